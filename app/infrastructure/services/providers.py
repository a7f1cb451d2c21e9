"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache
from pathlib import Path

from infrastructure.configuration import Settings
from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.translator import CatalogTranslator
from infrastructure.resolution.translate_errors import TranslateErrors


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translator() -> CatalogTranslator:
    """
    Get application-scoped catalog translator singleton.

    Catalogs are loaded once here and only read afterwards, so the instance
    is shared by every request.

    Returns:
        CatalogTranslator: Translator over the configured YAML catalogs.
    """
    i18n = get_settings().i18n
    translations_dir = Path(i18n.translations_dir) if i18n.translations_dir else None
    return create_translator(
        translations_dir=translations_dir,
        fallback_locale=i18n.fallback_locale,
        preload=i18n.preload,
    )


@lru_cache
def get_locale_resolver() -> LocaleResolver:
    """
    Get application-scoped locale resolver singleton.

    Returns:
        LocaleResolver: Resolver defaulting to the configured locale.
    """
    return LocaleResolver(default_locale=get_settings().i18n.default_locale)


@lru_cache
def get_translate_errors() -> TranslateErrors:
    """
    Get application-scoped TranslateErrors middleware singleton.

    Returns:
        TranslateErrors: Middleware wired to the configured translator,
        default locale and catalog domains.
    """
    i18n = get_settings().i18n
    return TranslateErrors(
        translator=get_translator(),
        default_locale=i18n.default_locale,
        errors_domain=i18n.errors_domain,
        schema_fields_domain=i18n.schema_fields_domain,
    )
