"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated, Optional

from fastapi import Depends, Header

from infrastructure.configuration import Settings
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.translator import CatalogTranslator
from infrastructure.resolution.translate_errors import TranslateErrors
from infrastructure.services.providers import (
    get_locale_resolver,
    get_settings,
    get_translate_errors,
    get_translator,
)

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Catalog translator dependency
TranslatorDep = Annotated[CatalogTranslator, Depends(get_translator)]

# Locale resolver dependency
LocaleResolverDep = Annotated[LocaleResolver, Depends(get_locale_resolver)]

# Error translation middleware dependency
TranslateErrorsDep = Annotated[TranslateErrors, Depends(get_translate_errors)]


def get_request_locale(
    resolver: LocaleResolverDep,
    translator: TranslatorDep,
    accept_language: Annotated[Optional[str], Header()] = None,
) -> str:
    """Negotiate the request locale from the Accept-Language header.

    Only locales with a loaded catalog, plus the default locale, are
    considered supported.
    """
    supported = [resolver.default_locale] + [
        locale
        for locale in translator.get_available_locales()
        if locale != resolver.default_locale
    ]
    return resolver.resolve_from_header(accept_language, supported)


# Negotiated request locale dependency
RequestLocaleDep = Annotated[str, Depends(get_request_locale)]

__all__ = [
    "SettingsDep",
    "TranslatorDep",
    "LocaleResolverDep",
    "TranslateErrorsDep",
    "RequestLocaleDep",
    "get_request_locale",
]
