"""Internationalization infrastructure settings."""

from typing import Optional

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Locale and message catalog configuration for error translation.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale used when a request carries none (default: en)
        I18N_FALLBACK_LOCALE: Catalog consulted when the requested locale misses
        I18N_TRANSLATIONS_DIR: Directory of YAML catalogs (default: bundled catalogs)
        I18N_ERRORS_DOMAIN: Catalog domain for message bodies (default: errors)
        I18N_SCHEMA_FIELDS_DOMAIN: Catalog domain for field names (default: schema_fields)
        I18N_PRELOAD: Load every catalog at startup (default: True)

    Example:
        ```python
        from infrastructure.services.providers import get_settings

        settings = get_settings()
        locale = settings.i18n.default_locale
        ```
    """

    default_locale: str = Field(
        default="en",
        alias="I18N_DEFAULT_LOCALE",
        description="Process-wide default locale",
    )
    fallback_locale: Optional[str] = Field(
        default=None,
        alias="I18N_FALLBACK_LOCALE",
        description="Locale whose catalog is consulted when the requested one misses",
    )
    translations_dir: Optional[str] = Field(
        default=None,
        alias="I18N_TRANSLATIONS_DIR",
        description="Directory holding <name>.<locale>.yml catalogs",
    )
    errors_domain: str = Field(default="errors", alias="I18N_ERRORS_DOMAIN")
    schema_fields_domain: str = Field(
        default="schema_fields", alias="I18N_SCHEMA_FIELDS_DOMAIN"
    )
    preload: bool = Field(default=True, alias="I18N_PRELOAD")

    @field_validator("fallback_locale", "translations_dir", mode="before")
    @classmethod
    def empty_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty environment values as unset."""
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        return v

    @field_validator("default_locale")
    @classmethod
    def validate_default_locale(cls, v: str) -> str:
        """Reject a blank default locale."""
        if not v or not v.strip():
            raise ValueError("I18N_DEFAULT_LOCALE must not be empty")
        return v.strip()
