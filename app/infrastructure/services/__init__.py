"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    SettingsDep,
    TranslatorDep,
    LocaleResolverDep,
    TranslateErrorsDep,
    RequestLocaleDep,
    get_request_locale,
)
from infrastructure.services.providers import (
    get_settings,
    get_translator,
    get_locale_resolver,
    get_translate_errors,
)

__all__ = [
    "SettingsDep",
    "TranslatorDep",
    "LocaleResolverDep",
    "TranslateErrorsDep",
    "RequestLocaleDep",
    "get_request_locale",
    "get_settings",
    "get_translator",
    "get_locale_resolver",
    "get_translate_errors",
]
