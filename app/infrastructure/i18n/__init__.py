"""i18n system - message catalogs, locale resolution and interpolation.

Main components:
- models: TranslationKey, TranslationCatalog
- loader: TranslationLoader and YAMLTranslationLoader
- translator: Translator capability, IdentityTranslator, CatalogTranslator
- interpolation: %{name} placeholder substitution
- resolvers: LocaleResolver and LanguageNegotiator for locale detection
"""

from infrastructure.i18n.interpolation import interpolate
from infrastructure.i18n.loader import TranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.models import TranslationCatalog, TranslationKey
from infrastructure.i18n.resolvers import LanguageNegotiator, LocaleResolver
from infrastructure.i18n.translator import (
    CatalogTranslator,
    IdentityTranslator,
    Translator,
)
from infrastructure.i18n.factory import create_translator

__all__ = [
    "TranslationKey",
    "TranslationCatalog",
    "TranslationLoader",
    "YAMLTranslationLoader",
    "Translator",
    "IdentityTranslator",
    "CatalogTranslator",
    "LocaleResolver",
    "LanguageNegotiator",
    "interpolate",
    "create_translator",
]
