"""Translator capability and catalog-backed implementation.

A translator is anything with a ``translate(domain, key, locale)`` method
returning the localized template, or None when the catalog has no entry.
Absence is a normal outcome: callers fall back to the untranslated key.
"""

from typing import Dict, Mapping, Optional, Protocol, Tuple

from infrastructure.i18n.loader import TranslationLoader
from infrastructure.i18n.models import TranslationCatalog, TranslationKey
from infrastructure.i18n.resolvers import LanguageNegotiator
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class Translator(Protocol):
    """Lookup from (domain, message key, locale) to a localized template."""

    def translate(self, domain: str, key: str, locale: str) -> Optional[str]:
        """Return the localized template for ``key`` or None if absent."""
        ...  # pylint: disable=unnecessary-ellipsis


class IdentityTranslator:
    """Translator with an empty catalog; every lookup is absent."""

    def translate(self, domain: str, key: str, locale: str) -> Optional[str]:
        return None

    def __repr__(self) -> str:
        return "IdentityTranslator()"


class CatalogTranslator:
    """Translator backed by per-locale TranslationCatalogs.

    Lookup order for a key:
    1. Catalog of the requested locale
    2. Best language-only match among loaded locales ("pt" -> "pt_BR")
    3. Catalog of ``fallback_locale``, if configured

    Catalogs are loaded once (startup) and only read afterwards, so one
    instance can be shared by concurrent requests.

    Attributes:
        loader: Optional TranslationLoader for (re)loading catalogs.
        catalogs: Loaded TranslationCatalogs by locale tag.
        fallback_locale: Locale consulted when the requested one misses.
    """

    def __init__(
        self,
        loader: Optional[TranslationLoader] = None,
        catalogs: Optional[Dict[str, TranslationCatalog]] = None,
        fallback_locale: Optional[str] = None,
    ):
        """Initialize CatalogTranslator.

        Args:
            loader: TranslationLoader instance for loading catalogs.
            catalogs: Pre-built catalogs by locale tag.
            fallback_locale: Locale to use when key not found (default: none).
        """
        self.loader = loader
        self.fallback_locale = fallback_locale
        self.catalogs: Dict[str, TranslationCatalog] = dict(catalogs or {})
        logger.debug(
            "initialized_translator",
            fallback_locale=fallback_locale,
            locale_count=len(self.catalogs),
        )

    @classmethod
    def from_mapping(
        cls,
        entries: Mapping[Tuple[str, str, str], str],
        fallback_locale: Optional[str] = None,
    ) -> "CatalogTranslator":
        """Build a translator from ``{(domain, msgid, locale): msgstr}`` entries.

        Example:
            >>> translator = CatalogTranslator.from_mapping(
            ...     {("errors", "Not logged in", "pt"): "Não está logado"}
            ... )
            >>> translator.translate("errors", "Not logged in", "pt")
            'Não está logado'
        """
        catalogs: Dict[str, TranslationCatalog] = {}
        for (domain, msgid, locale), msgstr in entries.items():
            catalog = catalogs.setdefault(locale, TranslationCatalog(locale=locale))
            catalog.set_message(TranslationKey(domain, msgid), msgstr)
        return cls(catalogs=catalogs, fallback_locale=fallback_locale)

    def _require_loader(self) -> TranslationLoader:
        if self.loader is None:
            raise ValueError("CatalogTranslator has no loader configured")
        return self.loader

    def load_all(self) -> None:
        """Load all available locales from loader."""
        self.catalogs = self._require_loader().load_all()
        logger.info("loaded_all_translations", locale_count=len(self.catalogs))

    def load_locale(self, locale: str) -> None:
        """Load specific locale from loader.

        Args:
            locale: Locale tag to load.

        Raises:
            FileNotFoundError: If translation files not found.
        """
        self.catalogs[locale] = self._require_loader().load(locale)
        logger.info("loaded_locale_translations", locale=locale)

    def translate(self, domain: str, key: str, locale: str) -> Optional[str]:
        """Look up the localized template for ``key`` in ``domain``.

        Args:
            domain: Catalog domain ("errors" or "schema_fields").
            key: Untranslated message id.
            locale: Requested locale tag.

        Returns:
            The catalog template, or None when no catalog has an entry.
        """
        translation_key = TranslationKey(domain, key)

        for candidate in self._candidate_locales(locale):
            message = self.catalogs[candidate].get_message(translation_key)
            if message is not None:
                return message

        return None

    def _candidate_locales(self, locale: str) -> list:
        candidates = []
        if locale in self.catalogs:
            candidates.append(locale)

        best = LanguageNegotiator.find_best_match(
            [locale], sorted(self.catalogs.keys())
        )
        if best is not None and best not in candidates:
            candidates.append(best)

        if (
            self.fallback_locale
            and self.fallback_locale in self.catalogs
            and self.fallback_locale not in candidates
        ):
            candidates.append(self.fallback_locale)

        return candidates

    def has_message(self, key: TranslationKey, locale: str) -> bool:
        """Check if translation exists for key in exactly this locale.

        Args:
            key: TranslationKey to check.
            locale: Locale tag to check.

        Returns:
            True if message exists in requested locale, False otherwise.
        """
        catalog = self.catalogs.get(locale)
        return catalog.has_message(key) if catalog else False

    def get_available_locales(self) -> list:
        """Get list of loaded locale tags."""
        return list(self.catalogs.keys())

    def get_catalog(self, locale: str) -> Optional[TranslationCatalog]:
        """Get complete catalog for a locale.

        Args:
            locale: Locale tag to retrieve catalog for.

        Returns:
            TranslationCatalog or None if not loaded.
        """
        return self.catalogs.get(locale)

    def reload(self) -> None:
        """Reload all translations from loader."""
        loader = self._require_loader()
        if hasattr(loader, "clear_cache"):
            loader.clear_cache()
        self.catalogs = {}
        self.load_all()
        logger.info("reloaded_all_translations")
