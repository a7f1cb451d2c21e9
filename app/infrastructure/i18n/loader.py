"""Translation loading interface and implementations.

Defines the contract for loading message catalogs and provides the
YAML-based loader.
"""

import re
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict

import yaml

from infrastructure.i18n.models import TranslationCatalog
from infrastructure.logging import get_module_logger

logger = get_module_logger()

LOCALE_TAG_PATTERN = re.compile(r"^[A-Za-z]{2,3}(?:[_-][A-Za-z0-9]{2,8})*$")


def is_locale_tag(value: str) -> bool:
    """Return True if ``value`` looks like a locale tag (``en``, ``pt_BR``, ``fr-FR``)."""
    return bool(LOCALE_TAG_PATTERN.match(value))


class TranslationLoader(ABC):
    """Abstract base for translation loaders.

    Implementations must define how to load and parse catalog files
    for different locales.
    """

    @abstractmethod
    def load(self, locale: str) -> TranslationCatalog:
        """Load translations for a specific locale.

        Args:
            locale: Locale tag to load translations for.

        Returns:
            TranslationCatalog with loaded messages.

        Raises:
            FileNotFoundError: If translation files not found.
            ValueError: If translation format is invalid.
        """
        pass

    @abstractmethod
    def load_all(self) -> Dict[str, TranslationCatalog]:
        """Load translations for all available locales.

        Returns:
            Dict mapping locale tag to TranslationCatalog.
        """
        pass


class YAMLTranslationLoader(TranslationLoader):
    """Loader for YAML-based catalog files.

    Expects files named ``<name>.<locale>.yml`` in the translations
    directory, e.g. ``errors.pt_BR.yml``. Each file maps a domain to its
    messages:

        errors:
          "can't be blank": "não pode estar vazio"

    Attributes:
        translations_dir: Path to directory containing YAML files.
        cache: Loaded catalogs (locale -> catalog) when caching is enabled.
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize YAML translation loader.

        Args:
            translations_dir: Path to directory with YAML translation files.
            use_cache: Whether to cache loaded catalogs in memory.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, TranslationCatalog] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def load(self, locale: str) -> TranslationCatalog:
        """Load translations for a locale from YAML files.

        Searches for files matching pattern ``*.<locale>.yml`` and merges
        them, in name order, into a single catalog.

        Args:
            locale: Locale tag to load.

        Returns:
            TranslationCatalog with loaded messages.

        Raises:
            FileNotFoundError: If no YAML files found for locale.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and locale in self.cache:
            logger.debug("loaded_from_cache", locale=locale)
            return self.cache[locale]

        catalog = TranslationCatalog(
            locale=locale,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )
        yaml_files = sorted(self.translations_dir.glob(f"*.{locale}.yml"))

        if not yaml_files:
            raise FileNotFoundError(
                f"No translation files found for locale {locale} in {self.translations_dir}"
            )

        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e
            if data:
                self._merge_yaml_data(catalog, data, yaml_file)

        logger.info(
            "loaded_translations",
            locale=locale,
            file_count=len(yaml_files),
            domain_count=len(catalog.messages),
        )

        if self.use_cache:
            self.cache[locale] = catalog

        return catalog

    def load_all(self) -> Dict[str, TranslationCatalog]:
        """Load translations for every locale found in the directory.

        Detects available locales from ``.yml`` file names and loads each.

        Returns:
            Dict mapping each locale tag to its TranslationCatalog.

        Raises:
            ValueError: If no translation files found at all.
        """
        locales_found = set()
        for yaml_file in self.translations_dir.glob("*.yml"):
            # "errors.pt_BR.yml" -> "pt_BR"
            parts = yaml_file.stem.split(".")
            if len(parts) >= 2 and is_locale_tag(parts[-1]):
                locales_found.add(parts[-1])

        if not locales_found:
            raise ValueError(f"No translation files found in {self.translations_dir}")

        result = {}
        for locale in sorted(locales_found):
            try:
                result[locale] = self.load(locale)
            except FileNotFoundError:
                logger.warning("could_not_load_locale", locale=locale)

        return result

    def _merge_yaml_data(
        self,
        catalog: TranslationCatalog,
        data: Dict,
        source_file: Path,
    ) -> None:
        """Merge YAML data into catalog.

        Args:
            catalog: TranslationCatalog to merge into.
            data: Parsed YAML data.
            source_file: Source file (for logging).
        """
        if not isinstance(data, dict):
            logger.warning(
                "invalid_yaml_format", file=str(source_file), expected="dict"
            )
            return

        for domain, messages in data.items():
            if not isinstance(messages, dict):
                logger.warning(
                    "invalid_domain_format",
                    file=str(source_file),
                    domain=domain,
                    expected="dict",
                )
                continue

            if domain not in catalog.messages:
                catalog.messages[domain] = {}

            catalog.messages[domain].update(
                {
                    str(msgid): str(msgstr)
                    for msgid, msgstr in messages.items()
                    if msgstr is not None
                }
            )

    def clear_cache(self) -> None:
        """Clear all cached translations."""
        self.cache.clear()
        logger.info("cleared_translation_cache")
