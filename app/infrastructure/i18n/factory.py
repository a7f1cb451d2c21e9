"""Factory functions for creating i18n components.

Provides convenience functions for initializing translators with default
configurations suitable for the application.
"""

from pathlib import Path
from typing import Optional

from infrastructure.i18n.loader import YAMLTranslationLoader
from infrastructure.i18n.translator import CatalogTranslator
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEFAULT_TRANSLATIONS_DIR = Path(__file__).resolve().parent / "locales"


def create_translator(
    translations_dir: Optional[Path] = None,
    fallback_locale: Optional[str] = None,
    use_cache: bool = True,
    preload: bool = True,
) -> CatalogTranslator:
    """Create and configure a CatalogTranslator instance.

    If no translations_dir is provided, the catalogs bundled with this
    package are used.

    Args:
        translations_dir: Path to YAML catalog files (default: bundled catalogs)
        fallback_locale: Locale to use when translations not found (default: none)
        use_cache: Whether loader should cache parsed YAML (default: True)
        preload: Whether to load all locales immediately (default: True)

    Returns:
        CatalogTranslator: Configured translator instance

    Raises:
        ValueError: If translations_dir does not exist

    Usage:
        # Bundled catalogs, preload all
        translator = create_translator()

        # Lazy loading
        translator = create_translator(preload=False)
        translator.load_locale("pt_BR")
    """
    if translations_dir is None:
        translations_dir = DEFAULT_TRANSLATIONS_DIR

    loader = YAMLTranslationLoader(
        translations_dir=translations_dir,
        use_cache=use_cache,
    )
    translator = CatalogTranslator(loader=loader, fallback_locale=fallback_locale)

    if preload:
        translator.load_all()
        logger.info(
            "translator_created_with_preload",
            translations_dir=str(translations_dir),
            locale_count=len(translator.get_available_locales()),
        )
    else:
        logger.info(
            "translator_created_lazy",
            translations_dir=str(translations_dir),
        )

    return translator
