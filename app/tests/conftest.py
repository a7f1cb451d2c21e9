import sys
from pathlib import Path

# Ensure the application source root is on sys.path so importing application
# modules (e.g. `infrastructure.i18n`) works during pytest collection
# regardless of the directory pytest was invoked from.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from infrastructure.services import providers


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset application-scoped singletons between tests."""
    yield
    providers.get_settings.cache_clear()
    providers.get_translator.cache_clear()
    providers.get_locale_resolver.cache_clear()
    providers.get_translate_errors.cache_clear()
