"""Fixtures for infrastructure.configuration tests."""

import pytest

I18N_ENV_VARS = [
    "I18N_DEFAULT_LOCALE",
    "I18N_FALLBACK_LOCALE",
    "I18N_TRANSLATIONS_DIR",
    "I18N_ERRORS_DOMAIN",
    "I18N_SCHEMA_FIELDS_DOMAIN",
    "I18N_PRELOAD",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove settings environment variables so defaults apply."""
    for name in I18N_ENV_VARS + ["PREFIX", "LOG_LEVEL"]:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
