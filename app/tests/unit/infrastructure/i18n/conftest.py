"""Feature-level fixtures for i18n system tests.

Provides YAML catalog directories and loaders for translation scenarios.
"""

import pytest
import yaml

from infrastructure.i18n import YAMLTranslationLoader


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML catalog files.

    Returns a directory structure like:
    - errors.en.yml
    - errors.pt_BR.yml
    - schema_fields.pt_BR.yml
    """
    en_errors = {
        "errors": {
            "can't be blank": "can't be blank",
            "Not logged in": "You are not logged in",
        }
    }
    with open(tmp_path / "errors.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_errors, f, allow_unicode=True)

    pt_br_errors = {
        "errors": {
            "can't be blank": "não pode estar vazio",
            "Not logged in": "Não está logado",
            "should be at least %{count} character(s)": "deve ter pelo menos %{count} caractere(s)",
        }
    }
    with open(tmp_path / "errors.pt_BR.yml", "w", encoding="utf-8") as f:
        yaml.dump(pt_br_errors, f, allow_unicode=True)

    pt_br_fields = {
        "schema_fields": {
            "username": "nome de usuário",
            "title": "título",
        }
    }
    with open(tmp_path / "schema_fields.pt_BR.yml", "w", encoding="utf-8") as f:
        yaml.dump(pt_br_fields, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def yaml_loader_with_cache(temp_translations_dir):
    """Create YAMLTranslationLoader with caching enabled."""
    return YAMLTranslationLoader(temp_translations_dir, use_cache=True)


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple_pt": "pt",
        "specific_pt_br": "pt-BR",
        "with_quality": "pt-BR,pt;q=0.9,en;q=0.8",
        "prefers_english": "en;q=0.9,pt-BR;q=0.5",
        "wildcard": "*",
        "invalid_quality": "de;q=invalid,pt",
    }
