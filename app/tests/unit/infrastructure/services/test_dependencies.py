"""
Unit tests for FastAPI dependency aliases.

Tests cover:
- Accept-Language negotiation through RequestLocaleDep
- TranslateErrorsDep usage inside a route
- Dependency override pattern for testing
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from infrastructure.configuration import I18nSettings, Settings
from infrastructure.i18n import LocaleResolver
from infrastructure.resolution import Resolution, TranslateErrors
from infrastructure.services.dependencies import (
    RequestLocaleDep,
    SettingsDep,
    TranslateErrorsDep,
)
from infrastructure.services.providers import (
    get_locale_resolver,
    get_settings,
    get_translate_errors,
    get_translator,
)
from tests.factories.i18n import make_catalog_translator
from tests.factories.validation import make_post_node, make_user_node


@pytest.fixture
def app():
    app = FastAPI()

    @app.get("/locale")
    def read_locale(locale: RequestLocaleDep) -> dict:
        return {"locale": locale}

    @app.get("/users/invalid")
    def create_user(locale: RequestLocaleDep, translate: TranslateErrorsDep) -> dict:
        resolution = Resolution(
            errors=[make_user_node(), make_post_node()],
            context={"locale": locale},
        )
        return {"errors": translate.call(resolution).errors}

    translator = make_catalog_translator()
    app.dependency_overrides[get_translator] = lambda: translator
    app.dependency_overrides[get_locale_resolver] = lambda: LocaleResolver("en")
    app.dependency_overrides[get_translate_errors] = lambda: TranslateErrors(
        translator=translator
    )
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.mark.unit
class TestRequestLocaleDep:
    """Tests for Accept-Language negotiation."""

    def test_missing_header_uses_default(self, client):
        response = client.get("/locale")

        assert response.status_code == 200
        assert response.json() == {"locale": "en"}

    def test_exact_match(self, client):
        response = client.get("/locale", headers={"Accept-Language": "pt-BR"})
        assert response.json() == {"locale": "pt_BR"}

    def test_language_only_match(self, client):
        response = client.get("/locale", headers={"Accept-Language": "pt"})
        assert response.json() == {"locale": "pt_BR"}

    def test_quality_ordering(self, client):
        response = client.get(
            "/locale", headers={"Accept-Language": "pt-BR;q=0.5,en;q=0.9"}
        )
        assert response.json() == {"locale": "en"}

    def test_unsupported_language_uses_default(self, client):
        response = client.get("/locale", headers={"Accept-Language": "fr-FR,de"})
        assert response.json() == {"locale": "en"}


@pytest.mark.unit
class TestTranslateErrorsDep:
    """Tests for the middleware dependency inside a route."""

    def test_errors_rendered_in_request_locale(self, client):
        response = client.get("/users/invalid", headers={"Accept-Language": "pt-BR"})

        assert response.json() == {
            "errors": [
                "nome de usuário não pode estar vazio",
                "título não pode estar vazio",
                "user_id não pode estar vazio",
            ]
        }

    def test_errors_rendered_in_default_locale(self, client):
        response = client.get("/users/invalid")

        assert response.json() == {
            "errors": [
                "title can't be blank",
                "user_id can't be blank",
                "username can't be blank",
            ]
        }


@pytest.mark.unit
class TestDependencyOverridePattern:
    """Tests for FastAPI dependency override pattern."""

    def test_settings_dep_with_dependency_override(self):
        """SettingsDep can be overridden in FastAPI app."""
        app = FastAPI()

        @app.get("/config")
        def get_config(settings: SettingsDep) -> dict:
            return {"default_locale": settings.i18n.default_locale}

        override = Settings(i18n=I18nSettings(I18N_DEFAULT_LOCALE="pt_BR"))
        app.dependency_overrides[get_settings] = lambda: override

        response = TestClient(app).get("/config")

        assert response.status_code == 200
        assert response.json() == {"default_locale": "pt_BR"}
