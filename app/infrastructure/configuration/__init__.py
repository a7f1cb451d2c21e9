"""Infrastructure configuration module - public API.

Centralized configuration management using Pydantic BaseSettings with
domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Locale and catalog settings

Example:
    ```python
    from infrastructure.services.providers import get_settings

    settings = get_settings()
    errors_domain = settings.i18n.errors_domain
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure.i18n import I18nSettings

__all__ = ["Settings", "I18nSettings"]
