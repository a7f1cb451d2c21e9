"""Infrastructure modules for validation error translation.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Message catalogs, locale resolution, interpolation
- validation: Validation-result trees, flattening and message formatting
- resolution: Resolution model, TranslateErrors middleware, pipelines
- services: Dependency injection providers (get_settings, get_translator)
"""
