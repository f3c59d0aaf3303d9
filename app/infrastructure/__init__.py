"""Infrastructure modules for the send server.

Centralized infrastructure components:
- configuration: Settings management (Settings, load_settings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Internationalization (LocaleStore, LocaleResolver, TextMapBuilder)
- services: Dependency injection services (SettingsDep, get_settings)
"""
