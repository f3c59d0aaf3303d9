"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the
application using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    load_settings: Build Settings from the environment and a TOML file
    ConfigurationError: Raised for unreadable or invalid configuration

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    servername = settings.server.SERVERNAME
    locales_dir = settings.i18n.LOCALES_DIR
    ```
"""

from infrastructure.configuration.loading import (
    DEFAULT_CONFIG_PATH,
    ConfigurationError,
    load_settings,
)
from infrastructure.configuration.settings import Settings

__all__ = ["Settings", "load_settings", "ConfigurationError", "DEFAULT_CONFIG_PATH"]
