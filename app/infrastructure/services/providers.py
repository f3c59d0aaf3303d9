"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings, load_settings


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Settings come from the environment and, when present, the default
    configuration file. The entry point may instead load an explicit file
    and hand the result to create_app(); request handlers read that instance
    through SettingsDep.

    Returns:
        Settings: Cached settings instance.
    """
    return load_settings()
