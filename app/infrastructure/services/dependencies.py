"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common infrastructure dependencies.
"""

from typing import Annotated

from fastapi import Depends, Request

from infrastructure.configuration import Settings
from infrastructure.services.providers import get_settings


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else get_settings()


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_app_settings)]

__all__ = [
    "SettingsDep",
    "get_app_settings",
]
