"""Localization infrastructure settings."""

import re
from pathlib import Path

from pydantic import AliasChoices, Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings

# app/ directory, which ships the default locales
APP_ROOT = Path(__file__).resolve().parents[3]


class I18nSettings(InfrastructureSettings):
    """Translation resource configuration.

    Environment Variables:
        LOCALES_DIR: Directory with one subdirectory per locale
            (default: app/locales)
        LOCALE_RESOURCE_FILENAME: Resource file inside each locale
            directory (default: send.yml)
        DEFAULT_LOCALE: Fallback locale, must be present (default: en-US)

    Example:
        ```python
        store = load_locale_store(
            settings.i18n.LOCALES_DIR,
            resource_filename=settings.i18n.RESOURCE_FILENAME,
        )
        ```
    """

    LOCALES_DIR: Path = Field(
        default=APP_ROOT / "locales",
        validation_alias=AliasChoices("LOCALES_DIR", "locales_dir"),
    )
    RESOURCE_FILENAME: str = Field(
        default="send.yml",
        validation_alias=AliasChoices("LOCALE_RESOURCE_FILENAME", "resource_filename"),
    )
    DEFAULT_LOCALE: str = Field(
        default="en-US",
        validation_alias=AliasChoices("DEFAULT_LOCALE", "default_locale"),
    )

    @field_validator("RESOURCE_FILENAME")
    @classmethod
    def validate_resource_filename(cls, v: str) -> str:
        """Resource file name must be a plain file name."""
        if not v or re.search(r"[\\/]", v) or v in (".", ".."):
            raise ValueError(f"Invalid resource file name: {v!r}")
        return v
