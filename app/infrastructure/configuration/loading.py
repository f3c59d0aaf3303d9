"""Settings loading from the environment and an optional TOML file.

The TOML file uses lowercase keys for server settings at the top level and
an optional ``[i18n]`` table:

    servername = "send.example.org"
    local_socket_addr = "0.0.0.0:8080"
    log_level = "DEBUG"

    [i18n]
    locales_dir = "/srv/send/locales"

Values from the file take precedence over environment variables. Unknown
keys in the file are rejected. A relative ``locales_dir`` is resolved
against the directory holding the configuration file.
"""

import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from infrastructure.configuration.infrastructure import I18nSettings, ServerSettings
from infrastructure.configuration.settings import Settings

DEFAULT_CONFIG_PATH = Path("/etc/send-server/config.toml")

_TOP_LEVEL_KEYS = {
    "prefix": "PREFIX",
    "log_level": "LOG_LEVEL",
    "git_sha": "GIT_SHA",
}
_SERVER_KEYS = {"servername", "local_socket_addr"}
_I18N_KEYS = {"locales_dir", "resource_filename", "default_locale"}


class ConfigurationError(Exception):
    """Raised when the configuration file cannot be read or is invalid."""


def read_config_file(path: Union[str, Path]) -> Dict[str, Any]:
    """Read and parse a TOML configuration file.

    Raises:
        OSError: If the file cannot be opened.
        ConfigurationError: If the file is not valid TOML.
    """
    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Could not parse TOML of {path}: {e}") from e


def _check_keys(values: Dict[str, Any], allowed: set, table: str) -> None:
    unknown = sorted(set(values) - allowed)
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration keys in {table}: {', '.join(unknown)}"
        )


def settings_from_mapping(
    data: Dict[str, Any], base_dir: Optional[Path] = None
) -> Settings:
    """Build Settings from parsed configuration file data.

    Args:
        data: Parsed TOML document.
        base_dir: Directory relative ``locales_dir`` values are resolved
            against. Relative paths are kept as-is when omitted.

    Raises:
        ConfigurationError: If a key is unknown or a value fails validation.
    """
    data = dict(data)
    i18n_values = data.pop("i18n", {}) or {}
    if not isinstance(i18n_values, dict):
        raise ConfigurationError("[i18n] must be a table")
    _check_keys(data, _SERVER_KEYS | set(_TOP_LEVEL_KEYS), "top level")
    _check_keys(i18n_values, _I18N_KEYS, "[i18n]")

    i18n_values = dict(i18n_values)
    locales_dir = i18n_values.get("locales_dir")
    if base_dir is not None and isinstance(locales_dir, str):
        i18n_values["locales_dir"] = base_dir / locales_dir

    top_level = {
        field_name: data.pop(key)
        for key, field_name in _TOP_LEVEL_KEYS.items()
        if key in data
    }

    try:
        return Settings(
            server=ServerSettings(**data),
            i18n=I18nSettings(**i18n_values),
            **top_level,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_settings(config_path: Optional[Union[str, Path]] = None) -> Settings:
    """Load settings from the environment and a TOML file.

    Args:
        config_path: Explicit configuration file; it must exist. When omitted,
            DEFAULT_CONFIG_PATH is used if present and skipped otherwise.

    Returns:
        Settings instance.

    Raises:
        ConfigurationError: If the file cannot be read or is invalid.
    """
    if config_path is not None:
        try:
            data = read_config_file(config_path)
        except OSError as e:
            raise ConfigurationError(
                f"Could not read config file {config_path}: {e}"
            ) from e
        return settings_from_mapping(data, base_dir=Path(config_path).parent)

    try:
        data = read_config_file(DEFAULT_CONFIG_PATH)
    except FileNotFoundError:
        try:
            return Settings()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
    except OSError as e:
        raise ConfigurationError(
            f"Could not read config file {DEFAULT_CONFIG_PATH}: {e}"
        ) from e
    return settings_from_mapping(data, base_dir=DEFAULT_CONFIG_PATH.parent)
