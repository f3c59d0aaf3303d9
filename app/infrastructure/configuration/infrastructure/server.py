"""Server infrastructure settings."""

from typing import Tuple

from pydantic import AliasChoices, Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


def split_address(value: str) -> Tuple[str, int]:
    """Split "host:port" (or "[ipv6]:port") into its parts.

    Raises:
        ValueError: If the address has no host or an invalid port.
    """
    value = value.strip()
    if value.startswith("["):
        host, separator, port = value[1:].partition("]:")
    else:
        host, separator, port = value.rpartition(":")

    if not separator or not host:
        raise ValueError(f"Listen address must be 'host:port': {value!r}")
    if not port.isdigit() or not 0 < int(port) < 65536:
        raise ValueError(f"Invalid port in listen address: {value!r}")
    return host, int(port)


class ServerSettings(InfrastructureSettings):
    """Server and application runtime configuration.

    Environment Variables:
        SERVERNAME: Public name of the server (default: example.com)
        LISTEN_ADDRESS: Local socket address to bind (default: 127.0.0.1:8080)

    The lowercase keys ``servername`` and ``local_socket_addr`` are accepted
    from the TOML configuration file.

    Example:
        ```python
        host, port = settings.server.host, settings.server.port
        ```
    """

    SERVERNAME: str = Field(
        default="example.com",
        validation_alias=AliasChoices("SERVERNAME", "servername"),
    )
    LISTEN_ADDRESS: str = Field(
        default="127.0.0.1:8080",
        validation_alias=AliasChoices("LISTEN_ADDRESS", "local_socket_addr"),
    )

    @field_validator("LISTEN_ADDRESS")
    @classmethod
    def validate_listen_address(cls, v: str) -> str:
        """Validate the LISTEN_ADDRESS field."""
        split_address(v)
        return v.strip()

    @property
    def host(self) -> str:
        return split_address(self.LISTEN_ADDRESS)[0]

    @property
    def port(self) -> int:
        return split_address(self.LISTEN_ADDRESS)[1]
