from __future__ import annotations

from dataclasses import dataclass

from .errors import ConfigurationError
from .status import StatusCode

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_RETURN_CODE = 200


@dataclass(frozen=True)
class ServerConfig:
    """Validated listener address and the status returned to every client."""

    host: str
    port: int
    status: StatusCode

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"

    @classmethod
    def from_values(
        cls,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        return_code: int = DEFAULT_RETURN_CODE,
    ) -> ServerConfig:
        if not 0 <= port <= 65535:
            raise ConfigurationError(f"Invalid port {port}")
        return cls(host=host, port=port, status=StatusCode.parse(return_code))
