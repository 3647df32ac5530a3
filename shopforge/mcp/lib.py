"""Core MCP server settings for shopforge.

Provides the transport enum and server configuration shared by the FastMCP
server and the CLI.
"""

from dataclasses import dataclass
from enum import Enum

from shopforge.config import EnvVar, get_environment

SERVER_NAME = "shopforge"


class TransportType(str, Enum):
    """Supported MCP transport types."""

    STDIO = "stdio"
    HTTP = "http"
    SSE = "sse"


@dataclass
class ServerConfig:
    """Configuration for MCP server.

    Attributes:
        name: Server display name.
        transport: Transport type for communication.
        host: Bind address for HTTP/SSE transports.
        port: Port for HTTP/SSE transports.
        path: URL path for HTTP transport.
    """

    name: str = SERVER_NAME
    transport: TransportType = TransportType.STDIO
    host: str = "0.0.0.0"
    port: int = 18080
    path: str = "/mcp"

    @classmethod
    def from_env(
        cls,
        transport: TransportType | None = None,
    ) -> "ServerConfig":
        """Create config from environment variables.

        Args:
            transport: Override transport type (default: STDIO).

        Returns:
            ServerConfig with host and port from MCP_HOST / MCP_PORT.
        """
        return cls(
            transport=transport or TransportType.STDIO,
            host=get_environment(EnvVar.MCP_HOST),
            port=get_environment(EnvVar.MCP_PORT),
        )

    @property
    def url(self) -> str | None:
        """Endpoint URL for network transports, None for stdio."""
        if self.transport == TransportType.STDIO:
            return None
        if self.transport == TransportType.HTTP:
            return f"http://{self.host}:{self.port}{self.path}"
        return f"http://{self.host}:{self.port}"


def get_server_version() -> str:
    """Get server version string."""
    return "0.1.0"


__all__ = [
    "SERVER_NAME",
    "TransportType",
    "ServerConfig",
    "get_server_version",
]
