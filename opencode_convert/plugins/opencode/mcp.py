"""
MCP server registry conversion.

Reads the Claude Code ``mcpServers`` registry and produces the ``mcp`` section
of opencode.json. Each server entry is handed to the first mapper that
recognizes its shape; entries no mapper recognizes are dropped.
"""

import json
import logging
from pathlib import Path
from typing import Any, Final, Protocol

from opencode_convert.models.servers import LocalServer, McpServer, RemoteServer

logger = logging.getLogger(__name__)

REGISTRY_KEY: Final[str] = "mcpServers"
REMOTE_SERVER_TYPE: Final[str] = "http"


def _server_type(server: dict[str, Any]) -> str:
    return str(server.get("type") or "").strip().lower()


def _command_arg(arg: Any) -> str:
    # Non-string arguments keep their JSON spelling: 8080, true, null.
    return arg if isinstance(arg, str) else json.dumps(arg, ensure_ascii=False)


def env_placeholder(name: str) -> str:
    """OpenCode substitution that reads a variable from the user's environment."""
    return f"{{env:{name}}}"


class ServerMapper(Protocol):
    """Defines the contract for mapping one shape of server entry."""

    def can_map(self, server: dict[str, Any]) -> bool: ...

    def map_server(self, name: str, server: dict[str, Any]) -> McpServer: ...


class RemoteServerMapper:
    """Map ``{"type": "http", "url": ...}`` entries to remote servers."""

    def can_map(self, server: dict[str, Any]) -> bool:
        url = server.get("url")
        return (
            _server_type(server) == REMOTE_SERVER_TYPE
            and isinstance(url, str)
            and bool(url)
        )

    def map_server(self, name: str, server: dict[str, Any]) -> RemoteServer:
        return RemoteServer(url=server["url"])


class LocalServerMapper:
    """Map ``{"command": ..., "args": [...], "env": {...}}`` entries to local servers."""

    def can_map(self, server: dict[str, Any]) -> bool:
        # An entry typed as remote is never reinterpreted as a local one.
        if _server_type(server) == REMOTE_SERVER_TYPE:
            return False
        return isinstance(server.get("command"), str) and isinstance(
            server.get("args"), list
        )

    def map_server(self, name: str, server: dict[str, Any]) -> LocalServer:
        command = [server["command"], *(_command_arg(arg) for arg in server["args"])]

        env = server.get("env")
        environment = None
        if isinstance(env, dict):
            # Secrets are never copied; only the variable names survive.
            environment = {key: env_placeholder(key) for key in env}

        return LocalServer(command=command, environment=environment)


class McpRegistryConverter:
    """Converts an MCP server registry document into OpenCode server entries."""

    def __init__(self, mappers: list[ServerMapper] | None = None):
        self._logger = logger.getChild(self.__class__.__name__)
        self._mappers: list[ServerMapper] = (
            mappers if mappers is not None else [RemoteServerMapper(), LocalServerMapper()]
        )

    def read_servers(self, registry_path: Path) -> dict[str, Any]:
        """
        Read the server map from a registry document.

        A missing document, invalid JSON, or a document without an
        ``mcpServers`` object all yield an empty map.
        """
        if not registry_path.is_file():
            self._logger.debug(f"No MCP registry at {registry_path}")
            return {}

        try:
            data = json.loads(registry_path.read_text(encoding="utf-8"))
        except ValueError as e:
            self._logger.debug(f"Ignoring unreadable MCP registry {registry_path}: {e}")
            return {}

        if not isinstance(data, dict):
            return {}
        servers = data.get(REGISTRY_KEY)
        if not isinstance(servers, dict):
            return {}
        return servers

    def convert_servers(self, servers: dict[str, Any]) -> dict[str, McpServer]:
        """Map every recognized server entry, preserving registry order."""
        converted: dict[str, McpServer] = {}

        for name, server in servers.items():
            if not isinstance(server, dict):
                self._logger.debug(f"Skipping MCP server '{name}': not an object")
                continue

            mapper = next((m for m in self._mappers if m.can_map(server)), None)
            if mapper is None:
                self._logger.debug(f"Skipping MCP server '{name}': unrecognized shape")
                continue

            converted[name] = mapper.map_server(name, server)

        return converted

    def convert(self, registry_path: Path) -> dict[str, McpServer]:
        """Read and convert a registry document in one step."""
        servers = self.convert_servers(self.read_servers(registry_path))
        self._logger.info(f"Converted {len(servers)} MCP servers")
        return servers
