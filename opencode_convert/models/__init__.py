from .document import Document, HeaderValue
from .headers import AgentHeader, CommandHeader
from .servers import LocalServer, McpServer, RemoteServer
from .settings import ConversionSummary, OpenCodeSettings

__all__ = [
    "Document",
    "HeaderValue",
    "AgentHeader",
    "CommandHeader",
    "LocalServer",
    "McpServer",
    "RemoteServer",
    "ConversionSummary",
    "OpenCodeSettings",
]
