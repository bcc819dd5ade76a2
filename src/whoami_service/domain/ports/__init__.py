"""Ports (interfaces) for the ports-and-adapters architecture."""

from whoami_service.domain.ports.client_inspector import ClientInspector
from whoami_service.domain.ports.web_server import WebServer

__all__ = [
    "ClientInspector",
    "WebServer",
]
