"""Protocols for web adapter collaborators."""

from whoami_service.domain.contracts.static_file_server import StaticFileServerProtocol

__all__ = ["StaticFileServerProtocol"]
