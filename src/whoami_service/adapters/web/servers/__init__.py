"""HTTP servers for the web adapter."""

from whoami_service.adapters.web.servers.static_file_server import StaticFileServer

__all__ = ["StaticFileServer"]
