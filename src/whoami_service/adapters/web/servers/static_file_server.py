"""Static file server implementation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from starlette.responses import FileResponse, PlainTextResponse, Response
from starlette.routing import Route
from starlette.staticfiles import StaticFiles

from whoami_service.domain.contracts.static_file_server import StaticFileServerProtocol

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable, MutableMapping

    from starlette.applications import Starlette
    from starlette.requests import Request

logger = logging.getLogger(__name__)

CACHE_CONTROL = "public, max-age=60, must-revalidate"


class StaticFileCacheApp:
    """ASGI app wrapper that adds cache headers to static file responses."""

    def __init__(self, static_files: StaticFiles) -> None:
        """Initialize with a StaticFiles instance."""
        self.static_files = static_files

    async def __call__(
        self,
        scope: dict[str, Any],
        receive: Callable[[], Awaitable[dict[str, Any]]],
        send: Callable[[MutableMapping[str, Any]], Awaitable[None]],
    ) -> None:
        """Handle ASGI request and add cache headers."""

        async def send_with_cache_headers(message: MutableMapping[str, Any]) -> None:
            if message["type"] == "http.response.start":
                # Headers in ASGI are already a list of (bytes, bytes) tuples
                headers = list(message.get("headers", []))
                has_cache_control = any(header[0].lower() == b"cache-control" for header in headers)
                if not has_cache_control:
                    headers.append((b"cache-control", CACHE_CONTROL.encode("latin-1")))
                    message["headers"] = headers
            await send(message)

        await self.static_files(scope, receive, send_with_cache_headers)


class StaticFileServer(StaticFileServerProtocol):
    """Serves the index page and static assets."""

    def __init__(self, static_dir: str | Path) -> None:
        """Initialize with the directory holding static assets.

        Relative paths are tried against the working directory first and the
        project root second.
        """
        self.static_dir = Path(static_dir)

    def resolve_static_path(self) -> Path | None:
        """Find the static directory on disk, if it exists."""
        if self.static_dir.is_absolute():
            candidates = [self.static_dir]
        else:
            candidates = [
                Path.cwd() / self.static_dir,
                Path(__file__).parents[5] / self.static_dir,
            ]

        for path in candidates:
            if path.is_dir():
                return path
        logger.warning(f"Static directory not found at any of: {[str(p) for p in candidates]}")
        return None

    def register_routes(self, app: Starlette) -> None:
        """Register the index route and mount the static directory.

        Args:
            app: The Starlette application instance.
        """
        static_path = self.resolve_static_path()
        app.router.routes.append(
            Route("/", self._make_index_handler(static_path), methods=["GET"])
        )

        if static_path is None:
            return

        static_files = StaticFiles(directory=str(static_path))
        app.mount("/static", StaticFileCacheApp(static_files), name="static")
        logger.info(f"Mounted static files from {static_path} with 1-minute cache headers")

    def _make_index_handler(
        self, static_path: Path | None
    ) -> Callable[[Request], Awaitable[Response]]:
        async def index(_request: Request) -> Response:
            """Serve index.html from the static directory."""
            if static_path is not None:
                index_path = static_path / "index.html"
                if index_path.is_file():
                    response = FileResponse(str(index_path), media_type="text/html")
                    response.headers["Cache-Control"] = CACHE_CONTROL
                    return response
            logger.error(f"index.html not found in static directory {static_path}")
            return PlainTextResponse("Not Found", status_code=404)

        return index
