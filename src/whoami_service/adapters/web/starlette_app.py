"""Starlette web adapter exposing the who-am-I endpoint."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from whoami_service.adapters.config import AppConfig
from whoami_service.domain.errors import MissingRequiredHeaderError
from whoami_service.domain.models import ErrorDetails
from whoami_service.domain.ports import ClientInspector, WebServer

from .request_headers import get_header_map_from_scope, get_remote_address_from_scope
from .servers import StaticFileServer

if TYPE_CHECKING:
    from starlette.requests import Request

logger = logging.getLogger(__name__)


def _error_response(status_code: int, reason: str) -> JSONResponse:
    details = ErrorDetails(status_code=status_code, reason=reason)
    return JSONResponse(details.model_dump(), status_code=status_code)


async def _missing_header_handler(_request: Request, exc: Exception) -> Response:
    """Turn a missing required header into a 400 response."""
    logger.warning(f"Rejecting request: {exc}")
    return _error_response(400, str(exc))


def create_app(inspector: ClientInspector, config: AppConfig) -> Starlette:
    """Build the Starlette application.

    Args:
        inspector: Inspector that describes the client from its headers.
        config: Application configuration.
    """

    async def whoami(request: Request) -> Response:
        """Describe the calling client."""
        headers = get_header_map_from_scope(request.scope)
        logger.debug(f"Request headers: {headers}")
        description = inspector.inspect(headers, get_remote_address_from_scope(request.scope))
        return JSONResponse(description.to_json_dict())

    async def healthz(_request: Request) -> Response:
        """Health check endpoint for load balancers and monitoring."""
        return Response(content="Ok", media_type="text/plain")

    app = Starlette(
        routes=[
            Route("/whoami", whoami, methods=["GET"]),
            Route("/healthz", healthz, methods=["GET"]),
        ],
        exception_handlers={MissingRequiredHeaderError: _missing_header_handler},
    )

    StaticFileServer(config.static_dir).register_routes(app)
    return app


class StarletteWebAdapter(WebServer):
    """Serves the Starlette application with uvicorn."""

    def __init__(self, inspector: ClientInspector, config: AppConfig) -> None:
        """Initialize the web adapter.

        Args:
            inspector: Inspector that describes the client from its headers.
            config: Application configuration.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        # Protocols can't be checked with isinstance, verify required methods exist
        if not callable(getattr(inspector, "inspect", None)):
            raise TypeError("inspector must implement ClientInspector protocol")

        self.inspector = inspector
        self.config = config
        self.app = create_app(inspector, config)
        self._server: Any | None = None

    async def start(self) -> None:
        """Start the web server."""
        import uvicorn

        config = uvicorn.Config(
            self.app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level,
        )
        self._server = uvicorn.Server(config)

        logger.info(f"Listening on {self.config.host}:{self.config.port}")
        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server:
            self._server.should_exit = True
