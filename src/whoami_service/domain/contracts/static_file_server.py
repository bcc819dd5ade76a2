"""Protocol for static file serving."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from starlette.applications import Starlette


class StaticFileServerProtocol(Protocol):
    """Protocol for serving static files."""

    def register_routes(self, app: "Starlette") -> None:
        """Register static file routes with the Starlette app.

        Args:
            app: The Starlette application instance.
        """
        ...
