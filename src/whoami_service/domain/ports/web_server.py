"""Web server port."""

from typing import Protocol


class WebServer(Protocol):
    """Port for the HTTP layer hosting the inspection endpoint."""

    async def start(self) -> None:
        """Start serving requests. Returns when the server shuts down."""
        ...

    async def stop(self) -> None:
        """Ask the server to shut down."""
        ...
