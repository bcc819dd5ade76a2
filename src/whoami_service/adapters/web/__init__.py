"""Web adapters serving the who-am-I endpoint."""

from whoami_service.adapters.web.starlette_app import StarletteWebAdapter, create_app

__all__ = ["StarletteWebAdapter", "create_app"]
