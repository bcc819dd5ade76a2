"""Domain layer - models, errors and ports."""

from whoami_service.domain.errors import MissingRequiredHeaderError
from whoami_service.domain.models import (
    ClientDescription,
    ErrorDetails,
    OsInfo,
    ProxiedAddress,
)
from whoami_service.domain.ports import ClientInspector, WebServer

__all__ = [
    "ClientDescription",
    "ClientInspector",
    "ErrorDetails",
    "MissingRequiredHeaderError",
    "OsInfo",
    "ProxiedAddress",
    "WebServer",
]
