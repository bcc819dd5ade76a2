"""Domain models for the who-am-I service."""

from whoami_service.domain.models.client_description import (
    ClientDescription,
    HeaderMap,
    IpResult,
    OsInfo,
    ProxiedAddress,
)
from whoami_service.domain.models.error_details import ErrorDetails

__all__ = [
    "ClientDescription",
    "ErrorDetails",
    "HeaderMap",
    "IpResult",
    "OsInfo",
    "ProxiedAddress",
]
