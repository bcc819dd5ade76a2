"""Application layer - use cases."""

from whoami_service.application.services import (
    HeaderInspectionService,
    classify_operating_system,
    extract_browser_language,
    resolve_client_ip,
)

__all__ = [
    "HeaderInspectionService",
    "classify_operating_system",
    "extract_browser_language",
    "resolve_client_ip",
]
