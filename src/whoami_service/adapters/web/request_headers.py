"""Utilities for extracting request headers from an ASGI scope.

These helpers only depend on the ASGI scope shape, so they work with any
Starlette request (``request.scope``) without further coupling to the framework.
"""

from __future__ import annotations

from typing import Any

UNKNOWN_ADDRESS = "unknown"


def _decode_header_value(value: Any) -> str:
    """Decode a header value into a readable string."""
    if isinstance(value, bytes):
        # latin-1 maps every byte, so decoding cannot fail
        return value.decode("latin-1")
    return str(value)


def get_header_map_from_scope(scope: dict[str, Any] | None) -> dict[str, str]:
    """Build a header map keyed by lower-cased header name.

    Repeated headers are joined with ``", "`` the way proxies fold them, so a
    request carrying two X-Forwarded-For lines yields one comma-separated chain.
    """
    if not isinstance(scope, dict):
        return {}

    header_map: dict[str, str] = {}
    for name, value in scope.get("headers") or []:
        decoded_name = _decode_header_value(name).lower()
        decoded_value = _decode_header_value(value)
        if decoded_name in header_map:
            header_map[decoded_name] = f"{header_map[decoded_name]}, {decoded_value}"
        else:
            header_map[decoded_name] = decoded_value
    return header_map


def get_remote_address_from_scope(scope: dict[str, Any] | None) -> str:
    """Return the transport-level peer address, or ``"unknown"`` if not available."""
    if not isinstance(scope, dict):
        return UNKNOWN_ADDRESS

    client = scope.get("client")
    if isinstance(client, (list, tuple)) and client:
        candidate = client[0]
        if isinstance(candidate, (str, bytes)) and candidate:
            return _decode_header_value(candidate)
    return UNKNOWN_ADDRESS
