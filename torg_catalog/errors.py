"""
Error kinds raised by the catalog client.

Every error carries an optional ``payload`` with whatever context was at hand
(the offending envelope, the request params) so callers can log or inspect it.
The library never retries or swallows these; they propagate to whoever asked
for the data.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class CatalogError(Exception):
    def __init__(self, message: str, *, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.payload = payload or {}


class ConfigurationError(CatalogError):
    """Required setting (usually the access token) is missing or invalid."""


class TransportError(CatalogError):
    """Network failure or non-2xx HTTP status from the catalog API."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, payload=payload)
        self.status_code = status_code
        self.url = url


class MalformedEnvelopeError(CatalogError, ValueError):
    """Response envelope violates the API contract (e.g. missing pagination fields)."""


__all__ = [
    "CatalogError",
    "ConfigurationError",
    "TransportError",
    "MalformedEnvelopeError",
]
