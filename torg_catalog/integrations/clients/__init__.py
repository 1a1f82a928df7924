"""
Catalog transports.

- real_http: talks to the live catalog API over HTTP (requests)
- mocks: serves canned payloads from memory, no network

Both implement contracts.interfaces.CatalogTransport, so CatalogClient and
Listing work unchanged against either.
"""

from .mocks.catalog_mock import MockCatalogTransport
from .real_http.catalog_http import HTTPCatalogTransport

__all__ = ["HTTPCatalogTransport", "MockCatalogTransport"]
