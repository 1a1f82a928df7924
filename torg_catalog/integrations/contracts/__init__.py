"""
Contracts (data shapes) shared by the catalog transports and the client.

- interfaces.py: the transport capability the client depends on
- envelope.py: the response envelope and the pagination block of listing pages

Both the HTTP transport and the mock transport honour these contracts, so the
client and listings never guess at payload formats.
"""

from .envelope import PageEnvelope, parse_page, unwrap_envelope
from .interfaces import CatalogTransport, QueryParams

__all__ = [
    "CatalogTransport",
    "QueryParams",
    "PageEnvelope",
    "parse_page",
    "unwrap_envelope",
]
