from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from torg_catalog.errors import TransportError
from torg_catalog.integrations.contracts.interfaces import CatalogTransport, QueryParams

logger = logging.getLogger(__name__)


class MockCatalogTransport(CatalogTransport):
    """
    In-memory transport.

    ``responses`` maps a resource path to either one payload (served for every
    request) or a list of payloads served by the ``page`` query param
    (``page=1`` -> first element). Every call is recorded in ``calls``.
    """

    def __init__(self, responses: Optional[Mapping[str, Any]] = None) -> None:
        self.responses: Dict[str, Any] = dict(responses or {})
        self.calls: List[Tuple[str, Dict[str, Any]]] = []

    def add_pages(self, resource: str, pages: List[Any]) -> None:
        self.responses[resource] = list(pages)

    def calls_for(self, resource: str) -> List[Dict[str, Any]]:
        return [params for called, params in self.calls if called == resource]

    def fetch_json(self, resource: str, params: Optional[QueryParams] = None) -> Any:
        query = dict(params or {})
        self.calls.append((resource, query))
        logger.info("[MOCK] GET %s params=%s", resource, query)

        if resource not in self.responses:
            raise TransportError(f"[MOCK] Unknown resource: {resource}", status_code=404, url=resource)

        payload = self.responses[resource]
        if isinstance(payload, list):
            index = int(query.get("page", 1)) - 1
            if not 0 <= index < len(payload):
                raise TransportError(
                    f"[MOCK] No page {index + 1} for resource {resource}", status_code=404, url=resource
                )
            payload = payload[index]
        if isinstance(payload, Exception):
            raise payload
        return copy.deepcopy(payload)
