"""
Catalog API client.

Purpose:
- Single entry point for callers: ``get`` for single-object endpoints,
  ``listing`` for paginated ones, plus one thin method per API endpoint
- Unwraps the one-key response envelope and normalizes the payload

Usage:
    config = config_from_env()
    with CatalogClient(config) as client:
        for offer in client.model_offers(1234, {"geo_id": 213}):
            print(offer["name"], offer.path("price", "value"))

Switching:
Pass ``transport=MockCatalogTransport(...)`` to run without the network.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from torg_catalog.integrations.clients.real_http.catalog_http import HTTPCatalogTransport
from torg_catalog.integrations.contracts.envelope import unwrap_envelope
from torg_catalog.integrations.contracts.interfaces import CatalogTransport, QueryParams
from torg_catalog.integrations.normalizer import normalize
from torg_catalog.listing import Listing
from torg_catalog.utils.config_loader import ClientConfig

logger = logging.getLogger(__name__)


class CatalogClient:
    def __init__(self, config: Optional[ClientConfig] = None, transport: Optional[CatalogTransport] = None) -> None:
        self.config = config or ClientConfig()
        self.transport = transport or HTTPCatalogTransport(self.config)

    def get(self, resource: str, params: Optional[QueryParams] = None) -> Any:
        """Fetch ``resource`` and return the normalized payload inside its envelope."""
        raw = self.transport.fetch_json(resource, dict(params or {}))
        return normalize(unwrap_envelope(raw))

    def listing(self, resource: str, params: Optional[QueryParams] = None) -> Listing:
        return Listing(self.get, resource, params)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "CatalogClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # -- Categories --

    def categories(self, params: Optional[QueryParams] = None) -> Listing:
        return self.listing("category", params)

    def category_children(self, category_id, params: Optional[QueryParams] = None) -> Listing:
        return self.listing(f"category/{category_id}/children", params)

    def category(self, category_id, params: Optional[QueryParams] = None) -> Any:
        return self.get(f"category/{category_id}", params)

    def category_parameters(self, category_id, params: Optional[QueryParams] = None) -> Any:
        return self.get(f"category/{category_id}/parameters", params)

    def category_models(self, category_id, params: Optional[QueryParams] = None) -> Listing:
        return self.listing(f"category/{category_id}/models", params)

    def category_offers(self, category_id, params: Optional[QueryParams] = None) -> Listing:
        return self.listing(f"category/{category_id}/offers", params)

    def category_hits(self, category_id, params: Optional[QueryParams] = None) -> Listing:
        return self.listing(f"category/{category_id}/hits", params)

    def category_newmodels(self, category_id, params: Optional[QueryParams] = None) -> Listing:
        return self.listing(f"category/{category_id}/newmodels", params)

    def category_filter(self, category_id, params: Optional[QueryParams] = None) -> Listing:
        return self.listing(f"category/{category_id}/filter", params)

    # -- Models --

    def model(self, model_id, params: Optional[QueryParams] = None) -> Any:
        return self.get(f"model/{model_id}", params)

    def model_parameters(self, model_id, params: Optional[QueryParams] = None) -> Any:
        return self.get(f"model/{model_id}/parameters", params)

    def model_offers(self, model_id, params: Optional[QueryParams] = None) -> Listing:
        return self.listing(f"model/{model_id}/offers", params)

    def model_outlets(self, model_id, params: Optional[QueryParams] = None) -> Listing:
        return self.listing(f"model/{model_id}/outlets", params)

    # -- Offers & search --

    def offer(self, offer_id, params: Optional[QueryParams] = None) -> Any:
        return self.get(f"offer/{offer_id}", params)

    def search(self, params: Optional[QueryParams] = None) -> Listing:
        return self.listing("search", params)

    # -- Sellers & vendors --

    def seller(self, seller_id, params: Optional[QueryParams] = None) -> Any:
        return self.get(f"seller/{seller_id}", params)

    def seller_reviews(self, seller_id, params: Optional[QueryParams] = None) -> Listing:
        return self.listing(f"seller/{seller_id}/reviews", params)

    def seller_outlets(self, seller_id, params: Optional[QueryParams] = None) -> Listing:
        return self.listing(f"seller/{seller_id}/outlets", params)

    def vendors(self, params: Optional[QueryParams] = None) -> Listing:
        return self.listing("vendor", params)

    def vendor(self, vendor_id, params: Optional[QueryParams] = None) -> Any:
        return self.get(f"vendor/{vendor_id}", params)

    # -- Regions --

    def regions(self, params: Optional[QueryParams] = None) -> Listing:
        return self.listing("regions", params)

    def region_children(self, region_id, params: Optional[QueryParams] = None) -> Listing:
        return self.listing(f"region/{region_id}/children", params)

    def region(self, region_id, params: Optional[QueryParams] = None) -> Any:
        return self.get(f"region/{region_id}", params)

    def region_suggest(self, params: Optional[QueryParams] = None) -> Any:
        return self.get("region/suggest", params)
