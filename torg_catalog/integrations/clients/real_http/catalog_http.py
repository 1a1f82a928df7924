"""
Catalog API HTTP transport.

Purpose:
- Performs the GET ``<base_url>/<api_version>/<resource>.json`` calls
- Sends the access token as the Authorization header
- Decodes the JSON body; everything else (envelope unwrap, normalization)
  happens in the client

Errors:
- Missing token -> ConfigurationError, raised before anything is sent
- Network failure / non-2xx / undecodable body -> TransportError
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from torg_catalog.errors import TransportError
from torg_catalog.integrations.contracts.interfaces import CatalogTransport, QueryParams
from torg_catalog.utils.config_loader import ClientConfig

logger = logging.getLogger(__name__)


class HTTPCatalogTransport(CatalogTransport):
    def __init__(self, config: ClientConfig, session: Optional[requests.Session] = None) -> None:
        self.config = config
        self._session = session
        self._owns_session = session is None

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
            if self.config.proxy:
                self._session.proxies.update({"http": self.config.proxy, "https": self.config.proxy})
        return self._session

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "Authorization": self.config.require_token(),
        }

    def url_for(self, resource: str) -> str:
        return f"{self.config.endpoint_url}/{resource.strip('/')}.json"

    def fetch_json(self, resource: str, params: Optional[QueryParams] = None) -> Any:
        headers = self._headers()
        url = self.url_for(resource)
        query = dict(params or {})
        logger.debug("GET %s params=%s", url, query)
        try:
            resp = self.session.get(url, params=query, headers=headers, timeout=self.config.timeout_seconds)
            resp.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error("Catalog API returned HTTP %s for %s", status, url)
            raise TransportError(
                f"Catalog API request failed with HTTP {status}: {url}",
                status_code=status,
                url=url,
                payload={"resource": resource, "params": query},
            ) from e
        except requests.RequestException as e:
            logger.error("Catalog API request to %s failed: %s", url, e)
            raise TransportError(
                f"Catalog API request failed: {e}",
                url=url,
                payload={"resource": resource, "params": query},
            ) from e

        try:
            return resp.json()
        except ValueError as e:
            logger.error("Catalog API returned a non-JSON body for %s", url)
            raise TransportError(
                f"Catalog API returned a non-JSON body: {url}",
                status_code=resp.status_code,
                url=url,
            ) from e

    def close(self) -> None:
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None
