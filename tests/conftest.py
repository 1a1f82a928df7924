"""Pytest fixtures for catalog client, listing and transport tests."""

import pytest

from torg_catalog.client import CatalogClient
from torg_catalog.integrations.clients.mocks.catalog_mock import MockCatalogTransport
from torg_catalog.utils.config_loader import ClientConfig


def _build_pages(total, per_page, envelope_key="Models", item_prefix="model"):
    pages = []
    page_count = max(1, -(-total // per_page))
    for page in range(1, page_count + 1):
        start = (page - 1) * per_page
        stop = min(start + per_page, total)
        pages.append(
            {
                envelope_key: {
                    "ResultsTotal": total,
                    "ResultsPerPage": per_page,
                    "Page": page,
                    "Listing": [{"Id": i, "Name": f"{item_prefix} {i}"} for i in range(start, stop)],
                }
            }
        )
    return pages


@pytest.fixture
def build_pages():
    """Factory for camel-cased listing pages: build_pages(total, per_page)."""
    return _build_pages


@pytest.fixture
def transport():
    return MockCatalogTransport()


@pytest.fixture
def client(transport):
    return CatalogClient(ClientConfig(access_token="test-token"), transport=transport)
