import pytest
import requests

from torg_catalog.errors import ConfigurationError, TransportError
from torg_catalog.integrations.clients.real_http.catalog_http import HTTPCatalogTransport
from torg_catalog.utils.config_loader import ClientConfig


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._body = body
        self._text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if self._text is not None:
            raise ValueError("No JSON object could be decoded")
        return self._body


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse(body={})
        self.error = error
        self.requests = []
        self.closed = False

    def get(self, url, params=None, headers=None, timeout=None):
        self.requests.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


@pytest.fixture
def config():
    return ClientConfig(access_token="secret", timeout_seconds=5)


def test_fetch_json_builds_url_headers_and_params(config):
    session = FakeSession(FakeResponse(body={"Category": {"Id": 1}}))
    transport = HTTPCatalogTransport(config, session=session)

    out = transport.fetch_json("category/1", {"geo_id": 213, "page": 2})

    assert out == {"Category": {"Id": 1}}
    sent = session.requests[0]
    assert sent["url"] == "http://content.api.torg.mail.ru/v1/category/1.json"
    assert sent["params"] == {"geo_id": 213, "page": 2}
    assert sent["headers"] == {"Accept": "application/json", "Authorization": "secret"}
    assert sent["timeout"] == 5


def test_missing_token_fails_before_request():
    session = FakeSession()
    transport = HTTPCatalogTransport(ClientConfig(), session=session)

    with pytest.raises(ConfigurationError):
        transport.fetch_json("category")
    assert session.requests == []


def test_http_error_status_becomes_transport_error(config):
    transport = HTTPCatalogTransport(config, session=FakeSession(FakeResponse(status_code=503)))

    with pytest.raises(TransportError) as exc_info:
        transport.fetch_json("search", {"q": "tv"})

    assert exc_info.value.status_code == 503
    assert exc_info.value.url.endswith("/search.json")
    assert exc_info.value.payload["params"] == {"q": "tv"}
    assert isinstance(exc_info.value.__cause__, requests.HTTPError)


def test_network_failure_becomes_transport_error(config):
    session = FakeSession(error=requests.ConnectionError("connection refused"))
    transport = HTTPCatalogTransport(config, session=session)

    with pytest.raises(TransportError) as exc_info:
        transport.fetch_json("regions")

    assert exc_info.value.status_code is None
    assert "connection refused" in str(exc_info.value)


def test_non_json_body_becomes_transport_error(config):
    transport = HTTPCatalogTransport(config, session=FakeSession(FakeResponse(text="<html>")))

    with pytest.raises(TransportError):
        transport.fetch_json("regions")


def test_injected_session_is_not_closed(config):
    session = FakeSession()
    transport = HTTPCatalogTransport(config, session=session)
    transport.close()
    assert session.closed is False


def test_owned_session_gets_proxy_and_is_closed():
    transport = HTTPCatalogTransport(ClientConfig(access_token="t", proxy="http://proxy:3128"))

    session = transport.session

    assert session.proxies["http"] == "http://proxy:3128"
    assert session.proxies["https"] == "http://proxy:3128"
    transport.close()
    assert transport._session is None


def test_custom_endpoint_and_version():
    config = ClientConfig(access_token="t", base_url="https://example.test/api/", api_version="v2")
    transport = HTTPCatalogTransport(config, session=FakeSession())

    assert transport.url_for("/model/3/") == "https://example.test/api/v2/model/3.json"
