import pytest

from torg_catalog.errors import ConfigurationError
from torg_catalog.utils.config_loader import ClientConfig, config_from_env, load_client_config


def test_defaults():
    config = ClientConfig()

    assert config.access_token is None
    assert config.endpoint_url == "http://content.api.torg.mail.ru/v1"
    assert config.timeout_seconds == 10.0
    with pytest.raises(ConfigurationError):
        config.require_token()


def test_repr_hides_token():
    assert "secret" not in repr(ClientConfig(access_token="secret"))


def test_load_client_config_from_yaml(tmp_path):
    path = tmp_path / "catalog_client.yml"
    path.write_text("access_token: abc\napi_version: v2\ntimeout_seconds: 3.5\n", encoding="utf-8")

    config = load_client_config(path)

    assert config.require_token() == "abc"
    assert config.endpoint_url.endswith("/v2")
    assert config.timeout_seconds == 3.5


def test_load_client_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_client_config(tmp_path / "nope.yml")


def test_load_client_config_invalid_values(tmp_path):
    path = tmp_path / "catalog_client.yml"
    path.write_text("timeout_seconds: -1\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_client_config(path)


def test_config_from_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TORG_ACCESS_TOKEN", "env-token")
    monkeypatch.setenv("TORG_TIMEOUT_SECONDS", "7")
    monkeypatch.setenv("TORG_PROXY", "http://proxy:8080")
    monkeypatch.delenv("TORG_BASE_URL", raising=False)
    monkeypatch.delenv("TORG_API_VERSION", raising=False)

    config = config_from_env()

    assert config.access_token == "env-token"
    assert config.timeout_seconds == 7.0
    assert config.proxy == "http://proxy:8080"
    assert config.endpoint_url == "http://content.api.torg.mail.ru/v1"
