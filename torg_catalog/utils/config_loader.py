"""
Configuration loader for the catalog client
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from torg_catalog.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://content.api.torg.mail.ru"
DEFAULT_API_VERSION = "v1"


class ClientConfig(BaseModel):
    """Connection settings for one catalog client. Passed explicitly, never global."""

    access_token: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    api_version: str = DEFAULT_API_VERSION
    timeout_seconds: float = Field(default=10.0, gt=0)
    proxy: Optional[str] = None

    @property
    def endpoint_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/{self.api_version.strip('/')}"

    def require_token(self) -> str:
        if not self.access_token:
            raise ConfigurationError("No access token configured for the catalog API.")
        return self.access_token

    def __repr__(self) -> str:
        token = "***" if self.access_token else None
        return (
            f"ClientConfig(access_token={token!r}, endpoint_url={self.endpoint_url!r}, "
            f"timeout_seconds={self.timeout_seconds!r}, proxy={self.proxy!r})"
        )


def _build_config(data: dict, source: str) -> ClientConfig:
    try:
        config = ClientConfig(**data)
    except ValidationError as e:
        logger.error("Catalog client config validation failed (%s): %s", source, e)
        raise ConfigurationError(f"Invalid catalog client config from {source}: {e}") from e
    logger.info("Successfully loaded catalog client config from %s", source)
    return config


def load_client_config(config_path: Optional[Path] = None) -> ClientConfig:
    """
    Load and validate client configuration from a YAML file

    Args:
        config_path: Path to config file. Defaults to config/catalog_client.yml

    Returns:
        Validated ClientConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigurationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = Path.cwd() / "config" / "catalog_client.yml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    return _build_config(data, str(config_path))


def config_from_env(prefix: str = "TORG_") -> ClientConfig:
    """Build a ClientConfig from ``<prefix>ACCESS_TOKEN`` etc. (``.env`` is honoured)."""
    load_dotenv()
    data = {}
    for field_name in ("access_token", "base_url", "api_version", "timeout_seconds", "proxy"):
        value = os.getenv(f"{prefix}{field_name.upper()}", "").strip()
        if value:
            data[field_name] = value
    return _build_config(data, "environment")
