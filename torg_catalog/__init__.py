"""
Client library for the Torg (Mail.ru) content catalog API.
"""

from .client import CatalogClient
from .errors import CatalogError, ConfigurationError, MalformedEnvelopeError, TransportError
from .integrations.clients import HTTPCatalogTransport, MockCatalogTransport
from .integrations.normalizer import NormalizedObject, export, normalize
from .listing import Listing
from .utils.config_loader import ClientConfig, config_from_env, load_client_config

__version__ = "0.1.0"

__all__ = [
    "CatalogClient",
    "CatalogError",
    "ClientConfig",
    "ConfigurationError",
    "HTTPCatalogTransport",
    "Listing",
    "MalformedEnvelopeError",
    "MockCatalogTransport",
    "NormalizedObject",
    "TransportError",
    "config_from_env",
    "export",
    "load_client_config",
    "normalize",
]
