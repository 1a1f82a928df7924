"""
Utility modules for the catalog client
"""
from .config_loader import ClientConfig, config_from_env, load_client_config

__all__ = [
    'ClientConfig',
    'config_from_env',
    'load_client_config',
]
