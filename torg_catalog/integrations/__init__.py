"""
Integrations layer.
This package contains all code used to talk to the catalog API:
- normalizer.py: raw JSON -> canonical, navigable tree
- contracts/: transport interface and response envelope shapes
- clients/: the real HTTP transport and an in-memory mock

Key rule:
- Nothing outside clients/real_http performs HTTP calls.
"""

from .normalizer import NormalizedObject, canonical_key, collapse_whitespace, export, normalize

__all__ = [
    "NormalizedObject",
    "canonical_key",
    "collapse_whitespace",
    "export",
    "normalize",
]
