"""
Response normalizer.

Purpose:
- Turns raw catalog JSON (camel/pascal-cased keys, ragged whitespace in text
  fields) into a canonical tree: snake_case keys, collapsed whitespace.
- Gives object nodes an explicit lookup API (``NormalizedObject``) and exports
  them back to plain JSON-compatible values.

Notes:
- The original key casing is not recoverable from a normalized tree.
- When two keys canonicalize to the same name the later one wins.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Dict, Iterator, List, Union

_WORD_RE = re.compile(r"[A-Z][a-z]*|[a-z]+")
_WHITESPACE_RE = re.compile(r"\s{2,}|[\r\n]")

_SCALAR_TYPES = (bool, int, float, type(None))

_MISSING = object()


def canonical_key(key: str) -> str:
    """``"ResultsPerPage"`` -> ``"results_per_page"``, ``"geoId"`` -> ``"geo_id"``."""
    if not isinstance(key, str):
        raise TypeError(f"Object keys must be strings; got {type(key).__name__}")
    return "_".join(_WORD_RE.findall(key)).lower()


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE_RE.sub(" ", text).strip()


class NormalizedObject(Mapping):
    """
    Object node of a normalized response.

    Read-only mapping keyed by canonical names. Nested values are either
    ``NormalizedObject``, ``list`` or JSON scalars.

        offer = client.offer(42)
        offer["price"]["value"]
        offer.get("vendor_name")
        offer.path("seller", "region", "name", default="")
    """

    __slots__ = ("_data",)

    def __init__(self, data: Dict[str, Any] = None) -> None:
        self._data: Dict[str, Any] = dict(data or {})

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"NormalizedObject({self._data!r})"

    def path(self, *keys: Union[str, int], default: Any = None) -> Any:
        """Walk nested objects/arrays; returns ``default`` as soon as a step is absent."""
        node: Any = self
        for key in keys:
            if isinstance(key, int) and isinstance(node, list):
                if not -len(node) <= key < len(node):
                    return default
                node = node[key]
            elif isinstance(key, str) and isinstance(node, Mapping):
                node = node.get(key, _MISSING)
                if node is _MISSING:
                    return default
            else:
                return default
        return node

    def to_dict(self) -> Dict[str, Any]:
        return export(self)


def normalize(value: Any) -> Any:
    """Pure, recursive: dict -> NormalizedObject, list -> list, str -> collapsed."""
    if isinstance(value, str):
        return collapse_whitespace(value)
    if isinstance(value, _SCALAR_TYPES):
        return value
    if isinstance(value, Mapping):
        return NormalizedObject({canonical_key(k): normalize(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return [normalize(item) for item in value]
    raise TypeError(f"Value of type {type(value).__name__} is not JSON-compatible")


def export(node: Any) -> Any:
    """Structural copy of a normalized tree as plain dicts/lists."""
    if isinstance(node, (str,) + _SCALAR_TYPES):
        return node
    if isinstance(node, Mapping):
        out: Dict[str, Any] = {}
        for key, value in node.items():
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be strings; got {type(key).__name__}")
            out[key] = export(value)
        return out
    if isinstance(node, (list, tuple)):
        items: List[Any] = [export(item) for item in node]
        return items
    raise TypeError(f"Value of type {type(node).__name__} is not JSON-compatible")


__all__ = [
    "NormalizedObject",
    "canonical_key",
    "collapse_whitespace",
    "normalize",
    "export",
]
