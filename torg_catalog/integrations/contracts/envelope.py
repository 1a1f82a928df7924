"""
Envelope contract.

Every endpoint answers with a single top-level key (the resource name) wrapping
the payload. Listing endpoints put a pagination block inside it:

    {"Category": {"ResultsTotal": 25, "ResultsPerPage": 10, "Page": 1, "Listing": [...]}}

After normalization the pagination block reads ``results_total``,
``results_per_page``, ``page`` and ``listing``.
"""

from __future__ import annotations

from typing import Any, List, Mapping

from pydantic import BaseModel, Field, ValidationError

from torg_catalog.errors import MalformedEnvelopeError


class PageEnvelope(BaseModel):
    results_total: int = Field(ge=0)
    results_per_page: int = Field(ge=0)
    page: int = Field(ge=1)
    listing: List[Any]

    @property
    def has_more(self) -> bool:
        # Trusts server-reported totals; an under-reported total ends the listing early.
        return (self.results_total - self.results_per_page * self.page) > 0


def unwrap_envelope(raw: Any) -> Any:
    """Return the value under the envelope's (first) top-level key."""
    if not isinstance(raw, Mapping) or not raw:
        raise MalformedEnvelopeError(
            f"Expected a single-key JSON object envelope; got {type(raw).__name__}",
            payload={"raw": raw} if raw is not None else None,
        )
    return raw[next(iter(raw))]


def parse_page(page: Any) -> PageEnvelope:
    if not isinstance(page, Mapping):
        raise MalformedEnvelopeError(
            f"Listing page must be an object; got {type(page).__name__}",
            payload={"page": page},
        )
    try:
        return PageEnvelope(**page)
    except ValidationError as exc:
        raise MalformedEnvelopeError(
            f"Listing page envelope validation failed: {exc}",
            payload={"keys": sorted(page.keys())},
        ) from exc


__all__ = ["PageEnvelope", "parse_page", "unwrap_envelope"]
