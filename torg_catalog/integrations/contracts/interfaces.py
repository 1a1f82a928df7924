from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Union

QueryParams = Mapping[str, Union[str, int, float, bool]]


class CatalogTransport(ABC):
    """Every catalog transport (real HTTP or mock) must implement this interface."""

    @abstractmethod
    def fetch_json(self, resource: str, params: Optional[QueryParams] = None) -> Any:
        """
        GET ``resource`` with ``params`` and return the decoded JSON body.

        Raises TransportError on network failure or non-2xx status.
        """

    def close(self) -> None:
        """Release any held connections. No-op by default."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
