from abc import ABC, abstractmethod
from typing import Any, Iterable, Optional


class DocumentStore(ABC):
    """Network-scoped document collections with field-level merge writes.

    Documents are addressed by (network, collection, doc_id) and hold an
    arbitrary JSON-like field map. Implementations return copies, so callers
    may freely mutate what they read.
    """

    @abstractmethod
    async def merge_many(
        self,
        network: str,
        collection: str,
        documents: Iterable[tuple[str, dict[str, Any]]],
    ) -> None:
        """Create or merge every (doc_id, fields) pair as one batch."""
        pass

    @abstractmethod
    async def get(self, network: str, collection: str, doc_id: str) -> Optional[dict[str, Any]]:
        pass

    @abstractmethod
    async def query(
        self,
        network: str,
        collection: str,
        filters: Optional[dict[str, Any]] = None,
    ) -> list[dict[str, Any]]:
        """Documents matching every equality filter, ordered by doc id."""
        pass

    async def close(self) -> None:
        pass


def matches(data: dict[str, Any], filters: Optional[dict[str, Any]]) -> bool:
    """True if every filter field is present in data with an equal value."""
    if not filters:
        return True
    for field, value in filters.items():
        if field not in data:
            return False
        # bool is an int subclass; keep True from matching 1
        if type(data[field]) is bool or type(value) is bool:
            if type(data[field]) is not type(value):
                return False
        if data[field] != value:
            return False
    return True
