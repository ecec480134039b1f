import copy
from typing import Any, Dict, Iterable, Optional

from app.store.base import DocumentStore, matches


class InMemoryDocumentStore(DocumentStore):
    def __init__(self):
        # (network, collection) -> doc_id -> fields
        self._storage: Dict[tuple[str, str], Dict[str, dict]] = {}

    async def merge_many(
        self,
        network: str,
        collection: str,
        documents: Iterable[tuple[str, dict[str, Any]]],
    ) -> None:
        """Merge all documents, or none if the batch is malformed."""
        batch = [(doc_id, copy.deepcopy(dict(fields))) for doc_id, fields in documents]
        bucket = self._storage.setdefault((network, collection), {})
        for doc_id, fields in batch:
            bucket.setdefault(doc_id, {}).update(fields)

    async def get(self, network: str, collection: str, doc_id: str) -> Optional[dict[str, Any]]:
        data = self._storage.get((network, collection), {}).get(doc_id)
        return copy.deepcopy(data) if data is not None else None

    async def query(
        self,
        network: str,
        collection: str,
        filters: Optional[dict[str, Any]] = None,
    ) -> list[dict[str, Any]]:
        bucket = self._storage.get((network, collection), {})
        return [
            copy.deepcopy(bucket[doc_id])
            for doc_id in sorted(bucket)
            if matches(bucket[doc_id], filters)
        ]

    def clear(self):
        """Clear all documents (only for testing)."""
        self._storage.clear()
