"""Document store backed by a single JSON table through async SQLAlchemy."""
import copy
import logging
from typing import Any, Iterable, Optional

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.models.document import Document
from app.store.base import DocumentStore, matches

logger = logging.getLogger(__name__)

# Dialects whose insert supports ON CONFLICT DO NOTHING
INSERT_BY_DIALECT = {
    'postgresql': postgresql.insert,
    'sqlite': sqlite.insert,
}


class SqlDocumentStore(DocumentStore):
    """Stores every document as a row of the `documents` table.

    A batch runs in one transaction. Missing rows are created first with an
    insert that ignores conflicts, then every row of the batch is locked and
    merged, so concurrent batches touching the same document serialise.

    Equality filters are applied in Python after loading the whole
    (network, collection), which costs one full scan per query. Rows are
    ordered by code point ("C" collation on Postgres), the same order the
    other stores produce.
    """

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_factory = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False,
        )
        dialect = engine.dialect.name
        if dialect not in INSERT_BY_DIALECT:
            raise ValueError(f'Unsupported database dialect: {dialect}')
        self._insert = INSERT_BY_DIALECT[dialect]
        self._order = Document.doc_id.collate('C') if dialect == 'postgresql' else Document.doc_id

    async def merge_many(
        self,
        network: str,
        collection: str,
        documents: Iterable[tuple[str, dict[str, Any]]],
    ) -> None:
        batch = [(doc_id, dict(fields)) for doc_id, fields in documents]
        if not batch:
            return
        doc_ids = list(dict.fromkeys(doc_id for doc_id, _ in batch))

        async with self.session_factory() as session:
            async with session.begin():
                await session.execute(
                    self._insert(Document)
                    .values([
                        {'network': network, 'collection': collection, 'doc_id': doc_id, 'data': {}}
                        for doc_id in doc_ids
                    ])
                    .on_conflict_do_nothing()
                )
                result = await session.execute(
                    select(Document)
                    .where(Document.network == network)
                    .where(Document.collection == collection)
                    .where(Document.doc_id.in_(doc_ids))
                    .with_for_update()
                    .execution_options(populate_existing=True)
                )
                existing = {doc.doc_id: doc for doc in result.scalars().all()}

                for doc_id, fields in batch:
                    doc = existing[doc_id]
                    # Reassign so the JSON column is flagged dirty
                    doc.data = {**(doc.data or {}), **fields}

        logger.debug('Merged %d documents into %s/%s', len(batch), network, collection)

    async def get(self, network: str, collection: str, doc_id: str) -> Optional[dict[str, Any]]:
        async with self.session_factory() as session:
            doc = await session.get(Document, (network, collection, doc_id))
            return copy.deepcopy(doc.data) if doc else None

    async def query(
        self,
        network: str,
        collection: str,
        filters: Optional[dict[str, Any]] = None,
    ) -> list[dict[str, Any]]:
        async with self.session_factory() as session:
            result = await session.execute(
                select(Document)
                .where(Document.network == network)
                .where(Document.collection == collection)
                .order_by(self._order)
            )
            return [
                copy.deepcopy(doc.data)
                for doc in result.scalars().all()
                if matches(doc.data, filters)
            ]

    async def close(self) -> None:
        await self.engine.dispose()
