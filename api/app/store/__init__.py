from app.store.base import DocumentStore
from app.store.memory import InMemoryDocumentStore


def create_store(settings) -> DocumentStore:
    """Build the document store selected by `settings.store_backend`."""
    backend = settings.store_backend.lower()
    if backend == 'memory':
        return InMemoryDocumentStore()
    if backend == 'sql':
        from app.db.database import engine
        from app.store.sql import SqlDocumentStore
        return SqlDocumentStore(engine)
    if backend == 'firestore':
        from app.store.firestore import FirestoreDocumentStore
        return FirestoreDocumentStore.from_settings(settings)
    raise ValueError(f'Unknown store backend: {settings.store_backend}')


__all__ = [
    'DocumentStore',
    'InMemoryDocumentStore',
    'create_store',
]
