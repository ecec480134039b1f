"""Document store backed by Cloud Firestore.

Layout: networks/{network}/{collection}/{doc_id}
"""
import logging
from typing import Any, Iterable, Optional

import firebase_admin
from firebase_admin import credentials, firestore_async
from google.cloud.firestore_v1.base_query import FieldFilter

from app.store.base import DocumentStore

logger = logging.getLogger(__name__)

# Firestore rejects write batches larger than this
MAX_BATCH_WRITES = 500

APP_NAME = 'wizard-directory'


class FirestoreDocumentStore(DocumentStore):
    def __init__(self, client, app: Optional[firebase_admin.App] = None):
        self.client = client
        self._app = app

    @classmethod
    def from_settings(cls, settings) -> 'FirestoreDocumentStore':
        """Initialise a dedicated firebase app and its async Firestore client."""
        if settings.firebase_credentials:
            cred = credentials.Certificate(settings.firebase_credentials)
        else:
            cred = credentials.ApplicationDefault()
        options = {}
        if settings.firebase_project_id:
            options['projectId'] = settings.firebase_project_id

        app = firebase_admin.initialize_app(cred, options, name=APP_NAME)
        logger.info('Connected Firestore app %s', app.project_id)
        return cls(firestore_async.client(app), app)

    def _collection(self, network: str, collection: str):
        return self.client.collection('networks').document(network).collection(collection)

    async def merge_many(
        self,
        network: str,
        collection: str,
        documents: Iterable[tuple[str, dict[str, Any]]],
    ) -> None:
        """Merge documents with `set(merge=True)`, one commit per 500 writes."""
        coll = self._collection(network, collection)
        batch = self.client.batch()
        pending = 0
        for doc_id, fields in documents:
            batch.set(coll.document(doc_id), dict(fields), merge=True)
            pending += 1
            if pending == MAX_BATCH_WRITES:
                await batch.commit()
                batch = self.client.batch()
                pending = 0
        if pending:
            await batch.commit()

    async def get(self, network: str, collection: str, doc_id: str) -> Optional[dict[str, Any]]:
        snapshot = await self._collection(network, collection).document(doc_id).get()
        return snapshot.to_dict() if snapshot.exists else None

    async def query(
        self,
        network: str,
        collection: str,
        filters: Optional[dict[str, Any]] = None,
    ) -> list[dict[str, Any]]:
        query = self._collection(network, collection)
        for field, value in (filters or {}).items():
            query = query.where(filter=FieldFilter(field, '==', value))

        snapshots = [snapshot async for snapshot in query.stream()]
        snapshots.sort(key=lambda s: s.id)
        return [snapshot.to_dict() for snapshot in snapshots]

    async def close(self) -> None:
        if self._app is not None:
            firebase_admin.delete_app(self._app)
            self._app = None
