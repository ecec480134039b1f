from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from app.store.firestore import FirestoreDocumentStore, MAX_BATCH_WRITES


def snapshot(doc_id, data, exists=True):
    snap = MagicMock()
    snap.id = doc_id
    snap.exists = exists
    snap.to_dict.return_value = data if exists else None
    return snap


async def stream_of(*snapshots):
    for snap in snapshots:
        yield snap


@pytest.fixture
def client():
    client = MagicMock()
    client.batches = []

    def new_batch():
        batch = MagicMock()
        batch.commit = AsyncMock()
        client.batches.append(batch)
        return batch

    client.batch.side_effect = new_batch
    return client


@pytest.fixture
def collection(client):
    return client.collection.return_value.document.return_value.collection.return_value


async def test_collection_path(client):
    store = FirestoreDocumentStore(client)
    store._collection('rinkeby', 'wizards')

    client.collection.assert_called_with('networks')
    client.collection.return_value.document.assert_called_with('rinkeby')
    client.collection.return_value.document.return_value.collection.assert_called_with('wizards')


async def test_merge_many_sets_with_merge(client, collection):
    store = FirestoreDocumentStore(client)

    await store.merge_many('rinkeby', 'wizards', [('293', {'id': '293', 'online': False})])

    assert len(client.batches) == 1
    batch = client.batches[0]
    collection.document.assert_called_with('293')
    batch.set.assert_called_once_with(
        collection.document.return_value, {'id': '293', 'online': False}, merge=True,
    )
    batch.commit.assert_awaited_once()


async def test_merge_many_splits_large_batches(client):
    store = FirestoreDocumentStore(client)

    docs = [(str(i), {'id': str(i)}) for i in range(MAX_BATCH_WRITES + 1)]
    await store.merge_many('rinkeby', 'wizards', docs)

    assert [b.set.call_count for b in client.batches] == [MAX_BATCH_WRITES, 1]
    for batch in client.batches:
        batch.commit.assert_awaited_once()


async def test_merge_many_empty_commits_nothing(client):
    store = FirestoreDocumentStore(client)

    await store.merge_many('rinkeby', 'wizards', [])

    client.batches[0].commit.assert_not_awaited()


async def test_get(client, collection):
    store = FirestoreDocumentStore(client)
    collection.document.return_value.get = AsyncMock(
        return_value=snapshot('293', {'id': '293'}),
    )

    assert await store.get('rinkeby', 'wizards', '293') == {'id': '293'}

    collection.document.return_value.get = AsyncMock(
        return_value=snapshot('404', None, exists=False),
    )
    assert await store.get('rinkeby', 'wizards', '404') is None


async def test_query_applies_equality_filters(client, collection):
    store = FirestoreDocumentStore(client)
    query = collection.where.return_value
    query.stream = lambda: stream_of(
        snapshot('b', {'id': 'b'}), snapshot('a', {'id': 'a'}),
    )

    result = await store.query('rinkeby', 'wizards', {'online': True})

    assert result == [{'id': 'a'}, {'id': 'b'}]
    field_filter = collection.where.call_args.kwargs['filter']
    assert (field_filter.field_path, field_filter.op_string, field_filter.value) == (
        'online', '==', True,
    )


async def test_query_without_filters_streams_collection(client, collection):
    store = FirestoreDocumentStore(client)
    collection.stream = lambda: stream_of(snapshot('a', {'id': 'a'}))

    assert await store.query('rinkeby', 'wizards') == [{'id': 'a'}]
    collection.where.assert_not_called()


async def test_close_deletes_owned_app(client):
    app = MagicMock()
    store = FirestoreDocumentStore(client, app)

    with patch('app.store.firestore.firebase_admin.delete_app') as delete_app:
        await store.close()
        await store.close()

    delete_app.assert_called_once_with(app)
