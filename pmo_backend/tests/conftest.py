import itertools

import pytest

from pmo import create_app
from pmo.errors import StoreError
from pmo.store import RecordStore


TEST_SETTINGS = {
    'STORE_API_KEY': 'test-api-key',
    'STORE_PROJECT_ID': 'pmo-test',
    'SQLALCHEMY_DATABASE_URI': 'sqlite://',
    'TESTING': True,
}


class MemoryStore(RecordStore):
    """Dict-backed store that records every write it receives."""

    def __init__(self):
        self.collections = {}
        self.writes = []
        self.fail_reads = False
        self.fail_writes = False
        self._ids = itertools.count(1)

    def seed(self, collection, record_id, **fields):
        self.collections.setdefault(collection, {})[record_id] = fields
        return record_id

    def record(self, collection, record_id):
        return self.collections[collection][record_id]

    def _check_write(self, op, collection, record_id=None):
        self.writes.append((op, collection, record_id))
        if self.fail_writes:
            raise StoreError(f"{op} {collection} refused", collection=collection, record_id=record_id)

    def list(self, collection, order_by=None, descending=False, limit=None):
        if self.fail_reads:
            raise StoreError(f"list {collection} refused", collection=collection)
        records = [dict(fields, id=record_id) for record_id, fields in self.collections.get(collection, {}).items()]
        if order_by is not None:
            records = [record for record in records if record.get(order_by) is not None]
            records.sort(key=lambda record: record[order_by], reverse=descending)
        if limit is not None:
            records = records[:limit]
        return records

    def create(self, collection, fields):
        self._check_write('create', collection)
        record_id = f"{collection}-{next(self._ids)}"
        self.collections.setdefault(collection, {})[record_id] = dict(fields)
        return record_id

    def update(self, collection, record_id, fields):
        self._check_write('update', collection, record_id)
        document = self.collections.get(collection, {}).get(record_id)
        if document is None:
            raise StoreError(f"No {collection} record {record_id}", collection=collection, record_id=record_id)
        for key, value in fields.items():
            if value is None:
                document.pop(key, None)
            else:
                document[key] = value

    def delete(self, collection, record_id):
        self._check_write('delete', collection, record_id)
        self.collections.get(collection, {}).pop(record_id, None)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def app(store):
    app = create_app(config_overrides=TEST_SETTINGS, store=store, environ={})
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def settings():
    return dict(TEST_SETTINGS)
