from concurrent.futures import ThreadPoolExecutor

from flask import current_app


PROJECTS = 'projects'
DEVELOPERS = 'developers'
ASSIGNMENTS = 'assignments'

COLLECTIONS = (PROJECTS, DEVELOPERS, ASSIGNMENTS)

EXTENSION_KEY = 'record_store'


class RecordStore:
    """
    Per-collection document access used by every service.

    Records are plain dicts of JSON-compatible values; ``list`` returns them
    with their ``id`` merged in. Implementations raise ``StoreError`` on any
    failure.
    """

    supports_parallel_reads = False

    def list(self, collection, order_by=None, descending=False, limit=None):
        raise NotImplementedError

    def create(self, collection, fields):
        raise NotImplementedError

    def update(self, collection, record_id, fields):
        raise NotImplementedError

    def delete(self, collection, record_id):
        raise NotImplementedError


def build_store(config):
    if config['STORE_BACKEND'] == 'sql':
        from .. import db
        from .sql_store import SqlRecordStore

        db.create_all()
        return SqlRecordStore(db.session, namespace=config['STORE_PROJECT_ID'])

    from .firestore_store import FirestoreRecordStore
    return FirestoreRecordStore(
        api_key=config['STORE_API_KEY'],
        project_id=config['STORE_PROJECT_ID'],
        database=config['STORE_DATABASE'],
        timeout=config['STORE_TIMEOUT'],
    )


def register_store(app, store):
    app.extensions[EXTENSION_KEY] = store


def get_store():
    return current_app.extensions[EXTENSION_KEY]


def fetch_collections(store, readers):
    """
    Runs independent collection reads, concurrently when the store allows it.

    :param readers: sequence of zero-argument callables, one per collection.
    :return: list of their results, in the same order.
    """
    if not store.supports_parallel_reads or len(readers) < 2:
        return [reader() for reader in readers]

    app = current_app._get_current_object()

    def run(reader):
        with app.app_context():
            return reader()

    with ThreadPoolExecutor(max_workers=len(readers)) as executor:
        return list(executor.map(run, readers))
