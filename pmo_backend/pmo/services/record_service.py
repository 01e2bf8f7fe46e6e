from flask import current_app

from ..errors import StoreError


def read_collection(store, collection, record_type, **query):
    """
    Fetches a whole collection and decodes it into ``record_type`` items.

    A failed read falls back to an empty list; a record that cannot be
    decoded is skipped. Both are logged.
    """
    try:
        records = store.list(collection, **query)
    except StoreError as e:
        current_app.logger.error("Error fetching %s: %s", collection, e)
        return []

    items = []
    for record in records:
        try:
            items.append(record_type.from_record(record))
        except (KeyError, TypeError, ValueError) as e:
            current_app.logger.error("Skipping malformed %s record %s: %s", collection, record.get('id'), e)
    return items
