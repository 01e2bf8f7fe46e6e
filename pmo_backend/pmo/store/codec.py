from datetime import datetime, timezone


def utcnow():
    return datetime.now(timezone.utc)


def as_utc(value):
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def encode_datetime(value):
    if value is None:
        return None
    return as_utc(value).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def decode_datetime(value):
    """Parses an ISO-8601 string from the store; empty values give None."""
    if value in (None, ''):
        return None
    if isinstance(value, datetime):
        return as_utc(value)
    text = str(value)
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    return as_utc(datetime.fromisoformat(text))


def drop_empty(fields):
    """Drops None values so absent optional fields stay absent in the store."""
    return {key: value for key, value in fields.items() if value is not None}


def record_patch(changes, record_keys):
    """
    Maps loaded attribute changes onto store field names for a partial update.

    None values are kept: the store removes those fields.
    """
    patch = {}
    for attribute, value in changes.items():
        if isinstance(value, datetime):
            value = encode_datetime(value)
        patch[record_keys[attribute]] = value
    return patch
