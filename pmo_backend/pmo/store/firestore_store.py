import logging

import requests

from . import RecordStore
from ..errors import StoreError


logger = logging.getLogger(__name__)

FIRESTORE_URL = "https://firestore.googleapis.com/v1"
PAGE_SIZE = 300


def encode_value(value):
    """Wraps a Python value in the typed value envelope of the REST API."""
    if value is None:
        return {"nullValue": None}
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return {"booleanValue": value}
    if isinstance(value, int):
        return {"integerValue": str(value)}
    if isinstance(value, float):
        return {"doubleValue": value}
    if isinstance(value, str):
        return {"stringValue": value}
    if isinstance(value, (list, tuple)):
        values = [encode_value(item) for item in value]
        return {"arrayValue": {"values": values} if values else {}}
    if isinstance(value, dict):
        return {"mapValue": {"fields": encode_fields(value)}}
    raise TypeError(f"Unsupported field value: {value!r}")


def decode_value(value):
    if "nullValue" in value:
        return None
    if "booleanValue" in value:
        return value["booleanValue"]
    if "integerValue" in value:
        return int(value["integerValue"])
    if "doubleValue" in value:
        return float(value["doubleValue"])
    # references and base64 bytes come back as their string form
    for key in ("stringValue", "timestampValue", "referenceValue", "bytesValue"):
        if key in value:
            return value[key]
    if "geoPointValue" in value:
        return dict(value["geoPointValue"])
    if "arrayValue" in value:
        return [decode_value(item) for item in value["arrayValue"].get("values", [])]
    if "mapValue" in value:
        return decode_fields(value["mapValue"].get("fields", {}))
    raise ValueError(f"Unsupported Firestore value: {value!r}")


def encode_fields(fields):
    return {key: encode_value(value) for key, value in fields.items()}


def decode_fields(fields):
    return {key: decode_value(value) for key, value in fields.items()}


def decode_document(document):
    record = decode_fields(document.get("fields", {}))
    record["id"] = document["name"].rsplit("/", 1)[-1]
    return record


def decode_documents(collection, documents):
    """Decodes listed documents, leaving out any that cannot be decoded."""
    records = []
    for document in documents:
        try:
            records.append(decode_document(document))
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Skipping undecodable %s document %s: %s", collection, document.get("name"), e)
    return records


class FirestoreRecordStore(RecordStore):
    """
    Collections of the hosted document database, through its REST API.

    Without an explicit ``session`` each call goes through ``requests.request``,
    so concurrent reads share no connection state.
    """

    supports_parallel_reads = True

    def __init__(self, api_key, project_id, database="(default)", timeout=10.0, session=None):
        self.api_key = api_key
        self.project_id = project_id
        self.database = database
        self.timeout = timeout
        self.session = session

    @property
    def documents_url(self):
        return f"{FIRESTORE_URL}/projects/{self.project_id}/databases/{self.database}/documents"

    def _request(self, method, url, *, collection, record_id=None, params=None, json=None):
        send = self.session.request if self.session is not None else requests.request
        query = [("key", self.api_key)] + list(params or [])
        try:
            r = send(method, url, params=query, json=json, timeout=self.timeout)
            r.raise_for_status()
            return r.json() if r.content else {}
        except (requests.RequestException, ValueError) as e:
            raise StoreError(f"{method} {collection} failed: {e}", collection=collection, record_id=record_id)

    def list(self, collection, order_by=None, descending=False, limit=None):
        if order_by is not None or limit is not None:
            return self._run_query(collection, order_by, descending, limit)

        records = []
        page_token = None
        while True:
            params = [("pageSize", PAGE_SIZE)]
            if page_token:
                params.append(("pageToken", page_token))
            payload = self._request("GET", f"{self.documents_url}/{collection}", collection=collection, params=params)
            records.extend(decode_documents(collection, payload.get("documents", [])))
            page_token = payload.get("nextPageToken")
            if not page_token:
                return records

    def _run_query(self, collection, order_by, descending, limit):
        structured_query = {"from": [{"collectionId": collection}]}
        if order_by is not None:
            structured_query["orderBy"] = [{
                "field": {"fieldPath": order_by},
                "direction": "DESCENDING" if descending else "ASCENDING",
            }]
        if limit is not None:
            structured_query["limit"] = limit

        rows = self._request(
            "POST", f"{self.documents_url}:runQuery",
            collection=collection, json={"structuredQuery": structured_query},
        )
        # rows without a document only carry the read time
        return decode_documents(collection, [row["document"] for row in rows if "document" in row])

    def create(self, collection, fields):
        document = self._request(
            "POST", f"{self.documents_url}/{collection}",
            collection=collection, json={"fields": encode_fields(fields)},
        )
        record_id = document["name"].rsplit("/", 1)[-1]
        logger.debug("Created %s/%s", collection, record_id)
        return record_id

    def update(self, collection, record_id, fields):
        # masked paths missing from the body are removed from the document
        params = [("updateMask.fieldPaths", key) for key in fields]
        params.append(("currentDocument.exists", "true"))
        present = {key: value for key, value in fields.items() if value is not None}
        self._request(
            "PATCH", f"{self.documents_url}/{collection}/{record_id}",
            collection=collection, record_id=record_id,
            params=params, json={"fields": encode_fields(present)},
        )

    def delete(self, collection, record_id):
        self._request(
            "DELETE", f"{self.documents_url}/{collection}/{record_id}",
            collection=collection, record_id=record_id,
        )
