import logging
import uuid

from sqlalchemy.exc import SQLAlchemyError

from . import RecordStore
from ..errors import StoreError
from ..models.document_model import Document


logger = logging.getLogger(__name__)


class SqlRecordStore(RecordStore):
    """Document collections kept as JSON rows in one SQL table."""

    def __init__(self, session, namespace):
        self.session = session
        self.namespace = namespace

    def _query(self, collection):
        return Document.query.filter_by(namespace=self.namespace, collection=collection)

    def list(self, collection, order_by=None, descending=False, limit=None):
        try:
            documents = self._query(collection).order_by(Document.pk).all()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to list {collection}: {e}", collection=collection)

        records = [dict(document.data, id=document.doc_id) for document in documents]
        if order_by is not None:
            # documents lacking the ordering field are left out, as the hosted store does
            records = [record for record in records if record.get(order_by) is not None]
            records.sort(key=lambda record: record[order_by], reverse=descending)
        if limit is not None:
            records = records[:limit]
        return records

    def create(self, collection, fields):
        document = Document(
            doc_id=uuid.uuid4().hex,
            namespace=self.namespace,
            collection=collection,
            data=dict(fields),
        )
        try:
            self.session.add(document)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError(f"Failed to create {collection} record: {e}", collection=collection)

        logger.debug("Created %s/%s", collection, document.doc_id)
        return document.doc_id

    def update(self, collection, record_id, fields):
        document = self._query(collection).filter_by(doc_id=record_id).first()
        if document is None:
            raise StoreError(f"No {collection} record {record_id}", collection=collection, record_id=record_id)

        data = dict(document.data)
        for key, value in fields.items():
            if value is None:
                data.pop(key, None)
            else:
                data[key] = value
        document.data = data

        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError(f"Failed to update {collection}/{record_id}: {e}", collection=collection, record_id=record_id)

    def delete(self, collection, record_id):
        try:
            self._query(collection).filter_by(doc_id=record_id).delete()
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError(f"Failed to delete {collection}/{record_id}: {e}", collection=collection, record_id=record_id)
