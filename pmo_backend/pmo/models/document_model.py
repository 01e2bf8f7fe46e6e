from datetime import datetime

from .. import db


class Document(db.Model):
    __tablename__ = 'documents'

    pk = db.Column(db.Integer, primary_key=True, autoincrement=True)  # insertion order
    doc_id = db.Column(db.String(36), nullable=False, unique=True)
    namespace = db.Column(db.String(120), nullable=False, index=True)
    collection = db.Column(db.String(50), nullable=False, index=True)
    data = db.Column(db.JSON, nullable=False, default=dict)
    created_on = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
