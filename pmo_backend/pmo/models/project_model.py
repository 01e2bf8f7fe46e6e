from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..store.codec import decode_datetime, drop_empty, encode_datetime


PROJECT_STATUSES = (
    'analysis',
    'estimation',
    'proposal',
    'negotiation',
    'won',
    'lost',
    'in_progress',
    'completed',
    'abandoned',
)
PROJECT_TYPES = ('commercial', 'internal')

RECORD_KEYS = {
    'name': 'name',
    'status': 'status',
    'start_date': 'startDate',
    'end_date': 'endDate',
    'description': 'description',
    'billable': 'billable',
    'type': 'type',
    'updated_at': 'updatedAt',
}


@dataclass
class Project:
    id: Optional[str]
    name: str
    start_date: datetime
    status: str = 'analysis'
    end_date: Optional[datetime] = None
    description: str = ''
    billable: bool = False
    type: str = 'commercial'
    created_at: Optional[datetime] = field(default=None, repr=False)
    updated_at: Optional[datetime] = field(default=None, repr=False)

    @classmethod
    def from_record(cls, record):
        return cls(
            id=record['id'],
            name=record.get('name') or '',
            status=record.get('status') or 'analysis',
            start_date=decode_datetime(record.get('startDate')),
            end_date=decode_datetime(record.get('endDate')),
            description=record.get('description') or '',
            billable=bool(record.get('billable')),
            type=record.get('type') or 'commercial',
            created_at=decode_datetime(record.get('createdAt')),
            updated_at=decode_datetime(record.get('updatedAt')),
        )

    def to_record(self):
        return drop_empty({
            'name': self.name,
            'status': self.status,
            'startDate': encode_datetime(self.start_date),
            'endDate': encode_datetime(self.end_date),
            'description': self.description,
            'billable': self.billable,
            'type': self.type,
            'createdAt': encode_datetime(self.created_at),
            'updatedAt': encode_datetime(self.updated_at),
        })
