from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..store.codec import decode_datetime, drop_empty, encode_datetime


RECORD_KEYS = {
    'developer_id': 'developerId',
    'project_id': 'projectId',
    'time_allocation': 'timeAllocation',
    'start_date': 'startDate',
    'end_date': 'endDate',
    'is_indefinite': 'isIndefinite',
}


@dataclass
class Assignment:
    id: Optional[str]
    developer_id: str
    project_id: str
    start_date: datetime
    time_allocation: int = 100  # percent, 0..100
    end_date: Optional[datetime] = None
    is_indefinite: bool = False

    def is_active(self, as_of):
        """An assignment counts against capacity while indefinite or not yet ended."""
        if self.is_indefinite:
            return True
        return self.end_date is not None and self.end_date > as_of

    @classmethod
    def from_record(cls, record):
        return cls(
            id=record['id'],
            developer_id=record.get('developerId') or '',
            project_id=record.get('projectId') or '',
            time_allocation=int(record.get('timeAllocation') or 0),
            start_date=decode_datetime(record.get('startDate')),
            end_date=decode_datetime(record.get('endDate')),
            is_indefinite=bool(record.get('isIndefinite')),
        )

    def to_record(self):
        return drop_empty({
            'developerId': self.developer_id,
            'projectId': self.project_id,
            'timeAllocation': self.time_allocation,
            'startDate': encode_datetime(self.start_date),
            'endDate': encode_datetime(self.end_date),
            'isIndefinite': self.is_indefinite,
        })
