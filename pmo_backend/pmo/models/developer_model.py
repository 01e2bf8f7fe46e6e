from dataclasses import dataclass, field
from typing import List, Optional


RECORD_KEYS = {
    'first_name': 'firstName',
    'last_name': 'lastName',
    'employee_id': 'employeeId',
    'position': 'position',
    'technical_skills': 'technicalSkills',
}


@dataclass
class Developer:
    id: Optional[str]
    first_name: str = ''
    last_name: str = ''
    employee_id: str = ''
    position: str = ''
    technical_skills: List[str] = field(default_factory=list)

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    @classmethod
    def from_record(cls, record):
        return cls(
            id=record['id'],
            first_name=record.get('firstName') or '',
            last_name=record.get('lastName') or '',
            employee_id=record.get('employeeId') or '',
            position=record.get('position') or '',
            technical_skills=list(record.get('technicalSkills') or []),
        )

    def to_record(self):
        return {
            'firstName': self.first_name,
            'lastName': self.last_name,
            'employeeId': self.employee_id,
            'position': self.position,
            'technicalSkills': list(self.technical_skills),
        }
