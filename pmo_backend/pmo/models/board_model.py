from dataclasses import dataclass, field
from typing import List, Optional

from .assignment_model import Assignment
from .project_model import Project


REORDER = 'reorder'


@dataclass(frozen=True)
class ReassignEvent:
    """A card dropped from one project column onto another."""
    kind: str
    assignment_id: str
    source_project_id: str
    target_project_id: Optional[str] = None  # None when the drag was cancelled

    @property
    def is_move(self):
        return self.target_project_id is not None and self.target_project_id != self.source_project_id


@dataclass
class BoardCard:
    assignment: Assignment
    developer_name: str


@dataclass
class BoardColumn:
    project: Project
    cards: List[BoardCard] = field(default_factory=list)
