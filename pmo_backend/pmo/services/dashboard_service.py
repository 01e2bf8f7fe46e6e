from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List

from ..store import fetch_collections
from ..store.codec import utcnow
from .assignment_service import get_assignments
from .availability_service import availability
from .developer_service import get_developer_name, get_developers
from .project_service import get_all_projects, get_project_name


ACTIVE_STATUS = 'in_progress'
RECENT_ASSIGNMENT_COUNT = 5

_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


@dataclass
class RecentAssignment:
    assignment: object
    developer_name: str
    project_name: str


@dataclass
class Dashboard:
    active_projects: List = field(default_factory=list)
    available_developers: List = field(default_factory=list)  # (developer, remaining percent)
    recent_assignments: List[RecentAssignment] = field(default_factory=list)


def get_active_projects(projects):
    return [project for project in projects if project.status == ACTIVE_STATUS]


def get_recent_assignments(assignments, count=RECENT_ASSIGNMENT_COUNT):
    # sorted() is stable, so equal start dates keep their fetched order
    return sorted(assignments, key=lambda a: a.start_date or _EARLIEST, reverse=True)[:count]


def build_dashboard(projects, developers, assignments, as_of=None):
    as_of = as_of or utcnow()
    return Dashboard(
        active_projects=get_active_projects(projects),
        available_developers=availability(developers, assignments, as_of),
        recent_assignments=[
            RecentAssignment(
                assignment,
                get_developer_name(developers, assignment.developer_id),
                get_project_name(projects, assignment.project_id),
            )
            for assignment in get_recent_assignments(assignments)
        ],
    )


def load_dashboard(store, as_of=None):
    projects, developers, assignments = fetch_collections(store, [
        lambda: get_all_projects(store),
        lambda: get_developers(store),
        lambda: get_assignments(store),
    ])
    return build_dashboard(projects, developers, assignments, as_of=as_of)
