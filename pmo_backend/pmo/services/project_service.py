from flask import current_app

from ..errors import ValidationError
from ..models.project_model import RECORD_KEYS, Project
from ..store import PROJECTS
from ..store.codec import record_patch, utcnow
from .record_service import read_collection


PROJECT_LIST_LIMIT = 100


def get_projects(store):
    """Project list screen: newest first, capped at PROJECT_LIST_LIMIT."""
    return read_collection(store, PROJECTS, Project, order_by='createdAt', descending=True,
                           limit=PROJECT_LIST_LIMIT)


def get_all_projects(store):
    return read_collection(store, PROJECTS, Project)


def validate_project_name(name):
    name = (name or '').strip()
    if not name:
        current_app.logger.error("Project name is required")
        raise ValidationError("Project name is required", fields={'name': ['Must not be blank.']})
    return name


def create_project(store, data):
    now = utcnow()
    project = Project(
        id=None,
        name=validate_project_name(data.get('name')),
        status=data.get('status', 'analysis'),
        start_date=data['start_date'],
        end_date=data.get('end_date'),
        description=(data.get('description') or '').strip(),
        billable=bool(data.get('billable', False)),
        type=data.get('type', 'commercial'),
        created_at=now,
        updated_at=now,
    )

    project.id = store.create(PROJECTS, project.to_record())
    current_app.logger.info("Project created: %s", project.id)
    return project


def update_project(store, project_id, changes):
    changes = dict(changes)
    if 'name' in changes:
        changes['name'] = validate_project_name(changes['name'])
    if changes.get('description') is not None:
        changes['description'] = changes['description'].strip()
    changes['updated_at'] = utcnow()

    store.update(PROJECTS, project_id, record_patch(changes, RECORD_KEYS))
    current_app.logger.info("Project updated: %s", project_id)


def delete_project(store, project_id):
    # assignments pointing at the project are left in place
    store.delete(PROJECTS, project_id)
    current_app.logger.info("Project deleted: %s", project_id)


def get_project_name(projects, project_id):
    for project in projects:
        if project.id == project_id:
            return project.name
    return 'Unknown'
