from flask import current_app

from ..models.assignment_model import RECORD_KEYS, Assignment
from ..store import ASSIGNMENTS
from ..store.codec import record_patch, utcnow
from .record_service import read_collection


def get_assignments(store):
    return read_collection(store, ASSIGNMENTS, Assignment)


def create_assignment(store, data):
    assignment = Assignment(
        id=None,
        developer_id=data.get('developer_id', ''),
        project_id=data.get('project_id', ''),
        time_allocation=data.get('time_allocation', 100),
        start_date=data.get('start_date') or utcnow(),
        end_date=data.get('end_date'),
        is_indefinite=bool(data.get('is_indefinite', False)),
    )
    assignment.id = store.create(ASSIGNMENTS, assignment.to_record())
    current_app.logger.info("Assignment created: %s", assignment.id)
    return assignment


def update_assignment(store, assignment_id, changes):
    store.update(ASSIGNMENTS, assignment_id, record_patch(changes, RECORD_KEYS))
    current_app.logger.info("Assignment updated: %s", assignment_id)


def delete_assignment(store, assignment_id):
    store.delete(ASSIGNMENTS, assignment_id)
    current_app.logger.info("Assignment deleted: %s", assignment_id)
