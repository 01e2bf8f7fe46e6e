from flask import current_app

from ..errors import NotFoundError
from ..models.developer_model import RECORD_KEYS, Developer
from ..store import DEVELOPERS
from ..store.codec import record_patch
from .record_service import read_collection


def get_developers(store):
    return read_collection(store, DEVELOPERS, Developer)


def get_developer(store, developer_id):
    """Reads one developer; a failed read raises StoreError rather than looking like a miss."""
    for record in store.list(DEVELOPERS):
        if record['id'] == developer_id:
            return Developer.from_record(record)
    raise NotFoundError(f"Developer {developer_id} not found")


def create_developer(store, data):
    developer = Developer(id=None, **data)
    developer.id = store.create(DEVELOPERS, developer.to_record())
    current_app.logger.info("Developer created: %s", developer.id)
    return developer


def update_developer(store, developer_id, changes):
    store.update(DEVELOPERS, developer_id, record_patch(changes, RECORD_KEYS))
    current_app.logger.info("Developer updated: %s", developer_id)


def delete_developer(store, developer_id):
    # assignments referencing the developer are left in place
    store.delete(DEVELOPERS, developer_id)
    current_app.logger.info("Developer deleted: %s", developer_id)


def add_skill(skills, skill):
    if not skill or skill in skills:
        return list(skills)
    return list(skills) + [skill]


def remove_skill(skills, skill):
    return [existing for existing in skills if existing != skill]


def edit_developer_skills(store, developer_id, skill, edit):
    """
    Applies ``add_skill`` or ``remove_skill`` to a stored developer.

    :return: the developer's skills after the edit. Nothing is written when the
        edit leaves the list unchanged.
    """
    developer = get_developer(store, developer_id)
    skills = edit(developer.technical_skills, skill)
    if skills != developer.technical_skills:
        update_developer(store, developer_id, {'technical_skills': skills})
    return skills


def get_developer_name(developers, developer_id):
    for developer in developers:
        if developer.id == developer_id:
            return developer.full_name
    return 'Unknown'
