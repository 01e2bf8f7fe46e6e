from flask import Blueprint, request, jsonify

from ..schemas.developer_schema import developer_schema, developers_schema, skill_schema
from ..services.developer_service import add_skill, create_developer, delete_developer, edit_developer_skills, \
    get_developers, remove_skill, update_developer
from ..store import get_store


developer_blueprint = Blueprint('developer_blueprint', __name__)


def _developer_list(store):
    return developers_schema.dump(get_developers(store))


@developer_blueprint.route('/get_developer_list', methods=['GET'])
def get_developer_list():
    return jsonify(_developer_list(get_store()))


@developer_blueprint.route('/add_developer', methods=['POST'])
def add_developer():
    store = get_store()
    data = developer_schema.load(request.get_json(silent=True) or {})
    developer = create_developer(store, data)
    return jsonify({
        "message": "Developer created successfully!",
        "developer_id": developer.id,
        "developers": _developer_list(store),
    }), 201


@developer_blueprint.route('/update_developer/<developer_id>', methods=['PUT'])
def update_developer_route(developer_id):
    store = get_store()
    changes = developer_schema.load(request.get_json(silent=True) or {}, partial=True)
    update_developer(store, developer_id, changes)
    return jsonify({"message": "Developer updated successfully", "developers": _developer_list(store)}), 200


@developer_blueprint.route('/delete_developer/<developer_id>', methods=['DELETE'])
def delete_developer_route(developer_id):
    store = get_store()
    delete_developer(store, developer_id)
    return jsonify({"message": "Developer deleted successfully", "developers": _developer_list(store)}), 200


@developer_blueprint.route('/add_skill/<developer_id>', methods=['POST'])
def add_skill_route(developer_id):
    skill = skill_schema.load(request.get_json(silent=True) or {})['skill']
    skills = edit_developer_skills(get_store(), developer_id, skill, add_skill)
    return jsonify({"technicalSkills": skills}), 200


@developer_blueprint.route('/remove_skill/<developer_id>', methods=['POST'])
def remove_skill_route(developer_id):
    skill = skill_schema.load(request.get_json(silent=True) or {})['skill']
    skills = edit_developer_skills(get_store(), developer_id, skill, remove_skill)
    return jsonify({"technicalSkills": skills}), 200
