from flask import Blueprint, request, jsonify

from ..schemas.project_schema import project_schema, projects_schema
from ..services.project_service import create_project, delete_project, get_projects, update_project
from ..store import get_store


project_blueprint = Blueprint('project_blueprint', __name__)


@project_blueprint.route('/get_project_list', methods=['GET'])
def get_project_list():
    projects = get_projects(get_store())
    return jsonify(projects_schema.dump(projects))


@project_blueprint.route('/add_project', methods=['POST'])
def add_project():
    store = get_store()
    data = project_schema.load(request.get_json(silent=True) or {})

    project = create_project(store, data)

    return jsonify({
        "message": "Project created successfully!",
        "project_id": project.id,
        "projects": projects_schema.dump(get_projects(store)),
    }), 201


@project_blueprint.route('/update_project/<project_id>', methods=['PUT'])
def update_project_route(project_id):
    store = get_store()
    changes = project_schema.load(request.get_json(silent=True) or {}, partial=True)

    update_project(store, project_id, changes)

    return jsonify({
        "message": "Project updated successfully",
        "projects": projects_schema.dump(get_projects(store)),
    }), 200


@project_blueprint.route('/delete_project/<project_id>', methods=['DELETE'])
def delete_project_route(project_id):
    store = get_store()
    delete_project(store, project_id)
    return jsonify({
        "message": "Project deleted successfully",
        "projects": projects_schema.dump(get_projects(store)),
    }), 200
