from flask import Blueprint, jsonify


home_blueprint = Blueprint('home_blueprint', __name__)

SECTIONS = [
    {"key": "dashboard", "title": "Dashboard", "prefix": "/dashboard"},
    {"key": "projects", "title": "Projects", "prefix": "/project"},
    {"key": "developers", "title": "Developers", "prefix": "/developer"},
    {"key": "assignments", "title": "Assignments", "prefix": "/assignment"},
]


@home_blueprint.route('/', methods=['GET'])
def index():
    return jsonify({"title": "PMO+", "sections": SECTIONS})
