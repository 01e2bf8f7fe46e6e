from flask import Blueprint, request, jsonify

from ..errors import ValidationError
from ..schemas.assignment_schema import assignment_schema
from ..schemas.developer_schema import developer_schema
from ..schemas.project_schema import projects_schema
from ..services.dashboard_service import load_dashboard
from ..store import get_store
from ..store.codec import decode_datetime


dashboard_blueprint = Blueprint('dashboard_blueprint', __name__)


@dashboard_blueprint.route('/get_summary', methods=['GET'])
def get_summary():
    as_of = request.args.get('as_of')
    try:
        as_of = decode_datetime(as_of)
    except ValueError:
        raise ValidationError("as_of must be an ISO-8601 date", fields={'as_of': ['Not a valid datetime.']})

    dashboard = load_dashboard(get_store(), as_of=as_of)

    available = []
    for developer, remaining in dashboard.available_developers:
        developer_data = developer_schema.dump(developer)
        developer_data["availableTime"] = remaining
        available.append(developer_data)

    recent = []
    for item in dashboard.recent_assignments:
        assignment_data = assignment_schema.dump(item.assignment)
        assignment_data["developerName"] = item.developer_name
        assignment_data["projectName"] = item.project_name
        recent.append(assignment_data)

    return jsonify({
        "activeProjects": projects_schema.dump(dashboard.active_projects),
        "activeProjectCount": len(dashboard.active_projects),
        "availableDevelopers": available,
        "availableDeveloperCount": len(available),
        "recentAssignments": recent,
    })
