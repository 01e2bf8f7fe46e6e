from flask import Blueprint, request, jsonify

from ..errors import StoreError
from ..schemas.assignment_schema import assignment_schema, assignments_schema
from ..schemas.board_schema import reassign_event_schema
from ..schemas.project_schema import project_schema
from ..services.assignment_service import create_assignment, delete_assignment, get_assignments, \
    update_assignment
from ..services.board_service import AssignmentBoard
from ..store import get_store


assignment_blueprint = Blueprint('assignment_blueprint', __name__)


def board_to_json(board):
    columns = []
    for column in board.columns:
        cards = []
        for card in column.cards:
            card_data = assignment_schema.dump(card.assignment)
            card_data["developerName"] = card.developer_name
            cards.append(card_data)
        columns.append({"project": project_schema.dump(column.project), "assignments": cards})
    return {"columns": columns}


@assignment_blueprint.route('/get_assignment_list', methods=['GET'])
def get_assignment_list():
    return jsonify(assignments_schema.dump(get_assignments(get_store())))


@assignment_blueprint.route('/add_assignment', methods=['POST'])
def add_assignment():
    store = get_store()
    data = assignment_schema.load(request.get_json(silent=True) or {})
    assignment = create_assignment(store, data)
    return jsonify({
        "message": "Assignment created successfully!",
        "assignment_id": assignment.id,
        "board": board_to_json(AssignmentBoard(store).refresh()),
    }), 201


@assignment_blueprint.route('/update_assignment/<assignment_id>', methods=['PUT'])
def update_assignment_route(assignment_id):
    store = get_store()
    changes = assignment_schema.load(request.get_json(silent=True) or {}, partial=True)
    update_assignment(store, assignment_id, changes)
    return jsonify({
        "message": "Assignment updated successfully",
        "board": board_to_json(AssignmentBoard(store).refresh()),
    }), 200


@assignment_blueprint.route('/delete_assignment/<assignment_id>', methods=['DELETE'])
def delete_assignment_route(assignment_id):
    store = get_store()
    delete_assignment(store, assignment_id)
    return jsonify({
        "message": "Assignment deleted successfully",
        "board": board_to_json(AssignmentBoard(store).refresh()),
    }), 200


@assignment_blueprint.route('/get_board', methods=['GET'])
def get_board():
    return jsonify(board_to_json(AssignmentBoard(get_store()).refresh()))


@assignment_blueprint.route('/move_assignment', methods=['POST'])
def move_assignment():
    """
    Applies a card drop from the board.

    Expects {"kind": "reorder", "assignmentId", "sourceProjectId", "targetProjectId"};
    a null targetProjectId is a cancelled drag.
    """
    event = reassign_event_schema.load(request.get_json(silent=True) or {})
    board = AssignmentBoard(get_store()).refresh()

    try:
        moved = board.handle(event)
    except StoreError as e:
        return jsonify({"error": str(e), "moved": False, "board": board_to_json(board)}), 502

    return jsonify({"moved": moved, "board": board_to_json(board)}), 200
