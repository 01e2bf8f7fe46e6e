from flask import current_app

from ..errors import NotFoundError, StoreError
from ..models.board_model import BoardCard, BoardColumn
from ..store import ASSIGNMENTS, fetch_collections
from .assignment_service import get_assignments
from .developer_service import get_developer_name, get_developers
from .project_service import get_all_projects


def build_columns(projects, developers, assignments):
    """One column per project holding its assignments in fetched order."""
    return [
        BoardColumn(
            project=project,
            cards=[
                BoardCard(assignment, get_developer_name(developers, assignment.developer_id))
                for assignment in assignments
                if assignment.project_id == project.id
            ],
        )
        for project in projects
    ]


class AssignmentBoard:
    """
    Projects, developers and assignments as last fetched, plus the
    reassignment operation performed by dropping a card on another column.
    """

    def __init__(self, store):
        self.store = store
        self.projects = []
        self.developers = []
        self.assignments = []

    def refresh(self):
        self.assignments, self.developers, self.projects = fetch_collections(self.store, [
            lambda: get_assignments(self.store),
            lambda: get_developers(self.store),
            lambda: get_all_projects(self.store),
        ])
        return self

    @property
    def columns(self):
        return build_columns(self.projects, self.developers, self.assignments)

    def find_assignment(self, assignment_id):
        for assignment in self.assignments:
            if assignment.id == assignment_id:
                return assignment
        return None

    def reassign(self, assignment_id, target_project_id):
        """
        Points an assignment at another project, then re-fetches the board.

        :return: True when a write happened, False for a same-project no-op.
        :raises NotFoundError: when the assignment is not on the board.
        :raises StoreError: when the write fails; the board keeps its current state.
        """
        assignment = self.find_assignment(assignment_id)
        if assignment is None:
            raise NotFoundError(f"Assignment {assignment_id} not found")
        if assignment.project_id == target_project_id:
            return False

        try:
            self.store.update(ASSIGNMENTS, assignment_id, {'projectId': target_project_id})
        except StoreError as e:
            current_app.logger.error("Error updating assignment %s: %s", assignment_id, e)
            raise

        current_app.logger.info("Assignment %s moved to project %s", assignment_id, target_project_id)
        self.refresh()
        return True

    def handle(self, event):
        """Dispatches a drop event; cancelled drops and same-column drops do nothing."""
        if not event.is_move:
            return False
        return self.reassign(event.assignment_id, event.target_project_id)
