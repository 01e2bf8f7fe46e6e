import pytest

from pmo.errors import NotFoundError, StoreError
from pmo.models.board_model import REORDER, ReassignEvent
from pmo.services.board_service import AssignmentBoard


@pytest.fixture
def seeded(store):
    store.seed('projects', 'p1', name='Apollo', status='in_progress', startDate='2024-01-01T00:00:00.000Z')
    store.seed('projects', 'p2', name='Gemini', status='analysis', startDate='2024-02-01T00:00:00.000Z')
    store.seed('developers', 'd1', firstName='Ada', lastName='Lovelace', employeeId='E1', position='Lead',
               technicalSkills=['Python'])
    store.seed('assignments', 'a1', developerId='d1', projectId='p1', timeAllocation=60,
               startDate='2024-01-10T00:00:00.000Z', endDate='2024-12-31T00:00:00.000Z', isIndefinite=False)
    store.seed('assignments', 'a2', developerId='ghost', projectId='p1', timeAllocation=20,
               startDate='2024-01-11T00:00:00.000Z', isIndefinite=True)
    store.seed('assignments', 'a3', developerId='d1', projectId='p2', timeAllocation=20,
               startDate='2024-01-12T00:00:00.000Z', isIndefinite=True)
    return store


def _event(assignment_id, source, target):
    return ReassignEvent(kind=REORDER, assignment_id=assignment_id, source_project_id=source,
                         target_project_id=target)


def test_columns_follow_projects_and_fetched_order(app, seeded):
    board = AssignmentBoard(seeded).refresh()
    columns = board.columns

    assert [column.project.id for column in columns] == ['p1', 'p2']
    assert [card.assignment.id for card in columns[0].cards] == ['a1', 'a2']
    assert [card.assignment.id for card in columns[1].cards] == ['a3']
    assert columns[0].cards[0].developer_name == 'Ada Lovelace'
    assert columns[0].cards[1].developer_name == 'Unknown'


def test_reassign_to_current_project_is_a_noop(app, seeded):
    board = AssignmentBoard(seeded).refresh()

    assert board.reassign('a1', 'p1') is False
    assert seeded.writes == []


def test_reassign_changes_only_the_project_reference(app, seeded):
    before = dict(seeded.record('assignments', 'a1'))
    board = AssignmentBoard(seeded).refresh()

    assert board.reassign('a1', 'p2') is True

    after = seeded.record('assignments', 'a1')
    assert after['projectId'] == 'p2'
    assert {k: v for k, v in after.items() if k != 'projectId'} == \
        {k: v for k, v in before.items() if k != 'projectId'}
    assert seeded.writes == [('update', 'assignments', 'a1')]
    # board was re-fetched
    assert [card.assignment.id for card in board.columns[1].cards] == ['a1', 'a3']


def test_reassign_unknown_assignment_raises(app, seeded):
    board = AssignmentBoard(seeded).refresh()
    with pytest.raises(NotFoundError):
        board.reassign('missing', 'p2')
    assert seeded.writes == []


def test_failed_write_leaves_board_unchanged(app, seeded):
    board = AssignmentBoard(seeded).refresh()
    seeded.fail_writes = True

    with pytest.raises(StoreError):
        board.reassign('a1', 'p2')

    assert board.find_assignment('a1').project_id == 'p1'
    assert [card.assignment.id for card in board.columns[0].cards] == ['a1', 'a2']


def test_cancelled_drag_does_nothing(app, seeded):
    board = AssignmentBoard(seeded).refresh()
    assert board.handle(_event('a1', 'p1', None)) is False
    assert seeded.writes == []


def test_drop_on_same_column_does_nothing(app, seeded):
    board = AssignmentBoard(seeded).refresh()
    assert board.handle(_event('a1', 'p1', 'p1')) is False
    assert seeded.writes == []


def test_move_endpoint_reassigns(client, seeded):
    response = client.post('/assignment/move_assignment', json={
        'kind': 'reorder', 'assignmentId': 'a1', 'sourceProjectId': 'p1', 'targetProjectId': 'p2',
    })

    assert response.status_code == 200
    body = response.get_json()
    assert body['moved'] is True
    second_column = body['board']['columns'][1]
    assert second_column['project']['id'] == 'p2'
    assert [card['id'] for card in second_column['assignments']] == ['a1', 'a3']


def test_move_endpoint_rejects_untagged_payload(client, seeded):
    response = client.post('/assignment/move_assignment', json={
        'draggableId': 'a1', 'destination': {'droppableId': 'p2'},
    })
    assert response.status_code == 400
    assert 'kind' in response.get_json()['fields']
    assert seeded.writes == []


def test_move_endpoint_accepts_cancelled_drag(client, seeded):
    response = client.post('/assignment/move_assignment', json={
        'kind': 'reorder', 'assignmentId': 'a1', 'sourceProjectId': 'p1', 'targetProjectId': None,
    })
    assert response.status_code == 200
    assert response.get_json()['moved'] is False
    assert seeded.writes == []


def test_move_endpoint_unknown_assignment_is_404(client, seeded):
    response = client.post('/assignment/move_assignment', json={
        'kind': 'reorder', 'assignmentId': 'nope', 'sourceProjectId': 'p1', 'targetProjectId': 'p2',
    })
    assert response.status_code == 404


def test_move_endpoint_reports_write_failure_with_stale_board(client, seeded):
    seeded.fail_writes = True
    response = client.post('/assignment/move_assignment', json={
        'kind': 'reorder', 'assignmentId': 'a1', 'sourceProjectId': 'p1', 'targetProjectId': 'p2',
    })

    assert response.status_code == 502
    body = response.get_json()
    assert body['moved'] is False
    assert [card['id'] for card in body['board']['columns'][0]['assignments']] == ['a1', 'a2']


def test_assignment_crud_refetches_board(client, seeded):
    response = client.post('/assignment/add_assignment', json={
        'developerId': 'd1', 'projectId': 'p2', 'timeAllocation': 30,
        'startDate': '2024-03-01T00:00:00+00:00', 'isIndefinite': True,
    })
    assert response.status_code == 201
    new_id = response.get_json()['assignment_id']
    card_ids = [card['id'] for card in response.get_json()['board']['columns'][1]['assignments']]
    assert card_ids == ['a3', new_id]
    assert 'endDate' not in seeded.record('assignments', new_id)

    response = client.put(f'/assignment/update_assignment/{new_id}', json={'timeAllocation': 50})
    assert response.status_code == 200
    assert seeded.record('assignments', new_id)['timeAllocation'] == 50

    response = client.delete(f'/assignment/delete_assignment/{new_id}')
    assert response.status_code == 200
    assert new_id not in seeded.collections['assignments']


def test_allocation_out_of_range_is_rejected(client, seeded):
    response = client.post('/assignment/add_assignment', json={
        'developerId': 'd1', 'projectId': 'p1', 'timeAllocation': 120,
    })
    assert response.status_code == 400
    assert seeded.writes == []


def test_parallel_refresh_matches_sequential(app, seeded):
    sequential = AssignmentBoard(seeded).refresh()
    seeded.supports_parallel_reads = True
    parallel = AssignmentBoard(seeded).refresh()

    assert parallel.projects == sequential.projects
    assert parallel.developers == sequential.developers
    assert parallel.assignments == sequential.assignments
    assert parallel.columns == sequential.columns


def test_move_endpoint_ignores_extra_fields(client, seeded):
    response = client.post('/assignment/move_assignment', json={
        'kind': 'reorder', 'assignmentId': 'a1', 'sourceProjectId': 'p1', 'targetProjectId': 'p2',
        'index': 0, 'reason': 'DROP',
    })
    assert response.status_code == 200
    assert response.get_json()['moved'] is True
