from datetime import datetime, timezone

import pytest

from pmo.models.assignment_model import Assignment
from pmo.models.project_model import RECORD_KEYS, Project
from pmo.store.codec import decode_datetime, encode_datetime, record_patch


def test_decodes_zulu_and_offsets_to_utc():
    assert decode_datetime('2024-03-01T10:00:00.000Z') == datetime(2024, 3, 1, 10, tzinfo=timezone.utc)
    assert decode_datetime('2024-03-01T12:00:00+02:00') == datetime(2024, 3, 1, 10, tzinfo=timezone.utc)


def test_naive_values_are_taken_as_utc():
    assert decode_datetime('2024-03-01T10:00:00') == datetime(2024, 3, 1, 10, tzinfo=timezone.utc)
    assert encode_datetime(datetime(2024, 3, 1, 10)) == '2024-03-01T10:00:00.000Z'


def test_empty_values_decode_to_none():
    assert decode_datetime(None) is None
    assert decode_datetime('') is None


def test_garbage_raises_value_error():
    with pytest.raises(ValueError):
        decode_datetime('next tuesday')


def test_project_record_omits_absent_end_date():
    project = Project(id=None, name='Apollo', start_date=datetime(2024, 3, 1, tzinfo=timezone.utc))
    record = project.to_record()

    assert 'endDate' not in record
    assert Project.from_record(dict(record, id='p1')).end_date is None


def test_assignment_record_defaults():
    assignment = Assignment.from_record({'id': 'a1', 'startDate': '2024-03-01T00:00:00.000Z'})

    assert assignment.time_allocation == 0
    assert assignment.is_indefinite is False
    assert assignment.developer_id == ''


def test_record_patch_maps_keys_and_keeps_removals():
    patch = record_patch({'start_date': datetime(2024, 3, 1, tzinfo=timezone.utc), 'end_date': None},
                         RECORD_KEYS)
    assert patch == {'startDate': '2024-03-01T00:00:00.000Z', 'endDate': None}
