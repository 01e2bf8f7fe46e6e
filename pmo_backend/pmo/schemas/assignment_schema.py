from datetime import timezone

from marshmallow import EXCLUDE, fields, post_dump, validate

from .. import ma


class AssignmentSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.String(dump_only=True)
    developer_id = fields.String(data_key='developerId', load_default='')
    project_id = fields.String(data_key='projectId', load_default='')
    time_allocation = fields.Integer(data_key='timeAllocation', load_default=100,
                                     validate=validate.Range(min=0, max=100))
    start_date = fields.AwareDateTime(data_key='startDate', allow_none=True, load_default=None,
                                      default_timezone=timezone.utc)
    end_date = fields.AwareDateTime(data_key='endDate', allow_none=True, load_default=None,
                                    default_timezone=timezone.utc)
    is_indefinite = fields.Boolean(data_key='isIndefinite', load_default=False)

    @post_dump
    def drop_absent_end_date(self, data, **kwargs):
        if data.get('endDate') is None:
            data.pop('endDate', None)
        return data


assignment_schema = AssignmentSchema()
assignments_schema = AssignmentSchema(many=True)
