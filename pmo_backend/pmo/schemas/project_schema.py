from datetime import timezone

from marshmallow import EXCLUDE, fields, post_dump, validate

from .. import ma
from ..models.project_model import PROJECT_STATUSES, PROJECT_TYPES


class ProjectSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.String(dump_only=True)
    name = fields.String(required=True)
    status = fields.String(load_default='analysis', validate=validate.OneOf(PROJECT_STATUSES))
    start_date = fields.AwareDateTime(data_key='startDate', required=True, default_timezone=timezone.utc)
    end_date = fields.AwareDateTime(data_key='endDate', allow_none=True, load_default=None,
                                    default_timezone=timezone.utc)
    description = fields.String(load_default='')
    billable = fields.Boolean(load_default=False)
    type = fields.String(load_default='commercial', validate=validate.OneOf(PROJECT_TYPES))
    created_at = fields.AwareDateTime(data_key='createdAt', dump_only=True)

    @post_dump
    def drop_absent_dates(self, data, **kwargs):
        for key in ('endDate', 'createdAt'):
            if data.get(key) is None:
                data.pop(key, None)
        return data


project_schema = ProjectSchema()
projects_schema = ProjectSchema(many=True)
