from marshmallow import EXCLUDE, fields, post_load, validate

from .. import ma
from ..models.board_model import REORDER, ReassignEvent


class ReassignEventSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    kind = fields.String(required=True, validate=validate.OneOf([REORDER]))
    assignment_id = fields.String(data_key='assignmentId', required=True)
    source_project_id = fields.String(data_key='sourceProjectId', required=True)
    target_project_id = fields.String(data_key='targetProjectId', allow_none=True, load_default=None)

    @post_load
    def make_event(self, data, **kwargs):
        return ReassignEvent(**data)


reassign_event_schema = ReassignEventSchema()
