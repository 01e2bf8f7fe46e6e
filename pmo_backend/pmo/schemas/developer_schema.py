from marshmallow import EXCLUDE, fields

from .. import ma


class DeveloperSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    id = fields.String(dump_only=True)
    first_name = fields.String(data_key='firstName', load_default='')
    last_name = fields.String(data_key='lastName', load_default='')
    employee_id = fields.String(data_key='employeeId', load_default='')
    position = fields.String(load_default='')
    technical_skills = fields.List(fields.String(), data_key='technicalSkills', load_default=list)


class SkillSchema(ma.Schema):
    skill = fields.String(required=True)


developer_schema = DeveloperSchema()
developers_schema = DeveloperSchema(many=True)
skill_schema = SkillSchema()
