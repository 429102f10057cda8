from marshmallow import EXCLUDE, Schema, fields, post_load, validate

from players_api.players.player_dataclasses import PlayerCriteria, PlayerOrder, Profession, Race
from players_api.web.schemes import OkResponseSchema

MAX_INT32 = 2 ** 31 - 1
MAX_INT64 = 2 ** 63 - 1

INT32 = validate.Range(min=-MAX_INT32 - 1, max=MAX_INT32)
INT64 = validate.Range(min=-MAX_INT64 - 1, max=MAX_INT64)


class PlayerSchema(Schema):
    id = fields.Int()
    name = fields.Str()
    title = fields.Str()
    race = fields.Enum(Race)
    profession = fields.Enum(Profession)
    birthday = fields.Int()
    banned = fields.Bool()
    experience = fields.Int()
    level = fields.Int()
    until_next_level = fields.Int(data_key="untilNextLevel")


class PlayerRequestSchema(Schema):
    """Create and update payload.

    Nothing is required here: missing or null fields reach the accessor as
    absent, and creation rules are enforced there. Derived and id fields
    sent by the client are dropped.
    """

    class Meta:
        unknown = EXCLUDE

    name = fields.Str(allow_none=True)
    title = fields.Str(allow_none=True)
    race = fields.Enum(Race, allow_none=True)
    profession = fields.Enum(Profession, allow_none=True)
    birthday = fields.Int(strict=True, allow_none=True)
    banned = fields.Bool(allow_none=True)
    experience = fields.Int(strict=True, allow_none=True)

    @post_load
    def drop_nulls(self, data, **kwargs):
        return {key: value for key, value in data.items() if value is not None}


class PlayerCriteriaSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    name = fields.Str()
    title = fields.Str()
    race = fields.Enum(Race)
    profession = fields.Enum(Profession)
    after = fields.Int(validate=INT64)
    before = fields.Int(validate=INT64)
    banned = fields.Bool()
    min_experience = fields.Int(data_key="minExperience", validate=INT32)
    max_experience = fields.Int(data_key="maxExperience", validate=INT32)
    min_level = fields.Int(data_key="minLevel", validate=INT32)
    max_level = fields.Int(data_key="maxLevel", validate=INT32)

    @post_load
    def make_criteria(self, data, **kwargs):
        return PlayerCriteria(**data)


class PlayerListQuerySchema(PlayerCriteriaSchema):
    # both paging bounds are int32, so the row offset stays within 63 bits
    order = fields.Enum(PlayerOrder, load_default=PlayerOrder.ID)
    page_number = fields.Int(data_key="pageNumber", load_default=0, validate=validate.Range(min=0, max=MAX_INT32))
    page_size = fields.Int(data_key="pageSize", load_default=3, validate=validate.Range(min=1, max=MAX_INT32))

    @post_load
    def make_criteria(self, data, **kwargs):
        paging = {key: data.pop(key) for key in ("order", "page_number", "page_size")}
        return PlayerCriteria(**data), paging


class PlayerResponseSchema(OkResponseSchema):
    data = fields.Nested(PlayerSchema)


class PlayerListResponseSchema(OkResponseSchema):
    data = fields.Nested(PlayerSchema, many=True)


class PlayerCountResponseSchema(OkResponseSchema):
    data = fields.Int()
