"""
Base schemas with shared configuration.
"""

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Schema exchanged with the dashboard client.
    Fields are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True
    )


class BaseResponseSchema(CamelModel):
    """
    Base for all response schemas.
    Serializes enums to their string values.
    """

    @field_serializer("*")
    def serialize_enum(self, v):
        if hasattr(v, "value"):
            return v.value
        return v
