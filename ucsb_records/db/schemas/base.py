"""
Shared Pydantic configuration for record schemas.

Record payloads travel as camelCase JSON (``requesterEmail``) while the ORM
and Python code use snake_case attributes. Either spelling is accepted on
input; responses are serialized by alias.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    type: str
    message: str
