"""Schema Base — shared pydantic configuration for every forum schema.

Invariants:
    - Serialized field names are camelCase (firstName, questionId); ids are "_id"
    - Input accepts both the wire name and the snake_case name, so FastAPI can
      re-validate a dumped response and ORM objects validate by attribute
    - Responses can be built straight from ORM objects (from_attributes)
"""

from pydantic import AliasChoices, AliasGenerator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _either_name(field_name: str) -> AliasChoices:
    return AliasChoices(to_camel(field_name), field_name)


def document_id_field():
    """Record identifier, exposed as "_id" on the wire."""
    return Field(
        validation_alias=AliasChoices("_id", "id"),
        serialization_alias="_id",
    )


class ForumSchema(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(
            validation_alias=_either_name,
            serialization_alias=to_camel,
        ),
    )


class MessageResponse(ForumSchema):
    """Bare confirmation: {"message": ...}."""
    message: str
