"""Base schema configuration."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """
    Base schema with common configuration.

    Clients speak camelCase (``userId``, ``lecturerType``); Python code
    uses snake_case. Both spellings are accepted on input and responses
    are serialised with the camelCase aliases.
    """

    model_config = ConfigDict(
        from_attributes=True,  # Read store records directly
        str_strip_whitespace=True,
        validate_assignment=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class SuccessResponse(BaseSchema):
    """Envelope flag shared by every successful response."""

    success: bool = True
