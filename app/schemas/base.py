"""Base schemas for the application."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchema(BaseModel):
    """Base schema class with common configuration.

    Fields are declared in snake_case and exchanged on the wire in camelCase.
    """

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ErrorResponse(BaseModel):
    """Error body returned for every failed request."""

    error: str
    details: str | None = None
