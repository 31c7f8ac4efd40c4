"""Base schema with camelCase serialization for API and wire models."""

from pydantic import BaseModel, ConfigDict


def to_camel(string: str) -> str:
    """Convert snake_case to camelCase."""
    components = string.split("_")
    return components[0] + "".join(x.title() for x in components[1:])


class BaseSchema(BaseModel):
    """Base schema that all maestro models inherit from.

    Converts snake_case Python attributes to camelCase in JSON, which is also
    the key style the structured-output schemas use.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
