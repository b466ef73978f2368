"""
Base Pydantic schema shared by every API payload.

The API speaks camelCase JSON; Python code uses snake_case attributes.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base schema that reads/writes camelCase keys.

    ``populate_by_name`` lets services build schemas with snake_case keywords,
    and ``from_attributes`` lets Pydantic read SQLAlchemy models.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
