"""Base model for copyrightd request and response bodies."""

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic.alias_generators import to_camel


class CamelCaseModel(BaseModel):
    """API model serialized with camelCase keys.

    Accepts snake_case names too, and can be validated straight from library
    objects (e.g. a CopyrightProfile) via attribute access.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
