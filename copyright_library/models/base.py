"""Base model for settings persisted as XML option lists."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Any
from typing import Self

from pydantic import BaseModel
from pydantic import ValidationError

from copyright_library.errors import InvalidDataError

OPTION = "option"


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class OptionModel(BaseModel):
    """Pydantic model that reads and writes `<option name=... value=.../>` children."""

    def write_options(self, element: ET.Element) -> ET.Element:
        """Append one option child per field that has a value."""
        for key, value in self.model_dump(mode="json", exclude_none=True).items():
            ET.SubElement(element, OPTION, name=key, value=_format_value(value))
        return element

    @classmethod
    def read_options(cls, element: ET.Element | None) -> Self:
        """Build a model from option children, ignoring unknown names.

        Raises:
            InvalidDataError: If an option value fails validation
        """
        values: dict[str, str] = {}
        if element is not None:
            for option in element.findall(OPTION):
                name = option.get("name")
                if name in cls.model_fields and option.get("value") is not None:
                    values[name] = option.get("value")
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise InvalidDataError(f"Invalid {cls.__name__} data: {e}") from e
