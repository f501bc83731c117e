"""Copyright profile model.

A profile is a named notice template. Profiles persist as a `<copyright>`
element holding option children.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from datetime import date
from string import Template
from typing import Any

from pydantic import Field

from .base import OptionModel

PROFILE_TAG = "copyright"

DEFAULT_NOTICE = (
    "Copyright (c) $today.year. $project.name contributors.\n"
    "\n"
    'Licensed under the Apache License, Version 2.0 (the "License");\n'
    "you may not use this file except in compliance with the License.\n"
    "You may obtain a copy of the License at\n"
    "\n"
    "http://www.apache.org/licenses/LICENSE-2.0"
)
DEFAULT_KEYWORD = "Copyright"


class NoticeTemplate(Template):
    """Template allowing dotted variables such as `$today.year`."""

    idpattern = r"(?a:[a-z_][a-z0-9_]*(?:\.[a-z_][a-z0-9_]*)*)"
    flags = 0


class CopyrightProfile(OptionModel):
    """Named copyright notice template.

    Attributes:
        name: Profile name, unique within a project
        notice: Notice text; may reference $today.year, $project.name and friends
        keyword: Text whose presence marks an existing notice
        allow_replace_regexp: Existing notices matching this may be replaced
    """

    name: str = Field(default="", description="Profile name")
    notice: str = Field(default=DEFAULT_NOTICE, description="Notice template text")
    keyword: str = Field(default=DEFAULT_KEYWORD, description="Keyword detecting an existing notice")
    allow_replace_regexp: str | None = Field(default=None, description="Regexp of notices that may be replaced")

    def copy_from(self, other: CopyrightProfile) -> None:
        """Overwrite content with another profile's, keeping this instance and its name."""
        for field_name in type(self).model_fields:
            if field_name != "name":
                setattr(self, field_name, getattr(other, field_name))

    def to_element(self) -> ET.Element:
        return self.write_options(ET.Element(PROFILE_TAG))

    @classmethod
    def from_element(cls, element: ET.Element | None) -> CopyrightProfile:
        return cls.read_options(element)

    def render_notice(self, context: dict[str, Any] | None = None, today: date | None = None) -> str:
        """Expand template variables in the notice text.

        Unknown variables are left as written.

        Args:
            context: Extra variables (e.g. {"project.name": "demo"})
            today: Date used for $today.* (default: current date)
        """
        today = today or date.today()
        values: dict[str, Any] = {
            "today.year": today.year,
            "today.month": f"{today.month:02d}",
            "today.day": f"{today.day:02d}",
        }
        values.update(context or {})
        return NoticeTemplate(self.notice).safe_substitute(values)
