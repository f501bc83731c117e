"""Per-file-type notice formatting options."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from enum import Enum

from pydantic import Field

from copyright_library.errors import InvalidDataError
from copyright_library.errors import WriteExternalError

from .base import OptionModel

LANGUAGE = "language"
TEMPLATE_NAME = "__TEMPLATE__"


class FileTypeOverride(str, Enum):
    """How a file type picks its notice formatting.

    - NO_COPYRIGHT: Never add a notice to files of this type
    - USE_TEMPLATE: Use the template (shared) formatting options
    - USE_CUSTOM: Use the options stored for this file type
    """

    NO_COPYRIGHT = "no_copyright"
    USE_TEMPLATE = "use_template"
    USE_CUSTOM = "use_custom"


class LanguageOptions(OptionModel):
    """Formatting options for notices in one file type."""

    file_type_override: FileTypeOverride = FileTypeOverride.USE_TEMPLATE
    block: bool = Field(default=True, description="Use a block comment when the file type has one")
    prefix_lines: bool = Field(default=True, description="Prefix each line inside a block comment")
    separator_before: bool = False
    separator_after: bool = False
    filler: str = Field(default="-", min_length=1, max_length=1)
    length_before: int = Field(default=80, ge=1)
    length_after: int = Field(default=80, ge=1)
    add_blank_after: bool = True


class Options:
    """Language options keyed by file type name, plus the template options."""

    def __init__(self) -> None:
        self._options: dict[str, LanguageOptions] = {}

    @property
    def template_options(self) -> LanguageOptions:
        return self._options.get(TEMPLATE_NAME) or LanguageOptions()

    def set_template_options(self, options: LanguageOptions) -> None:
        self._options[TEMPLATE_NAME] = options

    def get_options(self, file_type: str) -> LanguageOptions:
        """Options stored for a file type, or defaults (use template)."""
        return self._options.get(file_type) or LanguageOptions()

    def set_options(self, file_type: str, options: LanguageOptions) -> None:
        self._options[file_type] = options

    def get_merged_options(self, file_type: str) -> LanguageOptions:
        """Options that actually apply to a file type.

        A USE_TEMPLATE override resolves to the template options.
        """
        options = self.get_options(file_type)
        if options.file_type_override == FileTypeOverride.USE_TEMPLATE:
            return self.template_options.model_copy(
                update={"file_type_override": FileTypeOverride.USE_TEMPLATE}
            )
        return options

    def file_types(self) -> list[str]:
        return [name for name in self._options if name != TEMPLATE_NAME]

    def clear(self) -> None:
        self._options.clear()

    def write_external(self, element: ET.Element) -> None:
        """Append a `<language>` child per stored file type.

        Raises:
            WriteExternalError: If an options entry can't be serialized
        """
        for name in sorted(self._options):
            try:
                self._options[name].write_options(ET.SubElement(element, LANGUAGE, name=name))
            except Exception as e:
                raise WriteExternalError(f"Failed to write options for {name}: {e}") from e

    def read_external(self, element: ET.Element) -> None:
        """Restore options from `<language>` children.

        Entries read before a failure are kept.

        Raises:
            InvalidDataError: If an entry is unnamed or holds invalid values
        """
        for child in element.findall(LANGUAGE):
            name = child.get("name")
            if not name:
                raise InvalidDataError("Language options entry without a name")
            self._options[name] = LanguageOptions.read_options(child)
