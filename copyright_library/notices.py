"""Notice insertion.

Renders a profile's notice, wraps it in the comment syntax of the target file
type and writes it at the top of the file.
"""

from __future__ import annotations

import logging
import re
from datetime import date
from pathlib import Path

from copyright_library.file_types import FileType
from copyright_library.file_types import FileTypeRegistry
from copyright_library.models.options import FileTypeOverride
from copyright_library.models.options import LanguageOptions
from copyright_library.models.options import Options
from copyright_library.models.profiles import CopyrightProfile

logger = logging.getLogger(__name__)

PRESERVED_FIRST_LINES = ("#!", "<?xml")


def build_comment(text: str, file_type: FileType, options: LanguageOptions) -> str:
    """Wrap notice text in a comment for the file type.

    Raises:
        ValueError: If the file type has no comment syntax
    """
    lines = text.splitlines() or [""]

    use_block = file_type.block_comment is not None and (options.block or file_type.line_comment is None)
    if use_block:
        start, end = file_type.block_comment
        prefix = " * " if start == "/*" else "  "
        opening = start + options.filler * max(0, options.length_before - len(start)) if options.separator_before else start
        if options.separator_after:
            closing = " " + options.filler * max(0, options.length_after - len(end) - 1) + end
        else:
            closing = f" {end}" if start == "/*" else end
        body = [(prefix + line).rstrip() if options.prefix_lines else line for line in lines]
        return "\n".join([opening, *body, closing])

    if file_type.line_comment is None:
        raise ValueError(f"File type {file_type.name} has no comment syntax")

    marker = file_type.line_comment
    body = [f"{marker} {line}".rstrip() for line in lines]
    if options.separator_before:
        body.insert(0, marker + options.filler * max(0, options.length_before - len(marker)))
    if options.separator_after:
        body.append(marker + options.filler * max(0, options.length_after - len(marker)))
    return "\n".join(body)


def leading_comment(text: str, file_type: FileType) -> tuple[int, int] | None:
    """Span of the comment at the start of `text` (ignoring leading blank lines)."""
    offset = len(text) - len(text.lstrip())
    if file_type.block_comment is not None:
        start, end = file_type.block_comment
        if text.startswith(start, offset):
            close = text.find(end, offset + len(start))
            if close != -1:
                return offset, close + len(end)

    if file_type.line_comment is not None:
        position = offset
        for line in text[offset:].splitlines(keepends=True):
            if not line.lstrip().startswith(file_type.line_comment):
                break
            position += len(line)
        if position > offset:
            return offset, position - (1 if text[position - 1] == "\n" else 0)

    return None


class UpdateCopyrightProcessor:
    """Adds a profile's notice to a single file."""

    def __init__(
        self,
        options: Options,
        file_types: FileTypeRegistry,
        project_name: str = "",
    ) -> None:
        self.options = options
        self.file_types = file_types
        self.project_name = project_name

    def render(self, file: Path, profile: CopyrightProfile, module: str | None = None, today: date | None = None) -> str:
        context = {
            "project.name": self.project_name,
            "file.file_name": Path(file).name,
            "module.name": module or "",
        }
        return profile.render_notice(context, today=today)

    def run(self, file: Path, profile: CopyrightProfile, module: str | None = None, today: date | None = None) -> bool:
        """Insert or refresh the notice in `file`.

        An existing leading comment containing the profile keyword is replaced
        only when it matches `allow_replace_regexp`; otherwise it is left alone.

        Returns:
            True if the file was rewritten
        """
        file = Path(file)
        file_type = self.file_types.get_file_type(file)
        if file_type is None or not file_type.has_comments:
            logger.debug(f"Unsupported file type, not adding notice: {file}")
            return False

        options = self.options.get_merged_options(file_type.name)
        if options.file_type_override == FileTypeOverride.NO_COPYRIGHT:
            return False

        comment = build_comment(self.render(file, profile, module, today), file_type, options)
        content = file.read_text(encoding="utf-8")

        head = ""
        if content.startswith(PRESERVED_FIRST_LINES):
            first_line_end = content.find("\n")
            if first_line_end == -1:
                head, content = content + "\n", ""
            else:
                head, content = content[: first_line_end + 1], content[first_line_end + 1 :]

        span = leading_comment(content, file_type)
        if span is not None:
            existing = content[span[0] : span[1]]
            if existing == comment:
                return False
            if profile.keyword and profile.keyword in existing:
                if not profile.allow_replace_regexp or not re.search(profile.allow_replace_regexp, existing):
                    logger.info(f"Existing notice kept in {file}")
                    return False
                updated = content[: span[0]] + comment + content[span[1] :]
                self._write(file, head + updated)
                logger.info(f"Replaced notice in {file} using profile '{profile.name}'")
                return True

        separator = "\n\n" if options.add_blank_after else "\n"
        self._write(file, head + comment + (separator if content else "\n") + content)
        logger.info(f"Added notice to {file} using profile '{profile.name}'")
        return True

    @staticmethod
    def _write(file: Path, text: str) -> None:
        temp_path = file.with_name(f".{file.name}.tmp")
        try:
            temp_path.write_text(text, encoding="utf-8")
            temp_path.replace(file)
        except Exception:
            if temp_path.exists():
                temp_path.unlink()
            raise
