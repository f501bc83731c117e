"""File types that can carry a copyright notice.

Maps file extensions to a named file type together with its comment syntax.
"""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from pathlib import Path


@dataclass(frozen=True)
class FileType:
    """A file type and the comment syntax used to embed a notice."""

    name: str
    extensions: tuple[str, ...]
    line_comment: str | None = None
    block_comment: tuple[str, str] | None = None
    file_names: tuple[str, ...] = field(default=())

    @property
    def has_comments(self) -> bool:
        return self.line_comment is not None or self.block_comment is not None


_C_STYLE = ("/*", "*/")

BUILTIN_FILE_TYPES: tuple[FileType, ...] = (
    FileType("Python", (".py", ".pyi"), line_comment="#"),
    FileType("Java", (".java",), line_comment="//", block_comment=_C_STYLE),
    FileType("Kotlin", (".kt", ".kts"), line_comment="//", block_comment=_C_STYLE),
    FileType("Groovy", (".groovy", ".gradle"), line_comment="//", block_comment=_C_STYLE),
    FileType("Scala", (".scala",), line_comment="//", block_comment=_C_STYLE),
    FileType("JavaScript", (".js", ".mjs", ".cjs", ".jsx"), line_comment="//", block_comment=_C_STYLE),
    FileType("TypeScript", (".ts", ".tsx"), line_comment="//", block_comment=_C_STYLE),
    FileType("C/C++", (".c", ".h", ".cc", ".cpp", ".hpp", ".cxx"), line_comment="//", block_comment=_C_STYLE),
    FileType("C#", (".cs",), line_comment="//", block_comment=_C_STYLE),
    FileType("Go", (".go",), line_comment="//", block_comment=_C_STYLE),
    FileType("Rust", (".rs",), line_comment="//", block_comment=_C_STYLE),
    FileType("CSS", (".css",), block_comment=_C_STYLE),
    FileType("Shell Script", (".sh", ".bash", ".zsh"), line_comment="#"),
    FileType("YAML", (".yaml", ".yml"), line_comment="#"),
    FileType("Properties", (".properties",), line_comment="#"),
    FileType("SQL", (".sql",), line_comment="--", block_comment=_C_STYLE),
    FileType("XML", (".xml", ".xsd", ".xsl"), block_comment=("<!--", "-->")),
    FileType("HTML", (".html", ".htm"), block_comment=("<!--", "-->")),
    FileType("Dockerfile", (), line_comment="#", file_names=("Dockerfile",)),
)


class FileTypeRegistry:
    """Lookup of file types by file name and extension."""

    def __init__(self, file_types: tuple[FileType, ...] | list[FileType] = BUILTIN_FILE_TYPES) -> None:
        self._by_name: dict[str, FileType] = {}
        self._by_extension: dict[str, FileType] = {}
        self._by_file_name: dict[str, FileType] = {}
        for file_type in file_types:
            self.register(file_type)

    def register(self, file_type: FileType) -> None:
        """Add a file type; later registrations win for shared extensions."""
        self._by_name[file_type.name] = file_type
        for extension in file_type.extensions:
            self._by_extension[extension.lower()] = file_type
        for file_name in file_type.file_names:
            self._by_file_name[file_name] = file_type

    def get(self, name: str) -> FileType | None:
        return self._by_name.get(name)

    def names(self) -> list[str]:
        return sorted(self._by_name)

    def get_file_type(self, path: Path) -> FileType | None:
        path = Path(path)
        return self._by_file_name.get(path.name) or self._by_extension.get(path.suffix.lower())

    def is_supported(self, path: Path) -> bool:
        """Whether a notice can be embedded in the file."""
        file_type = self.get_file_type(path)
        return file_type is not None and file_type.has_comments
