"""Error taxonomy for page resolution and directory indexing"""

from pathlib import Path
from typing import Optional


class FlatPagesError(Exception):
    """Base class for every error raised by flatpages."""


class InvalidFrontmatter(FlatPagesError, ValueError):
    """Frontmatter text could not be deserialized into the page schema.

    `cause` is the underlying yaml.YAMLError, pydantic.ValidationError or
    TypeError describing the problem.
    """

    def __init__(self, cause: Exception):
        super().__init__(f"Invalid frontmatter: {cause}")
        self.cause = cause


class FrontmatterParseError(FlatPagesError):
    """A page file was read but its frontmatter is broken."""

    def __init__(self, path: Path, cause: Exception):
        super().__init__(f"Broken frontmatter in {path}: {cause}")
        self.path = Path(path)
        self.cause = cause


class DirectoryReadError(FlatPagesError):
    """The pages directory could not be listed."""

    def __init__(self, path: Path, cause: OSError):
        super().__init__(f"Cannot read directory {path}: {cause}")
        self.path = Path(path)
        self.cause = cause


class DirectoryEntryError(FlatPagesError):
    """An entry of a readable pages directory could not be inspected.

    `path` is the directory; `name` is the entry's filename when the listing
    got far enough to know it.
    """

    def __init__(self, path: Path, cause: OSError, name: Optional[str] = None):
        entry = f" {name!r}" if name is not None else ""
        super().__init__(f"Cannot read directory entry{entry} in {path}: {cause}")
        self.path = Path(path)
        self.name = name
        self.cause = cause
