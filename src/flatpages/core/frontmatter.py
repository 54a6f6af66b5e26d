"""Frontmatter splitting and validation for flat page files"""

import re
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from flatpages.errors import InvalidFrontmatter


EMPTY_YAML = "{}"
OPEN_DELIMITER = "---\n"
CLOSE_DELIMITER = "\n---"
KNOWN_KEYS = ("title", "description")

BOOL_TAG = "tag:yaml.org,2002:bool"
TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class FrontmatterLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 scalars: only true/false are booleans and
    dates stay strings, so `title: No` or `title: 2024-01-01` is text.
    """


FrontmatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag not in (BOOL_TAG, TIMESTAMP_TAG)]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
FrontmatterLoader.add_implicit_resolver(
    BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


class NoExtra(BaseModel):
    """Default extra-fields schema: no fields, unknown keys are ignored."""
    model_config = ConfigDict(extra="ignore")


class AnyExtra(BaseModel):
    """Keeps every unknown frontmatter key; read them back via model_extra."""
    model_config = ConfigDict(extra="allow")


class ForbidExtra(BaseModel):
    """Rejects any frontmatter key other than title and description."""
    model_config = ConfigDict(extra="forbid")


E = TypeVar("E", bound=BaseModel)


class _KnownFields(BaseModel):
    title:       Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class Frontmatter(Generic[E]):
    """Validated frontmatter: the two recognized keys plus the caller's extra record."""
    title:       Optional[str]
    description: Optional[str]
    extra:       E


def split_frontmatter(content: str) -> tuple[Optional[str], str]:
    """Return (matter, body); matter is None unless content opens with a frontmatter block.

    The opening delimiter must be the first thing in the content (after leading
    whitespace), so a `---` block quoted further down in a body is never taken
    for frontmatter. An unterminated block is treated as plain content.
    """
    stripped = content.lstrip()
    if not stripped.startswith(OPEN_DELIMITER):
        return None, content.strip()
    matter, sep, body = stripped[len(OPEN_DELIMITER):].partition(CLOSE_DELIMITER)
    if not sep:
        return None, content.strip()
    return matter, body.strip()


def parse_frontmatter(content: str, extra: type[E] = NoExtra) -> tuple[Frontmatter[E], str]:
    """Split content and validate its frontmatter. Returns (frontmatter, body).

    Keys other than title/description are validated against `extra`.
    Raises InvalidFrontmatter on YAML syntax errors, non-mapping documents and
    schema violations.
    """
    matter, body = split_frontmatter(content)
    try:
        data = yaml.load(EMPTY_YAML if matter is None else matter, Loader=FrontmatterLoader)
    except yaml.YAMLError as e:
        raise InvalidFrontmatter(e) from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidFrontmatter(TypeError(f"expected a mapping, got {type(data).__name__}"))

    rest = {k: v for k, v in data.items() if k not in KNOWN_KEYS}
    try:
        known = _KnownFields.model_validate({k: data[k] for k in KNOWN_KEYS if k in data})
        extra_fields = extra.model_validate(rest)
    except ValidationError as e:
        raise InvalidFrontmatter(e) from e
    return Frontmatter(title=known.title, description=known.description, extra=extra_fields), body
