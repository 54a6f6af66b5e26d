"""Page resolution: URL to file mapping, file reading and title inference"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, Optional, Union

from flatpages.core.frontmatter import E, NoExtra, parse_frontmatter
from flatpages.core.render import render_html
from flatpages.errors import FrontmatterParseError, InvalidFrontmatter


logger = logging.getLogger(__name__)

STEM_SEPARATOR = "^"
PAGE_SUFFIX = ".md"
# Only these characters may reach the filesystem: no '.', '\\' or NUL.
URL_RE = re.compile(r"[A-Za-z0-9/_-]+")


@dataclass(frozen=True)
class Page(Generic[E]):
    """A flat page resolved from a markdown file."""
    title:       str                # html title, og:title; inferred from the body if missing
    description: Optional[str]      # meta description, og:description
    body:        str                # raw markdown, frontmatter removed
    extra:       E                  # frontmatter fields other than title/description

    @classmethod
    def from_content(cls, content: str, extra: type[E] = NoExtra) -> "Page[E]":
        """Parse a page from text. Raises InvalidFrontmatter."""
        fm, body = parse_frontmatter(content, extra)
        title = fm.title if fm.title is not None else title_from_markdown(body)
        return cls(title=title, description=fm.description, body=body, extra=fm.extra)

    @classmethod
    def by_path(cls, path: Union[str, Path], extra: type[E] = NoExtra) -> Optional["Page[E]"]:
        """Read the page at path; None if the file cannot be read as UTF-8 text.

        Line endings are kept as stored; no newline translation happens.

        Raises FrontmatterParseError when the file was read but its
        frontmatter is broken.
        """
        path = Path(path)
        try:
            content = path.read_bytes().decode("utf-8")
        except (OSError, ValueError) as e:
            logger.debug("Cannot read page %s: %s", path, e)
            return None
        try:
            return cls.from_content(content, extra)
        except InvalidFrontmatter as e:
            raise FrontmatterParseError(path, e.cause) from e

    @classmethod
    def by_url(cls, root: Union[str, Path], url: str, extra: type[E] = NoExtra) -> Optional["Page[E]"]:
        """Return the page stored under root for url, or None."""
        filename = url_to_filename(url)
        if filename is None:
            return None
        return cls.by_path(Path(root) / filename, extra)

    def html(self) -> str:
        """Body rendered to HTML."""
        return render_html(self.body)


def title_from_markdown(body: str) -> str:
    """Take the first line of body as a title, dropping the `#` header prefix."""
    return body.split("\n", 1)[0].lstrip("#").strip()


def url_to_stem(url: str) -> str:
    """Map a url to a file stem: every '/' becomes '^'."""
    return url.replace("/", STEM_SEPARATOR)


def url_to_filename(url: str) -> Optional[str]:
    """Map a url to a page filename, or None if the url has disallowed characters.

    '/foo-bar/baz/' -> '^foo-bar^baz^.md'
    """
    if not URL_RE.fullmatch(url):
        return None
    return url_to_stem(url) + PAGE_SUFFIX
