"""In-memory index of page metadata for a flat pages directory"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, Mapping, Optional, Union

from flatpages.core.frontmatter import E, NoExtra
from flatpages.core.page import PAGE_SUFFIX, Page, url_to_stem
from flatpages.errors import DirectoryEntryError, DirectoryReadError


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageMeta:
    """Cached page metadata."""
    title:       str
    description: Optional[str]


def page_meta(page: Page) -> PageMeta:
    """Project a resolved page onto its cached metadata."""
    return PageMeta(title=page.title, description=page.description)


def _iter_entries(root: Path) -> Iterator[os.DirEntry]:
    """Yield the entries of root, wrapping listing and per-entry failures."""
    try:
        it = os.scandir(root)
    except OSError as e:
        raise DirectoryReadError(root, e) from e
    with it:
        while True:
            try:
                entry = next(it)
            except StopIteration:
                return
            except OSError as e:
                raise DirectoryEntryError(root, e) from e
            yield entry


def _is_page_file(root: Path, entry: os.DirEntry) -> bool:
    try:
        is_file = entry.is_file()
    except OSError as e:
        raise DirectoryEntryError(root, e, name=entry.name) from e
    return is_file and Path(entry.name).suffix == PAGE_SUFFIX


def _text_stem(name: str) -> Optional[str]:
    """Return the filename stem, or None when it is not valid text."""
    stem = Path(name).stem
    try:
        stem.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return stem


class PageStore:
    """Page metadata for every `.md` file directly under a root directory.

    The index is a snapshot taken by read_dir; files changed afterwards are
    not noticed until a new store is built. Page bodies are never cached.
    """

    def __init__(self, root: Union[str, Path], pages: Mapping[str, PageMeta]):
        self._root = Path(root)
        self._pages = MappingProxyType(dict(pages))

    @classmethod
    def read_dir(cls, root: Union[str, Path], extra: type[E] = NoExtra) -> "PageStore":
        """Scan root (non-recursively) and index every readable page.

        Unreadable files and stems that are not valid text are skipped.
        Raises DirectoryReadError, DirectoryEntryError or FrontmatterParseError.
        """
        root = Path(root)
        pages: dict[str, PageMeta] = {}
        for entry in _iter_entries(root):
            if not _is_page_file(root, entry):
                continue
            stem = _text_stem(entry.name)
            if stem is None:
                logger.debug("Skipping %r: filename is not valid text", entry.path)
                continue
            page = Page.by_path(entry.path, extra)
            if page is None:
                logger.debug("Skipping %s: file is unreadable", entry.path)
                continue
            pages[stem] = page_meta(page)
        logger.info("Indexed %d page(s) in %s", len(pages), root)
        return cls(root, pages)

    @property
    def root(self) -> Path:
        return self._root

    @property
    def pages(self) -> Mapping[str, PageMeta]:
        """Read-only mapping of file stem to page metadata."""
        return self._pages

    def __len__(self) -> int:
        return len(self._pages)

    def __contains__(self, stem: object) -> bool:
        return stem in self._pages

    def meta_by_stem(self, stem: str) -> Optional[PageMeta]:
        return self._pages.get(stem)

    def meta_by_url(self, url: str) -> Optional[PageMeta]:
        """Index-only lookup; the url is not validated since no file is touched."""
        return self.meta_by_stem(url_to_stem(url))

    def page_by_stem(self, stem: str, extra: type[E] = NoExtra) -> Optional[Page[E]]:
        """Re-read the full page for an indexed stem; None for unknown stems."""
        if stem not in self._pages:
            return None
        return Page.by_path(self._root / f"{stem}{PAGE_SUFFIX}", extra)

    def page_by_url(self, url: str, extra: type[E] = NoExtra) -> Optional[Page[E]]:
        return self.page_by_stem(url_to_stem(url), extra)
