"""Markdown to HTML rendering with footnotes, strikethrough, tables and task lists"""

from markdown_it import MarkdownIt
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.tasklists import tasklists_plugin


def _make_parser() -> MarkdownIt:
    """Build a CommonMark MarkdownIt instance with the page extensions enabled."""
    return (
        MarkdownIt("commonmark")
        .enable(["table", "strikethrough"])
        .use(footnote_plugin)
        .use(tasklists_plugin)
    )


def render_html(text: str) -> str:
    """Render markdown text to HTML."""
    return _make_parser().render(text)
