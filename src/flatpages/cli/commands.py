"""CLI command implementations"""

import logging
from typing import Annotated, NoReturn, Optional

import typer

from flatpages.config import Settings, load_config
from flatpages.core.frontmatter import AnyExtra, ForbidExtra
from flatpages.core.page import Page
from flatpages.core.store import PageStore
from flatpages.errors import FlatPagesError


PagesDirOption = Annotated[Optional[str], typer.Option("--pages-dir", help="Directory of flat .md pages")]


def _abort(message: str, cause: Optional[Exception] = None) -> NoReturn:
    """Report an error on stderr and exit with status 1."""
    detail = f"{message}: {cause}" if cause is not None else message
    typer.secho(f"Error: {detail}", err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then configure logging."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _abort(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _load_page(settings: Settings, url: str) -> Page:
    """Resolve url under the configured pages dir, exiting 1 if there is no page."""
    extra = ForbidExtra if settings.strict_frontmatter else AnyExtra
    try:
        page = Page.by_url(settings.pages_dir, url, extra)
    except FlatPagesError as e:
        _abort(f"Cannot load page '{url}'", e)
    if page is None:
        _abort(f"No page found for '{url}' in {settings.pages_dir}/")
    return page


def list_cmd(pages_dir: PagesDirOption = None):
    """List indexed pages as stem and title."""
    settings = _settings(overrides={"pages_dir": pages_dir})
    extra = ForbidExtra if settings.strict_frontmatter else AnyExtra
    try:
        store = PageStore.read_dir(settings.pages_dir, extra)
    except FlatPagesError as e:
        _abort("Indexing failed", e)
    for stem in sorted(store.pages):
        typer.echo(f"{stem}\t{store.pages[stem].title}")
    typer.echo(f"{len(store)} page(s) in {settings.pages_dir}/")


def show_cmd(
    url: Annotated[str, typer.Argument(help="Page url, e.g. /about")],
    pages_dir: PagesDirOption = None,
    ):
    """Print a page's metadata and markdown body."""
    settings = _settings(overrides={"pages_dir": pages_dir})
    page = _load_page(settings, url)
    typer.echo(f"title: {page.title}")
    if page.description is not None:
        typer.echo(f"description: {page.description}")
    for key, value in (page.extra.model_extra or {}).items():
        typer.echo(f"{key}: {value}")
    typer.echo("")
    typer.echo(page.body)


def render_cmd(
    url: Annotated[str, typer.Argument(help="Page url, e.g. /about")],
    pages_dir: PagesDirOption = None,
    ):
    """Print a page's body rendered to HTML."""
    settings = _settings(overrides={"pages_dir": pages_dir})
    page = _load_page(settings, url)
    typer.echo(page.html(), nl=False)
