"""CLI entrypoint: Typer app definition and command registration"""

import typer

from flatpages.cli.commands import list_cmd, render_cmd, show_cmd


app = typer.Typer(name="flatpages", no_args_is_help=True, help="Inspect a directory of flat markdown pages")

app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
app.command(name="render")(render_cmd)
