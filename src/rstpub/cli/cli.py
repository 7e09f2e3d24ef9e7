"""CLI entrypoint: Typer app definition and command registration"""

import typer

from rstpub.cli.commands import build_cmd, main_callback, parse_cmd


app = typer.Typer(name="rstpub", no_args_is_help=True, help="RST content parsing and publishing pipeline")

app.callback()(main_callback)
app.command(name="parse")(parse_cmd)
app.command(name="build")(build_cmd)
