"""CLI entrypoint: Typer app definition and command registration"""

import typer

from briefmail.cli.commands import fetch_cmd, render_cmd, send_cmd


app = typer.Typer(name="briefmail", no_args_is_help=True, help="Daily markdown briefing to HTML email")

app.command(name="fetch")(fetch_cmd)
app.command(name="render")(render_cmd)
app.command(name="send")(send_cmd)
