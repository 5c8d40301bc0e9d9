"""CLI entrypoint: Typer app definition and command registration"""

import typer

from cfgdiff.cli.commands import diff_cmd, main_callback, show_config_cmd


app = typer.Typer(name="cfgdiff", no_args_is_help=True, help="Guarded unified diffs for configuration changes")

app.callback()(main_callback)
app.command(name="diff")(diff_cmd)
app.command(name="show-config")(show_config_cmd)
