"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdposts.cli.commands import (
    check_cmd, fmt_cmd, index_cmd, links_cmd, main_callback, new_cmd, show_cmd,
)


app = typer.Typer(name="mdposts", no_args_is_help=True, help="Front-matter tools for markdown blog posts")

app.callback()(main_callback)
app.command(name="check")(check_cmd)
app.command(name="show")(show_cmd)
app.command(name="fmt")(fmt_cmd)
app.command(name="links")(links_cmd)
app.command(name="index")(index_cmd)
app.command(name="new")(new_cmd)
