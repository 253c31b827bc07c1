"""CLI entrypoint: Typer app definition and command registration"""

import logging
from typing import Annotated

import typer

from mdsite.cli.commands import build_posts_cmd, generate_pages_cmd, list_cmd, show_cmd


app = typer.Typer(name="mdsite", no_args_is_help=True, help="Markdown posts -> data module -> static pages")


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


app.command(name="build-posts")(build_posts_cmd)
app.command(name="generate-pages")(generate_pages_cmd)
app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
