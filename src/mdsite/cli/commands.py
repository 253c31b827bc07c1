"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from mdsite.config import Settings, load_config
from mdsite.core.index import PostIndex
from mdsite.core.pipeline import run_build_posts, run_generate_pages


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _index(settings: Settings) -> PostIndex:
    try:
        return PostIndex.from_file(Path(settings.data_json))
    except (RuntimeError, ValueError) as e:
        _fail(str(e))


def build_posts_cmd(
    posts_dir: Annotated[Optional[str], typer.Option("--posts-dir", help="Directory of markdown posts")] = None,
    data_module: Annotated[Optional[str], typer.Option("--data-module", help="Generated JS module path")] = None,
    data_json: Annotated[Optional[str], typer.Option("--data-json", help="Generated JSON side-file path")] = None,
    ):
    """Parse markdown posts and write the data module + JSON side-file."""
    settings = _settings(overrides={
        "posts_dir": posts_dir, "data_module": data_module, "data_json": data_json,
    })
    try:
        posts = run_build_posts(settings)
    except RuntimeError as e:
        _fail(str(e))
    except Exception as e:
        _fail("Building posts failed", e)
    for post in posts:
        typer.echo(f"  - {post.title} ({post.date})")
    typer.echo(f"Built {len(posts)} post(s) -> {settings.data_module}")


def generate_pages_cmd(
    site_dir: Annotated[Optional[str], typer.Option("--site-dir", help="Built site root containing index.html")] = None,
    data_json: Annotated[Optional[str], typer.Option("--data-json", help="JSON side-file from build-posts")] = None,
    site_owner: Annotated[Optional[str], typer.Option("--site-owner", help="Name appended to page titles")] = None,
    ):
    """Write a static index.html for /about/ and every /post/<slug>/."""
    settings = _settings(overrides={"site_dir": site_dir, "data_json": data_json, "site_owner": site_owner})
    try:
        results = run_generate_pages(settings)
    except (RuntimeError, ValueError) as e:
        _fail(str(e))
    except Exception as e:
        _fail("Generating pages failed", e)
    for route, _ in results:
        typer.echo(f"  /{route}")
    post_count = len(results) - 1
    typer.echo(f"Generated {len(results)} page(s) ({post_count} posts + 1 about page) in {settings.site_dir}/")


def list_cmd(
    data_json: Annotated[Optional[str], typer.Option("--data-json", help="JSON side-file from build-posts")] = None,
    ):
    """List built posts, newest first."""
    index = _index(_settings(overrides={"data_json": data_json}))
    posts = index.all_posts()
    if not posts:
        typer.echo("No posts found.")
        raise typer.Exit(1)
    for post in posts:
        typer.echo(f"{post.date}  {post.slug}  {post.title}")


def show_cmd(
    slug: Annotated[str, typer.Argument(help="Post slug (file name without .md)")],
    data_json: Annotated[Optional[str], typer.Option("--data-json", help="JSON side-file from build-posts")] = None,
    ):
    """Print a single built post."""
    index = _index(_settings(overrides={"data_json": data_json}))
    post = index.get_post(slug)
    if post is None:
        _fail(f"No post with slug '{slug}'")
    typer.echo(f"title:   {post.title}")
    typer.echo(f"date:    {post.date}")
    typer.echo(f"excerpt: {post.excerpt}")
    for key, value in post.frontmatter.items():
        if key not in ("title", "date", "excerpt"):
            typer.echo(f"{key}: {value}")
    typer.echo("")
    typer.echo(post.content)
