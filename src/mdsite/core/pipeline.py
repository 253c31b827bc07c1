"""Pipeline step functions: build-posts and generate-pages orchestration"""

from datetime import date
from pathlib import Path

from mdsite.config import Settings
from mdsite.core.collect import collect_posts
from mdsite.core.emit import write_data
from mdsite.core.index import load_posts
from mdsite.core.models import Post
from mdsite.core.pages import load_template, plan_pages, write_pages


def run_build_posts(settings: Settings, today: date = None) -> list[Post]:
    """Collect posts from posts_dir and write the data module + JSON side-file. Returns the posts."""
    posts = collect_posts(Path(settings.posts_dir), settings.excerpt_length, today)
    write_data(posts, Path(settings.data_module), Path(settings.data_json))
    return posts


def run_generate_pages(settings: Settings) -> list[tuple[str, Path]]:
    """Write the about page and one page per post under site_dir. Returns (route, path) pairs.

    Both the template and the post data are loaded before anything is written.
    """
    base_html = load_template(settings.template_path)
    posts = load_posts(Path(settings.data_json))
    pages = plan_pages(posts, settings.about_title, settings.about_description)
    return write_pages(base_html, pages, Path(settings.site_dir), settings.site_owner)
