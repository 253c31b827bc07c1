"""Static per-route pages cloned from the built index.html for SEO and link previews"""

import html
import logging
import re
from pathlib import Path

from mdsite.core.models import Page, Post


logger = logging.getLogger(__name__)

TITLE_RE = re.compile(r"<title>.*?</title>")
HEAD_CLOSE = "</head>"

META_TEMPLATE = """
    <meta property="og:title" content="{title}" />
    <meta name="description" content="{description}" />
    <meta property="og:description" content="{description}" />"""


def load_template(path: Path) -> str:
    """Read the base template produced by the front-end build."""
    if not path.exists():
        raise RuntimeError(f"Build output not found at {path}. Run the site build first.")
    return path.read_text(encoding="utf-8")


def render_page(base_html: str, title: str, description: str = "", site_owner: str = "") -> str:
    """Return base_html with a route-specific <title> and description/OpenGraph meta tags.

    With no title the template is returned unchanged. Title and description are
    HTML-escaped, so `&` and quotes differ from the raw frontmatter text.
    """
    if not title:
        return base_html

    full_title = html.escape(f"{title} - {site_owner}" if site_owner else title, quote=False)
    page = TITLE_RE.sub(lambda _: f"<title>{full_title}</title>", base_html, count=1)

    meta = META_TEMPLATE.format(
        title=html.escape(title),
        description=html.escape(description or title),
    )
    return page.replace(HEAD_CLOSE, f"{meta}\n  {HEAD_CLOSE}", 1)


def plan_pages(posts: list[Post], about_title: str, about_description: str) -> list[Page]:
    """The about page followed by one page per post."""
    pages = [Page(route="about", title=about_title, description=about_description)]
    pages.extend(Page(route=f"post/{p.slug}", title=p.title, description=p.excerpt) for p in posts)
    return pages


def write_pages(base_html: str, pages: list[Page], site_dir: Path, site_owner: str) -> list[tuple[str, Path]]:
    """Render every page, then write each to site_dir/<route>/index.html.

    Returns (route, path) pairs in page order.
    """
    rendered = [(p.route, render_page(base_html, p.title, p.description, site_owner)) for p in pages]
    results = []
    for route, text in rendered:
        out_file = site_dir / route / "index.html"
        out_file.parent.mkdir(parents=True, exist_ok=True)
        out_file.write_text(text, encoding="utf-8")
        logger.debug("Wrote %s", out_file)
        results.append((route, out_file))
    return results
