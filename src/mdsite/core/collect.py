"""Post discovery, defaulting, and date ordering"""

import logging
from datetime import date, datetime
from pathlib import Path

from mdsite.core.frontmatter import parse_frontmatter
from mdsite.core.models import Post


logger = logging.getLogger(__name__)

MD_EXTENSION = ".md"
DATE_FORMAT = "%Y-%m-%d"


def _parse_date(value: str) -> date | None:
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        return None


def _sort_key(post: Post) -> tuple[bool, date]:
    """Parseable dates first (newest to oldest under reverse=True); unparseable ones sort as oldest."""
    parsed = _parse_date(post.date)
    if parsed is None:
        logger.debug("Unparseable date %r in %s; sorting as oldest", post.date, post.slug)
        return False, date.min
    return True, parsed


def default_excerpt(body: str, length: int = 120) -> str:
    """First line of body, truncated to length, always suffixed with '...'."""
    return body.split("\n")[0][:length] + "..."


def discover_posts(path: Path) -> list[Path]:
    """Return .md files directly under path, sorted by file name."""
    try:
        entries = list(path.iterdir())
    except OSError as e:
        raise RuntimeError(f"Cannot list posts directory {path}: {e}") from e
    return sorted(
        (p for p in entries if p.is_file() and p.name.endswith(MD_EXTENSION)),
        key=lambda p: p.name,
    )


def build_post(path: Path, today: date, excerpt_length: int = 120) -> Post:
    """Read and parse one markdown file into a Post, filling in missing fields."""
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RuntimeError(f"Failed to read {path}: {e}") from e

    frontmatter, body = parse_frontmatter(raw)
    body = body.strip()
    if not frontmatter:
        logger.debug("No frontmatter in %s; using defaults", path.name)
    slug = path.name[: -len(MD_EXTENSION)]
    return Post(
        slug=slug,
        title=frontmatter.get("title") or slug,
        date=frontmatter.get("date") or today.isoformat(),
        excerpt=frontmatter.get("excerpt") or default_excerpt(body, excerpt_length),
        content=body,
        frontmatter=frontmatter,
    )


def collect_posts(path: Path, excerpt_length: int = 120, today: date = None) -> list[Post]:
    """Build every post under path, newest first.

    Ties, including posts with unparseable dates, keep file-name order.
    """
    today = today or date.today()
    posts = [build_post(p, today, excerpt_length) for p in discover_posts(path)]
    return sorted(posts, key=_sort_key, reverse=True)
