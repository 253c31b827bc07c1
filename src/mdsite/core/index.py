"""Read side of the generated post data"""

import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from mdsite.core.models import Post


_POSTS = TypeAdapter(list[Post])


def load_posts(path: Path) -> list[Post]:
    """Load posts from a JSON side-file written by `write_data`."""
    if not path.exists():
        raise RuntimeError(f"Post data not found at {path}. Run 'mdsite build-posts' first.")
    try:
        return _POSTS.validate_python(json.loads(path.read_text(encoding="utf-8")))
    except (json.JSONDecodeError, ValidationError) as e:
        raise ValueError(f"Invalid post data in {path}: {e}") from e


class PostIndex:
    """Ordered, read-only view over the post list."""

    def __init__(self, posts: list[Post]):
        self._posts = list(posts)
        self._by_slug = {p.slug: p for p in self._posts}

    @classmethod
    def from_file(cls, path: Path) -> "PostIndex":
        return cls(load_posts(path))

    def all_posts(self) -> list[Post]:
        return list(self._posts)

    def get_post(self, slug: str) -> Post | None:
        return self._by_slug.get(slug)

    def __len__(self) -> int:
        return len(self._posts)
