"""Serialize posts into the front-end data module and the JSON side-file"""

import json
from pathlib import Path

from mdsite.core.models import Post


MODULE_TEMPLATE = """\
// Auto-generated file - do not edit manually
// Run 'mdsite build-posts' to regenerate

export const posts = {posts_json}

export function getPost(slug) {{
  return posts.find(post => post.slug === slug)
}}

export function getAllPosts() {{
  return posts
}}
"""


def _dump(posts: list[Post]) -> str:
    return json.dumps([p.model_dump() for p in posts], indent=2, ensure_ascii=False)


def render_data_module(posts: list[Post]) -> str:
    """Return an ES module exposing `posts`, `getPost(slug)` and `getAllPosts()`."""
    return MODULE_TEMPLATE.format(posts_json=_dump(posts))


def render_posts_json(posts: list[Post]) -> str:
    """Return the post list as a standalone JSON document."""
    return _dump(posts) + "\n"


def write_data(posts: list[Post], module_path: Path, json_path: Path) -> None:
    """Overwrite the JSON side-file and data module, creating parent directories.

    Both are rendered and written to temporary siblings first, then swapped in,
    the JSON hand-off before the module.
    """
    outputs = [(json_path, render_posts_json(posts)), (module_path, render_data_module(posts))]
    staged = []
    for path, text in outputs:
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp = path.with_name(f".{path.name}.tmp")
        tmp.write_text(text, encoding="utf-8")
        staged.append((tmp, path))
    for tmp, path in staged:
        tmp.replace(path)
