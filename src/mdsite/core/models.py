"""Data models shared by the build-posts and generate-pages phases"""

from dataclasses import dataclass

from pydantic import BaseModel


class Post(BaseModel):
    """A published markdown document after frontmatter parsing and defaulting."""
    slug:        str                # file name without extension
    title:       str
    date:        str                # YYYY-MM-DD
    excerpt:     str
    content:     str                # body with frontmatter stripped
    frontmatter: dict[str, str] = {}


@dataclass(frozen=True)
class Page:
    """One static route rendered from the base template."""
    route:       str                # e.g. "about" or "post/<slug>"
    title:       str
    description: str = ""
