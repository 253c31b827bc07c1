"""Build configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    posts_dir:     str = Field(default="src/posts",            description="Directory of markdown posts")
    data_module:   str = Field(default="src/utils/posts.js",   description="Generated JS data module")
    data_json:     str = Field(default="src/utils/posts.json", description="Generated JSON side-file")
    site_dir:      str = Field(default="docs",                 description="Built site root (pages are written here)")
    template_name: str = Field(default="index.html",           description="Base template, relative to site_dir")
    site_owner:    str = Field(default="Benjamin F. Wilson",   description="Appended to every page title")
    about_title:   str = "About"
    about_description: str = (
        "Software engineer specializing in programming language theory and DSL development"
    )
    excerpt_length: int = Field(default=120, ge=1, description="Max characters in a derived excerpt")

    @property
    def template_path(self) -> Path:
        return Path(self.site_dir) / self.template_name


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDSITE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDSITE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
