"""Unit tests for config.py"""

from pathlib import Path

import pytest

from mdsite.config import load_config


def test_load_config_defaults():
    """Defaults apply when no config.yaml, env var, or CLI override exists."""
    settings = load_config()
    assert settings.posts_dir == "src/posts"
    assert settings.data_module == "src/utils/posts.js"
    assert settings.site_owner == "Benjamin F. Wilson"
    assert settings.excerpt_length == 120
    assert settings.template_path == Path("docs") / "index.html"


def test_load_config_reads_config_yaml(tmp_path):
    """Values in config.yaml replace the defaults."""
    (tmp_path / "config.yaml").write_text("site_dir: public\nsite_owner: 'Jane Doe'\n")
    settings = load_config()
    assert settings.site_dir == "public"
    assert settings.site_owner == "Jane Doe"


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """MDSITE_POSTS_DIR takes precedence over config.yaml posts_dir."""
    (tmp_path / "config.yaml").write_text("posts_dir: content\n")
    monkeypatch.setenv("MDSITE_POSTS_DIR", "from-env")
    assert load_config().posts_dir == "from-env"


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var; None overrides are ignored."""
    monkeypatch.setenv("MDSITE_SITE_DIR", "env-docs")
    assert load_config(overrides={"site_dir": "cli-docs"}).site_dir == "cli-docs"
    assert load_config(overrides={"site_dir": None}).site_dir == "env-docs"


def test_load_config_env_excerpt_length(monkeypatch):
    """MDSITE_EXCERPT_LENGTH env var is coerced to int."""
    monkeypatch.setenv("MDSITE_EXCERPT_LENGTH", "40")
    assert load_config().excerpt_length == 40


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_non_mapping_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("- a\n- b\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


def test_load_config_rejects_bad_excerpt_length():
    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(overrides={"excerpt_length": 0})
