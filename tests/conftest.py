"""Shared fixtures: a small posts directory and a built site template"""

import pytest

from mdsite.config import Settings


NEW_SITE_MD = """\
---
title: New Site Setup
date: 2025-11-26
excerpt: "New site setup."
---

# New Site

New redesign after quite a few years.
"""

OLDER_MD = """\
---
title: 'Older Post'
date: 2025-01-15
tags: python, dsl
draft: false
---

First line of the older post.

Second paragraph.
"""

BASE_HTML = """\
<!doctype html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <title>Benjamin F. Wilson</title>
  </head>
  <body>
    <div id="root"></div>
  </body>
</html>
"""


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory so relative paths and config.yaml are isolated."""
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(f"MDSITE_{name.upper()}", raising=False)


@pytest.fixture(name="posts_dir")
def posts_dir_fixture(tmp_path):
    d = tmp_path / "src" / "posts"
    d.mkdir(parents=True)
    (d / "new-site.md").write_text(NEW_SITE_MD, encoding="utf-8")
    (d / "older.md").write_text(OLDER_MD, encoding="utf-8")
    (d / "notes.txt").write_text("not a post", encoding="utf-8")
    return d


@pytest.fixture(name="site_dir")
def site_dir_fixture(tmp_path):
    d = tmp_path / "docs"
    d.mkdir()
    (d / "index.html").write_text(BASE_HTML, encoding="utf-8")
    return d


@pytest.fixture(name="settings")
def settings_fixture(tmp_path):
    return Settings(
        posts_dir=str(tmp_path / "src" / "posts"),
        data_module=str(tmp_path / "src" / "utils" / "posts.js"),
        data_json=str(tmp_path / "src" / "utils" / "posts.json"),
        site_dir=str(tmp_path / "docs"),
    )
