"""Root test configuration: a sample flat pages directory"""

import pytest


HOME_MD = "# Home\n\nWelcome."

ABOUT_MD = """\
---
title: About us
description: Who we are
team: docs
---

# About

We write things down.
"""

NESTED_MD = "## Getting started\n\nInstall it."


@pytest.fixture(name="pages_dir")
def pages_dir_fixture(tmp_path):
    """A pages directory with two root-level pages, one nested url, and noise."""
    root = tmp_path / "pages"
    root.mkdir()
    (root / "^.md").write_text(HOME_MD, encoding="utf-8")
    (root / "^about.md").write_text(ABOUT_MD, encoding="utf-8")
    (root / "^docs^start.md").write_text(NESTED_MD, encoding="utf-8")
    (root / "notes.txt").write_text("# Not a page", encoding="utf-8")
    (root / "LOUD.MD").write_text("# Wrong suffix case", encoding="utf-8")
    (root / "folder.md").mkdir()
    sub = root / "sub"
    sub.mkdir()
    (sub / "^inner.md").write_text("# Inner", encoding="utf-8")
    return root
