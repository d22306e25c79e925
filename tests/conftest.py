"""
Pytest configuration and shared fixtures
"""

from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from portfolio_site.models.project import Project
from portfolio_site.web.app import create_app

POST_WITH_FRONTMATTER = """---
title: Target-Type Inference
date: 2023-03-14
description: Inference from the expected type.
tags: [kotlin, types]
---

## A small example

Some `code` and a few words here.
"""

POST_WITHOUT_FRONTMATTER = """# Notes

Just some notes without any metadata.
"""

DRAFT_POST = """---
title: Unfinished
date: 2024-01-01
draft: true
---

Not ready yet.
"""


@pytest.fixture
def sample_projects():
    """The three-project data source used by the end-to-end ordering checks"""
    return [
        Project(name="B", url="https://b.example", archived=False, stars=1),
        Project(name="A", url="https://a.example", archived=True, stars=5),
        Project(name="C", url="https://c.example", archived=False, stars=3),
    ]


@pytest.fixture
def content_dir(tmp_path) -> Path:
    """Content directory with a published post, a bare post and a draft"""
    posts = tmp_path / "posts"
    posts.mkdir()
    (posts / "target-type-inference.md").write_text(POST_WITH_FRONTMATTER, encoding="utf-8")
    (posts / "plain-notes.md").write_text(POST_WITHOUT_FRONTMATTER, encoding="utf-8")
    (posts / "unfinished.md").write_text(DRAFT_POST, encoding="utf-8")
    return tmp_path


@pytest.fixture
def posts_dir(content_dir) -> Path:
    return content_dir / "posts"


@pytest.fixture
async def client(content_dir):
    app = create_app(content_dir, build_id="abc123")
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
