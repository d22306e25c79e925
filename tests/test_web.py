"""Tests for the FastAPI site — pages, JSON APIs and redirects."""

from datetime import date

import pytest

from portfolio_site.web.pages import age_on


class TestPages:

    @pytest.mark.asyncio
    async def test_home(self, client):
        response = await client.get("/")
        assert response.status_code == 200
        assert "Hello!" in response.text
        assert 'href="/joke"' in response.text
        assert "build abc123" in response.text

    @pytest.mark.asyncio
    async def test_projects_grid_order(self, client):
        response = await client.get("/projects")
        assert response.status_code == 200
        text = response.text
        assert "8 Projects" in text
        assert "8 Active" in text
        # non-archived, alphabetical
        assert text.index("CashOrbit") < text.index("Coffee analysis project") < text.index("Rove")

    @pytest.mark.asyncio
    async def test_projects_source_link_fallback(self, client):
        text = (await client.get("/projects")).text
        assert 'href="https://github.com/jonathancaleb/enoflow"' in text
        assert 'href="https://www.traderepubliq.com/"' in text

    @pytest.mark.asyncio
    async def test_speaking(self, client):
        response = await client.get("/speaking")
        assert response.status_code == 200
        assert "Reality-Driven Testing Using TestContainers" in response.text

    @pytest.mark.asyncio
    async def test_joke(self, client):
        response = await client.get("/joke")
        assert "Glory to Algorithms!" in response.text

    @pytest.mark.asyncio
    async def test_blog_index(self, client):
        text = (await client.get("/blog")).text
        assert "Target-Type Inference" in text
        assert "Unfinished" not in text
        assert "<code" in text
        assert ">kotlin</code>" in text

    @pytest.mark.asyncio
    async def test_blog_post(self, client):
        response = await client.get("/blog/target-type-inference")
        assert response.status_code == 200
        assert 'id="a-small-example"' in response.text

    @pytest.mark.asyncio
    async def test_blog_post_not_found(self, client):
        response = await client.get("/blog/nope")
        assert response.status_code == 404


class TestRedirects:

    @pytest.mark.asyncio
    async def test_project_detail_redirects_to_list(self, client):
        response = await client.get("/projects/rove")
        assert response.status_code == 308
        assert response.headers["location"] == "/projects"

    @pytest.mark.asyncio
    async def test_renamed_post(self, client):
        response = await client.get("/blog/return-type-inference")
        assert response.status_code == 308
        assert response.headers["location"] == "/blog/target-type-inference"


class TestApi:

    @pytest.mark.asyncio
    async def test_projects_default_showcase(self, client):
        data = (await client.get("/api/projects")).json()
        names = [p["name"] for p in data["projects"]]
        assert names == sorted(names, key=str.casefold)
        assert data["total"] == 8

    @pytest.mark.asyncio
    async def test_projects_ranked(self, client):
        data = (await client.get("/api/projects", params={"sort": "ranked"})).json()
        stars = [p["stars"] for p in data["projects"]]
        assert stars == sorted(stars, reverse=True)
        # ties keep fixture order
        assert [p["name"] for p in data["projects"][:2]] == [
            "EnoFlow",
            "Logistics and Supply system",
        ]

    @pytest.mark.asyncio
    async def test_projects_invalid_sort(self, client):
        response = await client.get("/api/projects", params={"sort": "random"})
        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_projects_payload_has_no_null(self, client):
        data = (await client.get("/api/projects")).json()
        for project in data["projects"]:
            assert None not in project.values()
            assert "homepageUrl" not in project

    @pytest.mark.asyncio
    async def test_speaking(self, client):
        data = (await client.get("/api/speaking")).json()
        assert len(data["engagements"]) == 2

    @pytest.mark.asyncio
    async def test_posts(self, client):
        data = (await client.get("/api/posts")).json()
        assert [p["slug"] for p in data] == ["target-type-inference", "plain-notes"]
        assert "description" not in data[1]


class TestAgeOn:

    def test_before_birthday(self):
        assert age_on(date(1999, 7, 7), date(2024, 7, 6)) == 24

    def test_on_birthday(self):
        assert age_on(date(1999, 7, 7), date(2024, 7, 7)) == 25
