"""Tests for core/aggregator.py — buffering, cleaning and sort policies."""

import asyncio

import pytest

from portfolio_site.core import aggregator
from portfolio_site.core.aggregator import (
    SortPolicy,
    buffer_iterable,
    delete_undefined,
    get_projects_props,
    get_speaking_props,
    sort_projects,
)
from portfolio_site.data.projects import PROJECTS, ProjectFetchError
from portfolio_site.models.project import Project


async def _agen(items):
    for item in items:
        await asyncio.sleep(0)
        yield item


class TestBufferIterable:

    @pytest.mark.asyncio
    async def test_preserves_order(self):
        assert await buffer_iterable(_agen([3, 1, 2])) == [3, 1, 2]

    @pytest.mark.asyncio
    async def test_empty(self):
        assert await buffer_iterable(_agen([])) == []

    @pytest.mark.asyncio
    async def test_error_propagates_unchanged(self):
        async def failing():
            yield 1
            raise ProjectFetchError("rate limited")

        with pytest.raises(ProjectFetchError, match="rate limited"):
            await buffer_iterable(failing())


class TestDeleteUndefined:

    def test_removes_none_keys(self):
        assert delete_undefined({"a": 1, "b": None}) == {"a": 1}

    def test_keeps_falsy_values(self):
        data = {"stars": 0, "archived": False, "language": "", "items": []}
        assert delete_undefined(data) == data

    def test_recurses_into_lists_and_dicts(self):
        data = [{"a": None, "nested": {"b": None, "c": 2}}, {"d": [{"e": None}]}]
        assert delete_undefined(data) == [{"nested": {"c": 2}}, {"d": [{}]}]

    def test_does_not_mutate_input(self):
        data = [{"a": 1, "b": None}]
        delete_undefined(data)
        assert data == [{"a": 1, "b": None}]

    def test_defined_values_unchanged_for_fixture(self):
        records = [p.to_dict() for p in PROJECTS]
        cleaned = delete_undefined(records)
        for before, after in zip(records, cleaned):
            assert None not in after.values()
            assert after == {k: v for k, v in before.items() if v is not None}


class TestSortProjects:

    def test_showcase_archived_last_then_name(self, sample_projects):
        ordered = sort_projects(sample_projects, SortPolicy.SHOWCASE)
        assert [p.name for p in ordered] == ["B", "C", "A"]

    def test_ranked_by_stars_descending(self, sample_projects):
        ordered = sort_projects(sample_projects, SortPolicy.RANKED)
        assert [(p.name, p.stars) for p in ordered] == [("A", 5), ("C", 3), ("B", 1)]

    def test_showcase_idempotent(self):
        once = sort_projects(PROJECTS, SortPolicy.SHOWCASE)
        assert sort_projects(once, SortPolicy.SHOWCASE) == once

    def test_showcase_idempotent_mixed_archived_and_case(self):
        projects = [
            Project(name="zeta", url="u", archived=True),
            Project(name="Beta", url="u"),
            Project(name="Alpha", url="u", archived=True),
            Project(name="beta", url="u"),
            Project(name="apple", url="u"),
            Project(name="Apple", url="u", archived=True),
        ]
        once = sort_projects(projects, SortPolicy.SHOWCASE)
        assert [(p.name, p.archived) for p in once] == [
            ("apple", False),
            ("beta", False),
            ("Beta", False),
            ("Alpha", True),
            ("Apple", True),
            ("zeta", True),
        ]
        assert sort_projects(once, SortPolicy.SHOWCASE) == once
        assert sort_projects(list(reversed(once)), SortPolicy.SHOWCASE) == once

    def test_ranked_is_stable(self):
        projects = [
            Project(name="first", url="u", stars=2),
            Project(name="second", url="u", stars=7),
            Project(name="third", url="u", stars=2),
            Project(name="fourth", url="u", stars=2),
        ]
        ordered = sort_projects(projects, SortPolicy.RANKED)
        assert [p.name for p in ordered] == ["second", "first", "third", "fourth"]

    def test_names_alphabetical_ignoring_case(self):
        projects = [Project(name="Beta", url="u"), Project(name="alpha", url="u")]
        ordered = sort_projects(projects, SortPolicy.SHOWCASE)
        assert [p.name for p in ordered] == ["alpha", "Beta"]

    def test_case_breaks_ties_lowercase_first(self):
        projects = [Project(name="Rove", url="u"), Project(name="rove", url="u")]
        ordered = sort_projects(projects, SortPolicy.SHOWCASE)
        assert [p.name for p in ordered] == ["rove", "Rove"]

    def test_works_on_dicts(self, sample_projects):
        records = [p.to_dict() for p in sample_projects]
        ordered = sort_projects(records, "ranked")
        assert [r["name"] for r in ordered] == ["A", "C", "B"]

    def test_returns_new_list(self, sample_projects):
        original = list(sample_projects)
        sort_projects(sample_projects, SortPolicy.SHOWCASE)
        assert sample_projects == original

    def test_unknown_policy(self, sample_projects):
        with pytest.raises(ValueError):
            sort_projects(sample_projects, "popularity")


class TestGetProjectsProps:

    @pytest.mark.asyncio
    async def test_end_to_end_showcase(self, sample_projects):
        props = await get_projects_props(SortPolicy.SHOWCASE, source=sample_projects)
        assert [p["name"] for p in props["projects"]] == ["B", "C", "A"]
        assert props["total"] == 3
        assert props["active"] == 2

    @pytest.mark.asyncio
    async def test_showcase_mixed_case_names(self):
        source = [
            Project(name="Zeta", url="u"),
            Project(name="apple", url="u"),
            Project(name="Beta", url="u"),
        ]
        props = await get_projects_props(SortPolicy.SHOWCASE, source=source)
        assert [p["name"] for p in props["projects"]] == ["apple", "Beta", "Zeta"]

    @pytest.mark.asyncio
    async def test_end_to_end_ranked(self, sample_projects):
        props = await get_projects_props(SortPolicy.RANKED, source=sample_projects)
        assert [p["stars"] for p in props["projects"]] == [5, 3, 1]

    @pytest.mark.asyncio
    async def test_payload_has_no_none(self, sample_projects):
        props = await get_projects_props(source=sample_projects)
        for record in props["projects"]:
            assert None not in record.values()
            assert "description" not in record

    @pytest.mark.asyncio
    async def test_default_source(self):
        props = await get_projects_props()
        assert props["total"] == len(PROJECTS)

    @pytest.mark.asyncio
    async def test_fetch_failure_propagates(self, monkeypatch):
        async def failing_loader(source=None):
            yield Project(name="partial", url="u")
            raise ProjectFetchError("network down")

        monkeypatch.setattr(aggregator, "load_projects", failing_loader)
        with pytest.raises(ProjectFetchError):
            await get_projects_props()


class TestGetSpeakingProps:

    @pytest.mark.asyncio
    async def test_sorted_newest_first(self):
        props = await get_speaking_props()
        dates = [e["date"] for e in props["engagements"]]
        assert dates == sorted(dates, reverse=True)

    @pytest.mark.asyncio
    async def test_missing_urls_removed(self):
        props = await get_speaking_props()
        oldest = props["engagements"][-1]
        assert "recordingUrl" not in oldest
