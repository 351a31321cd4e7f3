"""Tests for catalog loading, search and ordering."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, patch

import pytest

from lessonrender.catalog import (
    filter_courses,
    find_course,
    find_topic,
    get_cycles,
    is_in_construction,
    load_bundled_catalog,
    load_catalog,
    load_catalog_data,
    sort_courses,
)
from lessonrender.exceptions import CourseNotFoundError, ParseError, TopicNotFoundError
from lessonrender.schemas import Catalog, Course, Cycle


def _course(course_id: str, title: str, **kwargs) -> Course:
    return Course(id=course_id, title=title, **kwargs)


class TestCourseHelpers:
    """Tests for get_cycles and is_in_construction."""

    def test_cycles_list_wins(self) -> None:
        course = _course("c", "C", cycles=["DAM", "DAW"], cycle="SMR")
        assert get_cycles(course) == [Cycle.DAM, Cycle.DAW]

    def test_single_cycle_fallback(self) -> None:
        assert get_cycles(_course("c", "C", cycle="ASIR")) == [Cycle.ASIR]

    def test_no_cycles(self) -> None:
        assert get_cycles(_course("c", "C")) == []

    def test_in_construction_by_default(self) -> None:
        assert is_in_construction(_course("c", "C"))
        assert is_in_construction(_course("c", "C", in_construction=True))
        assert not is_in_construction(_course("c", "C", inConstruction=False))


class TestFilterCourses:
    """Tests for filter_courses function."""

    def _courses(self) -> list[Course]:
        return [
            _course("a", "Diseño de interfaces web", cycles=["DAW"]),
            _course("b", "Redes locales", cycles=["SMR"]),
            _course("c", "Lenguajes de marcas", cycles=["DAM", "DAW", "ASIR"]),
        ]

    def test_query_ignores_case_and_accents(self) -> None:
        result = filter_courses(self._courses(), "DISENO")
        assert [c.id for c in result] == ["a"]

    def test_cycle_filter(self) -> None:
        result = filter_courses(self._courses(), cycle="DAW")
        assert [c.id for c in result] == ["a", "c"]

    def test_cycle_enum_is_accepted(self) -> None:
        result = filter_courses(self._courses(), cycle=Cycle.ASIR)
        assert [c.id for c in result] == ["c"]

    def test_query_and_cycle_combine(self) -> None:
        assert filter_courses(self._courses(), "redes", cycle="DAW") == []

    def test_blank_query_matches_all(self) -> None:
        assert len(filter_courses(self._courses(), "   ")) == 3

    def test_unknown_cycle_raises(self) -> None:
        with pytest.raises(ValueError):
            filter_courses(self._courses(), cycle="FP")


class TestSortCourses:
    """Tests for sort_courses function."""

    def test_finished_courses_first_then_title(self) -> None:
        courses = [
            _course("z", "Zeta"),
            _course("e", "Éter"),
            _course("b", "beta"),
            _course("done", "Programación", inConstruction=False),
        ]
        assert [c.id for c in sort_courses(courses)] == ["done", "b", "e", "z"]

    def test_enye_after_n(self) -> None:
        courses = [_course("o", "Ofimática"), _course("ny", "Ñu"), _course("n", "Nube")]
        assert [c.id for c in sort_courses(courses)] == ["n", "ny", "o"]


class TestLookup:
    """Tests for find_course and find_topic."""

    def test_find_course_and_topic(self) -> None:
        catalog = load_bundled_catalog()
        course = find_course(catalog, "python-intro")
        assert find_topic(course, "t2").title == "2. Variables y tipos"

    def test_missing_course(self) -> None:
        with pytest.raises(CourseNotFoundError, match="nope"):
            find_course(Catalog(), "nope")

    def test_missing_topic(self) -> None:
        with pytest.raises(TopicNotFoundError):
            find_topic(_course("c", "C"), "t1")

    def test_lookup_errors_are_lookup_errors(self) -> None:
        assert issubclass(CourseNotFoundError, LookupError)
        assert issubclass(TopicNotFoundError, LookupError)


class TestLoadCatalogData:
    """Tests for load_catalog_data function."""

    def test_from_json_text(self) -> None:
        text = json.dumps(
            {"courses": [{"id": "c", "title": "C", "topics": [{"id": "t", "title": "T", "pageBlocks": []}]}]}
        )
        catalog = load_catalog_data(text)
        assert catalog.courses[0].topics[0].page_blocks == []

    def test_from_bytes(self) -> None:
        catalog = load_catalog_data(b'{"courses": []}')
        assert catalog.courses == []

    def test_bare_list_is_course_list(self) -> None:
        catalog = load_catalog_data([{"id": "c", "title": "C"}])
        assert catalog.courses[0].id == "c"

    def test_missing_page_blocks_is_none(self) -> None:
        catalog = load_catalog_data([{"id": "c", "title": "C", "topics": [{"id": "t", "title": "T"}]}])
        assert catalog.courses[0].topics[0].page_blocks is None

    def test_invalid_json(self) -> None:
        with pytest.raises(ParseError, match="Invalid catalog data"):
            load_catalog_data("{not json")

    def test_invalid_shape(self) -> None:
        with pytest.raises(ParseError):
            load_catalog_data({"courses": [{"title": "sin id"}]})

    def test_unknown_cycle_is_rejected(self) -> None:
        with pytest.raises(ParseError):
            load_catalog_data([{"id": "c", "title": "C", "cycle": "FP"}])


class TestBundledCatalog:
    """Tests for the catalog shipped with the package."""

    def test_loads(self) -> None:
        catalog = load_bundled_catalog()
        assert len(catalog.courses) == 31
        assert catalog.courses[0].id == "python-intro"

    def test_only_python_intro_is_finished(self) -> None:
        catalog = load_bundled_catalog()
        finished = [c.id for c in catalog.courses if not is_in_construction(c)]
        assert finished == ["python-intro"]
        assert sort_courses(catalog.courses)[0].id == "python-intro"

    def test_python_intro_topics(self) -> None:
        course = find_course(load_bundled_catalog(), "python-intro")
        assert [t.id for t in course.topics] == [f"t{i}" for i in range(1, 11)]
        assert course.topics[0].page_blocks
        assert all(t.page_blocks is None for t in course.topics[1:])


class TestLoadCatalog:
    """Tests for the async load_catalog function."""

    @pytest.mark.asyncio
    async def test_falls_back_to_bundled_catalog(self) -> None:
        with (
            patch("lessonrender.catalog.LESSONRENDER_CATALOG_URL", None),
            patch("lessonrender.catalog.fetch_catalog_json", new_callable=AsyncMock) as mock_fetch,
        ):
            catalog = await load_catalog()

        mock_fetch.assert_not_called()
        assert len(catalog.courses) == 31

    @pytest.mark.asyncio
    async def test_fetches_remote_catalog(self) -> None:
        with patch(
            "lessonrender.catalog.fetch_catalog_json",
            new_callable=AsyncMock,
            return_value='{"courses": [{"id": "remote", "title": "Remoto"}]}',
        ) as mock_fetch:
            catalog = await load_catalog("https://example.com/catalog.json", use_cache=False)

        mock_fetch.assert_awaited_once_with("https://example.com/catalog.json", use_cache=False)
        assert [c.id for c in catalog.courses] == ["remote"]

    @pytest.mark.asyncio
    async def test_uses_configured_url(self) -> None:
        with (
            patch("lessonrender.catalog.LESSONRENDER_CATALOG_URL", "https://cfg.example/c.json"),
            patch(
                "lessonrender.catalog.fetch_catalog_json",
                new_callable=AsyncMock,
                return_value="[]",
            ) as mock_fetch,
        ):
            catalog = await load_catalog()

        mock_fetch.assert_awaited_once_with("https://cfg.example/c.json", use_cache=True)
        assert catalog.courses == []

    @pytest.mark.asyncio
    async def test_remote_garbage_raises_parse_error(self) -> None:
        with patch(
            "lessonrender.catalog.fetch_catalog_json",
            new_callable=AsyncMock,
            return_value="<html>",
        ):
            with pytest.raises(ParseError):
                await load_catalog("https://example.com/catalog.json")
