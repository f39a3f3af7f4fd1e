"""Unit tests for the search/filter evaluator."""

import pytest

from case_library.application.services.case_filter import (
    derive_filter_options,
    filter_cases,
)
from case_library.domain.entities import FilterState

from tests.store_fakes import make_case


@pytest.fixture
def cases():
    return [
        make_case("1"),
        make_case(
            "2",
            client_name="Haidilao",
            subcategory="Hotpot",
            region="China",
            robot_type="KettyBot",
            keywords=["reception"],
        ),
        make_case(
            "3",
            client_name="Aeon Mall",
            category="Retail",
            region="Japan",
            robot_type="KettyBot",
            keywords=["Advertising"],
        ),
        make_case(
            "4",
            client_name="Frankfurt Airport",
            category="Cleaning",
            region="Germany",
            robot_type="CC1",
            keywords=[],
            subcategory=None,
        ),
    ]


FILTER_STATES = [
    FilterState(),
    FilterState(search="mcdon"),
    FilterState(search="HOT"),
    FilterState(category="Retail"),
    FilterState(region="China", robot_type="KettyBot"),
    FilterState(search="a", robot_type="KettyBot"),
    FilterState(search="nothing-matches"),
]


def test_empty_filter_is_identity(cases):
    assert filter_cases(cases, FilterState()) == cases


@pytest.mark.parametrize("filters", FILTER_STATES)
def test_filter_is_idempotent(cases, filters):
    once = filter_cases(cases, filters)
    assert filter_cases(once, filters) == once


def test_filter_preserves_original_order(cases):
    result = filter_cases(cases, FilterState(robot_type="KettyBot"))
    assert [case.id for case in result] == ["2", "3"]


def test_example_search_matches_client_name():
    collection = [make_case("1")]
    assert filter_cases(collection, FilterState(search="mcdon")) == collection


def test_example_category_without_match_returns_empty():
    collection = [make_case("1")]
    assert filter_cases(collection, FilterState(category="Retail")) == []


def test_search_matches_keywords_case_insensitively(cases):
    result = filter_cases(cases, FilterState(search="advert"))
    assert [case.id for case in result] == ["3"]


def test_search_matches_subcategory(cases):
    result = filter_cases(cases, FilterState(search="hotpot"))
    assert [case.id for case in result] == ["2"]


def test_missing_subcategory_does_not_raise(cases):
    # Case 4 has no subcategory and no keywords; only its name can match
    assert [c.id for c in filter_cases(cases, FilterState(search="airport"))] == ["4"]
    assert filter_cases([cases[3]], FilterState(search="hotpot")) == []


def test_selectors_are_case_sensitive(cases):
    assert filter_cases(cases, FilterState(category="retail")) == []
    assert filter_cases(cases, FilterState(region="china")) == []
    assert filter_cases(cases, FilterState(robot_type="kettybot")) == []


def test_all_criteria_must_hold(cases):
    result = filter_cases(cases, FilterState(search="mall", region="China"))
    assert result == []


def test_filter_options_are_distinct_and_sorted(cases):
    options = derive_filter_options(cases)
    assert options.categories == ["Catering", "Cleaning", "Retail"]
    assert options.regions == ["China", "Germany", "Japan", "USA"]
    assert options.robot_types == ["BellaBot", "CC1", "KettyBot"]


def test_filter_options_pick_up_free_text_values(cases):
    cases.append(make_case("5", category="Hospitality", region="Brazil"))
    options = derive_filter_options(cases)
    assert "Hospitality" in options.categories
    assert "Brazil" in options.regions
