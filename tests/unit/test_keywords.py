"""Unit tests for the keyword codec."""

from case_library.domain.keywords import join_keywords, parse_keywords


def test_parse_empty_string_yields_empty_list():
    assert parse_keywords("") == []
    assert parse_keywords(None) == []


def test_parse_trims_each_keyword():
    assert parse_keywords("delivery , fastfood,  drive-thru") == [
        "delivery",
        "fastfood",
        "drive-thru",
    ]


def test_join_keeps_order_and_duplicates():
    assert join_keywords(["b", "a", "b"]) == "b,a,b"


def test_join_then_parse_preserves_keywords():
    keywords = ["hotpot", "reception", "hotpot"]
    assert parse_keywords(join_keywords(keywords)) == keywords
