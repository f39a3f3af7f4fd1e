"""Search and filter evaluation over a loaded case collection.

Pure functions: no I/O, no mutation of the input. The result keeps the
original relative order of the collection.
"""

from collections.abc import Iterable, Sequence

from case_library.domain.entities import FilterOptions, FilterState, VideoCase


def matches_search(case: VideoCase, search: str) -> bool:
    """Case-insensitive substring match on client name, keywords and subcategory."""
    if not search:
        return True
    needle = search.lower()
    if needle in case.client_name.lower():
        return True
    if any(needle in keyword.lower() for keyword in case.keywords):
        return True
    return case.subcategory is not None and needle in case.subcategory.lower()


def matches_filters(case: VideoCase, filters: FilterState) -> bool:
    """True when the case satisfies the search and every exact-match selector."""
    if filters.category and case.category != filters.category:
        return False
    if filters.region and case.region != filters.region:
        return False
    if filters.robot_type and case.robot_type != filters.robot_type:
        return False
    return matches_search(case, filters.search)


def filter_cases(cases: Sequence[VideoCase], filters: FilterState) -> list[VideoCase]:
    return [case for case in cases if matches_filters(case, filters)]


def _distinct_sorted(values: Iterable[str]) -> list[str]:
    return sorted(set(values))


def derive_filter_options(cases: Sequence[VideoCase]) -> FilterOptions:
    """Selectable dropdown values — whatever is present in the collection."""
    return FilterOptions(
        categories=_distinct_sorted(case.category for case in cases),
        regions=_distinct_sorted(case.region for case in cases),
        robot_types=_distinct_sorted(case.robot_type for case in cases),
    )
