import pytest

from series_motifs.errors import InvalidConfiguration
from series_motifs.fingerprints import filters


def test_simple_filters() -> None:
    assert filters.accept_all([0, 0, 0])
    assert not filters.reject_constant([4, 4, 4])
    assert filters.reject_constant([4, 4, 5])
    assert not filters.reject_all_zero([0, 0])
    assert filters.reject_all_zero([0, -1])


def test_parametrised_filters() -> None:
    at_least_three = filters.min_distinct(3)
    assert not at_least_three([1, 2, 2, 1])
    assert at_least_three([1, 2, 3])

    wide = filters.min_range(10)
    assert not wide([0, 5, 9])
    assert wide([0, 5, 10])


def test_all_of_requires_every_filter() -> None:
    combined = filters.all_of(filters.reject_constant, filters.reject_all_zero)
    assert not combined([0, 0, 0])
    assert not combined([7, 7])
    assert combined([0, 1])
    assert filters.all_of() is filters.accept_all
    assert filters.all_of(filters.reject_constant) is filters.reject_constant


def test_make_filter_from_config_entries() -> None:
    assert filters.make_filter("reject_constant") is filters.reject_constant
    built = filters.make_filter({"name": "min_distinct", "n": 2})
    assert built([1, 2])
    assert not built([1, 1])


def test_make_filters_combines_list() -> None:
    combined = filters.make_filters(["reject_all_zero", {"name": "min_range", "span": 2}])
    assert not combined([0, 0, 0])
    assert not combined([1, 2])
    assert combined([1, 3])
    assert filters.make_filters([])([0, 0])


@pytest.mark.parametrize(
    "entry",
    [
        "no_such_filter",
        {"name": "no_such_filter"},
        {"name": "reject_constant", "n": 2},
        {"name": "min_distinct", "count": 2},
        {"n": 2},
        42,
    ],
)
def test_bad_filter_entries_raise(entry) -> None:
    with pytest.raises(InvalidConfiguration):
        filters.make_filter(entry)


def test_list_filters_names_every_filter() -> None:
    names = filters.list_filters()
    for name in ("accept_all", "reject_constant", "reject_all_zero", "min_distinct", "min_range"):
        assert name in names
