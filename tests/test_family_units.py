from __future__ import annotations

import pytest

from giftexchange.errors import (
    DuplicateMemberAcrossUnitsError,
    InvalidFamilyUnitsError,
    InvalidMemberIdError,
    InvalidUnitError,
    TooFewUnitsError,
    UnitTooLargeError,
)
from giftexchange.models.family_units import build_family_units, validate_family_units


def test_returns_frozensets_in_given_order() -> None:
    units = validate_family_units([[3, 4], {0}, (1, 2)])
    assert units == [frozenset({3, 4}), frozenset({0}), frozenset({1, 2})]


@pytest.mark.parametrize("family_units", [None, [], [{0, 1}]])
def test_too_few_units(family_units) -> None:
    with pytest.raises(TooFewUnitsError):
        validate_family_units(family_units)


def test_single_unit_reports_count() -> None:
    with pytest.raises(TooFewUnitsError) as excinfo:
        validate_family_units([{0, 1}])
    assert excinfo.value.count == 1


@pytest.mark.parametrize("bad_unit", [None, set(), 5, "ab"])
def test_invalid_unit(bad_unit) -> None:
    with pytest.raises(InvalidUnitError):
        validate_family_units([{0}, bad_unit, {1}])


def test_missing_member_id() -> None:
    with pytest.raises(InvalidMemberIdError):
        validate_family_units([{0, 1}, [2, None], {3}])


def test_duplicate_member_reports_first_duplicate() -> None:
    with pytest.raises(DuplicateMemberAcrossUnitsError) as excinfo:
        validate_family_units([[0, 1], [2, 1], [3, 0]])
    assert excinfo.value.member == 1


def test_unit_too_large() -> None:
    with pytest.raises(UnitTooLargeError) as excinfo:
        validate_family_units([{0, 1, 2, 3}, {4}])
    assert excinfo.value.total == 5


def test_unit_of_exactly_half_is_allowed() -> None:
    assert len(validate_family_units([{0, 1, 2}, {3}, {4}, {5}])) == 4


def test_input_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        validate_family_units([{0, 1}])
    assert issubclass(UnitTooLargeError, InvalidFamilyUnitsError)


def test_structural_checks_run_before_size_check() -> None:
    # Unit {0, 1, 2} is too large, but the duplicate is found first.
    with pytest.raises(DuplicateMemberAcrossUnitsError):
        validate_family_units([{0, 1, 2}, {2}])


def test_unit_checks_run_before_member_and_duplicate_checks() -> None:
    with pytest.raises(InvalidUnitError):
        validate_family_units([[0], [0], None])
    with pytest.raises(InvalidUnitError):
        validate_family_units([[0, None], []])


def test_member_check_runs_before_duplicate_check() -> None:
    with pytest.raises(InvalidMemberIdError):
        validate_family_units([[0], [0, None]])


def test_repeat_inside_one_unit_is_an_invalid_unit() -> None:
    with pytest.raises(InvalidUnitError, match="repeated member"):
        validate_family_units([[1, 1], [2]])


def test_build_all_singles_by_default() -> None:
    units = build_family_units(["Nick", "Trevor", "Amy"])
    assert units == [frozenset({0}), frozenset({1}), frozenset({2})]


def test_build_uses_first_members_only() -> None:
    units = build_family_units(["Nick", "Trevor", "Amy", "Sam"], members=2)
    assert units == [frozenset({0}), frozenset({1})]


def test_build_couples_and_families() -> None:
    names = ["Nick", "Trevor", "Amy", "Sam", "Nancy", "Ingo"]
    units = build_family_units(names, couples=1, families=[["Amy", " Ingo"]])
    assert units == [frozenset({2, 5}), frozenset({0, 1}), frozenset({3}), frozenset({4})]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"members": 1},
        {"members": 4},
        {"couples": 2},
        {"couples": -1},
        {"families": [["Nobody"]]},
        {"families": [["Nick"], ["Nick", "Amy"]]},
    ],
)
def test_build_rejects_bad_input(kwargs) -> None:
    with pytest.raises(ValueError):
        build_family_units(["Nick", "Trevor", "Amy"], **kwargs)


def test_build_rejects_duplicate_and_empty_names() -> None:
    with pytest.raises(ValueError):
        build_family_units(["Nick", "Nick"])
    with pytest.raises(ValueError):
        build_family_units(["Nick", "  "])
