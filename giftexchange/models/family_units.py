import logging
from typing import FrozenSet, Hashable, Iterable, List, Optional, Sequence

from ..errors import (
    DuplicateMemberAcrossUnitsError,
    InvalidMemberIdError,
    InvalidUnitError,
    TooFewUnitsError,
    UnitTooLargeError,
)

logger = logging.getLogger(__name__)

FamilyUnit = FrozenSet[Hashable]


def validate_family_units(family_units: Optional[Iterable[Iterable[Hashable]]]) -> List[FamilyUnit]:
    """
    Gate on the family-unit partition before any drawing happens.
    Returns the units as a list of frozensets, in the order given.

    Raises (first failure wins, in this order):
      TooFewUnitsError, InvalidUnitError, InvalidMemberIdError,
      DuplicateMemberAcrossUnitsError, UnitTooLargeError.
    """
    if family_units is None:
        raise TooFewUnitsError(0)
    raw_units = list(family_units)
    if len(raw_units) < 2:
        raise TooFewUnitsError(len(raw_units))

    member_lists = []
    for raw in raw_units:
        if raw is None:
            raise InvalidUnitError(raw)
        if isinstance(raw, (str, bytes)):
            raise InvalidUnitError(raw, "not a collection of member ids")
        try:
            members = list(raw)
        except TypeError:
            raise InvalidUnitError(raw, "not iterable") from None
        if not members:
            raise InvalidUnitError(raw, "empty")
        if len(set(members)) != len(members):
            raise InvalidUnitError(raw, "repeated member")
        member_lists.append((raw, members))

    for raw, members in member_lists:
        if any(member is None for member in members):
            raise InvalidMemberIdError(raw)

    units: List[FamilyUnit] = []
    seen = set()
    for raw, members in member_lists:
        for member in members:
            if member in seen:
                raise DuplicateMemberAcrossUnitsError(member)
            seen.add(member)
        units.append(frozenset(members))

    total = len(seen)
    for unit in units:
        # Every member needs its own outside receiver, and each outsider receives once.
        if len(unit) * 2 > total:
            raise UnitTooLargeError(unit, total)

    logger.debug("Validated %d family units covering %d members", len(units), total)
    return units


def build_family_units(
    names: Sequence[str],
    members: Optional[int] = None,
    couples: int = 0,
    families: Iterable[Sequence[str]] = (),
) -> List[FamilyUnit]:
    """
    Translate a name list into a partition of member ids (index into names).
      - members: use only the first N names (default: all of them)
      - families: explicit groups, given by name
      - couples: pair up the first 2*couples members not already in a family
      - everybody left over is a unit of one
    Raises ValueError for unknown, empty or duplicate names and impossible counts.
    """
    if members is None:
        members = len(names)
    if members < 2:
        raise ValueError("You need at least 2 members.")
    if members > len(names):
        raise ValueError(f"Asked for {members} members but only {len(names)} names are available.")
    if couples < 0:
        raise ValueError("The number of couples cannot be negative.")

    people = [n.strip() for n in names[:members]]
    if any(not n for n in people):
        raise ValueError("Names cannot be empty.")
    if len(set(people)) != len(people):
        raise ValueError("Every name must be unique (duplicate names found).")
    index_of = {name: i for i, name in enumerate(people)}

    units: List[FamilyUnit] = []
    grouped = set()
    for family in families:
        ids = []
        for raw_name in family:
            name = raw_name.strip()
            if name not in index_of:
                raise ValueError(f"Unknown family member “{name}”.")
            member_id = index_of[name]
            if member_id in grouped:
                raise ValueError(f"{name} is listed in more than one family.")
            grouped.add(member_id)
            ids.append(member_id)
        if ids:
            units.append(frozenset(ids))

    loose = [i for i in range(members) if i not in grouped]
    if couples * 2 > len(loose):
        raise ValueError(f"Cannot form {couples} couples from {len(loose)} ungrouped members.")
    for k in range(couples):
        units.append(frozenset(loose[2 * k:2 * k + 2]))
    units.extend(frozenset([i]) for i in loose[2 * couples:])
    return units
