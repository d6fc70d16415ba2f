import logging
from typing import Dict, Hashable, Iterable

from ..errors import (
    DuplicateReceiverError,
    IncompleteMappingError,
    IntraUnitGiftError,
    NullGiverOrReceiverError,
    SelfGiftError,
)

logger = logging.getLogger(__name__)


def check_no_null(mapping: Dict[Hashable, Hashable]) -> None:
    for giver, receiver in mapping.items():
        if giver is None or receiver is None:
            raise NullGiverOrReceiverError(
                f"Missing giver or receiver: {giver!r} -> {receiver!r}", giver, receiver
            )


def check_no_self_gift(mapping: Dict[Hashable, Hashable]) -> None:
    for giver, receiver in mapping.items():
        if giver == receiver:
            raise SelfGiftError(f"{giver!r} is gifting themself.", giver, receiver)


def check_unique_receivers(mapping: Dict[Hashable, Hashable]) -> None:
    receivers = set()
    for giver, receiver in mapping.items():
        if receiver in receivers:
            raise DuplicateReceiverError(f"{receiver!r} is already receiving a gift.", giver, receiver)
        receivers.add(receiver)


def check_no_intra_unit_gift(mapping: Dict[Hashable, Hashable], family_units: Iterable[Iterable[Hashable]]) -> None:
    for unit in family_units:
        members = set(unit)
        for giver in members:
            if giver in mapping and mapping[giver] in members:
                raise IntraUnitGiftError(
                    f"{giver!r} gifts {mapping[giver]!r} from their own family unit.",
                    giver, mapping[giver],
                )


def check_complete(mapping: Dict[Hashable, Hashable], family_units: Iterable[Iterable[Hashable]]) -> None:
    universe = {m for unit in family_units for m in unit}
    givers = set(mapping)
    if givers != universe:
        raise IncompleteMappingError(
            f"Givers do not match the members: missing {sorted(universe - givers, key=repr)!r}, "
            f"unknown {sorted(givers - universe, key=repr)!r}"
        )
    receivers = set(mapping.values())
    if receivers != universe:
        raise IncompleteMappingError(
            f"Receivers do not match the members: nobody gifts {sorted(universe - receivers, key=repr)!r}"
        )


def validate(
    mapping: Dict[Hashable, Hashable],
    family_units: Iterable[Iterable[Hashable]],
    complete: bool = True,
) -> None:
    """
    Fail-fast check of a giver -> receiver mapping, usable on any mapping,
    not only on what generate() produced. Raises on the first violation:
      NullGiverOrReceiverError, SelfGiftError, DuplicateReceiverError,
      IntraUnitGiftError, and with complete=True, IncompleteMappingError.
    Pass complete=False for partial mappings (mid-draw checks).
    """
    units = [list(unit) for unit in family_units]
    check_no_null(mapping)
    check_no_self_gift(mapping)
    check_unique_receivers(mapping)
    check_no_intra_unit_gift(mapping, units)
    if complete:
        check_complete(mapping, units)
    logger.debug("Mapping of %d pairs passed validation (complete=%s)", len(mapping), complete)
