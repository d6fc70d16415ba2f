"""Shared assertions for gift exchange tests."""
from __future__ import annotations

from typing import Dict, Hashable, Iterable


def assert_gift_exchange_pairs(mapping: Dict[Hashable, Hashable], family_units: Iterable[Iterable[Hashable]]) -> None:
    units = [set(u) for u in family_units]
    universe = set().union(*units)
    assert set(mapping) == universe
    assert sorted(mapping.values()) == sorted(mapping)
    for giver, receiver in mapping.items():
        assert giver != receiver
    for unit in units:
        for giver in unit:
            assert mapping[giver] not in unit
