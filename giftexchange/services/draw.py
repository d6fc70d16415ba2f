import logging
import random
from typing import Dict, Hashable, Iterable, List, Optional

from ..errors import UnsatisfiableConfigurationError
from ..models.family_units import FamilyUnit, validate_family_units
from .validation import validate

logger = logging.getLogger(__name__)


def generate(
    family_units: Iterable[Iterable[Hashable]],
    rng: Optional[random.Random] = None,
    verify_progress: bool = False,
) -> Dict[Hashable, Hashable]:
    """
    Pool-based random draw, one family unit at a time.
    Constraints:
      - Nobody gifts themself or anyone in their own family unit.
      - Everybody receives exactly one gift.
    Returns mapping giver -> receiver; raises a GiftExchangeError otherwise.

    A unit's receiver pool is built once: everyone outside the unit who is not
    yet receiving. A unit can use up its pool before its last member has drawn;
    that member is then served by rotating with an earlier pair.
    """
    units = validate_family_units(family_units)
    if rng is None:
        rng = random.Random()

    universe = [m for unit in units for m in unit]
    assignment: Dict[Hashable, Hashable] = {}
    for unit in units:
        claimed = set(assignment.values())
        pool = [m for m in universe if m not in claimed and m not in unit]
        logger.debug("Unit of %d members draws from a pool of %d", len(unit), len(pool))
        for giver in unit:
            if pool:
                assignment[giver] = pool.pop(rng.randrange(len(pool)))
            else:
                _swap_with_prior_giver(giver, unit, assignment, universe, rng)
        if verify_progress:
            validate(assignment, units, complete=False)

    validate(assignment, units)
    logger.info("Drew %d gift pairs across %d family units", len(assignment), len(units))
    return assignment


def _swap_with_prior_giver(
    giver: Hashable,
    unit: FamilyUnit,
    assignment: Dict[Hashable, Hashable],
    universe: List[Hashable],
    rng: random.Random,
) -> None:
    # Only pairs entirely outside the unit can hand their receiver over.
    eligible = [g for g, r in assignment.items() if g not in unit and r not in unit]
    if not eligible:
        raise UnsatisfiableConfigurationError(giver, unit)
    prior_giver = eligible[rng.randrange(len(eligible))]
    prior_receiver = assignment[prior_giver]

    # Unit pool is exhausted, so whoever is left unclaimed belongs to this unit.
    claimed = set(assignment.values())
    remaining = [m for m in universe if m not in claimed]
    replacement = remaining[rng.randrange(len(remaining))]

    assignment[prior_giver] = replacement
    assignment[giver] = prior_receiver
    logger.debug(
        "Rotated %r: %r now gifts %r, %r takes over %r",
        giver, prior_giver, replacement, giver, prior_receiver,
    )
