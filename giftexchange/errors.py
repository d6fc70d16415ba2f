from typing import Any, Hashable, Optional


class GiftExchangeError(Exception):
    """Base class for everything the gift exchange raises on purpose."""


# ---- Input (family-unit partition) errors ----

class InvalidFamilyUnitsError(GiftExchangeError, ValueError):
    pass


class TooFewUnitsError(InvalidFamilyUnitsError):
    def __init__(self, count: int):
        super().__init__(f"Need at least 2 family units to generate a gift exchange, got {count}.")
        self.count = count


class InvalidUnitError(InvalidFamilyUnitsError):
    def __init__(self, unit: Any, reason: str = "missing"):
        super().__init__(f"Invalid family unit ({reason}): {unit!r}")
        self.unit = unit


class InvalidMemberIdError(InvalidFamilyUnitsError):
    def __init__(self, unit: Any):
        super().__init__(f"Family unit contains a missing member id: {unit!r}")
        self.unit = unit


class DuplicateMemberAcrossUnitsError(InvalidFamilyUnitsError):
    def __init__(self, member: Hashable):
        super().__init__(f"Member {member!r} appears in more than one family unit.")
        self.member = member


class UnitTooLargeError(InvalidFamilyUnitsError):
    def __init__(self, unit: Any, total: int):
        super().__init__(
            f"Family unit of size {len(unit)} is more than half of all {total} members; "
            "its members cannot all get an outside receiver."
        )
        self.unit = unit
        self.total = total


# ---- Mapping (postcondition) errors ----

class InvalidAssignmentError(GiftExchangeError):
    def __init__(self, message: str, giver: Optional[Hashable] = None, receiver: Optional[Hashable] = None):
        super().__init__(message)
        self.giver = giver
        self.receiver = receiver


class NullGiverOrReceiverError(InvalidAssignmentError):
    pass


class SelfGiftError(InvalidAssignmentError):
    pass


class DuplicateReceiverError(InvalidAssignmentError):
    pass


class IntraUnitGiftError(InvalidAssignmentError):
    pass


class IncompleteMappingError(InvalidAssignmentError):
    pass


# ---- Internal ----

class UnsatisfiableConfigurationError(GiftExchangeError, RuntimeError):
    """No prior giver could be rotated to free a receiver. Should not happen on validated input."""

    def __init__(self, giver: Hashable, unit: Any):
        super().__init__(f"No eligible prior giver to swap with for {giver!r} in unit {sorted(unit, key=repr)!r}.")
        self.giver = giver
        self.unit = unit
