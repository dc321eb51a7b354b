"""Refinement failure taxonomy.

These are raised by the controller's validation steps and converted into an
``Outcome`` at its public boundary; they never reach the host.
"""
from .models import OutcomeKind


class RefinementError(Exception):
    """Base class for a refused refinement."""

    kind: OutcomeKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ActorNotFound(RefinementError):
    kind = OutcomeKind.ACTOR_NOT_FOUND


class SlotEmpty(RefinementError):
    kind = OutcomeKind.SLOT_EMPTY


class MaterialNotFound(RefinementError):
    kind = OutcomeKind.MATERIAL_NOT_FOUND


class RankMismatch(RefinementError):
    kind = OutcomeKind.RANK_MISMATCH


class MaxLevelReached(RefinementError):
    kind = OutcomeKind.MAX_LEVEL_REACHED


class NoMaterialAvailable(RefinementError):
    kind = OutcomeKind.NO_MATERIAL_AVAILABLE


__all__ = [
    "RefinementError",
    "ActorNotFound",
    "SlotEmpty",
    "MaterialNotFound",
    "RankMismatch",
    "MaxLevelReached",
    "NoMaterialAvailable",
]
