"""
Exception hierarchy for the battle engine.

Every command either applies fully or raises one of these with the battle state
left untouched:

- SetupError: player registration, roster validation and team selection
- InvalidActionError: illegal move/switch commands, resubmit a different one
- InvariantError: sequencing or data bugs in a collaborator, not retryable

Usage:
    try:
        battle.move(1, 1, 3, 1)
    except InvalidActionError as e:
        logger.warning(f"Rejected: {e}")
"""

from typing import Any, Optional


class BattleError(Exception):
    """Base exception for all battle engine errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class SetupError(BattleError):
    """Raised for wrong player count, bad rosters and malformed team selections."""


class InvalidActionError(BattleError):
    """Raised when a move or switch command fails validation."""


class InvariantError(BattleError):
    """Raised when the engine is driven into a state a correct system never reaches."""
