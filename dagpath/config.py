"""Configuration for the longest-path engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class TraversalMode(IntEnum):
    """Depth-first traversal mechanism used by ``PathEngine``.

    Both modes honor the same contract; they differ only in how the descent
    is driven.
    """

    #: Plain recursion; depth is bounded by the interpreter recursion limit.
    RECURSIVE = 1
    #: Explicit stack of frames; depth is bounded only by memory.
    ITERATIVE = 2

    @classmethod
    def from_string(cls, value: str) -> "TraversalMode":
        """Parse a case-insensitive mode name.

        Args:
            value: Mode name such as ``"recursive"`` or ``"ITERATIVE"``.

        Returns:
            The matching TraversalMode member.

        Raises:
            ValueError: If the name does not match any member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(m.name.lower() for m in cls)
            raise ValueError(
                f"Invalid traversal mode '{value}'. Valid values are: {valid}"
            ) from None


@dataclass
class EngineConfig:
    """Configuration for ``PathEngine`` traversal."""

    # Traversal mechanism
    mode: TraversalMode = TraversalMode.RECURSIVE

    # Minimum interpreter recursion limit for recursive traversal (None keeps the
    # interpreter default)
    recursion_limit: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.mode, str):
            self.mode = TraversalMode.from_string(self.mode)
        if self.recursion_limit is not None and self.recursion_limit <= 0:
            raise ValueError(
                f"recursion_limit must be positive, got {self.recursion_limit}"
            )


# Global configuration instance
DEFAULT_CONFIG = EngineConfig()
