"""Exception hierarchy for OrderedChain.

Defines all custom exceptions raised by the container.
"""

from __future__ import annotations


class ChainError(Exception):
    """Base exception for all OrderedChain errors."""
    pass


class OutOfBoundsError(ChainError, IndexError):
    """Raised when an indexed insert has no predecessor node in the chain.

    Attributes:
        index: The position that was requested
        length: Number of nodes walked before the chain ran out
    """

    def __init__(self, index: int, length: int) -> None:
        self.index = index
        self.length = length
        super().__init__(
            f"insert index {index} out of bounds for chain of length {length}"
        )
