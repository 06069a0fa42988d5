"""OrderedChain - a singly-linked ordered container in Python."""

from .chain import Node, OrderedChain
from .config import DEFAULT_STYLE, RenderStyle
from .errors import ChainError, OutOfBoundsError

__all__ = [
    "Node",
    "OrderedChain",
    "RenderStyle",
    "DEFAULT_STYLE",
    "ChainError",
    "OutOfBoundsError",
]
