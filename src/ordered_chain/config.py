"""Configuration for OrderedChain rendering.

Defines the tokens used when a chain is converted to text.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderStyle:
    """Formatting parameters for OrderedChain.render().

    Attributes:
        separator: Text written after every value, including the last one
        sentinel: Terminal token marking the end of the chain
    """

    separator: str = " -> "
    sentinel: str = "None"


DEFAULT_STYLE = RenderStyle()
