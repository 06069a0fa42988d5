"""
A singly-linked ordered chain of individually allocated nodes.

Time Complexity:
Push/Pop (head): O(1)
Insert at index: O(index)
Iterate/Render/Length: O(n)
"""

from __future__ import annotations  # allows forward-referencing without quotes

import logging
from collections.abc import Sequence
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from .config import DEFAULT_STYLE, RenderStyle
from .errors import OutOfBoundsError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Node(Generic[T]):
    """
    A node is a container which holds a value of type T
    and the only reference to the next node in the chain.
    """

    __slots__ = ("value", "next")

    def __init__(self, value: T, next: Optional[Node[T]] = None) -> None:
        self.value: T = value
        self.next: Optional[Node[T]] = next

    def __repr__(self) -> str:
        return f"Node(value={self.value!r}, next={getattr(self.next, 'value', None)!r})"


class OrderedChain(Generic[T]):
    """
    OrderedChain implements a singly-linked list, using the Node
    container with value type, T.

    Only the head is stored: there is no tail reference and no
    element count. Every node is referenced by exactly one slot,
    either the chain's head or its predecessor's next.

    It implements push, pop, insert, iteration and rendering.
    """

    def __init__(self, style: RenderStyle = DEFAULT_STYLE) -> None:
        self._head: Optional[Node[T]] = None
        self._style = style

    @classmethod
    def from_sequence(
        cls, values: Iterable[T], style: RenderStyle = DEFAULT_STYLE
    ) -> OrderedChain[T]:
        """
        Builds a chain whose order matches the order of values.
        Elements are pushed in reverse so the first value ends up
        at the head.
        """
        items = values if isinstance(values, Sequence) else list(values)
        chain = cls(style=style)
        for value in reversed(items):
            chain.push(value)
        logger.debug(f"Built chain of {len(items)} nodes from sequence")
        return chain

    @property
    def style(self) -> RenderStyle:
        return self._style

    def push(self, value: T) -> None:
        """
        Inserts a new element at the head of the chain.
        O(1) since no scanning is involved.
        """
        self._head = Node(value, next=self._head)

    def pop(self) -> Optional[T]:
        """
        Removes the head node and returns its value.
        Returns None if the chain is empty.
        """
        node = self._head
        if node is None:
            return None
        self._head = node.next
        return node.value

    def insert(self, index: int, value: T) -> None:
        """
        Inserts an element so that exactly `index` elements precede it.

        Inserting at index 0 is a push, and inserting at the current
        length appends after the last node. Any other index without a
        predecessor raises OutOfBoundsError and leaves the chain as it was.
        O(index), since the predecessor has to be found by walking.
        """
        if index == 0:
            self.push(value)
            return

        if index < 0:
            logger.warning(f"Rejected insert at negative index {index}")
            raise OutOfBoundsError(index, len(self))

        # Walk to the node at position index - 1
        prior = self._head
        position = 0
        while prior is not None and position < index - 1:
            prior = prior.next
            position += 1

        if prior is None:
            logger.warning(f"Rejected insert at index {index}, chain has {position} nodes")
            raise OutOfBoundsError(index, position)

        prior.next = Node(value, next=prior.next)
        logger.debug(f"Spliced node at index {index}")

    def iter(self) -> Iterator[T]:
        """
        Returns a fresh forward iterator over the values, head first.
        The chain itself is never modified by iterating.
        """
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __iter__(self) -> Iterator[T]:
        return self.iter()

    def render(self) -> str:
        """Returns the chain as "v1 -> v2 -> ... -> None"."""
        separator = self._style.separator
        parts: List[str] = []
        current = self._head
        while current is not None:
            parts.append(str(current.value))
            parts.append(separator)
            current = current.next
        parts.append(self._style.sentinel)
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        values = ", ".join(repr(v) for v in self)
        return f"OrderedChain([{values}])"

    def __len__(self) -> int:
        """Returns the number of nodes, counted by traversal."""
        length = 0
        current = self._head
        while current is not None:
            length += 1
            current = current.next
        return length

    def __bool__(self) -> bool:
        return self._head is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedChain):
            return NotImplemented
        left, right = self._head, other._head
        while left is not None and right is not None:
            if left.value != right.value:
                return False
            left, right = left.next, right.next
        return left is None and right is None

    __hash__ = None  # type: ignore[assignment]

    def is_empty(self) -> bool:
        return self._head is None

    def to_list(self) -> List[T]:
        return list(self.iter())
