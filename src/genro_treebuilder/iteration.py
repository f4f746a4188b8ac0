# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Iteration combinators.

Every combinator reads its whole source when it is called, then either
returns a Nested block that runs the per-item block under the current
node, or a Followers sequence built from the items.

Example:
    >>> tree.child('ol', each(['A', 'B'], lambda item: tree.child('li', text(item))))
    >>> str(tree.root)
    '<ol><li>A</li><li>B</li></ol>'
"""

from __future__ import annotations

from typing import Any, Callable

from .followers import Followers, Nested


def iter_items(source: Any) -> tuple[Any, ...]:
    """Materialize an iteration source.

    Args:
        source: One of:
            - int n: 0 .. n-1
            - range, list, tuple or any other iterable: its items in order
            - Enum class: its members in declaration order
            - None: no items

    Returns:
        Tuple of items.
    """
    if source is None:
        return ()
    if isinstance(source, int) and not isinstance(source, bool):
        return tuple(range(source))
    return tuple(source)


def each(source: Any, block: Callable[[Any], Any]) -> Nested:
    """Run ``block(item)`` once per item, under the current node."""
    items = iter_items(source)

    def run() -> None:
        for item in items:
            block(item)

    return Nested(run)


def each_indexed(source: Any, block: Callable[[int, Any], Any]) -> Nested:
    """Run ``block(index, item)`` once per item, under the current node."""
    items = iter_items(source)

    def run() -> None:
        for index, item in enumerate(items):
            block(index, item)

    return Nested(run)


def repeat(*args: Any) -> Nested:
    """Run a block over an integer range.

    ``repeat(count, block)`` runs ``block`` for 0 .. count-1 and
    ``repeat(start, end, block)`` for start .. end-1.

    Raises:
        TypeError: If no bounds are given.
    """
    if len(args) < 2:
        raise TypeError("repeat() expects (count, block) or (start, end, block)")
    *bounds, block = args
    return each(range(*bounds), block)


def map_followers(source: Any, factory: Callable[[Any], Any]) -> Followers:
    """Turn each item into a follower with ``factory(item)``.

    The result can be passed straight to child(), giving one follower
    per item without a nested block.
    """
    return Followers(factory(item) for item in iter_items(source))


def map_followers_indexed(source: Any, factory: Callable[[int, Any], Any]) -> Followers:
    """Like map_followers(), calling ``factory(index, item)``."""
    return Followers(factory(index, item) for index, item in enumerate(iter_items(source)))
