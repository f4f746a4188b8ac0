# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Followers - deferred work applied to a freshly created node.

A follower is any callable taking the new node. TreeBuilder.child()
accepts four argument kinds, told apart by classify():

- followers (Attribute, text(), embed(), plain callables, ...)
- nested blocks, made with nested() or the iteration combinators
- follower sequences (Followers, lists, generators and other non-string
  iterables), applied in order
- None, silently omitted

Example:
    >>> tree.child('input', attr('type', 'checkbox'), when(checked, attr('checked')))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable as IterableABC
from enum import Enum
from typing import Any, Callable, Iterable, Union

from .exceptions import UnsupportedArgumentError
from .node import Element, Node, Text


class Follower:
    """Base class for the package's own followers."""

    __slots__ = ()

    def __call__(self, node: Element) -> None:
        raise NotImplementedError


class Attribute(Follower):
    """Set attribute ``name`` on the node.

    The name is checked when the follower is applied: None or a name whose
    string form is empty leaves the node untouched.
    """

    __slots__ = ('name', 'value')

    def __init__(self, name: Any, value: Any = None) -> None:
        self.name = name
        self.value = value

    def __repr__(self) -> str:
        return f"Attribute({self.name!r}, {self.value!r})"

    def __call__(self, node: Element) -> None:
        if self.name is None:
            return
        name = str(self.name)
        if name:
            node.set_attr(name, self.value)


def attr(name: Any, value: Any = None) -> Attribute:
    """Create an attribute follower.

    Args:
        name: Attribute name. None or empty means no attribute.
        value: Attribute value. None gives a presence-only attribute,
            '' an explicit empty value.

    Example:
        >>> tree.child('input', attr('checked'))        # <input checked/>
        >>> tree.child('div', attr('id', ''))           # <div id=''/>
    """
    return Attribute(name, value)


class _AppendText(Follower):
    __slots__ = ('value',)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __call__(self, node: Element) -> None:
        if self.value is not None:
            node.append(Text(self.value))


def text(value: Any) -> Follower:
    """Append a text child. None appends nothing."""
    return _AppendText(value)


class _Embed(Follower):
    __slots__ = ('child',)

    def __init__(self, child: Node | None) -> None:
        self.child = child

    def __call__(self, node: Element) -> None:
        if self.child is not None:
            node.append(self.child)


def embed(child: Node | None) -> Follower:
    """Append a pre-built node. None appends nothing."""
    return _Embed(child)


class _Code(Follower):
    __slots__ = ('value',)

    def __init__(self, value: Any) -> None:
        self.value = value

    def __call__(self, node: Element) -> None:
        if self.value is not None:
            node.child('code').append(Text(self.value))


def code(value: Any) -> Follower:
    """Append a ``<code>`` child holding ``value`` as text. None appends nothing."""
    return _Code(value)


class _Skip(Follower):
    __slots__ = ()

    def __repr__(self) -> str:
        return 'SKIP'

    def __call__(self, node: Element) -> None:
        pass


SKIP = _Skip()


class Nested:
    """A zero-argument block run with its node on top of the context stack."""

    __slots__ = ('block',)

    def __init__(self, block: Callable[[], Any]) -> None:
        self.block = block

    def __repr__(self) -> str:
        return f"Nested({self.block!r})"

    def __call__(self) -> None:
        self.block()


def nested(block: Callable[[], Any]) -> Nested:
    """Mark a zero-argument callable as a nested-declaration block.

    Example:
        >>> def items():
        ...     tree.child('li')
        >>> tree.child('ul', nested(items))
    """
    return Nested(block)


class Followers(tuple):
    """An ordered sequence of followers, applied one after the other."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"Followers({list(self)!r})"


class ClassNameProvider(ABC):
    """Capability of followers that contribute class names to a node.

    The merge policy adds each name from class_names() to the node's
    ``class`` attribute instead of calling the object.
    """

    @abstractmethod
    def class_names(self) -> Iterable[str]:
        """Return the class names to add."""


def merge_follower(follower: Any, node: Element) -> None:
    """Default merge policy: apply one follower to ``node``."""
    if isinstance(follower, ClassNameProvider):
        for class_name in follower.class_names():
            node.add_class(class_name)
    else:
        follower(node)


# ==================== Argument dispatch ====================


class ArgumentKind(Enum):
    FOLLOWER = 'follower'
    NESTED = 'nested'
    SEQUENCE = 'sequence'
    OMITTED = 'omitted'


def classify(argument: Any) -> ArgumentKind:
    """Tell which kind of child() argument ``argument`` is.

    Raises:
        UnsupportedArgumentError: If it is none of the supported kinds.
    """
    if argument is None:
        return ArgumentKind.OMITTED
    if isinstance(argument, Nested):
        return ArgumentKind.NESTED
    if isinstance(argument, ClassNameProvider) or callable(argument):
        return ArgumentKind.FOLLOWER
    if isinstance(argument, IterableABC) and not isinstance(argument, (str, bytes, Element, Text)):
        return ArgumentKind.SEQUENCE
    raise UnsupportedArgumentError(
        f"Unsupported child argument of type {type(argument).__name__}: {argument!r}"
    )


# ==================== Conditionals ====================


Condition = Union[bool, Callable[[], Any], None]


def resolve_condition(condition: Condition) -> bool:
    """Resolve a condition source to a boolean.

    None, and a callable returning None, count as false.
    """
    if condition is None:
        return False
    if callable(condition):
        condition = condition()
        if condition is None:
            return False
    return bool(condition)


def when(condition: Condition, follower: Any) -> Any:
    """Include ``follower`` only if ``condition`` holds.

    The condition is resolved immediately, before any node exists.

    Args:
        condition: A bool, a zero-argument callable, or None.
        follower: Any child() argument.

    Returns:
        ``follower`` itself when the condition is true, otherwise SKIP.
    """
    return follower if resolve_condition(condition) else SKIP


def either(condition: Condition, when_true: Any, when_false: Any) -> Any:
    """Pick one of two child() arguments by ``condition``."""
    return when_true if resolve_condition(condition) else when_false
