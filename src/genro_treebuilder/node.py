# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Element and text nodes produced by a TreeBuilder session.

Nodes serialize to a compact XML form: no whitespace between siblings,
single-quoted attribute values, and self-closing empty elements::

    >>> ul = Element('ul')
    >>> ul.child('li').append(Text('one'))
    >>> str(ul)
    '<ul><li>one</li></ul>'
"""

from __future__ import annotations

from typing import Any, Iterator, Union
from xml.sax.saxutils import escape

_ATTR_ENTITIES = {"'": "&apos;"}


def attr_text(value: Any) -> str | None:
    """Return the textual form of an attribute value.

    None stays None (presence-only attribute). Booleans are rendered
    lowercase, everything else through str().
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


class Text:
    """A literal text child."""

    __slots__ = ('value', 'parent')

    def __init__(self, value: Any) -> None:
        text = attr_text(value)
        self.value = '' if text is None else text
        self.parent: Element | None = None

    def __repr__(self) -> str:
        return f"Text({self.value!r})"

    def to_xml(self) -> str:
        return escape(self.value)

    __str__ = to_xml


class Element:
    """A named node with ordered attributes and ordered children.

    Each element has:
    - name: The element's tag name
    - attrs: List of (name, value) pairs in declaration order; a None
      value is a presence-only attribute
    - children: Element and Text children in insertion order
    - parent: The element this one is attached to, if any

    Example:
        >>> div = Element('div')
        >>> div.set_attr('id', 'main')
        >>> div.set_attr('hidden')
        >>> str(div)
        "<div id='main' hidden/>"
    """

    __slots__ = ('name', 'attrs', 'children', 'parent')

    def __init__(self, name: str, parent: Element | None = None) -> None:
        """Initialize an Element.

        Args:
            name: The element's tag name.
            parent: The element containing this one.
        """
        self.name = name
        self.attrs: list[tuple[str, str | None]] = []
        self.children: list[Node] = []
        self.parent = parent

    def __repr__(self) -> str:
        return f"Element({self.name!r}, attrs={len(self.attrs)}, children={len(self.children)})"

    def __len__(self) -> int:
        """Return the number of direct children."""
        return len(self.children)

    def __iter__(self) -> Iterator[Node]:
        """Iterate over direct children in insertion order."""
        return iter(self.children)

    # ==================== Attributes ====================

    def set_attr(self, name: str, value: Any = None) -> None:
        """Set an attribute, replacing an existing one in place.

        Args:
            name: Attribute name.
            value: Attribute value. None makes a presence-only attribute.
        """
        text = attr_text(value)
        for i, (key, _) in enumerate(self.attrs):
            if key == name:
                self.attrs[i] = (name, text)
                return
        self.attrs.append((name, text))

    def add_attr(self, name: str, value: Any = None) -> None:
        """Append an attribute even if one with the same name exists."""
        self.attrs.append((name, attr_text(value)))

    def get_attr(self, name: str, default: Any = None) -> Any:
        """Get the last value set for an attribute.

        Args:
            name: Attribute name.
            default: Returned if the attribute is absent.

        Returns:
            The attribute value (None for presence-only), or default.
        """
        found = default
        for key, value in self.attrs:
            if key == name:
                found = value
        return found

    def has_attr(self, name: str) -> bool:
        """True if the attribute is present, with or without a value."""
        return any(key == name for key, _ in self.attrs)

    @property
    def classes(self) -> list[str]:
        """Class names of this element, in order."""
        value = self.get_attr('class')
        return value.split() if value else []

    def add_class(self, class_name: str) -> None:
        """Add the class names in ``class_name`` the element does not have yet."""
        classes = self.classes
        added = False
        for token in class_name.split():
            if token not in classes:
                classes.append(token)
                added = True
        if added:
            self.set_attr('class', ' '.join(classes))

    # ==================== Children ====================

    def append(self, node: Node) -> Node:
        """Attach a node as the last child and return it."""
        node.parent = self
        self.children.append(node)
        return node

    def child(self, name: str) -> Element:
        """Create a child element, append it and return it."""
        element = Element(name)
        self.append(element)
        return element

    # ==================== Serialization ====================

    def to_xml(self) -> str:
        """Serialize this element and its subtree."""
        parts = [f"<{self.name}"]
        for key, value in self.attrs:
            if value is None:
                parts.append(f" {key}")
            else:
                parts.append(f" {key}='{escape(value, _ATTR_ENTITIES)}'")
        if not self.children:
            parts.append('/>')
            return ''.join(parts)
        parts.append('>')
        parts.extend(child.to_xml() for child in self.children)
        parts.append(f"</{self.name}>")
        return ''.join(parts)

    __str__ = to_xml


Node = Union[Element, Text]


class Root:
    """Top-level nodes of one builder session, in declaration order.

    The root only grows: nodes are appended, never reordered or removed.
    """

    __slots__ = ('_nodes',)

    def __init__(self) -> None:
        self._nodes: list[Node] = []

    def __repr__(self) -> str:
        return f"Root({[getattr(n, 'name', n) for n in self._nodes]})"

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __getitem__(self, index: int) -> Node:
        return self._nodes[index]

    def append(self, node: Node) -> Node:
        """Add a top-level node."""
        node.parent = None
        self._nodes.append(node)
        return node

    def to_xml(self) -> str:
        """Serialize all top-level nodes, concatenated."""
        return ''.join(node.to_xml() for node in self._nodes)

    __str__ = to_xml


def create_element(name: str, identifier: str | None = None, context: Element | None = None) -> Element:
    """Default node factory.

    Args:
        name: Tag name.
        identifier: Optional identifier, stored as the ``id`` attribute.
        context: The element the new node will be attached to, or None
            at top level. Unused by the default factory.

    Returns:
        A new detached Element.
    """
    element = Element(name)
    if identifier:
        element.set_attr('id', identifier)
    return element
