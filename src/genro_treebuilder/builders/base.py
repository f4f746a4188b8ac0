# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Declaration - Abstract base class for tree declarations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from ..builder import TreeBuilder
from ..exceptions import MissingDeclarationError
from ..node import Root


class Declaration(ABC):
    """Abstract base class for reusable tree declarations.

    Subclasses implement declare(), which receives the TreeBuilder of the
    current session and emits nodes with it:

        >>> class Menu(Declaration):
        ...     def __init__(self, entries):
        ...         self.entries = entries
        ...
        ...     def declare(self, tree):
        ...         tree.child('ul', each(self.entries, lambda e: tree.child('li', text(e))))
        ...
        >>> Menu(['a', 'b']).render()
        '<ul><li>a</li><li>b</li></ul>'

    A declaration can be built any number of times; every build() runs
    a new session with a new root.

    Attributes:
        tree_class: The TreeBuilder subclass used by build().
    """

    tree_class: type[TreeBuilder] = TreeBuilder

    @abstractmethod
    def declare(self, tree: TreeBuilder) -> None:
        """Emit this declaration's nodes with ``tree``."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def build(self, **options: Any) -> Root:
        """Build a new root from this declaration.

        Args:
            **options: Passed to the tree_class constructor
                (node_factory, merge_policy).
        """
        return self.tree_class(**options).run(self)

    def render(self, **options: Any) -> str:
        """Build and serialize this declaration."""
        return self.build(**options).to_xml()

    def __str__(self) -> str:
        return self.render()


def build(
    declaration: Declaration | Callable[[TreeBuilder], Any],
    tree_class: type[TreeBuilder] | None = None,
    **options: Any,
) -> Root:
    """Build a root from a Declaration or a callable taking the builder.

    Args:
        declaration: What to build.
        tree_class: Builder class. Defaults to the declaration's tree_class,
            or TreeBuilder for plain callables.
        **options: Passed to the builder constructor.

    Raises:
        MissingDeclarationError: If declaration is None.

    Example:
        >>> str(build(lambda tree: tree.child('div', attr('id', 'x'))))
        "<div id='x'/>"
    """
    if declaration is None:
        raise MissingDeclarationError("Cannot build from a None declaration")
    if tree_class is None:
        tree_class = getattr(declaration, 'tree_class', TreeBuilder)
    return tree_class(**options).run(declaration)
