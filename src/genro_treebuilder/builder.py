# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeBuilder - one session of declarative tree construction."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from .exceptions import MissingDeclarationError, UnbalancedScopeError
from .followers import ArgumentKind, classify, embed, merge_follower
from .node import Element, Node, Root, create_element

if TYPE_CHECKING:
    from .builders.base import Declaration

logger = logging.getLogger(__name__)

NodeFactory = Callable[[str, 'str | None', 'Element | None'], Element]
MergePolicy = Callable[[Any, Element], None]


class NodeScope:
    """Context manager that keeps a node on top of the context stack.

    Returned by TreeBuilder.child():

        >>> with tree.child('ul'):
        ...     tree.child('li')
    """

    __slots__ = ('tree', 'node', 'depth')

    def __init__(self, tree: TreeBuilder, node: Element) -> None:
        self.tree = tree
        self.node = node
        self.depth = tree.depth

    def __repr__(self) -> str:
        return f"NodeScope({self.node.name!r})"

    def __enter__(self) -> Element:
        self.depth = self.tree.depth
        self.tree._push(self.node)
        return self.node

    def __exit__(self, exc_type: Any, *exc_info: Any) -> None:
        if exc_type is not None:
            self.tree._unwind(self.depth)
        else:
            self.tree._pop(self.node)


class TreeBuilder:
    """Builds a tree of elements from child() calls.

    The builder keeps a context stack of in-progress elements; its top is
    where child() attaches new nodes. With an empty stack nodes go to
    ``root``. Each builder is one session and owns its stack.

    Example:
        >>> tree = TreeBuilder()
        >>> tree.child('ol', repeat(2, lambda i: tree.child('li', text(i))))
        >>> str(tree.root)
        '<ol><li>0</li><li>1</li></ol>'

    Attributes:
        node_factory: Callable ``(name, identifier, context) -> Element``.
        merge_policy: Callable ``(follower, node)`` applying one follower.
        root: Top-level nodes built so far.
    """

    node_factory: NodeFactory = staticmethod(create_element)
    merge_policy: MergePolicy = staticmethod(merge_follower)

    def __init__(
        self,
        node_factory: NodeFactory | None = None,
        merge_policy: MergePolicy | None = None,
    ) -> None:
        """Initialize a TreeBuilder session.

        Args:
            node_factory: Overrides the class-level node factory.
            merge_policy: Overrides the class-level merge policy.
        """
        if node_factory is not None:
            self.node_factory = node_factory
        if merge_policy is not None:
            self.merge_policy = merge_policy
        self.root = Root()
        self._stack: list[Element] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(roots={len(self.root)}, depth={self.depth})"

    @property
    def current(self) -> Element | None:
        """The current attachment point, or None at top level."""
        return self._stack[-1] if self._stack else None

    @property
    def depth(self) -> int:
        """Current depth of the context stack."""
        return len(self._stack)

    # ==================== Context stack ====================

    def _push(self, node: Element) -> None:
        self._stack.append(node)

    def _pop(self, node: Element) -> None:
        if not self._stack or self._stack[-1] is not node:
            raise UnbalancedScopeError(
                f"Cannot close '{node.name}': it is not the current node"
            )
        self._stack.pop()

    def _unwind(self, depth: int) -> None:
        """Drop every node pushed above ``depth``."""
        del self._stack[depth:]

    def _run_nested(self, node: Element, block: Callable[[], Any]) -> None:
        depth = self.depth
        self._push(node)
        try:
            block()
        except BaseException:
            self._unwind(depth)
            raise
        self._pop(node)

    # ==================== Emission ====================

    @staticmethod
    def split_name(name: str) -> tuple[str, str | None]:
        """Split ``'tag#identifier'`` into its tag and identifier."""
        tag, _, identifier = name.partition('#')
        return tag, identifier or None

    def append(self, node: Node) -> Node:
        """Attach a pre-built node at the current attachment point."""
        parent = self.current
        if parent is None:
            return self.root.append(node)
        return parent.append(node)

    def child(self, name: str, *args: Any) -> NodeScope:
        """Create a node, attach it and apply its arguments.

        Followers and follower sequences are applied first, in argument
        order. Nested blocks then run in argument order with the new node
        on top of the context stack.

        Args:
            name: Tag name, optionally with a ``#identifier`` suffix.
            *args: Followers, nested blocks, follower sequences (any
                iterable other than a string) or None.

        Returns:
            A NodeScope for ``with``-style nesting.

        Raises:
            UnsupportedArgumentError: If an argument has an unsupported kind.
        """
        tag, identifier = self.split_name(name)
        node = self.node_factory(tag, identifier, self.current)
        self.append(node)

        blocks = []
        pending = list(args)
        pending.reverse()
        while pending:
            argument = pending.pop()
            kind = classify(argument)
            if kind is ArgumentKind.FOLLOWER:
                self.merge_policy(argument, node)
            elif kind is ArgumentKind.SEQUENCE:
                pending.extend(reversed(tuple(argument)))
            elif kind is ArgumentKind.NESTED:
                blocks.append(argument)

        for block in blocks:
            self._run_nested(node, block)

        return NodeScope(self, node)

    # ==================== Sessions ====================

    def spawn(self) -> TreeBuilder:
        """Create a fresh session with the same class and configuration."""
        return type(self)(self.node_factory, self.merge_policy)

    def run(self, declaration: Declaration | Callable[[TreeBuilder], Any]) -> Root:
        """Run a declaration in this session and return the root.

        Args:
            declaration: A Declaration, or a callable taking the builder.

        Raises:
            MissingDeclarationError: If declaration is None.
            UnbalancedScopeError: If the declaration left nodes open.
        """
        if declaration is None:
            raise MissingDeclarationError("Cannot build from a None declaration")
        logger.debug("Building %r", declaration)
        declare = getattr(declaration, 'declare', declaration)
        declare(self)
        if self._stack:
            raise UnbalancedScopeError(
                f"Declaration left {len(self._stack)} node(s) open"
            )
        logger.debug("Built %d root node(s) from %r", len(self.root), declaration)
        return self.root

    def include(self, declaration: Declaration | Callable[[TreeBuilder], Any]) -> None:
        """Embed another declaration at the current attachment point.

        The declaration runs to completion in its own session; its root
        nodes are then added here, in order.

        Raises:
            MissingDeclarationError: If declaration is None.
        """
        if declaration is None:
            raise MissingDeclarationError("Cannot include a None declaration")
        tree_class = getattr(declaration, 'tree_class', None)
        if tree_class is None or isinstance(self, tree_class):
            session = self.spawn()
        else:
            session = tree_class(self.node_factory, self.merge_policy)
        roots = list(session.run(declaration))
        logger.debug("Including %d node(s) from %r", len(roots), declaration)

        parent = self.current
        for node in roots:
            if parent is None:
                self.root.append(node)
            else:
                embed(node)(parent)
