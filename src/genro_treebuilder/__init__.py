# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-TreeBuilder - Declarative construction of ordered node trees.

A lightweight, zero-dependency library: declaration code emits nodes with
TreeBuilder.child() and the builder assembles them into a tree of
elements, following the nesting of the declaration.
"""

__version__ = "0.1.0"

from .builder import NodeScope, TreeBuilder
from .builders import Declaration, build
from .exceptions import (
    MissingDeclarationError,
    TreeBuilderError,
    UnbalancedScopeError,
    UnsupportedArgumentError,
)
from .followers import (
    SKIP,
    Attribute,
    ClassNameProvider,
    Follower,
    Followers,
    Nested,
    attr,
    code,
    either,
    embed,
    merge_follower,
    nested,
    text,
    when,
)
from .iteration import (
    each,
    each_indexed,
    iter_items,
    map_followers,
    map_followers_indexed,
    repeat,
)
from .node import Element, Root, Text, create_element

__all__ = [
    # Core classes
    "TreeBuilder",
    "NodeScope",
    "Declaration",
    "build",
    # Nodes
    "Element",
    "Text",
    "Root",
    "create_element",
    # Followers
    "Follower",
    "Followers",
    "Attribute",
    "Nested",
    "ClassNameProvider",
    "SKIP",
    "attr",
    "text",
    "embed",
    "code",
    "nested",
    "merge_follower",
    # Combinators
    "when",
    "either",
    "each",
    "each_indexed",
    "repeat",
    "map_followers",
    "map_followers_indexed",
    "iter_items",
    # Exceptions
    "TreeBuilderError",
    "MissingDeclarationError",
    "UnsupportedArgumentError",
    "UnbalancedScopeError",
]
