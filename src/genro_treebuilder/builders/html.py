# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""HTML vocabulary on top of the generic TreeBuilder.

This module provides attribute shorthands, a Style follower carrying
class names, and HtmlTree, a builder with helpers for the usual
``<link>`` and ``<script>`` tags.

Example:
    Declaring a page::

        from genro_treebuilder import each, text
        from genro_treebuilder.builders import HtmlDeclaration, Style, charset, href

        class Page(HtmlDeclaration):
            def __init__(self, links):
                self.links = links

            def declare(self, tree):
                with tree.child('html'):
                    with tree.child('head'):
                        tree.child('meta', charset('utf-8'))
                        tree.stylesheet('/site.css')
                    tree.child('body', Style('page'), each(
                        self.links, lambda url: tree.child('a', href(url), text(url))
                    ))

        Page(['/a', '/b']).render()
"""

from __future__ import annotations

from typing import Any, Iterable

from ..builder import TreeBuilder
from ..followers import Attribute, ClassNameProvider, attr
from .base import Declaration


# ==================== Attribute shorthands ====================


def charset(encoding: Any) -> Attribute:
    return attr('charset', encoding)


def name(value: Any) -> Attribute:
    return attr('name', value)


def content(value: Any) -> Attribute:
    return attr('content', value)


def rel(value: Any) -> Attribute:
    return attr('rel', value)


def href(value: Any) -> Attribute:
    return attr('href', value)


def src(value: Any) -> Attribute:
    return attr('src', value)


def id_(value: Any) -> Attribute:
    """Shorthand for the ``id`` attribute (trailing underscore avoids the builtin)."""
    return attr('id', value)


def class_(value: Any) -> Attribute:
    """Shorthand for the ``class`` attribute, replacing any previous value."""
    return attr('class', value)


def title(value: Any) -> Attribute:
    return attr('title', value)


class Style(ClassNameProvider):
    """A set of class names merged into the node's ``class`` attribute.

    Unlike class_(), a Style adds to the classes already present:

        >>> tree.child('div', Style('card'), Style('card', 'wide'))
        >>> str(tree.root)
        "<div class='card wide'/>"
    """

    __slots__ = ('names',)

    def __init__(self, *names: str) -> None:
        self.names = tuple(names)

    def __repr__(self) -> str:
        return f"Style{self.names!r}"

    def class_names(self) -> Iterable[str]:
        return self.names


class HtmlTree(TreeBuilder):
    """TreeBuilder with helpers for stylesheet and script tags."""

    def stylesheet(self, uri: str) -> None:
        """Emit ``<link rel='stylesheet' href=uri/>``."""
        self.child('link', rel('stylesheet'), href(uri))

    def stylesheet_async(self, uri: str) -> None:
        """Emit a preload link plus a stylesheet applied once loaded."""
        self.child('link', rel('preload'), href(uri), attr('as', 'style'), attr('fetchpriority', 'high'))
        self.child('link', rel('stylesheet'), href(uri), attr('media', 'print'), attr('onload', "this.media='all'"))

    def script(self, uri: str) -> None:
        self.child('script', src(uri))

    def script_async(self, uri: str) -> None:
        self.child('script', src(uri), attr('async', True))

    def module(self, uri: str) -> None:
        """Emit an ES module script tag."""
        self.child('script', src(uri), attr('type', 'module'))

    def module_async(self, uri: str) -> None:
        self.child('script', src(uri), attr('async', True), attr('type', 'module'))


class HtmlDeclaration(Declaration):
    """Declaration built with an HtmlTree."""

    tree_class = HtmlTree
