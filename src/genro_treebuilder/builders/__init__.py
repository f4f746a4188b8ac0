# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Declarations - base class and the HTML vocabulary."""

from .base import Declaration, build
from .html import (
    HtmlDeclaration,
    HtmlTree,
    Style,
    charset,
    class_,
    content,
    href,
    id_,
    name,
    rel,
    src,
    title,
)

__all__ = [
    'Declaration',
    'build',
    'HtmlDeclaration',
    'HtmlTree',
    'Style',
    # Attribute shorthands
    'charset',
    'class_',
    'content',
    'href',
    'id_',
    'name',
    'rel',
    'src',
    'title',
]
