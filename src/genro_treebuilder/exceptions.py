# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""TreeBuilder exceptions."""

from __future__ import annotations


class TreeBuilderError(Exception):
    """Base exception for TreeBuilder errors."""

    pass


class MissingDeclarationError(TreeBuilderError, TypeError):
    """Raised when None is given where a declaration is required."""

    pass


class UnsupportedArgumentError(TreeBuilderError, TypeError):
    """Raised when child() receives an argument it cannot dispatch."""

    pass


class UnbalancedScopeError(TreeBuilderError):
    """Raised when the context stack is popped out of order."""

    pass
