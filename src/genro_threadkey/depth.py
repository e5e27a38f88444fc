# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Display depth: bounded indentation for arbitrarily deep threads.

A reply chain deeper than the configured maximum stops indenting: the first
node past the limit renders at the same depth as its parent, and so do all
of its descendants. Keys are not touched, so the nodes still sort as nested
replies. Display depth is recomputed on each render, which means changing
the maximum reshapes existing threads immediately.
"""

from __future__ import annotations

from .config import DEFAULT_SETTINGS, ThreadSettings
from .key import ThreadKey, coerce_key


def display_depth(
    logical_depth: int | ThreadKey | str,
    max_depth: int,
    settings: ThreadSettings | None = None,
) -> int:
    """Return the indentation level for a node: ``min(logical_depth, max_depth)``.

    Args:
        logical_depth: Number of ancestors of the node, or its key.
        max_depth: Deepest indentation level to render. 0 renders flat.
        settings: Settings used to decode a string key.

    Raises:
        ValueError: If either depth is negative or not an int.

    Example:
        >>> [display_depth(d, 2) for d in range(5)]
        [0, 1, 2, 2, 2]
    """
    depth = _logical_depth(logical_depth, settings)
    _check_depth('max_depth', max_depth)
    return min(depth, max_depth)


class DepthLimiter:
    """Display depth calculator bound to a configured maximum.

    ``max_depth`` may be reassigned at any time; the next call uses it.

    Example:
        >>> limiter = DepthLimiter(max_depth=2)
        >>> limiter.display_depth('01.00.00.00/')
        2
    """

    __slots__ = ('_max_depth', 'settings')

    def __init__(
        self,
        max_depth: int | None = None,
        settings: ThreadSettings | None = None,
    ) -> None:
        self.settings = settings or DEFAULT_SETTINGS
        self.max_depth = self.settings.max_depth if max_depth is None else max_depth

    def __repr__(self) -> str:
        return f"DepthLimiter(max_depth={self._max_depth})"

    @property
    def max_depth(self) -> int:
        """Configured maximum display depth."""
        return self._max_depth

    @max_depth.setter
    def max_depth(self, value: int) -> None:
        _check_depth('max_depth', value)
        self._max_depth = value

    def display_depth(self, node: int | ThreadKey | str) -> int:
        """Return the display depth of a node given its key or logical depth."""
        return display_depth(node, self._max_depth, self.settings)


def _logical_depth(
    value: int | ThreadKey | str,
    settings: ThreadSettings | None,
) -> int:
    if isinstance(value, (ThreadKey, str)):
        return coerce_key(value, settings).depth
    _check_depth('logical_depth', value)
    return value


def _check_depth(name: str, value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool) or value < 0:
        raise ValueError(f"{name} must be a non-negative int, not {value!r}")
