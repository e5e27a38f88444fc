# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Thread ordering and render planning over lists of keys.

These helpers take keys loaded by the caller and return the order to show
them in, plus the indentation change between consecutive nodes. A renderer
opens ``indent`` nesting levels before a node when positive, closes
``-indent`` levels when negative, and after the last node closes
``final_indent(entries)`` levels.

Example:
    >>> keys = ['01.00.00.00/', '01/', '01.00/', '01.00.00/']
    >>> [e.indent for e in iter_thread(thread_order(keys), max_depth=2)]
    [0, 1, 1, 0]
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from .config import ThreadSettings
from .depth import display_depth
from .key import ThreadKey, coerce_key


@dataclass(frozen=True)
class ThreadEntry:
    """One node of a render pass.

    Attributes:
        key: The node's ThreadKey.
        depth: Logical depth of the node.
        display_depth: Depth clamped to the render pass maximum.
        indent: Change from the previous entry's display depth.
    """

    key: ThreadKey
    depth: int
    display_depth: int
    indent: int


def thread_order(
    keys: Iterable[ThreadKey | str],
    newest_first: bool = False,
    settings: ThreadSettings | None = None,
) -> list[ThreadKey]:
    """Sort keys for display.

    Args:
        keys: ThreadKeys or encoded key strings.
        newest_first: If False (default), pre-order with oldest siblings
            first. If True, newest siblings first, each node still above
            its own replies.
        settings: Settings used to decode string keys.

    Returns:
        List of ThreadKey in display order.
    """
    decoded = [coerce_key(k, settings) for k in keys]
    if newest_first:
        return sorted(decoded, key=ThreadKey.encode, reverse=True)
    return sorted(decoded, key=lambda k: k.sort_key)


def iter_thread(
    keys: Iterable[ThreadKey | str],
    max_depth: int,
    settings: ThreadSettings | None = None,
) -> Iterator[ThreadEntry]:
    """Yield a ThreadEntry per key, in the order given.

    Args:
        keys: Keys already in display order (see thread_order).
        max_depth: Deepest indentation level to render.
        settings: Settings used to decode string keys.
    """
    current = 0
    for item in keys:
        key = coerce_key(item, settings)
        shown = display_depth(key.depth, max_depth)
        yield ThreadEntry(key, key.depth, shown, shown - current)
        current = shown


def final_indent(entries: Sequence[ThreadEntry]) -> int:
    """Return the nesting levels still open after the last entry."""
    if not entries:
        return 0
    return entries[-1].display_depth
