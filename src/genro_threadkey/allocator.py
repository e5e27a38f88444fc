# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Key allocation for new reply-tree nodes.

The allocator never reads storage. The caller passes the parent's key and
the ordinal of the new child, and persists the returned key. Reading the
current children of a parent and writing the new node must be serialized
per parent by the caller, otherwise two concurrent replies can receive the
same ordinal.

Example:
    >>> str(allocate(None, 1))
    '01/'
    >>> str(allocate('01/', 0))
    '01.00/'
    >>> str(allocate('01/', 99))
    '01.99/'

An ordinal of 100 or more raises SegmentOverflowError with the default
two-digit segments.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable

from .config import DEFAULT_SETTINGS, ThreadSettings
from .exceptions import InvalidOrdinalError, SegmentOverflowError
from .key import ThreadKey, coerce_key

logger = logging.getLogger(__name__)


class KeyAllocator:
    """Produce thread keys for nodes inserted under a given parent.

    Stateless apart from its settings, so one instance can be shared
    across threads.

    Example:
        >>> allocator = KeyAllocator(ThreadSettings(segment_width=3))
        >>> str(allocator.allocate(None, 7))
        '007/'
    """

    __slots__ = ('settings',)

    def __init__(self, settings: ThreadSettings | None = None) -> None:
        self.settings = settings or DEFAULT_SETTINGS

    def __repr__(self) -> str:
        return f"KeyAllocator(segment_width={self.settings.segment_width})"

    def allocate(
        self,
        parent_key: ThreadKey | str | None,
        sibling_ordinal: int,
    ) -> ThreadKey:
        """Return the key of the ``sibling_ordinal``-th child of ``parent_key``.

        Args:
            parent_key: Key of the parent node (ThreadKey or encoded string),
                or None to allocate a root key.
            sibling_ordinal: 0-based position of the new node among the
                parent's direct children.

        Returns:
            The new node's ThreadKey.

        Raises:
            InvalidOrdinalError: If the ordinal is not a non-negative int.
            SegmentOverflowError: If the ordinal does not fit one segment.
            MalformedKeyError: If ``parent_key`` cannot be decoded or uses
                another segment width.
        """
        if (
            not isinstance(sibling_ordinal, int)
            or isinstance(sibling_ordinal, bool)
            or sibling_ordinal < 0
        ):
            raise InvalidOrdinalError(
                f"Sibling ordinal must be a non-negative int, not {sibling_ordinal!r}"
            )

        if parent_key is None:
            segments: tuple[int, ...] = ()
        else:
            segments = coerce_key(parent_key, self.settings).segments

        if sibling_ordinal > self.settings.max_ordinal:
            raise SegmentOverflowError(
                sibling_ordinal, self.settings.segment_width, len(segments)
            )

        key = ThreadKey(segments + (sibling_ordinal,), self.settings)
        logger.debug("Allocated thread key %s under %s", key, parent_key)
        return key


@lru_cache(maxsize=8)
def _allocator_for(segment_width: int) -> KeyAllocator:
    return KeyAllocator(ThreadSettings(segment_width=segment_width))


def allocate(
    parent_key: ThreadKey | str | None,
    sibling_ordinal: int,
    segment_width: int = DEFAULT_SETTINGS.segment_width,
) -> ThreadKey:
    """Allocate a key with the default separators.

    See KeyAllocator.allocate for arguments and errors.
    """
    return _allocator_for(segment_width).allocate(parent_key, sibling_ordinal)


def next_ordinal(
    sibling_keys: Iterable[ThreadKey | str],
    settings: ThreadSettings | None = None,
) -> int:
    """Return the first unused ordinal after the given sibling keys.

    Ordinals freed by deleted siblings are not reused: the result is one
    past the highest ordinal present, or 0 when there are no siblings.

    Args:
        sibling_keys: Keys of the existing direct children of one parent.
        settings: Settings used to decode string keys.

    Raises:
        ValueError: If the keys do not share the same parent or segment
            width.
    """
    highest = -1
    first = None
    for item in sibling_keys:
        key = coerce_key(item, settings)
        if first is None:
            first = key
        elif (
            key.settings.segment_width != first.settings.segment_width
            or key.parent != first.parent
        ):
            raise ValueError(f"{key} is not a sibling of {first}")
        highest = max(highest, key.ordinal)
    return highest + 1
