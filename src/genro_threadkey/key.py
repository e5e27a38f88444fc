# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""ThreadKey - sortable position of a node in a reply tree.

A thread key is the ordered list of sibling ordinals leading from a root
node down to the node itself. Each ordinal is one fixed-width, zero-padded
decimal segment:

    root #1                  '01/'
    first reply to it        '01.00/'
    reply to that reply      '01.00.00/'
    second reply to root #1  '01.01/'

Keys are computed once, when the node is created, and never change.

Ordering:
    ``sort_key`` drops the trailing terminator. Ascending comparison of
    ``sort_key`` strings (or of ThreadKey objects) is pre-order: a node sorts
    right after its parent and before the parent's next sibling.

    The complete encoded key compared in *descending* order gives the
    newest-first listing, still with each parent above its own replies,
    because the terminator sorts above the separator.

Example:
    >>> key = ThreadKey.decode('01.00.00/')
    >>> key.segments
    (1, 0, 0)
    >>> key.depth
    2
    >>> str(key.parent)
    '01.00/'
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from .config import DEFAULT_SETTINGS, ThreadSettings
from .exceptions import MalformedKeyError, SegmentOverflowError

logger = logging.getLogger(__name__)


class ThreadKey:
    """Immutable segment-encoded position of a reply-tree node.

    Attributes:
        segments: Tuple of sibling ordinals, root first.
        settings: ThreadSettings used to encode the key.
    """

    __slots__ = ('_segments', '_settings')

    def __init__(
        self,
        segments: Iterable[int],
        settings: ThreadSettings | None = None,
    ) -> None:
        """Initialize a ThreadKey.

        Args:
            segments: Sibling ordinals from the root down to this node.
            settings: Encoding settings. Defaults to two-digit segments.

        Raises:
            MalformedKeyError: If there are no segments or a segment is not
                a non-negative int.
            SegmentOverflowError: If a segment does not fit the width.
        """
        settings = settings or DEFAULT_SETTINGS
        segments = tuple(segments)
        if not segments:
            raise MalformedKeyError(segments, "a key needs at least one segment")
        for depth, segment in enumerate(segments):
            if not isinstance(segment, int) or isinstance(segment, bool) or segment < 0:
                raise MalformedKeyError(
                    segments, f"segment {segment!r} is not a non-negative int"
                )
            if segment > settings.max_ordinal:
                raise SegmentOverflowError(segment, settings.segment_width, depth)
        self._segments = segments
        self._settings = settings

    # ==================== Construction ====================

    @classmethod
    def root(cls, ordinal: int, settings: ThreadSettings | None = None) -> ThreadKey:
        """Return the key of a root node with the given ordinal."""
        return cls((ordinal,), settings)

    @classmethod
    def decode(cls, text: str, settings: ThreadSettings | None = None) -> ThreadKey:
        """Parse an encoded key such as ``'01.00.00/'``.

        Args:
            text: The stored key string.
            settings: Encoding settings the key was written with.

        Returns:
            The decoded ThreadKey.

        Raises:
            MalformedKeyError: If the text is not a string, lacks the trailing
                terminator, or holds a segment of the wrong width or with
                characters other than ASCII digits.
        """
        settings = settings or DEFAULT_SETTINGS
        try:
            segments = _parse_segments(text, settings)
        except MalformedKeyError as exc:
            logger.debug("Rejected thread key %r: %s", text, exc.reason)
            raise
        return cls(segments, settings)

    def child(self, ordinal: int) -> ThreadKey:
        """Return the key of this node's child with the given ordinal.

        Raises:
            SegmentOverflowError: If the ordinal does not fit one segment.
        """
        from .allocator import KeyAllocator
        return KeyAllocator(self._settings).allocate(self, ordinal)

    # ==================== Special Methods ====================

    def __repr__(self) -> str:
        return f"ThreadKey({self.encode()!r})"

    def __str__(self) -> str:
        return self.encode()

    def __hash__(self) -> int:
        return hash(self.encode())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ThreadKey):
            return NotImplemented
        return self.encode() == other.encode()

    def __lt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._segments < other._segments  # type: ignore[union-attr]

    def __le__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._segments <= other._segments  # type: ignore[union-attr]

    def __gt__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._segments > other._segments  # type: ignore[union-attr]

    def __ge__(self, other: object) -> bool:
        if not self._comparable(other):
            return NotImplemented
        return self._segments >= other._segments  # type: ignore[union-attr]

    def _comparable(self, other: object) -> bool:
        # Tuple order on fixed-width segments matches sort_key string order.
        return (
            isinstance(other, ThreadKey)
            and self._settings.segment_width == other._settings.segment_width
        )

    # ==================== Encoding ====================

    def encode(self) -> str:
        """Return the complete key string, terminator included."""
        return self.sort_key + self._settings.terminator

    @property
    def sort_key(self) -> str:
        """Encoded key without the terminator, for ascending pre-order."""
        width = self._settings.segment_width
        return self._settings.separator.join(
            str(segment).zfill(width) for segment in self._segments
        )

    # ==================== Navigation ====================

    @property
    def segments(self) -> tuple[int, ...]:
        """Sibling ordinals from the root down to this node."""
        return self._segments

    @property
    def settings(self) -> ThreadSettings:
        """Settings the key is encoded with."""
        return self._settings

    @property
    def depth(self) -> int:
        """Logical depth: number of ancestors (0 for a root)."""
        return len(self._segments) - 1

    @property
    def ordinal(self) -> int:
        """Position of this node among its siblings."""
        return self._segments[-1]

    @property
    def is_root(self) -> bool:
        """True if the key has a single segment."""
        return len(self._segments) == 1

    @property
    def parent(self) -> ThreadKey | None:
        """Key of the parent node, or None for a root."""
        if self.is_root:
            return None
        return ThreadKey(self._segments[:-1], self._settings)

    def ancestors(self) -> Iterator[ThreadKey]:
        """Yield ancestor keys from the immediate parent up to the root."""
        for size in range(len(self._segments) - 1, 0, -1):
            yield ThreadKey(self._segments[:size], self._settings)

    def is_ancestor_of(self, other: ThreadKey) -> bool:
        """True if ``other`` lies strictly below this key."""
        return (
            self._comparable(other)
            and len(other._segments) > len(self._segments)
            and other._segments[:len(self._segments)] == self._segments
        )

    def is_descendant_of(self, other: ThreadKey) -> bool:
        """True if this key lies strictly below ``other``."""
        return other.is_ancestor_of(self)


def _parse_segments(text: object, settings: ThreadSettings) -> list[int]:
    """Split and validate an encoded key, returning its ordinals."""
    if not isinstance(text, str):
        raise MalformedKeyError(text, f"expected str, not {type(text).__name__}")
    if not text.endswith(settings.terminator):
        raise MalformedKeyError(text, f"missing trailing {settings.terminator!r}")

    width = settings.segment_width
    segments = []
    for part in text[:-1].split(settings.separator):
        if len(part) != width:
            raise MalformedKeyError(text, f"segment {part!r} is not {width} digits wide")
        if not (part.isascii() and part.isdigit()):
            raise MalformedKeyError(text, f"segment {part!r} is not decimal")
        segments.append(int(part))
    return segments


def coerce_key(value: ThreadKey | str, settings: ThreadSettings | None = None) -> ThreadKey:
    """Return ``value`` as a ThreadKey, decoding strings.

    Without ``settings``, ThreadKey objects pass through unchanged and
    strings decode with the default settings.

    Raises:
        MalformedKeyError: If a string does not decode, or a ThreadKey uses
            a different segment width than ``settings``.
    """
    if isinstance(value, ThreadKey):
        if settings is None:
            return value
        if value.settings.segment_width != settings.segment_width:
            raise MalformedKeyError(
                value,
                f"encoded with {value.settings.segment_width}-digit segments, "
                f"expected {settings.segment_width}",
            )
        return value
    return ThreadKey.decode(value, settings)
