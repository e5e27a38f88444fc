# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Thread key exceptions."""

from __future__ import annotations


class ThreadKeyError(Exception):
    """Base exception for thread key errors."""

    pass


class SegmentOverflowError(ThreadKeyError, OverflowError):
    """Raised when a sibling ordinal does not fit in one key segment.

    Attributes:
        ordinal: The ordinal that was requested.
        segment_width: Number of digits available per segment.
        depth: Logical depth of the key being allocated.
    """

    def __init__(self, ordinal: int, segment_width: int, depth: int = 0) -> None:
        self.ordinal = ordinal
        self.segment_width = segment_width
        self.depth = depth
        limit = 10 ** segment_width - 1
        super().__init__(
            f"Ordinal {ordinal} at depth {depth} exceeds the {segment_width}-digit "
            f"segment limit ({limit})"
        )


class MalformedKeyError(ThreadKeyError, ValueError):
    """Raised when a stored key does not match the segment grammar.

    Attributes:
        key: The offending input, as received.
        reason: Short description of what is wrong with it.
    """

    def __init__(self, key: object, reason: str) -> None:
        self.key = key
        self.reason = reason
        super().__init__(f"Malformed thread key {key!r}: {reason}")


class InvalidOrdinalError(ThreadKeyError, ValueError):
    """Raised when a sibling ordinal is not a non-negative integer."""

    pass
