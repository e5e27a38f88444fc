# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Genro-ThreadKey - Sortable keys and bounded indentation for reply threads.

A lightweight, zero-dependency library that assigns each node of a reply
tree a fixed-width segment key (``'01.00.00/'``) encoding its ancestry, and
computes the display depth used to indent it.
"""

__version__ = "0.1.0"

from .allocator import KeyAllocator, allocate, next_ordinal
from .config import DEFAULT_MAX_DEPTH, DEFAULT_SEGMENT_WIDTH, ThreadSettings
from .depth import DepthLimiter, display_depth
from .exceptions import (
    InvalidOrdinalError,
    MalformedKeyError,
    SegmentOverflowError,
    ThreadKeyError,
)
from .key import ThreadKey
from .ordering import ThreadEntry, final_indent, iter_thread, thread_order

__all__ = [
    # Keys
    "ThreadKey",
    "KeyAllocator",
    "allocate",
    "next_ordinal",
    # Depth
    "DepthLimiter",
    "display_depth",
    # Ordering
    "ThreadEntry",
    "thread_order",
    "iter_thread",
    "final_indent",
    # Settings
    "ThreadSettings",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_SEGMENT_WIDTH",
    # Exceptions
    "ThreadKeyError",
    "SegmentOverflowError",
    "MalformedKeyError",
    "InvalidOrdinalError",
]
