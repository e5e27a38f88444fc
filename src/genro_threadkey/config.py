# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Settings shared by key allocation, decoding and depth limiting."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

DEFAULT_SEGMENT_WIDTH = 2
DEFAULT_MAX_DEPTH = 3
DEFAULT_SEPARATOR = '.'
DEFAULT_TERMINATOR = '/'


@dataclass(frozen=True)
class ThreadSettings:
    """Encoding and rendering settings for thread keys.

    Attributes:
        segment_width: Digits per segment. Ordinals must be below
            ``10 ** segment_width``.
        max_depth: Deepest display depth used for indentation.
        separator: Character placed between segments.
        terminator: Character closing a complete key.

    Both separator and terminator must sort below ``'0'`` so that a shorter
    prefix precedes any deeper continuation, and the separator must sort
    below the terminator so that newest-first order keeps parents above
    their replies.

    Example:
        >>> ThreadSettings()
        ThreadSettings(segment_width=2, max_depth=3, separator='.', terminator='/')
        >>> ThreadSettings.from_dict({'max_depth': 5}).max_depth
        5
    """

    segment_width: int = DEFAULT_SEGMENT_WIDTH
    max_depth: int = DEFAULT_MAX_DEPTH
    separator: str = DEFAULT_SEPARATOR
    terminator: str = DEFAULT_TERMINATOR

    def __post_init__(self) -> None:
        if not _is_int(self.segment_width) or self.segment_width < 1:
            raise ValueError(f"segment_width must be a positive int, not {self.segment_width!r}")
        if not _is_int(self.max_depth) or self.max_depth < 0:
            raise ValueError(f"max_depth must be a non-negative int, not {self.max_depth!r}")
        for name in ('separator', 'terminator'):
            char = getattr(self, name)
            if not isinstance(char, str) or len(char) != 1 or char >= '0':
                raise ValueError(
                    f"{name} must be a single character sorting below '0', not {char!r}"
                )
        if self.separator >= self.terminator:
            raise ValueError(
                f"separator {self.separator!r} must sort below terminator {self.terminator!r}"
            )

    @property
    def max_ordinal(self) -> int:
        """Largest ordinal a single segment can hold."""
        return 10 ** self.segment_width - 1

    @classmethod
    def from_dict(cls, source: Mapping[str, Any]) -> ThreadSettings:
        """Build settings from a plain mapping.

        Args:
            source: Mapping with any of the dataclass field names.

        Raises:
            ValueError: If the mapping holds unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(source) - known)
        if unknown:
            raise ValueError(f"Unknown thread settings: {', '.join(unknown)}")
        return cls(**dict(source))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


DEFAULT_SETTINGS = ThreadSettings()
