from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class SizeRange:
    min_size: float
    max_size: float

    @classmethod
    def from_scale(cls, max_font_size: float, min_font_scale: float) -> "SizeRange":
        return cls(min_size=max_font_size * min_font_scale, max_size=max_font_size)


class LayoutMode(str, Enum):
    SINGLE_LINE = "single_line"
    MULTI_LINE = "multi_line"

    @classmethod
    def from_number_of_lines(cls, number_of_lines: int) -> "LayoutMode":
        # 0 means "as many lines as needed"
        return cls.SINGLE_LINE if number_of_lines == 1 else cls.MULTI_LINE


class FitState(str, Enum):
    FIT = "fit"
    TOO_BIG = "too_big"
    TOO_SMALL = "too_small"


# measure(text, font_size, constraint) -> bounding box of the laid out text.
# A constraint dimension of math.inf is unbounded.
Measure = Callable[[str, float, Size], Size]

UNBOUNDED = math.inf
