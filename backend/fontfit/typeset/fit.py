from __future__ import annotations

import logging
import math
from typing import Optional

from fontfit.typeset.model import UNBOUNDED, FitState, LayoutMode, Measure, Size, SizeRange

logger = logging.getLogger(__name__)

DEFAULT_MAX_FONT_SIZE = 100.0
DEFAULT_MIN_FONT_SCALE = 0.1

# Search stops once the candidate interval is this narrow.
PRECISION = 0.1
FIT_TOLERANCE = 10.0

# Decimal digits kept from value * 10 before flooring
_DIGITS = 9


def normalize_font_bounds(max_font_size: float, min_font_scale: float) -> SizeRange:
    """Build the search range, replacing NaN/inf inputs with the defaults."""
    if not math.isfinite(max_font_size):
        max_font_size = DEFAULT_MAX_FONT_SIZE
    if not math.isfinite(min_font_scale):
        min_font_scale = DEFAULT_MIN_FONT_SCALE
    return SizeRange.from_scale(float(max_font_size), float(min_font_scale))


def constraint_for(mode: LayoutMode, target: Size) -> Size:
    if mode is LayoutMode.SINGLE_LINE:
        return Size(width=UNBOUNDED, height=target.height)
    return Size(width=target.width, height=UNBOUNDED)


def single_line_state(rect: Size, target: Size) -> FitState:
    # The FIT condition is contradictory for non-negative widths; kept as is.
    if rect.width >= target.width + FIT_TOLERANCE and rect.width <= target.width:
        return FitState.FIT
    elif rect.width > target.width:
        return FitState.TOO_BIG
    else:
        return FitState.TOO_SMALL


def multi_line_state(rect: Size, target: Size) -> FitState:
    # Height within tolerance of the target. The width half of the FIT
    # condition can never hold for non-negative widths; kept as is.
    if (
        rect.height < target.height + FIT_TOLERANCE
        and rect.height > target.height - FIT_TOLERANCE
        and rect.width > target.width + FIT_TOLERANCE
        and rect.width < target.width - FIT_TOLERANCE
    ):
        return FitState.FIT
    elif rect.height > target.height or rect.width > target.width:
        return FitState.TOO_BIG
    else:
        return FitState.TOO_SMALL


def classify(rect: Size, target: Size, mode: LayoutMode) -> FitState:
    if mode is LayoutMode.SINGLE_LINE:
        return single_line_state(rect, target)
    return multi_line_state(rect, target)


def binary_search(
    text: str,
    size_range: SizeRange,
    target: Size,
    mode: LayoutMode,
    measure: Measure,
) -> float:
    """
    Narrow [min_size, max_size] until a probe fits or the interval is within PRECISION.

    Once the interval is narrow enough the upper bound is returned only when the
    last probe was too small; otherwise the lower, safe bound is returned.
    """
    constraint = constraint_for(mode, target)
    low = size_range.min_size
    high = size_range.max_size

    while True:
        mid = (low + high) / 2
        rect = measure(text, mid, constraint)
        state = classify(rect, target, mode)
        logger.debug(
            "fit_probe",
            extra={"font_size": mid, "low": low, "high": high, "width": rect.width, "height": rect.height, "state": state.value},
        )

        if high - low <= PRECISION:
            return high if state is FitState.TOO_SMALL else low

        if state is FitState.FIT:
            return mid
        if state is FitState.TOO_BIG:
            high = mid
        else:
            low = mid


def truncate_font_size(value: float) -> float:
    """Round down to one decimal place.

    Float noise (12 * 0.1 == 1.2000000000000002) is absorbed before flooring, so
    a size that is a tenth in intent truncates to itself.
    """
    return math.floor(round(value * 10.0, _DIGITS)) / 10.0


def find_best_fit(
    text: str,
    size_range: SizeRange,
    target: Size,
    mode: LayoutMode,
    measure: Measure,
    *,
    current_font_size: Optional[float] = None,
) -> float:
    """
    Largest font size in size_range whose measured text satisfies the fit rule for mode.

    Empty text returns current_font_size (or max_size when unknown) without measuring.
    """
    if not text:
        return size_range.max_size if current_font_size is None else current_font_size

    calculated = binary_search(text, size_range, target, mode, measure)
    result = truncate_font_size(calculated)
    logger.debug("fit_result", extra={"font_size": result, "mode": mode.value, "chars": len(text)})
    return result
