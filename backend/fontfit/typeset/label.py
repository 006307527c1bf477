from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fontfit.typeset.fit import DEFAULT_MAX_FONT_SIZE, DEFAULT_MIN_FONT_SCALE, find_best_fit, normalize_font_bounds
from fontfit.typeset.model import LayoutMode, Measure, Size


@dataclass
class FittableLabel:
    text: Optional[str]
    font_size: float
    bounds: Size
    measure: Measure
    # 1 keeps the text on a single line; any other value (0 = unlimited) wraps
    number_of_lines: int = 1

    @property
    def layout_mode(self) -> LayoutMode:
        return LayoutMode.from_number_of_lines(self.number_of_lines)

    def _measure_with_spacing(self, line_spacing_multiplier: float) -> Measure:
        with_line_spacing = getattr(self.measure, "with_line_spacing", None)
        if line_spacing_multiplier and callable(with_line_spacing):
            return with_line_spacing(line_spacing_multiplier)
        return self.measure

    def font_size_that_fits(
        self,
        text: str,
        max_font_size: float = DEFAULT_MAX_FONT_SIZE,
        min_font_scale: float = DEFAULT_MIN_FONT_SCALE,
        rect_size: Optional[Size] = None,
        line_spacing_multiplier: float = 0.0,
    ) -> float:
        """
        Returns the font size at which text fits rect_size (the label bounds by default).

        The label itself is left untouched.
        """
        size_range = normalize_font_bounds(max_font_size, min_font_scale)
        return find_best_fit(
            text,
            size_range,
            rect_size or self.bounds,
            self.layout_mode,
            self._measure_with_spacing(line_spacing_multiplier),
            current_font_size=self.font_size,
        )

    def font_size_to_fit(
        self,
        max_font_size: float = DEFAULT_MAX_FONT_SIZE,
        min_font_scale: float = DEFAULT_MIN_FONT_SCALE,
        rect_size: Optional[Size] = None,
    ) -> None:
        """Resize the font so the current text fits the label bounds (or rect_size)."""
        if self.text is None:
            return
        self.font_size = self.font_size_that_fits(
            self.text,
            max_font_size=max_font_size,
            min_font_scale=min_font_scale,
            rect_size=rect_size,
        )
