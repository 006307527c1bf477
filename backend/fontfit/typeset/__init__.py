"""Font size fitting.

Modules:
- model: value types (Size, SizeRange, LayoutMode, FitState)
- fit: binary search for the best-fit font size
- measure: Pillow-backed text measurement
- label: label-style entry points that funnel into the search
"""

from fontfit.typeset.fit import find_best_fit, normalize_font_bounds
from fontfit.typeset.label import FittableLabel
from fontfit.typeset.measure import PillowTextMeasurer
from fontfit.typeset.model import FitState, LayoutMode, Size, SizeRange

__all__ = [
    "FitState",
    "FittableLabel",
    "LayoutMode",
    "PillowTextMeasurer",
    "Size",
    "SizeRange",
    "find_best_fit",
    "normalize_font_bounds",
]
