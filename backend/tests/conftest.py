import logging
from typing import Callable, List, Tuple

import pytest

from fontfit.core.config import get_settings
from fontfit.typeset.model import Size


class RecordingMeasure:
    """Stub measurer scaling a fixed per-point box linearly with the font size."""

    def __init__(self, width_per_pt: float, height_per_pt: float = 1.0) -> None:
        self.width_per_pt = width_per_pt
        self.height_per_pt = height_per_pt
        self.calls: List[Tuple[str, float, Size]] = []

    def __call__(self, text: str, font_size: float, constraint: Size) -> Size:
        self.calls.append((text, font_size, constraint))
        return Size(width=self.width_per_pt * font_size, height=self.height_per_pt * font_size)


@pytest.fixture
def linear_measure() -> Callable[..., RecordingMeasure]:
    return RecordingMeasure


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
