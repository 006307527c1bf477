from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

from PIL import ImageFont  # type: ignore

from fontfit.typeset.model import Size

FontLike = Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]


def _text_width(font: FontLike, text: str) -> float:
    if not text:
        return 0.0
    bbox = font.getbbox(text)
    return float(bbox[2] - bbox[0])


def _split_word_hard(word: str, font: FontLike, max_width: float) -> List[str]:
    """Split a single oversized word into chunks that each fit within max_width.

    Falls back to single-character chunks when necessary.
    """
    chunks: List[str] = []
    current = ""
    for ch in word:
        candidate = current + ch
        if _text_width(font, candidate) <= max_width:
            current = candidate
        elif current:
            chunks.append(current)
            current = ch
        else:
            # Even a single char does not fit; force it onto its own line
            chunks.append(ch)
            current = ""
    if current:
        chunks.append(current)
    return chunks


def wrap_paragraph(text: str, font: FontLike, max_width: float) -> List[str]:
    # Greedy word wrap with hard fallback for single oversized words
    words = text.split()
    if not words:
        return [""]
    lines: List[str] = []
    current: List[str] = []
    for word in words:
        candidate = " ".join(current + [word])
        if _text_width(font, candidate) <= max_width:
            current.append(word)
            continue
        if current:
            lines.append(" ".join(current))
            current = []
        if _text_width(font, word) <= max_width:
            current = [word]
        else:
            chunks = _split_word_hard(word, font, max_width)
            lines.extend(chunks[:-1])
            current = [chunks[-1]]
    if current:
        lines.append(" ".join(current))
    return lines


@dataclass
class PillowTextMeasurer:
    """Measures text with a Pillow font, wrapping to the constraint width when it is finite.

    The constraint height is never enforced: the full laid out height is reported so
    the caller can tell how far the text overflows.
    """

    font_path: Optional[Path] = None
    line_spacing_multiplier: float = 0.0
    _font_cache: Dict[float, FontLike] = field(default_factory=dict, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.font_path is not None:
            self.font_path = Path(self.font_path)
            if not self.font_path.exists():
                raise FileNotFoundError(f"Font not found: {self.font_path}")

    def with_line_spacing(self, multiplier: float) -> "PillowTextMeasurer":
        # Copies share nothing; the font cache is rebuilt lazily.
        return dataclasses.replace(self, line_spacing_multiplier=float(multiplier))

    def font(self, size: float) -> FontLike:
        if size not in self._font_cache:
            if self.font_path is None:
                self._font_cache[size] = ImageFont.load_default(size=size)
            else:
                self._font_cache[size] = ImageFont.truetype(str(self.font_path), size)
        return self._font_cache[size]

    def layout_lines(self, text: str, font_size: float, max_width: float = math.inf) -> List[str]:
        font = self.font(font_size)
        lines: List[str] = []
        for paragraph in text.split("\n"):
            if math.isinf(max_width):
                lines.append(paragraph)
            else:
                lines.extend(wrap_paragraph(paragraph, font, max_width))
        return lines

    def line_height(self, font_size: float) -> float:
        ascent, descent = self.font(font_size).getmetrics()
        return float(ascent + descent)

    def __call__(self, text: str, font_size: float, constraint: Size) -> Size:
        font = self.font(font_size)
        lines = self.layout_lines(text, font_size, constraint.width)
        line_height = self.line_height(font_size)
        spacing = line_height * self.line_spacing_multiplier
        width = max((_text_width(font, line) for line in lines), default=0.0)
        height = len(lines) * line_height + max(0, len(lines) - 1) * spacing
        return Size(width=width, height=height)
