"""Text-fit sizer — shrink a font size until word-wrapped text fits its box.

Monotonic local search: the candidate shrinks geometrically until the wrapped
height fits, the floor is reached, or the attempt cap runs out. It never
returns less than the floor and never more than the starting size.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from typing import Protocol

from PIL import ImageFont

from adcanvas.engine.config import LayoutConfig

logger = logging.getLogger(__name__)


class TextMeasurer(Protocol):
    def line_width(self, text: str, font_size: int) -> float:
        """Advance width of a single unwrapped line."""
        ...


class PillowTextMeasurer:
    """Measures with a TrueType font, or Pillow's bundled default font."""

    def __init__(self, font_path: str | None = None) -> None:
        self.font_path = font_path or None
        self._font = lru_cache(maxsize=64)(self._load_font)

    def _load_font(self, size: int):
        if self.font_path:
            return ImageFont.truetype(self.font_path, size)
        return ImageFont.load_default(size=size)

    def line_width(self, text: str, font_size: int) -> float:
        return float(self._font(max(1, int(font_size))).getlength(text))


def wrap_words(text: str, max_width: float, font_size: int, measurer: TextMeasurer) -> list[str]:
    """Greedy word wrap. A single word wider than the box is broken by characters."""
    lines: list[str] = []
    for paragraph in text.split("\n"):
        current = ""
        for word in paragraph.split():
            candidate = f"{current} {word}" if current else word
            if measurer.line_width(candidate, font_size) <= max_width:
                current = candidate
                continue
            if current:
                lines.append(current)
            current = ""
            # Overlong word: hard-break into chunks that fit
            for ch in word:
                if current and measurer.line_width(current + ch, font_size) > max_width:
                    lines.append(current)
                    current = ch
                else:
                    current += ch
        lines.append(current)
    return lines


def wrapped_height(
    text: str,
    max_width: float,
    font_size: int,
    line_height: float,
    measurer: TextMeasurer,
) -> float:
    lines = wrap_words(text, max_width, font_size, measurer)
    return len(lines) * font_size * line_height


def fit_font_size(
    text: str,
    box_width: float,
    box_height: float,
    start_size: int,
    min_size: int,
    line_height: float | None = None,
    measurer: TextMeasurer | None = None,
    padding: float = 0.0,
    config: LayoutConfig | None = None,
) -> int:
    """Largest candidate size (from start_size downward) whose wrapped text fits.

    Empty text or an empty box keeps the starting size. Hitting the floor is
    not an error: the floor is returned and the host may flag the overflow.
    If start_size is below min_size, the floor wins.
    """
    config = config or LayoutConfig()
    line_height = line_height or config.default_line_height
    floor_size = int(min_size)
    size = max(int(start_size), floor_size)

    content = (text or "").strip()
    if not content or not box_width or not box_height:
        return size

    measurer = measurer or PillowTextMeasurer()
    width = max(config.min_measure_box, box_width - padding * 2)
    height = max(config.min_measure_box, box_height - padding * 2)

    for _ in range(config.text_fit_max_attempts):
        if wrapped_height(content, width, size, line_height, measurer) <= height:
            return size
        size = max(floor_size, math.floor(size * config.text_shrink_factor))
        if size == floor_size:
            logger.debug("Text fit hit floor %d for %d chars in %.0fx%.0f", size, len(content), width, height)
            return size
    return size
