# Greedy word wrap for table cells and the height it needs.

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

import config

FontSpec = Tuple
Measurer = Callable[[str, FontSpec], float]

CELL_FONT: FontSpec = (config.DEFAULT_FONT, config.DEFAULT_FONT_SIZE)


def estimate_width(text: str, font: FontSpec) -> float:
    """Description: Width estimate for hosts without a font backend
    Inputs: text: str, font: FontSpec
    """
    size = abs(int(font[1])) if len(font) > 1 else config.DEFAULT_FONT_SIZE
    return size * len(text) * config.TEXT_WIDTH_FACTOR


def wrap_lines(
    text: str,
    cell_width: float,
    font: Optional[FontSpec] = None,
    measure: Optional[Measurer] = None,
) -> List[str]:
    """Description: Split text into lines that fit cell_width minus the margin
    Inputs: text: str, cell_width: float, font: Optional[FontSpec], measure: Optional[Measurer]

    Words are separated by single spaces. The first word always stays on the
    first line even when it alone is too wide.
    """
    measure = measure or estimate_width
    font = font or CELL_FONT
    limit = cell_width - config.REFLOW_MARGIN
    lines: List[str] = []
    line = ""
    for index, word in enumerate(text.split(" ")):
        candidate = line + word + " "
        if measure(candidate, font) > limit and index > 0:
            lines.append(line.rstrip(" "))
            line = word + " "
        else:
            line = candidate
    lines.append(line.rstrip(" "))
    return lines


def reflow(
    text: str,
    cell_width: float,
    font: Optional[FontSpec] = None,
    existing_height: float = 0.0,
    measure: Optional[Measurer] = None,
) -> float:
    """Description: Cell height needed to show text, never below existing_height
    Inputs: text: str, cell_width: float, font: Optional[FontSpec], existing_height: float, measure: Optional[Measurer]
    """
    lines = wrap_lines(text, cell_width, font, measure)
    required = len(lines) * config.REFLOW_LINE_HEIGHT + config.REFLOW_PADDING
    return max(existing_height, required)
