# Render pass from engine state to a painter, plus image load tracking.

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional, Protocol, Tuple
import logging

import config
from model import Shape, Table
from reflow import CELL_FONT, wrap_lines

if TYPE_CHECKING:
    from engine import SceneEngine

logger = logging.getLogger(__name__)

PENDING = "pending"
READY = "ready"
FAILED = "failed"


class Painter(Protocol):
    """Device-coordinate drawing surface."""

    def clear(self, color: str, size: Optional[Tuple[float, float]]) -> None: ...

    def rectangle(self, x0: float, y0: float, x1: float, y1: float, outline: str) -> None: ...

    def ellipse(self, x0: float, y0: float, x1: float, y1: float, outline: str) -> None: ...

    def text(self, x: float, y: float, text: str, font: Tuple, color: str, anchor: str) -> None: ...

    def image(self, handle: Any, x0: float, y0: float, x1: float, y1: float) -> None: ...


class ImageCache:
    """Load state of every image source the scene refers to.

    The render pass only requests sources; the host drains pending ones,
    loads them outside pointer handlers and reports back with resolve/fail.
    """

    def __init__(self) -> None:
        self._status: Dict[str, str] = {}
        self._handles: Dict[str, Any] = {}
        self._queue: List[str] = []

    def request(self, source: str) -> str:
        """Description: Status of source, queueing it on first sight
        Inputs: source: str
        """
        status = self._status.get(source)
        if status is None:
            self._status[source] = PENDING
            self._queue.append(source)
            return PENDING
        return status

    def take_pending(self) -> List[str]:
        queue, self._queue = self._queue, []
        return queue

    def resolve(self, source: str, handle: Any) -> None:
        self._status[source] = READY
        self._handles[source] = handle

    def fail(self, source: str, error: Optional[BaseException] = None) -> None:
        """Description: Mark source unloadable; logged once
        Inputs: source: str, error: Optional[BaseException]
        """
        if self._status.get(source) != FAILED:
            logger.warning("Could not load image %s: %s", source, error)
        self._status[source] = FAILED
        self._handles.pop(source, None)

    def status(self, source: str) -> Optional[str]:
        return self._status.get(source)

    def handle(self, source: str) -> Any:
        return self._handles.get(source)


def render_scene(engine: "SceneEngine", painter: Painter, size: Optional[Tuple[float, float]] = None) -> None:
    """Description: Paint the whole scene
    Inputs: engine: SceneEngine, painter: Painter, size: Optional[Tuple[float, float]]

    In "transform" mode scene coordinates go through zoom and pan. In
    "direct" mode stored coordinates are painted unchanged, which matches
    positions written by the legacy zoom drag.
    """
    if engine.options.render_mode == "direct":
        scale, offset = 1.0, (0.0, 0.0)
    else:
        scale, offset = engine.view.zoom, engine.view.pan

    def to_device(x: float, y: float) -> Tuple[float, float]:
        return (x * scale + offset[0], y * scale + offset[1])

    painter.clear(engine.background_color, size)
    for shape in engine.shapes:
        _paint_shape(engine, painter, shape, to_device, scale)
    if engine.options.tables_enabled:
        for table in engine.tables:
            _paint_table(engine, painter, table, to_device, scale)


def _scaled_font(font: Tuple, scale: float) -> Tuple:
    return (font[0], max(1, int(round(font[1] * scale))), *font[2:])


def _paint_shape(engine: "SceneEngine", painter: Painter, shape: Shape, to_device, scale: float) -> None:
    x0, y0 = to_device(shape.x, shape.y)
    x1, y1 = to_device(shape.x + shape.width, shape.y + shape.height)
    if shape.kind == "rectangle":
        painter.rectangle(x0, y0, x1, y1, shape.outline_color)
    elif shape.kind == "circle":
        painter.ellipse(x0, y0, x1, y1, shape.outline_color)
    elif shape.kind == "image":
        if shape.src and engine.images.request(shape.src) == READY:
            painter.image(engine.images.handle(shape.src), x0, y0, x1, y1)
        else:
            painter.rectangle(x0, y0, x1, y1, config.THEME["muted"])
    elif shape.kind == "text":
        painter.text(x0, y0, shape.text, _scaled_font(shape.style.font(), scale), shape.outline_color, "nw")


def _paint_table(engine: "SceneEngine", painter: Painter, table: Table, to_device, scale: float) -> None:
    font = _scaled_font(CELL_FONT, scale)
    for row in range(table.rows):
        for col in range(table.cols):
            left = table.x + col * table.cell_width
            top = table.y + row * table.cell_height
            x0, y0 = to_device(left, top)
            x1, y1 = to_device(left + table.cell_width, top + table.cell_height)
            painter.rectangle(x0, y0, x1, y1, config.TABLE_GRID_COLOR)
            text = table.data[row][col]
            if not text:
                continue
            lines = wrap_lines(text, table.cell_width, CELL_FONT, engine.measure)
            for index, line in enumerate(lines):
                tx, ty = to_device(left + config.CELL_TEXT_INSET, top + (index + 1) * config.REFLOW_LINE_HEIGHT)
                painter.text(tx, ty, line, font, config.TABLE_GRID_COLOR, "sw")
