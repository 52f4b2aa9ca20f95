# Scene engine: the operations the toolbar and canvas host call.

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple
import logging

from matplotlib import colors

import config
from history import HistoryStack
from interaction import Interaction
from model import SHAPE_KINDS, CellRef, Point, Shape, Table, TextStyle
from reflow import CELL_FONT, Measurer, estimate_width, reflow
from render import ImageCache, Painter, render_scene
from store import ShapeStore
from view import ViewTransform

logger = logging.getLogger(__name__)

STYLE_KEYS = ("font_family", "font_size", "bold", "italic", "underline")


@dataclass
class EngineOptions:
    tables_enabled: bool = True
    legacy_zoom_drag: bool = config.LEGACY_ZOOM_DRAG
    # "transform" paints through zoom and pan, "direct" paints stored coordinates as-is
    render_mode: str = "transform"
    # "per_tick" snapshots before every drag/resize move, "per_gesture" once per gesture
    snapshot_policy: str = "per_tick"
    history_limit: int = config.HISTORY_LIMIT
    edge_threshold: float = config.EDGE_THRESHOLD


def normalize_color(color: str) -> Optional[str]:
    """Description: Hex form of any matplotlib color name or hex string, None when invalid
    Inputs: color: str
    """
    try:
        return colors.to_hex(color)
    except ValueError:
        return None


class SceneEngine:
    def __init__(self, options: Optional[EngineOptions] = None, measure: Optional[Measurer] = None) -> None:
        """Description: Init
        Inputs: options: Optional[EngineOptions], measure: Optional[Measurer]
        """
        self.options = options or EngineOptions()
        self.measure: Measurer = measure or estimate_width
        self.store = ShapeStore()
        self.history = HistoryStack(self.options.history_limit)
        self.view = ViewTransform()
        self.interaction = Interaction(self.store, self.view, self.history, self.options)
        self.images = ImageCache()
        self.background_color = config.DEFAULT_BACKGROUND

    # Read access

    @property
    def shapes(self) -> List[Shape]:
        return self.store.shapes

    @property
    def tables(self) -> List[Table]:
        return self.store.tables

    @property
    def zoom(self) -> float:
        return self.view.zoom

    @property
    def pan(self) -> Point:
        return self.view.pan

    @property
    def move_mode(self) -> bool:
        return self.interaction.move_mode

    @property
    def cursor(self) -> str:
        return self.interaction.cursor

    @property
    def state(self) -> str:
        return self.interaction.gesture

    @property
    def editing(self) -> Optional[CellRef]:
        return self.interaction.editing_cell

    @property
    def selected_id(self) -> Optional[int]:
        return self.interaction.selected_id

    @property
    def editing_shape_id(self) -> Optional[int]:
        return self.interaction.editing_shape_id

    # Object creation

    def add_shape(self, kind: str) -> Optional[Shape]:
        """Description: Add a rectangle, circle, image or text with default geometry
        Inputs: kind: str
        """
        if kind not in SHAPE_KINDS:
            logger.debug("Ignoring unknown shape kind %r", kind)
            return None
        self.history.snapshot(self.store.shapes)
        return self.store.add_shape(kind)

    def add_text(self, content: str, style: Optional[TextStyle] = None) -> Optional[Shape]:
        """Description: Add a text label; empty content is ignored
        Inputs: content: str, style: Optional[TextStyle]
        """
        if not content:
            logger.debug("Ignoring empty text")
            return None
        self.history.snapshot(self.store.shapes)
        return self.store.add_text(content, style)

    def add_image(self, source: str) -> Optional[Shape]:
        """Description: Add an image shape and queue its source for loading
        Inputs: source: str
        """
        if not source:
            logger.debug("Ignoring image without a source")
            return None
        self.history.snapshot(self.store.shapes)
        shape = self.store.add_image(source)
        self.images.request(source)
        return shape

    def add_table(self, rows: int, cols: int) -> Optional[Table]:
        """Description: Add an empty table, rows and cols coerced to at least one
        Inputs: rows: int, cols: int
        """
        if not self.options.tables_enabled:
            logger.debug("Tables are disabled")
            return None
        return self.store.add_table(rows, cols)

    # Editing

    def update_shape_style(self, shape_id: int, **delta) -> Optional[Shape]:
        """Description: Change outline color, text content or font of a shape
        Inputs: shape_id: int, delta: outline_color, text, font_family, font_size, bold, italic, underline
        Returns: the shape, or None for an unknown id; history is only touched when a value changes
        """
        shape = self.store.get_shape(shape_id)
        if shape is None:
            logger.debug("No shape with id %s", shape_id)
            return None
        changes = {}
        for key, value in delta.items():
            if key == "outline_color":
                value = normalize_color(value)
                if value is None:
                    logger.warning("Ignoring invalid color %r", delta[key])
                    continue
                current = shape.outline
            elif key == "text":
                value = str(value)
                current = shape.text
            elif key == "font_size":
                try:
                    value = max(1, int(value))
                except (TypeError, ValueError):
                    logger.warning("Ignoring invalid font size %r", value)
                    continue
                current = shape.style.font_size
            elif key == "font_family":
                value = str(value)
                current = shape.style.font_family
            elif key in STYLE_KEYS:
                value = bool(value)
                current = getattr(shape.style, key)
            else:
                logger.debug("Ignoring unknown style key %r", key)
                continue
            if value != current:
                changes[key] = value
        if not changes:
            return shape
        self.history.snapshot(self.store.shapes)
        for key, value in changes.items():
            if key == "outline_color":
                shape.outline = value
            elif key == "text":
                shape.text = value
            else:
                setattr(shape.style, key, value)
        return shape

    def commit_table_cell(self, table_id: int, row: int, col: int, text: str) -> bool:
        """Description: Store cell text and grow the shared cell height to fit it
        Inputs: table_id: int, row: int, col: int, text: str
        """
        if not self.store.set_cell(table_id, row, col, text):
            return False
        table = self.store.get_table(table_id)
        table.cell_height = reflow(text, table.cell_width, CELL_FONT, table.cell_height, self.measure)
        return True

    def commit_edit(self, text: str) -> bool:
        """Description: Commit text typed into the open cell or label edit session
        Inputs: text: str
        """
        cell = self.interaction.editing_cell
        shape_id = self.interaction.editing_shape_id
        self.interaction.cancel_edit()
        if cell is not None:
            return self.commit_table_cell(cell.table_id, cell.row, cell.col, text)
        if shape_id is not None:
            return self.update_shape_style(shape_id, text=text) is not None
        logger.debug("No edit session to commit")
        return False

    def cancel_edit(self) -> None:
        self.interaction.cancel_edit()

    def set_background_color(self, color: str) -> bool:
        normalized = normalize_color(color)
        if normalized is None:
            logger.warning("Ignoring invalid background color %r", color)
            return False
        self.background_color = normalized
        return True

    # History

    def undo(self) -> bool:
        self.interaction.pointer_up()
        restored = self.history.undo(self.store.shapes)
        if restored is None:
            return False
        self.store.replace_shapes(restored)
        return True

    def redo(self) -> bool:
        self.interaction.pointer_up()
        restored = self.history.redo(self.store.shapes)
        if restored is None:
            return False
        self.store.replace_shapes(restored)
        return True

    # View

    def zoom_in(self) -> bool:
        return self.view.zoom_in()

    def zoom_out(self) -> bool:
        return self.view.zoom_out()

    def toggle_move_mode(self) -> bool:
        """Description: Switch pointer gestures between editing and panning
        Inputs: None
        Returns: the new move-mode flag
        """
        self.interaction.pointer_up()
        self.interaction.move_mode = not self.interaction.move_mode
        return self.interaction.move_mode

    def reset_scene(self) -> None:
        """Description: Remove every object and reset zoom and pan; undo brings the shapes back
        Inputs: None
        """
        if self.store.shapes:
            self.history.snapshot(self.store.shapes)
        self.store.clear()
        self.view.reset()
        self.interaction.pointer_up()
        self.interaction.cancel_edit()
        self.interaction.selected_id = None

    # Pointer events

    def on_pointer_down(self, screen_point: Point) -> None:
        self.interaction.pointer_down(screen_point)

    def on_pointer_move(self, screen_point: Point) -> bool:
        return self.interaction.pointer_move(screen_point)

    def on_pointer_up(self) -> None:
        self.interaction.pointer_up()

    def render(self, painter: Painter, size: Optional[Tuple[float, float]] = None) -> None:
        """Description: Paint background, shapes and tables through painter
        Inputs: painter: Painter, size: Optional[Tuple[float, float]]
        """
        render_scene(self, painter, size)
