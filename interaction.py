# Pointer gesture state machine: drag, resize and pan over the scene.

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union
import logging

import config
import geometry
from history import HistoryStack
from model import CellRef, Point, Shape, Table, direction_edges
from store import ShapeStore
from view import ViewTransform

if TYPE_CHECKING:
    from engine import EngineOptions

logger = logging.getLogger(__name__)

Target = Union[Shape, Table]


@dataclass
class Idle:
    name: str = "idle"


@dataclass
class Dragging:
    target_id: int
    on_table: bool
    grab_offset: Point
    name: str = "dragging"


@dataclass
class Resizing:
    target_id: int
    on_table: bool
    direction: str
    grab_offset: Point
    start_bounds: tuple
    name: str = "resizing"


@dataclass
class Panning:
    anchor: Point
    name: str = "panning"


State = Union[Idle, Dragging, Resizing, Panning]


class Interaction:
    def __init__(self, store: ShapeStore, view: ViewTransform, history: HistoryStack, options: "EngineOptions") -> None:
        """Description: Init
        Inputs: store: ShapeStore, view: ViewTransform, history: HistoryStack, options: EngineOptions
        """
        self.store = store
        self.view = view
        self.history = history
        self.options = options

        self.state: State = Idle()
        self.move_mode = False
        self.cursor = "default"
        self.editing_cell: Optional[CellRef] = None
        self.editing_shape_id: Optional[int] = None
        self.selected_id: Optional[int] = None
        self._gesture_snapshotted = False

    @property
    def gesture(self) -> str:
        return self.state.name

    def pointer_down(self, screen_point: Point) -> None:
        """Description: Start a gesture at screen_point
        Inputs: screen_point: Point
        """
        scene = self.view.to_scene(screen_point)
        self._gesture_snapshotted = False
        if self.move_mode:
            self.state = Panning(anchor=scene)
            return

        self.editing_cell = None
        self.editing_shape_id = None

        if self.options.tables_enabled and self._table_down(scene):
            return

        threshold = self.options.edge_threshold
        for shape in reversed(self.store.shapes):
            direction = geometry.edge_proximity(scene, shape, threshold)
            if direction:
                self.state = self._begin_resize(shape, direction, scene)
                self.selected_id = shape.id
                return

        shape = geometry.shape_at(scene, self.store.shapes)
        if shape is None:
            self.state = Idle()
            self.selected_id = None
            return
        self.selected_id = shape.id
        if shape.kind == "text":
            self.editing_shape_id = shape.id
        self.state = Dragging(target_id=shape.id, on_table=False, grab_offset=(scene[0] - shape.x, scene[1] - shape.y))

    def _table_down(self, scene: Point) -> bool:
        """Description: Route a pointer-down that lands on a table
        Inputs: scene: Point
        """
        for table in reversed(self.store.tables):
            if not geometry.contains(scene, table.bounds()):
                continue
            direction = geometry.table_edge_proximity(scene, table, self.options.edge_threshold)
            if direction:
                self.state = self._begin_resize(table, direction, scene)
                return True
            cell = geometry.table_cell_at(scene, table)
            if cell is not None:
                self.editing_cell = cell
                self.state = Idle()
                return True
            self.state = Dragging(target_id=table.id, on_table=True, grab_offset=(scene[0] - table.x, scene[1] - table.y))
            return True
        return False

    def _begin_resize(self, target: Target, direction: str, scene: Point) -> Resizing:
        """Description: Capture the box and the pointer offset from the grabbed edges
        Inputs: target: Target, direction: str, scene: Point
        """
        bounds = target.bounds()
        logger.debug("Resize %s from %s", direction, bounds)
        left, top, right, bottom = bounds
        moves_left, _, moves_top, _ = direction_edges(direction)
        edge_x = left if moves_left else right
        edge_y = top if moves_top else bottom
        return Resizing(
            target_id=target.id,
            on_table=isinstance(target, Table),
            direction=direction,
            grab_offset=(scene[0] - edge_x, scene[1] - edge_y),
            start_bounds=bounds,
        )

    def pointer_move(self, screen_point: Point) -> bool:
        """Description: Advance the active gesture
        Inputs: screen_point: Point
        Returns: True when the scene or view changed
        """
        scene = self.view.to_scene(screen_point)
        changed = False
        if isinstance(self.state, Panning):
            self.view.pan_to_anchor(self.state.anchor, screen_point)
            changed = True
        elif isinstance(self.state, Dragging):
            self._drag_to(self.state, scene)
            changed = True
        elif isinstance(self.state, Resizing):
            self._resize_to(self.state, scene)
            changed = True
        self.cursor = self._cursor_at(scene)
        return changed

    def _target(self, state: Union[Dragging, Resizing]) -> Optional[Target]:
        """Description: Live object a gesture acts on, looked up by id
        Inputs: state: Union[Dragging, Resizing]
        """
        if state.on_table:
            return self.store.get_table(state.target_id)
        return self.store.get_shape(state.target_id)

    def _drag_to(self, state: Dragging, scene: Point) -> None:
        """Description: Move the dragged target so the grab point follows the pointer
        Inputs: state: Dragging, scene: Point
        """
        x = scene[0] - state.grab_offset[0]
        y = scene[1] - state.grab_offset[1]
        target = self._target(state)
        if target is None:
            logger.debug("Drag target %s is gone", state.target_id)
            self.pointer_up()
            return
        if state.on_table:
            target.x, target.y = x, y
            return
        self._snapshot()
        if self.options.legacy_zoom_drag:
            x *= self.view.zoom
            y *= self.view.zoom
        target.x, target.y = x, y

    def _resize_to(self, state: Resizing, scene: Point) -> None:
        """Description: Recompute the target box from the captured one
        Inputs: state: Resizing, scene: Point
        """
        point = (scene[0] - state.grab_offset[0], scene[1] - state.grab_offset[1])
        target = self._target(state)
        if target is None:
            logger.debug("Resize target %s is gone", state.target_id)
            self.pointer_up()
            return
        if state.on_table:
            x, y, width, height = geometry.resize_bounds(
                state.start_bounds,
                state.direction,
                point,
                config.MIN_CELL_WIDTH * target.cols,
                config.MIN_CELL_HEIGHT * target.rows,
            )
            target.x, target.y = x, y
            target.cell_width = max(config.MIN_CELL_WIDTH, width / target.cols)
            target.cell_height = max(config.MIN_CELL_HEIGHT, height / target.rows)
            return
        self._snapshot()
        x, y, width, height = geometry.resize_bounds(
            state.start_bounds,
            state.direction,
            point,
            config.MIN_SHAPE_SIZE,
            config.MIN_SHAPE_SIZE,
        )
        target.x, target.y, target.width, target.height = x, y, width, height

    def _snapshot(self) -> None:
        if self.options.snapshot_policy == "per_gesture" and self._gesture_snapshotted:
            return
        self.history.snapshot(self.store.shapes)
        self._gesture_snapshotted = True

    def _cursor_at(self, scene: Point) -> str:
        """Description: Cursor hint for the pointer position and active gesture
        Inputs: scene: Point
        """
        if isinstance(self.state, Resizing):
            return geometry.cursor_for(self.state.direction)
        if isinstance(self.state, Dragging) and self.state.on_table:
            return "move"
        threshold = self.options.edge_threshold
        if self.options.tables_enabled:
            for table in reversed(self.store.tables):
                if geometry.contains(scene, table.bounds()):
                    direction = geometry.table_edge_proximity(scene, table, threshold)
                    return geometry.cursor_for(direction) if direction else "move"
        for shape in reversed(self.store.shapes):
            direction = geometry.edge_proximity(scene, shape, threshold)
            if direction:
                return geometry.cursor_for(direction)
        return "default"

    def pointer_up(self) -> None:
        self.state = Idle()
        self.cursor = "default"
        self._gesture_snapshotted = False

    def cancel_edit(self) -> None:
        self.editing_cell = None
        self.editing_shape_id = None
