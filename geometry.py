# Pure hit-testing and box math over scene coordinates.

from __future__ import annotations

from typing import Optional, Sequence, Tuple
import math

import numpy as np

import config
from model import Bounds, CellRef, Point, Shape, Table, direction_edges

CURSORS = {
    "top-left": "nwse-resize",
    "bottom-right": "nwse-resize",
    "bottom-left": "nesw-resize",
    "top-right": "nesw-resize",
    "left": "ew-resize",
    "right": "ew-resize",
    "top": "ns-resize",
    "bottom": "ns-resize",
}


def contains(point: Point, bounds: Bounds) -> bool:
    """Description: Closed box containment
    Inputs: point: Point, bounds: Bounds
    """
    left, top, right, bottom = bounds
    return left <= point[0] <= right and top <= point[1] <= bottom


def shape_at(point: Point, shapes: Sequence[Shape]) -> Optional[Shape]:
    """Description: Topmost shape whose bounding box holds the point
    Inputs: point: Point, shapes: Sequence[Shape]

    Later shapes sit above earlier ones, so the last match wins.
    """
    if not shapes:
        return None
    boxes = np.array([shape.bounds() for shape in shapes], dtype=float)
    x, y = point
    mask = (boxes[:, 0] <= x) & (x <= boxes[:, 2]) & (boxes[:, 1] <= y) & (y <= boxes[:, 3])
    hits = np.flatnonzero(mask)
    if hits.size == 0:
        return None
    return shapes[int(hits[-1])]


def edge_proximity_box(point: Point, bounds: Bounds, threshold: float = config.EDGE_THRESHOLD) -> Optional[str]:
    """Description: Classify a point as near one edge or corner of a box
    Inputs: point: Point, bounds: Bounds, threshold: float

    An edge is near when the point lies strictly closer than threshold to the
    edge line and inside the box span on the other axis.
    """
    left, top, right, bottom = bounds
    x, y = point
    in_x_span = left <= x <= right
    in_y_span = top <= y <= bottom
    near_left = abs(x - left) < threshold and in_y_span
    near_right = abs(x - right) < threshold and in_y_span
    near_top = abs(y - top) < threshold and in_x_span
    near_bottom = abs(y - bottom) < threshold and in_x_span

    if near_left and near_top:
        return "top-left"
    if near_left and near_bottom:
        return "bottom-left"
    if near_right and near_top:
        return "top-right"
    if near_right and near_bottom:
        return "bottom-right"
    if near_left:
        return "left"
    if near_right:
        return "right"
    if near_top:
        return "top"
    if near_bottom:
        return "bottom"
    return None


def edge_proximity(point: Point, shape: Shape, threshold: float = config.EDGE_THRESHOLD) -> Optional[str]:
    return edge_proximity_box(point, shape.bounds(), threshold)


def table_edge_proximity(point: Point, table: Table, threshold: float = config.EDGE_THRESHOLD) -> Optional[str]:
    return edge_proximity_box(point, table.bounds(), threshold)


def table_cell_at(point: Point, table: Table) -> Optional[CellRef]:
    """Description: Cell under the point using half-open cell intervals
    Inputs: point: Point, table: Table
    """
    if table.cell_width <= 0 or table.cell_height <= 0:
        return None
    col = math.floor((point[0] - table.x) / table.cell_width)
    row = math.floor((point[1] - table.y) / table.cell_height)
    if 0 <= row < table.rows and 0 <= col < table.cols:
        return CellRef(table.id, row, col)
    return None


def resize_bounds(
    bounds: Bounds,
    direction: str,
    point: Point,
    min_width: float,
    min_height: float,
) -> Tuple[float, float, float, float]:
    """Description: Box after dragging the edges named by direction to point
    Inputs: bounds: Bounds, direction: str, point: Point, min_width: float, min_height: float
    Returns: (x, y, width, height)

    Opposite edges stay fixed. A clamped moving edge stops at the floor.
    """
    left, top, right, bottom = bounds
    moves_left, moves_right, moves_top, moves_bottom = direction_edges(direction)

    x, width = left, right - left
    if moves_left:
        width = max(min_width, right - point[0])
        x = right - width
    elif moves_right:
        width = max(min_width, point[0] - left)

    y, height = top, bottom - top
    if moves_top:
        height = max(min_height, bottom - point[1])
        y = bottom - height
    elif moves_bottom:
        height = max(min_height, point[1] - top)

    return (x, y, width, height)


def cursor_for(direction: Optional[str]) -> str:
    if direction is None:
        return "default"
    return CURSORS.get(direction, "default")
