from __future__ import annotations

from typing import List, Optional, Sequence
import itertools
import logging

import config
from model import SHAPE_KINDS, Shape, Table, TextStyle

logger = logging.getLogger(__name__)


class ShapeStore:
    """Ordered shapes and tables of one scene.

    Insertion order is z-order: later entries paint and hit-test above
    earlier ones. Shapes and tables draw ids from one counter.
    """

    def __init__(self) -> None:
        self.shapes: List[Shape] = []
        self.tables: List[Table] = []
        self._ids = itertools.count(1)

    def new_id(self) -> int:
        """Description: Next unique object id
        Inputs: None
        """
        return next(self._ids)

    def add_shape(self, kind: str) -> Optional[Shape]:
        """Description: Add a shape of kind with its default size at the default origin
        Inputs: kind: str
        """
        if kind not in SHAPE_KINDS:
            logger.debug("Ignoring unknown shape kind %r", kind)
            return None
        width, height = config.SHAPE_SIZES[kind]
        x, y = config.SHAPE_ORIGIN
        outline = config.DEFAULT_OUTLINE if kind in ("rectangle", "circle") else None
        shape = Shape(id=self.new_id(), kind=kind, x=x, y=y, width=width, height=height, outline=outline)
        self.shapes.append(shape)
        return shape

    def add_text(self, content: str, style: Optional[TextStyle] = None) -> Shape:
        """Description: Add a text label
        Inputs: content: str, style: Optional[TextStyle]
        """
        shape = self.add_shape("text")
        shape.text = content
        if style is not None:
            shape.style = TextStyle.from_dict(style.to_dict())
        return shape

    def add_image(self, source: str) -> Shape:
        """Description: Add an image placeholder for source
        Inputs: source: str
        """
        shape = self.add_shape("image")
        shape.src = source
        return shape

    def add_table(self, rows: int, cols: int) -> Table:
        """Description: Add an empty rows x cols table
        Inputs: rows: int, cols: int
        """
        x, y = config.TABLE_ORIGIN
        table = Table(id=self.new_id(), x=x, y=y, rows=max(1, int(rows)), cols=max(1, int(cols)))
        self.tables.append(table)
        return table

    def get_shape(self, shape_id: int) -> Optional[Shape]:
        for shape in self.shapes:
            if shape.id == shape_id:
                return shape
        return None

    def get_table(self, table_id: int) -> Optional[Table]:
        for table in self.tables:
            if table.id == table_id:
                return table
        return None

    def replace_shapes(self, shapes: Sequence[Shape]) -> None:
        """Description: Swap in a whole shape sequence, as restored from history
        Inputs: shapes: Sequence[Shape]
        """
        self.shapes = list(shapes)

    def update_shape(self, shape_id: int, **fields) -> Optional[Shape]:
        """Description: Set attributes on a shape; sizes keep the floor
        Inputs: shape_id: int, fields
        """
        shape = self.get_shape(shape_id)
        if shape is None:
            logger.debug("No shape with id %s", shape_id)
            return None
        for key, value in fields.items():
            if key in ("width", "height"):
                value = max(config.MIN_SHAPE_SIZE, float(value))
            setattr(shape, key, value)
        return shape

    def update_table(self, table_id: int, **fields) -> Optional[Table]:
        """Description: Set geometry attributes on a table; cell sizes keep the floor
        Inputs: table_id: int, fields
        """
        table = self.get_table(table_id)
        if table is None:
            logger.debug("No table with id %s", table_id)
            return None
        for key, value in fields.items():
            if key == "cell_width":
                value = max(config.MIN_CELL_WIDTH, float(value))
            elif key == "cell_height":
                value = max(config.MIN_CELL_HEIGHT, float(value))
            elif key not in ("x", "y"):
                logger.debug("Table field %r is not editable", key)
                continue
            setattr(table, key, value)
        return table

    def set_cell(self, table_id: int, row: int, col: int, text: str) -> bool:
        """Description: Write one cell
        Inputs: table_id: int, row: int, col: int, text: str
        """
        table = self.get_table(table_id)
        if table is None or table.cell(row, col) is None:
            logger.debug("No cell (%s, %s) in table %s", row, col, table_id)
            return False
        table.data[row][col] = text
        return True

    def clear(self) -> None:
        self.shapes.clear()
        self.tables.clear()
