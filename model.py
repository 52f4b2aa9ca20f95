from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import config

Point = Tuple[float, float]
Bounds = Tuple[float, float, float, float]

SHAPE_KINDS = ("rectangle", "circle", "image", "text")

# Resize directions, corners first so that hit-testing prefers them.
DIRECTIONS = (
    "top-left",
    "bottom-left",
    "top-right",
    "bottom-right",
    "left",
    "right",
    "top",
    "bottom",
)


def direction_edges(direction: str) -> Tuple[bool, bool, bool, bool]:
    """Description: Which box edges a resize direction moves
    Inputs: direction: str
    Returns: (left, right, top, bottom)
    """
    return (
        direction in ("left", "top-left", "bottom-left"),
        direction in ("right", "top-right", "bottom-right"),
        direction in ("top", "top-left", "top-right"),
        direction in ("bottom", "bottom-left", "bottom-right"),
    )


@dataclass
class TextStyle:
    font_family: str = config.DEFAULT_FONT
    font_size: int = config.DEFAULT_FONT_SIZE
    bold: bool = False
    italic: bool = False
    underline: bool = False

    def font(self) -> Tuple:
        """Description: Font descriptor in tkinter tuple form
        Inputs: None
        """
        modifiers = []
        if self.bold:
            modifiers.append("bold")
        if self.italic:
            modifiers.append("italic")
        if self.underline:
            modifiers.append("underline")
        return (self.font_family, int(self.font_size), *modifiers)

    def to_dict(self) -> Dict:
        """Description: To dict
        Inputs: None
        """
        return {
            "font_family": self.font_family,
            "font_size": self.font_size,
            "bold": self.bold,
            "italic": self.italic,
            "underline": self.underline,
        }

    @classmethod
    def from_dict(cls, payload: Dict) -> "TextStyle":
        """Description: From dict
        Inputs: cls, payload: Dict
        """
        return cls(
            font_family=payload.get("font_family", config.DEFAULT_FONT),
            font_size=int(payload.get("font_size", config.DEFAULT_FONT_SIZE)),
            bold=bool(payload.get("bold", False)),
            italic=bool(payload.get("italic", False)),
            underline=bool(payload.get("underline", False)),
        )


@dataclass
class Shape:
    id: int
    kind: str
    x: float
    y: float
    width: float
    height: float
    outline: Optional[str] = None
    src: Optional[str] = None
    text: str = ""
    style: TextStyle = field(default_factory=TextStyle)

    def bounds(self) -> Bounds:
        """Description: Bounding box as (left, top, right, bottom)
        Inputs: None
        """
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    @property
    def outline_color(self) -> str:
        return self.outline or config.DEFAULT_OUTLINE

    def to_dict(self) -> Dict:
        """Description: To dict
        Inputs: None
        """
        return {
            "id": self.id,
            "kind": self.kind,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "outline": self.outline,
            "src": self.src,
            "text": self.text,
            "style": self.style.to_dict(),
        }

    @classmethod
    def from_dict(cls, payload: Dict) -> "Shape":
        """Description: From dict
        Inputs: cls, payload: Dict
        """
        return cls(
            id=int(payload["id"]),
            kind=payload["kind"],
            x=float(payload.get("x", 0.0)),
            y=float(payload.get("y", 0.0)),
            width=max(0.0, float(payload.get("width", 0.0))),
            height=max(0.0, float(payload.get("height", 0.0))),
            outline=payload.get("outline"),
            src=payload.get("src"),
            text=payload.get("text", ""),
            style=TextStyle.from_dict(payload.get("style", {})),
        )

    def copy(self) -> "Shape":
        return Shape.from_dict(self.to_dict())


@dataclass
class Table:
    id: int
    x: float
    y: float
    rows: int
    cols: int
    cell_width: float = config.DEFAULT_CELL_WIDTH
    cell_height: float = config.DEFAULT_CELL_HEIGHT
    data: List[List[str]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.data:
            self.data = [["" for _ in range(self.cols)] for _ in range(self.rows)]

    @property
    def width(self) -> float:
        return self.cols * self.cell_width

    @property
    def height(self) -> float:
        return self.rows * self.cell_height

    def bounds(self) -> Bounds:
        """Description: Outer box as (left, top, right, bottom)
        Inputs: None
        """
        return (self.x, self.y, self.x + self.width, self.y + self.height)

    def cell(self, row: int, col: int) -> Optional[str]:
        """Description: Cell text, None when out of range
        Inputs: row: int, col: int
        """
        if 0 <= row < self.rows and 0 <= col < self.cols:
            return self.data[row][col]
        return None

    def to_dict(self) -> Dict:
        """Description: To dict
        Inputs: None
        """
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "rows": self.rows,
            "cols": self.cols,
            "cell_width": self.cell_width,
            "cell_height": self.cell_height,
            "data": [list(row) for row in self.data],
        }

    @classmethod
    def from_dict(cls, payload: Dict) -> "Table":
        """Description: From dict
        Inputs: cls, payload: Dict
        """
        return cls(
            id=int(payload["id"]),
            x=float(payload.get("x", 0.0)),
            y=float(payload.get("y", 0.0)),
            rows=int(payload["rows"]),
            cols=int(payload["cols"]),
            cell_width=float(payload.get("cell_width", config.DEFAULT_CELL_WIDTH)),
            cell_height=float(payload.get("cell_height", config.DEFAULT_CELL_HEIGHT)),
            data=[list(row) for row in payload.get("data", [])],
        )

    def copy(self) -> "Table":
        return Table.from_dict(self.to_dict())


@dataclass(frozen=True)
class CellRef:
    table_id: int
    row: int
    col: int
