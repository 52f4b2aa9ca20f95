# Configuration values for the scene editor.

WINDOW_TITLE = "Scene Editor"

CANVAS_WIDTH = 1200
CANVAS_HEIGHT = 800

COLORS = [
    "#000000",
    "#FFFFFF",
    "#FF4D4D",
    "#FF9500",
    "#FFD60A",
    "#32D74B",
    "#0A84FF",
    "#64D2FF",
    "#BF5AF2",
    "#FF2D55",
]

FONTS = [
    "Arial",
    "Helvetica",
    "Times New Roman",
    "Courier New",
    "Verdana",
]

DEFAULT_FONT = "Arial"
DEFAULT_FONT_SIZE = 16

THEME = {
    "bg": "#1F2125",
    "panel": "#262A30",
    "panel_alt": "#2F343C",
    "text": "#E6E6E6",
    "muted": "#9AA0A6",
    "accent": "#0A84FF",
    "accent_alt": "#64D2FF",
}

DEFAULT_OUTLINE = "black"
DEFAULT_BACKGROUND = "#ffffff"
TABLE_GRID_COLOR = "black"

# Placement defaults for newly created objects (scene coordinates)
SHAPE_ORIGIN = (50.0, 50.0)
TABLE_ORIGIN = (100.0, 100.0)
SHAPE_SIZES = {
    "rectangle": (100.0, 100.0),
    "circle": (100.0, 100.0),
    "image": (150.0, 150.0),
    "text": (200.0, 50.0),
}
DEFAULT_CELL_WIDTH = 100.0
DEFAULT_CELL_HEIGHT = 40.0

MIN_SHAPE_SIZE = 10.0
MIN_CELL_WIDTH = 50.0
MIN_CELL_HEIGHT = 20.0

EDGE_THRESHOLD = 10.0

# Table cell reflow
REFLOW_LINE_HEIGHT = 20.0
REFLOW_PADDING = 10.0
REFLOW_MARGIN = 10.0
CELL_TEXT_INSET = 5.0
TEXT_WIDTH_FACTOR = 0.6

ZOOM_MIN = 0.5
ZOOM_MAX = 3.0
ZOOM_STEP = 0.1

HISTORY_LIMIT = 500

# Older editor builds wrote drag positions as (pointer - offset) * zoom.
LEGACY_ZOOM_DRAG = True
