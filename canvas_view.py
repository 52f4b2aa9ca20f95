from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Tuple
import logging

import tkinter as tk
import tkinter.font as tkfont
from PIL import Image, ImageTk

import config
from engine import SceneEngine
from reflow import estimate_width

logger = logging.getLogger(__name__)

TK_CURSORS = {
    "nwse-resize": "bottom_right_corner",
    "nesw-resize": "bottom_left_corner",
    "ew-resize": "sb_h_double_arrow",
    "ns-resize": "sb_v_double_arrow",
    "move": "fleur",
    "default": "",
}


def tk_cursor(name: str) -> str:
    """Description: Tk cursor name for an engine cursor hint
    Inputs: name: str
    """
    return TK_CURSORS.get(name, "")


def load_image(source: str) -> Image.Image:
    """Description: Open an image file fully into memory
    Inputs: source: str
    """
    with Image.open(source) as image:
        return image.convert("RGBA")


class TkTextMeasurer:
    """Text width through Tk fonts, cached per font descriptor."""

    def __init__(self, root: tk.Misc) -> None:
        self.root = root
        self._fonts: Dict[Tuple, tkfont.Font] = {}

    def __call__(self, text: str, font: Tuple) -> float:
        """Description: Measure text
        Inputs: text: str, font: Tuple
        """
        try:
            measurer = self._fonts.get(font)
            if measurer is None:
                measurer = tkfont.Font(root=self.root, font=font)
                self._fonts[font] = measurer
            return float(measurer.measure(text))
        except tk.TclError:
            return estimate_width(text, font)


class TkPainter:
    """Painter over a tk.Canvas; every item is tagged "scene"."""

    def __init__(self, canvas: tk.Canvas) -> None:
        self.canvas = canvas
        self._photos: List[Any] = []

    def clear(self, color: str, size: Optional[Tuple[float, float]]) -> None:
        """Description: Drop previous items and fill the background
        Inputs: color: str, size: Optional[Tuple[float, float]]
        """
        self.canvas.delete("scene")
        self._photos.clear()
        self.canvas.configure(bg=color)

    def rectangle(self, x0: float, y0: float, x1: float, y1: float, outline: str) -> None:
        self.canvas.create_rectangle(x0, y0, x1, y1, outline=outline, width=1, fill="", tags="scene")

    def ellipse(self, x0: float, y0: float, x1: float, y1: float, outline: str) -> None:
        self.canvas.create_oval(x0, y0, x1, y1, outline=outline, width=1, fill="", tags="scene")

    def text(self, x: float, y: float, text: str, font: Tuple, color: str, anchor: str) -> None:
        self.canvas.create_text(x, y, text=text, font=font, fill=color, anchor=anchor, tags="scene")

    def image(self, handle: Image.Image, x0: float, y0: float, x1: float, y1: float) -> None:
        """Description: Draw handle stretched over the box
        Inputs: handle: Image.Image, x0: float, y0: float, x1: float, y1: float
        """
        width = max(1, int(round(x1 - x0)))
        height = max(1, int(round(y1 - y0)))
        photo = ImageTk.PhotoImage(handle.resize((width, height)), master=self.canvas)
        # Tk drops images that Python no longer references.
        self._photos.append(photo)
        self.canvas.create_image(x0, y0, image=photo, anchor="nw", tags="scene")


class CanvasView:
    def __init__(
        self,
        master: tk.Widget,
        engine: SceneEngine,
        on_scene_changed: Optional[Callable[[], None]] = None,
    ) -> None:
        """Description: Init
        Inputs: master: tk.Widget, engine: SceneEngine, on_scene_changed
        """
        self.engine = engine
        self.canvas = tk.Canvas(
            master,
            width=config.CANVAS_WIDTH,
            height=config.CANVAS_HEIGHT,
            bg=engine.background_color,
            highlightthickness=0,
        )
        self.painter = TkPainter(self.canvas)
        self._on_scene_changed = on_scene_changed
        self._editor: Optional[tk.Entry] = None
        self._editor_window: Optional[int] = None

        self.canvas.bind("<Configure>", self._on_resize)
        self.canvas.bind("<ButtonPress-1>", self._on_left_press)
        self.canvas.bind("<B1-Motion>", self._on_left_drag)
        self.canvas.bind("<Motion>", self._on_hover)
        self.canvas.bind("<ButtonRelease-1>", self._on_left_release)
        self.canvas.bind("<Double-Button-1>", self._on_left_double)
        self.canvas.bind("<MouseWheel>", self._on_mouse_wheel)
        self.canvas.focus_set()

    def draw(self) -> None:
        """Description: Repaint the scene and queue any new image sources
        Inputs: None
        """
        size = (self.canvas.winfo_width(), self.canvas.winfo_height())
        self.engine.render(self.painter, size)
        pending = self.engine.images.take_pending()
        if pending:
            self.canvas.after_idle(lambda: self._load_images(pending))

    def _load_images(self, sources: List[str]) -> None:
        """Description: Load queued images and repaint
        Inputs: sources: List[str]
        """
        for source in sources:
            try:
                self.engine.images.resolve(source, load_image(source))
                logger.debug("Loaded image %s", source)
            except (OSError, ValueError) as exc:
                self.engine.images.fail(source, exc)
        self.draw()

    def _notify_scene_changed(self) -> None:
        if self._on_scene_changed:
            self._on_scene_changed()

    def _on_resize(self, _event: tk.Event) -> None:
        self.draw()

    def _on_left_press(self, event: tk.Event) -> None:
        """Description: On left press
        Inputs: event: tk.Event
        """
        self._commit_editor()
        self.canvas.focus_set()
        self.engine.on_pointer_down((event.x, event.y))
        if self.engine.editing is not None:
            self._open_editor()

    def _on_left_drag(self, event: tk.Event) -> None:
        """Description: On left drag
        Inputs: event: tk.Event
        """
        changed = self.engine.on_pointer_move((event.x, event.y))
        self.canvas.configure(cursor=tk_cursor(self.engine.cursor))
        if changed:
            self.draw()
            self._notify_scene_changed()

    def _on_hover(self, event: tk.Event) -> None:
        self.engine.on_pointer_move((event.x, event.y))
        self.canvas.configure(cursor=tk_cursor(self.engine.cursor))

    def _on_left_release(self, _event: tk.Event) -> None:
        self.engine.on_pointer_up()
        self.canvas.configure(cursor=tk_cursor(self.engine.cursor))
        self.draw()
        self._notify_scene_changed()

    def _on_left_double(self, _event: tk.Event) -> None:
        if self._editor is None and self.engine.editing_shape_id is not None:
            self._open_editor()

    def _on_mouse_wheel(self, event: tk.Event) -> None:
        """Description: On mouse wheel
        Inputs: event: tk.Event
        """
        changed = self.engine.zoom_in() if event.delta > 0 else self.engine.zoom_out()
        if changed:
            self.draw()
            self._notify_scene_changed()

    def _editor_geometry(self) -> Optional[Tuple[float, float, float, str]]:
        """Description: Screen position, width and current text of the open edit session
        Inputs: None
        """
        view = self.engine.view
        cell = self.engine.editing
        if cell is not None:
            table = self.engine.store.get_table(cell.table_id)
            if table is None:
                return None
            left = table.x + cell.col * table.cell_width
            top = table.y + cell.row * table.cell_height
            x, y = view.to_screen((left, top))
            return x, y, table.cell_width * view.zoom, table.data[cell.row][cell.col]
        shape = self.engine.store.get_shape(self.engine.editing_shape_id)
        if shape is None:
            return None
        x, y = view.to_screen((shape.x, shape.y))
        return x, y, shape.width * view.zoom, shape.text

    def _open_editor(self) -> None:
        placement = self._editor_geometry()
        if placement is None:
            self.engine.cancel_edit()
            return
        x, y, width, text = placement
        self._editor = tk.Entry(self.canvas, relief=tk.FLAT)
        self._editor.insert(0, text)
        self._editor.bind("<Return>", lambda _e: self._commit_editor())
        self._editor.bind("<Escape>", lambda _e: self._close_editor(cancel=True))
        self._editor_window = self.canvas.create_window(x, y, window=self._editor, anchor="nw", width=max(20, int(width)))
        self._editor.focus_set()

    def _commit_editor(self) -> None:
        if self._editor is None:
            return
        text = self._editor.get()
        self._close_editor(cancel=False)
        if self.engine.commit_edit(text):
            self.draw()
            self._notify_scene_changed()

    def _close_editor(self, cancel: bool) -> None:
        if self._editor_window is not None:
            self.canvas.delete(self._editor_window)
        if self._editor is not None:
            self._editor.destroy()
        self._editor = None
        self._editor_window = None
        if cancel:
            self.engine.cancel_edit()
        self.canvas.focus_set()
