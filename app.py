from __future__ import annotations

import logging
import tkinter as tk
from tkinter import colorchooser, filedialog, simpledialog

import config
from canvas_view import CanvasView, TkTextMeasurer
from engine import EngineOptions, SceneEngine
from model import TextStyle

logger = logging.getLogger(__name__)


class SceneApp:
    def __init__(self, options: EngineOptions | None = None) -> None:
        self.root = tk.Tk()
        self.root.title(config.WINDOW_TITLE)
        self.root.configure(bg=config.THEME["bg"])

        self.engine = SceneEngine(options, measure=TkTextMeasurer(self.root))

        self.font_var = tk.StringVar(value=config.DEFAULT_FONT)
        self.font_size_var = tk.IntVar(value=config.DEFAULT_FONT_SIZE)
        self.bold_var = tk.BooleanVar(value=False)
        self.italic_var = tk.BooleanVar(value=False)
        self.underline_var = tk.BooleanVar(value=False)

        self._build_layout()
        self._bind_shortcuts()
        self._refresh()

    def run(self) -> None:
        self.root.mainloop()

    def _build_layout(self) -> None:
        self.main_frame = tk.Frame(self.root, bg=config.THEME["bg"])
        self.main_frame.pack(fill=tk.BOTH, expand=True)
        self.main_frame.columnconfigure(0, weight=0)
        self.main_frame.columnconfigure(1, weight=1)
        self.main_frame.rowconfigure(0, weight=1)

        self.toolbar_frame = tk.Frame(self.main_frame, bg=config.THEME["panel"], padx=10, pady=10)
        self.toolbar_frame.grid(row=0, column=0, sticky="ns")

        self.canvas_frame = tk.Frame(self.main_frame, bg=config.THEME["bg"], padx=8, pady=8)
        self.canvas_frame.grid(row=0, column=1, sticky="nsew")
        self.canvas_frame.rowconfigure(0, weight=1)
        self.canvas_frame.columnconfigure(0, weight=1)

        self.canvas_view = CanvasView(self.canvas_frame, self.engine, on_scene_changed=self._update_status)
        self.canvas_view.canvas.grid(row=0, column=0, sticky="nsew")

        self._build_toolbar()
        self._build_status_bar()

    def _button(self, text: str, command) -> tk.Button:
        button = tk.Button(
            self.toolbar_frame,
            text=text,
            command=command,
            bg=config.THEME["panel_alt"],
            fg=config.THEME["text"],
            activebackground=config.THEME["accent"],
            activeforeground=config.THEME["text"],
            relief=tk.FLAT,
            width=12,
            pady=4,
        )
        button.pack(fill=tk.X, pady=3)
        return button

    def _separator(self) -> None:
        sep = tk.Frame(self.toolbar_frame, bg=config.THEME["panel_alt"], height=2)
        sep.pack(fill=tk.X, pady=8)

    def _build_toolbar(self) -> None:
        header = tk.Label(self.toolbar_frame, text="Shapes", bg=config.THEME["panel"], fg=config.THEME["text"], font=("Arial", 12, "bold"))
        header.pack(anchor="w", pady=(0, 10))

        self._button("Rectangle", lambda: self.add_shape("rectangle"))
        self._button("Circle", lambda: self.add_shape("circle"))
        self._button("Text", self.add_text)
        self._button("Image", self.add_image)
        if self.engine.options.tables_enabled:
            self._button("Table", self.add_table)

        self._separator()

        tk.OptionMenu(self.toolbar_frame, self.font_var, *config.FONTS).pack(fill=tk.X, pady=3)
        tk.Spinbox(self.toolbar_frame, from_=6, to=96, textvariable=self.font_size_var, width=6).pack(fill=tk.X, pady=3)
        for label, variable in (("Bold", self.bold_var), ("Italic", self.italic_var), ("Underline", self.underline_var)):
            tk.Checkbutton(
                self.toolbar_frame,
                text=label,
                variable=variable,
                bg=config.THEME["panel"],
                fg=config.THEME["text"],
                selectcolor=config.THEME["panel_alt"],
                activebackground=config.THEME["panel"],
            ).pack(anchor="w")
        self._button("Apply Font", self.apply_font)
        palette = tk.Frame(self.toolbar_frame, bg=config.THEME["panel"])
        palette.pack(fill=tk.X, pady=3)
        for index, color in enumerate(config.COLORS):
            swatch = tk.Button(palette, bg=color, activebackground=color, width=2, relief=tk.FLAT, command=lambda c=color: self._apply_palette_color(c))
            swatch.grid(row=index // 5, column=index % 5, padx=1, pady=1)
        self._button("Outline Color", self.pick_outline_color)
        self._button("Background", self.pick_background_color)

        self._separator()

        self._button("Undo", self.undo)
        self._button("Redo", self.redo)
        self._button("Zoom +", self.zoom_in)
        self._button("Zoom -", self.zoom_out)
        self.move_button = self._button("Move Canvas", self.toggle_move_mode)
        self._button("Reset", self.reset_scene)

    def _build_status_bar(self) -> None:
        self.status_var = tk.StringVar(value="")
        status = tk.Label(self.root, textvariable=self.status_var, bg=config.THEME["panel_alt"], fg=config.THEME["muted"], anchor="w")
        status.pack(fill=tk.X, side=tk.BOTTOM)

    def _bind_shortcuts(self) -> None:
        self.root.bind("<Control-z>", self._on_undo_shortcut)
        self.root.bind("<Control-y>", self._on_redo_shortcut)
        self.root.bind("<Control-plus>", lambda _e: self.zoom_in())
        self.root.bind("<Control-minus>", lambda _e: self.zoom_out())

    def _text_input_focused(self) -> bool:
        widget = self.root.focus_get()
        if widget is None:
            return False
        return isinstance(widget, (tk.Entry, tk.Text, tk.Spinbox))

    def _on_undo_shortcut(self, _event: tk.Event) -> None:
        if self._text_input_focused():
            return
        self.undo()

    def _on_redo_shortcut(self, _event: tk.Event) -> None:
        if self._text_input_focused():
            return
        self.redo()

    def _current_style(self) -> TextStyle:
        try:
            font_size = self.font_size_var.get()
        except tk.TclError:
            # empty or non-numeric spinbox text
            font_size = config.DEFAULT_FONT_SIZE
        return TextStyle(
            font_family=self.font_var.get(),
            font_size=font_size,
            bold=self.bold_var.get(),
            italic=self.italic_var.get(),
            underline=self.underline_var.get(),
        )

    def _refresh(self) -> None:
        self.canvas_view.draw()
        self._update_status()

    def _update_status(self) -> None:
        stats = self.engine.history.stats()
        mode = "move" if self.engine.move_mode else "edit"
        self.status_var.set(
            f"Zoom: {self.engine.zoom:.1f}x  |  Mode: {mode}  |  Shapes: {len(self.engine.shapes)}  |  "
            f"Tables: {len(self.engine.tables)}  |  Undo: {stats['undo_count']}  Redo: {stats['redo_count']}"
        )

    def add_shape(self, kind: str) -> None:
        self.engine.add_shape(kind)
        self._refresh()

    def add_text(self) -> None:
        content = simpledialog.askstring("Text", "Label text:", parent=self.root)
        if content is None:
            return
        self.engine.add_text(content, self._current_style())
        self._refresh()

    def add_image(self) -> None:
        path = filedialog.askopenfilename(
            filetypes=[("Images", "*.png *.jpg *.jpeg *.gif *.bmp"), ("All Files", "*.*")]
        )
        if not path:
            return
        self.engine.add_image(path)
        self._refresh()

    def add_table(self) -> None:
        rows = simpledialog.askinteger("Table", "Rows:", parent=self.root, minvalue=1, initialvalue=3)
        if rows is None:
            return
        cols = simpledialog.askinteger("Table", "Columns:", parent=self.root, minvalue=1, initialvalue=3)
        if cols is None:
            return
        self.engine.add_table(rows, cols)
        self._refresh()

    def apply_font(self) -> None:
        shape_id = self.engine.selected_id
        if shape_id is None:
            return
        self.engine.update_shape_style(shape_id, **self._current_style().to_dict())
        self._refresh()

    def _apply_palette_color(self, color: str) -> None:
        shape_id = self.engine.selected_id
        if shape_id is None:
            return
        self.engine.update_shape_style(shape_id, outline_color=color)
        self._refresh()

    def pick_outline_color(self) -> None:
        shape_id = self.engine.selected_id
        if shape_id is None:
            return
        _rgb, color = colorchooser.askcolor(parent=self.root)
        if not color:
            return
        self.engine.update_shape_style(shape_id, outline_color=color)
        self._refresh()

    def pick_background_color(self) -> None:
        _rgb, color = colorchooser.askcolor(color=self.engine.background_color, parent=self.root)
        if not color:
            return
        self.engine.set_background_color(color)
        self._refresh()

    def undo(self) -> None:
        if self.engine.undo():
            self._refresh()

    def redo(self) -> None:
        if self.engine.redo():
            self._refresh()

    def zoom_in(self) -> None:
        if self.engine.zoom_in():
            self._refresh()

    def zoom_out(self) -> None:
        if self.engine.zoom_out():
            self._refresh()

    def toggle_move_mode(self) -> None:
        active = self.engine.toggle_move_mode()
        color = config.THEME["accent"] if active else config.THEME["panel_alt"]
        self.move_button.configure(bg=color)
        logger.debug("Move mode %s", "on" if active else "off")
        self._update_status()

    def reset_scene(self) -> None:
        self.engine.reset_scene()
        self._refresh()
