"""Desktop window for drawing lines and rectangles."""

from __future__ import annotations

import tkinter as tk
from tkinter import filedialog, messagebox
from typing import Any

from sketchboard.drawing import Drawing
from sketchboard.shapes import Painter
from sketchboard.sketch import MouseButton

_DASH_PATTERN = (4, 2)
_FILE_TYPES = [("Text Files", "*.txt")]
_BUTTONS = {1: MouseButton.LEFT, 2: MouseButton.MIDDLE, 3: MouseButton.RIGHT}


class CanvasPainter(Painter):
    """Painter that draws onto a canvas as well as recording commands."""

    def __init__(self, canvas: Any) -> None:
        super().__init__()
        self.canvas = canvas

    def _style(self) -> dict[str, Any]:
        return {"dash": _DASH_PATTERN} if self.dashed else {}

    def draw_line(self, x1: int, y1: int, x2: int, y2: int) -> None:
        super().draw_line(x1, y1, x2, y2)
        self.canvas.create_line(x1, y1, x2, y2, **self._style())

    def draw_rect(self, x1: int, y1: int, x2: int, y2: int) -> None:
        super().draw_rect(x1, y1, x2, y2)
        self.canvas.create_rectangle(x1, y1, x2, y2, **self._style())

    def set_dashed(self, dashed: bool) -> None:
        super().set_dashed(dashed)


class MainWindow:
    """Main window with file and drawing menus over a canvas."""

    def __init__(self, root: tk.Misc) -> None:
        self.root = root
        self.drawing = Drawing()
        root.title("MainWindow")

        menubar = tk.Menu(root)
        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(label="保存", command=self.save_shapes_to_file)
        file_menu.add_command(label="打开", command=self.load_shapes_from_file)
        menubar.add_cascade(label="文件", menu=file_menu)
        draw_menu = tk.Menu(menubar, tearoff=False)
        draw_menu.add_command(label="画线", command=self.drawing.select_draw_line)
        draw_menu.add_command(
            label="画矩形", command=self.drawing.select_draw_rectangle
        )
        menubar.add_cascade(label="绘图", menu=draw_menu)
        root.config(menu=menubar)

        self.canvas = tk.Canvas(root, width=800, height=600, background="white")
        self.canvas.pack(fill=tk.BOTH, expand=True)
        self.canvas.bind("<ButtonPress>", self._on_press)
        self.canvas.bind("<ButtonRelease>", self._on_release)

    def _on_press(self, event: tk.Event) -> None:
        button = _BUTTONS.get(event.num)
        if button is not None:
            self.drawing.press((event.x, event.y), button)

    def _on_release(self, event: tk.Event) -> None:
        button = _BUTTONS.get(event.num)
        if button is None:
            return
        was_drawing = self.drawing.is_drawing
        self.drawing.release((event.x, event.y), button)
        if was_drawing and not self.drawing.is_drawing:
            self._repaint()

    def _repaint(self) -> None:
        self.canvas.delete("all")
        self.drawing.paint(CanvasPainter(self.canvas))

    def save_shapes_to_file(self) -> None:
        """Ask for a file name and save the shapes there."""
        path = filedialog.asksaveasfilename(
            parent=self.root, title="保存文件", filetypes=_FILE_TYPES
        )
        if not path:
            return
        try:
            self.drawing.save(path)
        except OSError:
            messagebox.showwarning("错误", "无法保存文件", parent=self.root)
            return
        messagebox.showinfo("成功", "文件已保存", parent=self.root)

    def load_shapes_from_file(self) -> None:
        """Ask for a file name and replace the shapes with its contents."""
        path = filedialog.askopenfilename(
            parent=self.root, title="打开文件", filetypes=_FILE_TYPES
        )
        if not path:
            return
        try:
            self.drawing.load(path)
        except OSError:
            messagebox.showwarning("错误", "无法打开文件", parent=self.root)
            return
        self._repaint()
        messagebox.showinfo("成功", "文件已加载", parent=self.root)


def main(argv: list[str] | None = None) -> int:
    """Open the drawing window and run until it is closed."""
    root = tk.Tk()
    MainWindow(root)
    root.mainloop()
    return 0