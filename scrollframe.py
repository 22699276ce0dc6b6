# scrollframe.py
from __future__ import annotations

import platform
import tkinter as tk
from tkinter import ttk


def wheel_steps(num: int | None, delta: int, system: str) -> int:
    """
    Canvas scroll units for one wheel event.
    Linux sends Button-4/5 (``num``); Windows sends multiples of 120 in
    ``delta``; macOS sends small deltas of either sign.
    """
    if num == 4:
        return -1
    if num == 5:
        return 1
    if not delta:
        return 0
    if system == "Darwin":
        return -1 if delta > 0 else 1
    return -int(delta / 120)


class ScrollFrame(ttk.Frame):
    """
    Vertically scrolling page holder for the left pane.
      - put the page inside ``self.content``
      - the wheel only scrolls while the pointer is over this frame
    """

    def __init__(self, parent):
        super().__init__(parent)
        self._system = platform.system()

        self.canvas = tk.Canvas(self, highlightthickness=0)
        self.v_scrollbar = ttk.Scrollbar(self, orient="vertical", command=self.canvas.yview)
        self.canvas.configure(yscrollcommand=self.v_scrollbar.set)

        self.content = ttk.Frame(self.canvas)
        self._window_id = self.canvas.create_window((0, 0), window=self.content, anchor="nw")

        self.content.bind("<Configure>", self._on_content_configure)
        self.canvas.bind("<Configure>", self._on_canvas_configure)

        self.canvas.pack(side="left", fill="both", expand=True)
        self.v_scrollbar.pack(side="right", fill="y")

        for widget in (self.canvas, self.content):
            widget.bind("<Enter>", self._enable_mousewheel)
            widget.bind("<Leave>", self._disable_mousewheel)

    # ---------- sizing ----------
    def _on_content_configure(self, event=None):
        self.canvas.configure(scrollregion=self.canvas.bbox("all"))

    def _on_canvas_configure(self, event):
        # page width follows the pane; only height scrolls
        self.canvas.itemconfigure(self._window_id, width=event.width)

    # ---------- mouse wheel ----------
    def _wheel_events(self) -> tuple[str, ...]:
        if self._system in ("Windows", "Darwin"):
            return ("<MouseWheel>",)
        return ("<Button-4>", "<Button-5>")

    def _enable_mousewheel(self, event=None):
        for seq in self._wheel_events():
            self.bind_all(seq, self._on_mousewheel)

    def _disable_mousewheel(self, event=None):
        for seq in self._wheel_events():
            self.unbind_all(seq)

    def _on_mousewheel(self, event):
        step = wheel_steps(getattr(event, "num", None), getattr(event, "delta", 0), self._system)
        if step:
            self.canvas.yview_scroll(step, "units")

    # -------- Public API --------
    def scroll_to_top(self):
        self.canvas.yview_moveto(0)
