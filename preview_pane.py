# preview_pane.py
import tkinter as tk
from tkinter import ttk

from report_view import (
    TAG_BODY,
    TAG_BULLET,
    TAG_HEADING,
    TAG_LABEL,
    TAG_SUBHEADING,
    TAG_TIMESTAMP,
    TAG_TITLE,
    ViewRun,
)

VIEW_STYLES = {
    TAG_TITLE: {"font": ("Segoe UI", 14, "bold"), "foreground": "#1e40af"},
    TAG_TIMESTAMP: {"font": ("Segoe UI", 9), "foreground": "gray"},
    TAG_HEADING: {"font": ("Segoe UI", 11, "bold"), "foreground": "#1d4ed8", "spacing1": 4},
    TAG_SUBHEADING: {"font": ("Segoe UI", 10, "bold"), "foreground": "#1d4ed8"},
    TAG_LABEL: {"font": ("Segoe UI", 10, "bold")},
    TAG_BULLET: {"font": ("Segoe UI", 10), "lmargin1": 14, "lmargin2": 26},
    TAG_BODY: {"font": ("Segoe UI", 10)},
}


class PreviewPane(ttk.Frame):
    """Read-only live preview; show() replaces everything each time."""

    def __init__(self, parent, title: str = "Report Preview"):
        super().__init__(parent)

        ttk.Label(self, text=title).pack(anchor="w", padx=10, pady=(10, 4))

        body = ttk.Frame(self)
        body.pack(fill="both", expand=True, padx=10, pady=(0, 10))

        self.text = tk.Text(body, width=60, height=30, wrap="word", padx=10, pady=8)
        scroll = ttk.Scrollbar(body, orient="vertical", command=self.text.yview)
        self.text.configure(yscrollcommand=scroll.set)
        self.text.pack(side="left", fill="both", expand=True)
        scroll.pack(side="right", fill="y")

        for tag, opts in VIEW_STYLES.items():
            self.text.tag_configure(tag, **opts)

        self.text.configure(state="disabled")

    def show(self, runs: list[ViewRun]):
        top = self.text.yview()[0]
        self.text.configure(state="normal")
        self.text.delete("1.0", tk.END)
        for run in runs:
            self.text.insert(tk.END, run.text, run.tags)
        self.text.configure(state="disabled")
        # keep the reader's place while they type
        self.text.yview_moveto(top)

    def get_value(self) -> str:
        return self.text.get("1.0", "end-1c")
