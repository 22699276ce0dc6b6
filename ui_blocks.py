# ui_blocks.py
import tkinter as tk
from tkinter import ttk


SECTION_FONT = ("Segoe UI", 10, "bold")
LABEL_FONT = ("Segoe UI", 9, "bold")


class CheckGrid(ttk.Frame):
    """
    Checkbuttons laid out in columns, one per catalog entry.
    on_toggle(item) fires on every click; set_selected() redraws without firing.
    """

    def __init__(self, parent, items, on_toggle, columns: int = 2):
        super().__init__(parent)
        self.items = list(items)
        self.on_toggle = on_toggle
        self.vars: dict[str, tk.BooleanVar] = {}

        for i, item in enumerate(self.items):
            v = tk.BooleanVar(value=False)
            self.vars[item] = v
            ttk.Checkbutton(
                self,
                text=item,
                variable=v,
                command=lambda it=item: self._clicked(it),
                takefocus=False,
            ).grid(row=i // columns, column=i % columns, sticky="w", padx=(0, 12), pady=1)

        for c in range(columns):
            self.grid_columnconfigure(c, weight=1)

    def _clicked(self, item: str):
        if callable(self.on_toggle):
            self.on_toggle(item)

    def set_selected(self, selected):
        chosen = set(selected or [])
        for item, v in self.vars.items():
            v.set(item in chosen)


class RadioRow(ttk.Frame):
    """Horizontal radio buttons over (value, label) pairs."""

    def __init__(self, parent, options, on_select, vertical: bool = False):
        super().__init__(parent)
        self.var = tk.StringVar(value=options[0][0] if options else "")
        self.on_select = on_select

        for value, label in options:
            rb = ttk.Radiobutton(
                self,
                text=label,
                value=value,
                variable=self.var,
                command=self._selected,
                takefocus=False,
            )
            if vertical:
                rb.pack(anchor="w", pady=1)
            else:
                rb.pack(side="left", padx=(0, 12))

    def _selected(self):
        if callable(self.on_select):
            self.on_select(self.var.get())

    def get(self) -> str:
        return self.var.get()

    def set(self, value: str):
        self.var.set(value)


class FreeText(ttk.Frame):
    """Label + multi-line Text; on_change(text) after each key release."""

    def __init__(self, parent, label: str, on_change, height: int = 4):
        super().__init__(parent)
        self.on_change = on_change

        if label:
            ttk.Label(self, text=label, font=LABEL_FONT).pack(anchor="w", pady=(0, 4))

        self.text = tk.Text(self, height=height, wrap="word")
        self.text.pack(fill="both", expand=True)
        self.text.bind("<KeyRelease>", lambda e: self._changed())

    def _changed(self):
        if callable(self.on_change):
            self.on_change(self.get_value())

    def get_value(self) -> str:
        return self.text.get("1.0", "end-1c")

    def set_value(self, value: str):
        if self.get_value() == (value or ""):
            return  # keep the cursor where it is
        self.text.delete("1.0", tk.END)
        self.text.insert(tk.END, value or "")


class LabeledEntry(ttk.Frame):
    """Label, Entry and a grey hint; on_change(value) on every edit."""

    def __init__(self, parent, label: str, on_change, hint: str = "", width: int = 28):
        super().__init__(parent)
        self.on_change = on_change
        self.var = tk.StringVar(value="")
        self._loading = False

        ttk.Label(self, text=f"{label}:", width=20).grid(row=0, column=0, sticky="w")
        ttk.Entry(self, textvariable=self.var, width=width).grid(row=0, column=1, sticky="w", padx=(6, 0))
        if hint:
            ttk.Label(self, text=hint, foreground="gray").grid(row=0, column=2, sticky="w", padx=(8, 0))

        self.var.trace_add("write", lambda *_: self._changed())

    def _changed(self):
        if self._loading:
            return
        if callable(self.on_change):
            self.on_change(self.var.get())

    def set_value(self, value: str):
        if self.var.get() == (value or ""):
            return
        self._loading = True
        try:
            self.var.set(value or "")
        finally:
            self._loading = False
