# plan_page.py
from __future__ import annotations

from tkinter import ttk

from editors import ChecklistEditor
from ui_blocks import SECTION_FONT, LABEL_FONT, CheckGrid, FreeText, RadioRow


class ChecklistPage(ttk.Frame):
    """
    Shared page for Assessment, Planning and Interventions:
      - Standard (multi-check from a fixed catalog) or Custom (free text)
      - Only the active panel is shown; the other keeps its content
    """

    def __init__(self, parent, title: str, noun: str, catalog, editor: ChecklistEditor):
        super().__init__(parent)
        self.title = title
        self.noun = noun
        self.catalog = list(catalog)
        self.editor = editor
        self._build_ui()
        self.refresh()

    # ---------- UI ----------
    def _build_ui(self):
        ttk.Label(self, text=self.title, font=SECTION_FONT).pack(anchor="w", padx=10, pady=(10, 8))

        self.type_row = RadioRow(
            self,
            [("standard", f"Standard {self.noun}"), ("custom", f"Custom {self.noun}")],
            on_select=self._on_type,
        )
        self.type_row.pack(anchor="w", padx=20, pady=(0, 10))

        self.standard_frame = ttk.Frame(self)
        ttk.Label(self.standard_frame, text=f"Select {self.noun}:", font=LABEL_FONT).pack(anchor="w", pady=(0, 4))
        self.checks = CheckGrid(self.standard_frame, self.catalog, on_toggle=self.editor.toggle_item)
        self.checks.pack(fill="x")

        self.custom_frame = ttk.Frame(self)
        self.custom_text = FreeText(
            self.custom_frame,
            f"Custom {self.noun}:",
            on_change=self.editor.set_custom_text,
            height=8,
        )
        self.custom_text.pack(fill="both", expand=True)

    def _apply_visibility(self):
        self.standard_frame.pack_forget()
        self.custom_frame.pack_forget()
        if self.editor.record.entry_type == "standard":
            self.standard_frame.pack(fill="x", padx=10, pady=(0, 10))
        else:
            self.custom_frame.pack(fill="both", expand=True, padx=10, pady=(0, 10))

    # ---------- events ----------
    def _on_type(self, value: str):
        self.editor.set_type(value)
        self._apply_visibility()

    # -------- Public API --------
    def refresh(self):
        rec = self.editor.record
        self.type_row.set(rec.entry_type)
        self.checks.set_selected(rec.standard_items)
        self.custom_text.set_value(rec.custom_text)
        self._apply_visibility()
