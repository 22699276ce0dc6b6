# handover_page.py
import tkinter as tk
from tkinter import ttk

from config import CAREGIVER_NAMES, HANDOVER_ROLES, OTHER_NAME
from editors import PatientInfoEditor
from ui_blocks import SECTION_FONT


class HandoverPage(ttk.Frame):
    """
    Handover Information:
    - Received-from role (fixed list)
    - Caregiver name (fixed list, or "Other" -> free text)
    """

    def __init__(self, parent, editor: PatientInfoEditor):
        super().__init__(parent)
        self.editor = editor
        self._loading = False

        self._role_by_label = {label: value for value, label in HANDOVER_ROLES}
        self._label_by_role = {value: label for value, label in HANDOVER_ROLES}

        self.role_var = tk.StringVar(value="")
        self.name_var = tk.StringVar(value="")
        self.other_var = tk.StringVar(value="")

        self._build_ui()
        self.refresh()

    # ---------- UI ----------
    def _build_ui(self):
        ttk.Label(self, text="Handover Information", font=SECTION_FONT).grid(
            row=0, column=0, columnspan=2, sticky="w", padx=10, pady=(10, 8)
        )

        ttk.Label(self, text="Received From (Role):").grid(row=1, column=0, sticky="w", padx=10, pady=6)
        role_cb = ttk.Combobox(
            self,
            textvariable=self.role_var,
            values=[label for _, label in HANDOVER_ROLES],
            state="readonly",
            width=32,
        )
        role_cb.grid(row=1, column=1, sticky="w", padx=(10, 0), pady=6)
        role_cb.bind("<<ComboboxSelected>>", lambda e: self._on_role())

        ttk.Label(self, text="Caregiver Name:").grid(row=2, column=0, sticky="w", padx=10, pady=6)
        name_cb = ttk.Combobox(
            self,
            textvariable=self.name_var,
            values=CAREGIVER_NAMES + ["Other"],
            state="readonly",
            width=32,
        )
        name_cb.grid(row=2, column=1, sticky="w", padx=(10, 0), pady=6)
        name_cb.bind("<<ComboboxSelected>>", lambda e: self._on_name_pick())

        self.other_label = ttk.Label(self, text="Specify Name:")
        self.other_entry = ttk.Entry(self, textvariable=self.other_var, width=34)
        self.other_label.grid(row=3, column=0, sticky="w", padx=10, pady=6)
        self.other_entry.grid(row=3, column=1, sticky="w", padx=(10, 0), pady=6)
        self.other_var.trace_add("write", lambda *_: self._on_other_typed())

        self._show_other(False)

    def _show_other(self, show: bool):
        if show:
            self.other_label.grid()
            self.other_entry.grid()
        else:
            self.other_label.grid_remove()
            self.other_entry.grid_remove()

    # ---------- events ----------
    def _on_role(self):
        if self._loading:
            return
        label = self.role_var.get()
        self.editor.set_role(self._role_by_label.get(label, label))

    def _on_name_pick(self):
        if self._loading:
            return
        picked = self.name_var.get()
        if picked.lower() == OTHER_NAME:
            self._show_other(True)
            self.editor.set_name(self.other_var.get())
            self.other_entry.focus_set()
        else:
            self._show_other(False)
            self.editor.set_name(picked)

    def _on_other_typed(self):
        if self._loading:
            return
        if self.name_var.get().lower() == OTHER_NAME:
            self.editor.set_name(self.other_var.get())

    # -------- Public API --------
    def refresh(self):
        """Redraw from editor.record (after reset)."""
        rf = self.editor.record.received_from
        self._loading = True
        try:
            self.role_var.set(self._label_by_role.get(rf.role, rf.role))
            if not rf.name or rf.name in CAREGIVER_NAMES:
                self.name_var.set(rf.name)
                self.other_var.set("")
                self._show_other(False)
            else:
                self.name_var.set("Other")
                self.other_var.set(rf.name)
                self._show_other(True)
        finally:
            self._loading = False
