# objectives.py
from tkinter import ttk

from config import FIELD_PLACEHOLDERS, OBJECTIVE_STATUS_LABELS, OBJECTIVE_STATUSES, SYSTEM_ORDER
from editors import ObjectiveEditor
from models import SYSTEM_TYPES
from ui_blocks import SECTION_FONT, LABEL_FONT, CheckGrid, FreeText, LabeledEntry, RadioRow


# Long names for the block frame titles
SYSTEM_LONG_NAMES = {
    "respiratory": "Respiratory",
    "cardiovascular": "Cardiovascular",
    "cns": "Central Nervous System",
    "git": "Gastrointestinal",
    "renal": "Renal",
    "skin": "Skin",
}

STATUS_BADGES = {
    "normal": "OK",
    "abnormal": "!",
    "not-assessed": "--",
}


class SystemBlock:
    """
    One body system:
    - Status (Normal / Abnormal / Not assessed)
    - System-specific fields (always visible)
    - Findings checklist + notes (only while Abnormal)
    """

    def __init__(self, parent, system: str, editor: ObjectiveEditor, on_status_change=None):
        self.system = system
        self.editor = editor
        self.on_status_change = on_status_change
        self.system_cls = SYSTEM_TYPES[system]

        self.frame = ttk.LabelFrame(parent, text=SYSTEM_LONG_NAMES.get(system, system))
        self._build_widgets()

    def _build_widgets(self):
        padx = 10

        self.status_row = RadioRow(
            self.frame,
            [(s, OBJECTIVE_STATUS_LABELS[s]) for s in OBJECTIVE_STATUSES],
            on_select=self._on_status,
        )
        self.status_row.grid(row=0, column=0, sticky="w", padx=padx, pady=(8, 8))

        # ---- schema fields ----
        fields_frame = ttk.Frame(self.frame)
        fields_frame.grid(row=1, column=0, sticky="ew", padx=padx, pady=(0, 8))
        ttk.Label(fields_frame, text=f"{self.system_cls.FIELD_GROUP}:", font=LABEL_FONT).pack(anchor="w")

        self.field_entries: dict[str, LabeledEntry] = {}
        for name, label in self.system_cls.FIELDS:
            entry = LabeledEntry(
                fields_frame,
                label,
                on_change=lambda value, n=name: self.editor.set_field(self.system, n, value),
                hint=FIELD_PLACEHOLDERS.get(name, ""),
            )
            entry.pack(anchor="w", pady=2)
            self.field_entries[name] = entry

        # ---- abnormal-only panel ----
        self.abnormal_frame = ttk.Frame(self.frame)
        self.abnormal_frame.grid(row=2, column=0, sticky="nsew", padx=padx, pady=(0, 10))
        self.abnormal_frame.grid_columnconfigure(0, weight=1)

        ttk.Label(
            self.abnormal_frame, text="Common findings (select all that apply):", font=LABEL_FONT
        ).grid(row=0, column=0, sticky="w", pady=(0, 4))
        self.symptoms = CheckGrid(
            self.abnormal_frame,
            self.system_cls.symptom_catalog(),
            on_toggle=lambda s: self.editor.toggle_symptom(self.system, s),
        )
        self.symptoms.grid(row=1, column=0, sticky="ew", pady=(0, 8))

        self.notes = FreeText(
            self.abnormal_frame,
            "Additional notes:",
            on_change=lambda text: self.editor.set_notes(self.system, text),
            height=4,
        )
        self.notes.grid(row=2, column=0, sticky="nsew")

        self.frame.grid_columnconfigure(0, weight=1)

    def _on_status(self, status: str):
        self.editor.set_status(self.system, status)
        # symptoms may have just been cleared
        self.refresh()
        if callable(self.on_status_change):
            self.on_status_change()

    def refresh(self):
        data = self.editor.record.system(self.system)
        self.status_row.set(data.status)
        for name, entry in self.field_entries.items():
            entry.set_value(getattr(data, name))
        self.symptoms.set_selected(data.symptoms)
        self.notes.set_value(data.notes)

        if data.status == "abnormal":
            self.abnormal_frame.grid()
        else:
            self.abnormal_frame.grid_remove()


class ObjectivePage(ttk.Frame):
    """
    Objective data, one block per body system.
    Only ONE block is shown at a time; the nav row switches between them
    and shows each system's status.
    """

    def __init__(self, parent, editor: ObjectiveEditor):
        super().__init__(parent)
        self.editor = editor

        self.blocks: dict[str, SystemBlock] = {}
        self.block_buttons: dict[str, ttk.Button] = {}
        self.current_system = SYSTEM_ORDER[0]

        self._build_ui()
        self.refresh()
        self.show_block(self.current_system)

    # ---------- UI ----------
    def _build_ui(self):
        ttk.Label(self, text="Objective Data", font=SECTION_FONT).pack(anchor="w", padx=10, pady=(10, 6))

        self.nav = ttk.Frame(self)
        self.nav.pack(fill="x", padx=10, pady=(0, 10))

        # Container where blocks live (stacked in the same grid cell)
        self.content = ttk.Frame(self)
        self.content.pack(fill="both", expand=True, padx=10, pady=(0, 10))
        self.content.rowconfigure(0, weight=1)
        self.content.columnconfigure(0, weight=1)

        for system in SYSTEM_ORDER:
            block = SystemBlock(self.content, system, self.editor, on_status_change=self._refresh_nav_buttons)
            block.frame.grid(row=0, column=0, sticky="nsew")
            self.blocks[system] = block

            btn = ttk.Button(self.nav, command=lambda s=system: self.show_block(s))
            btn.pack(side="left", padx=(0, 6))
            self.block_buttons[system] = btn

    def _button_text(self, system: str) -> str:
        status = self.editor.record.system(system).status
        return f"{SYSTEM_TYPES[system].TITLE} {STATUS_BADGES.get(status, '--')}"

    def _refresh_nav_buttons(self):
        for system, btn in self.block_buttons.items():
            btn.configure(text=self._button_text(system))
            if system == self.current_system:
                btn.state(["disabled"])
            else:
                btn.state(["!disabled"])

    # ---------- Navigation ----------
    def show_block(self, system: str):
        if system not in self.blocks:
            return
        self.current_system = system
        self.blocks[system].frame.tkraise()
        self._refresh_nav_buttons()

    # -------- Public API --------
    def refresh(self):
        for block in self.blocks.values():
            block.refresh()
        self._refresh_nav_buttons()
