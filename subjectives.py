# subjectives.py
from tkinter import ttk

from config import COMMON_SYMPTOMS, SUBJECTIVE_TYPE_LABELS, SUBJECTIVE_TYPES
from editors import SubjectiveEditor
from ui_blocks import SECTION_FONT, LABEL_FONT, CheckGrid, FreeText, RadioRow


class SubjectivePage(ttk.Frame):
    """
    Subjective data:
    - Nil subjective / Nil obtained / Custom
    - Custom shows the common-symptom checklist + free text
    - Hiding the custom panel does not clear it (the record keeps both)
    """

    def __init__(self, parent, editor: SubjectiveEditor):
        super().__init__(parent)
        self.editor = editor
        self._build_ui()
        self.refresh()

    # ---------- UI ----------
    def _build_ui(self):
        ttk.Label(self, text="Subjective Data", font=SECTION_FONT).pack(anchor="w", padx=10, pady=(10, 8))
        ttk.Label(self, text="Patient's subjective data:").pack(anchor="w", padx=10)

        self.type_row = RadioRow(
            self,
            [(t, SUBJECTIVE_TYPE_LABELS[t]) for t in SUBJECTIVE_TYPES],
            on_select=self._on_type,
            vertical=True,
        )
        self.type_row.pack(anchor="w", padx=20, pady=(4, 10))

        self.custom_frame = ttk.Frame(self)

        ttk.Label(self.custom_frame, text="Common symptoms:", font=LABEL_FONT).pack(anchor="w", pady=(0, 4))
        self.symptoms = CheckGrid(self.custom_frame, COMMON_SYMPTOMS, on_toggle=self.editor.toggle_symptom)
        self.symptoms.pack(fill="x", pady=(0, 10))

        self.notes = FreeText(
            self.custom_frame,
            "Additional subjective data:",
            on_change=self.editor.set_custom_text,
            height=6,
        )
        self.notes.pack(fill="both", expand=True)

    def _apply_visibility(self):
        if self.editor.record.subjective_type == "custom":
            self.custom_frame.pack(fill="both", expand=True, padx=10, pady=(0, 10))
        else:
            self.custom_frame.pack_forget()

    # ---------- events ----------
    def _on_type(self, value: str):
        self.editor.set_type(value)
        self._apply_visibility()

    # -------- Public API --------
    def refresh(self):
        rec = self.editor.record
        self.type_row.set(rec.subjective_type)
        self.symptoms.set_selected(rec.common_symptoms)
        self.notes.set_value(rec.custom_text)
        self._apply_visibility()
