# handover_app.py
import logging
import tkinter as tk
from tkinter import ttk, messagebox

from config import (
    REPORT_TITLE,
    STANDARD_ASSESSMENTS,
    STANDARD_INTERVENTIONS,
    STANDARD_PLANS,
    UI_PAGES,
)
from editors import (
    AssessmentEditor,
    InterventionEditor,
    ObjectiveEditor,
    PatientInfoEditor,
    PlanningEditor,
    SubjectiveEditor,
)
from export_options import ExportNotice, copy_to_clipboard, download_pdf, print_report
from logs import get_logger, log_path
from models import ReportRecords
from report_render import render_sections
from report_store import ReportStore
from report_text import render_text
from report_view import render_view
from utils import use_system_locale

# Pages
from handover_page import HandoverPage
from objectives import ObjectivePage
from plan_page import ChecklistPage
from preview_pane import PreviewPane
from scrollframe import ScrollFrame
from subjectives import SubjectivePage

_LOGGER = logging.getLogger(__name__)


class App(tk.Tk):
    def __init__(self, store: ReportStore | None = None):
        super().__init__()

        self.store = store or ReportStore()

        self.title(f"{REPORT_TITLE} - Handover Builder")
        self.geometry("1280x860")

        self.status_var = tk.StringVar(value="Ready.")

        # Each editor pushes its full record straight into the store
        records = self.store.snapshot()
        self.editors = {
            "Handover": PatientInfoEditor(records.patient_info, self.store.update_patient_info),
            "Subjective": SubjectiveEditor(records.subjective, self.store.update_subjective),
            "Objective": ObjectiveEditor(records.objective, self.store.update_objective),
            "Assessment": AssessmentEditor(records.assessment, self.store.update_assessment),
            "Planning": PlanningEditor(records.planning, self.store.update_planning),
            "Interventions": InterventionEditor(records.intervention, self.store.update_intervention),
        }

        self.pages: dict[str, ttk.Frame] = {}
        self.page_holders: dict[str, ScrollFrame] = {}
        self.page_buttons: dict[str, ttk.Button] = {}
        self.current_page = UI_PAGES[0]

        self._build_ui()

        self.store.subscribe(self._on_store_change)
        self._on_store_change(self.store.snapshot())
        self.show_page(self.current_page)

    # ---------- UI ----------
    def _build_ui(self):
        padx = 10

        # =========================
        # LEFT: form pages
        # RIGHT: live preview
        # =========================
        main = ttk.Frame(self)
        main.pack(fill="both", expand=True)

        left_root = ttk.Frame(main, width=700)
        left_root.pack(side="left", fill="both", expand=True)
        left_root.pack_propagate(False)

        right_root = ttk.Frame(main)
        right_root.pack(side="right", fill="both", expand=True)

        # --- Export toolbar ---
        toolbar = ttk.Frame(left_root)
        toolbar.pack(fill="x", padx=padx, pady=(padx, 6))

        ttk.Button(toolbar, text="Copy to Clipboard", command=self.copy_report).pack(side="left")
        ttk.Button(toolbar, text="Print", command=self.print_report).pack(side="left", padx=(6, 0))
        ttk.Button(toolbar, text="Download PDF", command=self.download_pdf).pack(side="left", padx=(6, 0))
        ttk.Button(toolbar, text="Reset Form", command=self.reset_form).pack(side="right")

        ttk.Separator(left_root).pack(fill="x", padx=padx)

        # --- Page nav ---
        nav = ttk.Frame(left_root)
        nav.pack(fill="x", padx=padx, pady=(6, 6))
        for name in UI_PAGES:
            btn = ttk.Button(nav, text=name, command=lambda n=name: self.show_page(n))
            btn.pack(side="left", padx=(0, 4))
            self.page_buttons[name] = btn

        # --- Stacked pages ---
        container = ttk.Frame(left_root)
        container.pack(fill="both", expand=True, padx=padx)
        container.rowconfigure(0, weight=1)
        container.columnconfigure(0, weight=1)

        # one ScrollFrame per page; tall pages outgrow short screens
        builders = {
            "Handover": lambda p: HandoverPage(p, self.editors["Handover"]),
            "Subjective": lambda p: SubjectivePage(p, self.editors["Subjective"]),
            "Objective": lambda p: ObjectivePage(p, self.editors["Objective"]),
            "Assessment": lambda p: ChecklistPage(
                p, "Assessment", "assessments", STANDARD_ASSESSMENTS, self.editors["Assessment"]
            ),
            "Planning": lambda p: ChecklistPage(
                p, "Planning", "plans", STANDARD_PLANS, self.editors["Planning"]
            ),
            "Interventions": lambda p: ChecklistPage(
                p, "Interventions", "interventions", STANDARD_INTERVENTIONS, self.editors["Interventions"]
            ),
        }
        for name in UI_PAGES:
            holder = ScrollFrame(container)
            holder.grid(row=0, column=0, sticky="nsew")
            page = builders[name](holder.content)
            page.pack(fill="both", expand=True)
            self.page_holders[name] = holder
            self.pages[name] = page

        # --- Status bar ---
        ttk.Label(left_root, textvariable=self.status_var, foreground="gray").pack(
            fill="x", padx=padx, pady=(4, 8)
        )

        # --- Preview ---
        self.preview = PreviewPane(right_root, title="Report Preview")
        self.preview.pack(fill="both", expand=True)

    # ---------- Navigation ----------
    def show_page(self, page_name: str):
        if page_name not in self.pages:
            return
        self.current_page = page_name
        self.page_holders[page_name].tkraise()
        for name, btn in self.page_buttons.items():
            if name == page_name:
                btn.state(["disabled"])
            else:
                btn.state(["!disabled"])

    # ---------- Preview ----------
    def _on_store_change(self, records: ReportRecords):
        self.preview.show(render_view(render_sections(records)))

    def current_report_text(self) -> str:
        return render_text(render_sections(self.store.snapshot()))

    # ---------- Export ----------
    def _show_notice(self, notice: ExportNotice):
        self.status_var.set(notice.title)
        if notice.ok:
            messagebox.showinfo(notice.title, notice.message)
        else:
            messagebox.showerror(notice.title, notice.message)

    def copy_report(self):
        self._show_notice(copy_to_clipboard(self.current_report_text(), self))

    def print_report(self):
        self._show_notice(print_report(self.current_report_text(), REPORT_TITLE))

    def download_pdf(self):
        notice = download_pdf()
        self.status_var.set(notice.title)
        messagebox.showinfo(notice.title, notice.message)

    # ---------- Reset ----------
    def reset_form(self):
        if not messagebox.askyesno("Reset Form", "Clear EVERY section and return to the defaults?"):
            return

        self.store.reset_form()
        records = self.store.snapshot()
        self.editors["Handover"].load(records.patient_info)
        self.editors["Subjective"].load(records.subjective)
        self.editors["Objective"].load(records.objective)
        self.editors["Assessment"].load(records.assessment)
        self.editors["Planning"].load(records.planning)
        self.editors["Interventions"].load(records.intervention)

        for page in self.pages.values():
            page.refresh()
        for holder in self.page_holders.values():
            holder.scroll_to_top()

        self.show_page(UI_PAGES[0])
        self.status_var.set("Form reset. (New blank report)")


def main():
    get_logger()
    _LOGGER.info("Starting handover builder (log: %s)", log_path())
    use_system_locale()
    App().mainloop()


if __name__ == "__main__":
    main()
