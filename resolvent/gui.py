"""Desktop front end for creating, browsing and testing formula files."""

from __future__ import annotations

import argparse
import enum
import re
from pathlib import Path
from typing import Callable, Optional, Protocol, Sequence

from resolvent.library import (
    INVALID_CLAUSE,
    INVALID_COUNT,
    INVALID_NAME,
    MISSING_NAME,
    FormulaDraft,
    LibraryError,
    Verdict,
    is_valid_clause,
    is_valid_formula_name,
    list_formula_files,
    preview_file,
    run_solver,
)

TITLE = "LOGICAL FORMULAS SOLVER"
NO_FILES = "No CNF files found"
SOLVER_FAILED = "Error executing logic solver!"
PREVIEW_FAILED = "Error: Could not open file"
TEST_PROMPT = "Would you like to test it now?"
CREDITS = (
    "LOGICAL FORMULAS SOLVER",
    "Propositional formulas in conjunctive normal form",
    "Satisfiability by resolution refutation",
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Screen(enum.Enum):
    """The page currently shown by the application."""

    MAIN_MENU = "main menu"
    FORMULA_CREATION = "formula creation"
    CLAUSE_INPUT = "clause input"
    FORMULA_LIST = "formula list"
    CREDITS = "credits"


class View(Protocol):
    """What the application needs from a user interface."""

    def render(self, app: "SolverApp") -> None: ...

    def error(self, message: str) -> None: ...

    def confirm(self, message: str) -> bool: ...

    def show_result(self, text: str) -> None: ...

    def mainloop(self) -> None: ...


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


class SolverApp:
    """Screen flow and state of the formula manager, independent of the toolkit."""

    def __init__(
        self,
        directory: str | Path = ".",
        view: Optional[View] = None,
        solver: Optional[Callable[[Path], Verdict]] = None,
        command: Optional[Sequence[str]] = None,
    ) -> None:
        self.directory = Path(directory)
        self.view: View = view if view is not None else TkView()
        self._solver = solver if solver is not None else (
            lambda path: run_solver(path, command)
        )
        self.screen = Screen.MAIN_MENU
        self.formula_name = ""
        self.clause_count = ""
        self.clause_text = ""
        self.status = ""
        self.files: list[str] = []
        self.preview = ""
        self.draft: Optional[FormulaDraft] = None
        self.last_verdict: Optional[Verdict] = None
        self._selected: Optional[str] = None

    @property
    def selected(self) -> Optional[str]:
        """The formula file chosen in the list, if any."""
        return self._selected

    @selected.setter
    def selected(self, name: Optional[str]) -> None:
        self._selected = name
        if name is None:
            self.preview = ""
            return
        try:
            self.preview = preview_file(self.directory / name)
        except LibraryError:
            self.preview = PREVIEW_FAILED

    @property
    def instruction(self) -> str:
        """Prompt shown above the clause entry field."""
        done = len(self.draft.clauses) if self.draft else 0
        total = self.draft.total_clauses if self.draft else 0
        return (
            f"Enter clause {done + 1} of {total}\n"
            "Use space between literals, ! for negation (e.g., P !Q R):"
        )

    def _show(self, screen: Screen) -> None:
        self.screen = screen
        self.view.render(self)

    def show_main_menu(self) -> None:
        self._show(Screen.MAIN_MENU)

    def show_formula_creation(self) -> None:
        self.draft = None
        self.formula_name = ""
        self.clause_count = ""
        self.status = ""
        self._show(Screen.FORMULA_CREATION)

    def show_clause_input(self) -> None:
        self.clause_text = ""
        self._show(Screen.CLAUSE_INPUT)

    def show_formula_list(self) -> None:
        self.files = list_formula_files(self.directory)
        self.selected = None
        self._show(Screen.FORMULA_LIST)

    def show_credits(self) -> None:
        self._show(Screen.CREDITS)

    def submit(self) -> None:
        """Start a new formula, or add the entered clause to the one in progress."""
        if self.draft is None:
            self._start_draft()
        else:
            self._add_clause()

    def _start_draft(self) -> None:
        if not self.formula_name:
            self.view.error(MISSING_NAME)
            return
        if not is_valid_formula_name(self.formula_name):
            self.view.error(INVALID_NAME)
            return
        total = _atoi(self.clause_count)
        if total < 0:
            self.view.error(INVALID_COUNT)
            return
        draft = FormulaDraft(self.formula_name, total)
        try:
            draft.save(self.directory)
        except LibraryError as exc:
            self.view.error(str(exc))
            return
        if draft.is_complete():
            self._finish(draft, "Empty formula saved to")
            return
        self.draft = draft
        self.status = ""
        self.show_clause_input()

    def _add_clause(self) -> None:
        draft = self.draft
        assert draft is not None
        if not is_valid_clause(self.clause_text):
            self.status = INVALID_CLAUSE
            self.view.render(self)
            return
        count = draft.add_clause(self.clause_text)
        try:
            draft.save(self.directory)
        except LibraryError as exc:
            self.draft = None
            self.view.error(str(exc))
            self.show_main_menu()
            return
        if draft.is_complete():
            self.draft = None
            self._finish(draft, "Formula saved to")
        else:
            self.status = f"Clause {count} added successfully!"
            self.show_clause_input()

    def _finish(self, draft: FormulaDraft, lead: str) -> None:
        if self.view.confirm(f"{lead} {draft.filename}\n{TEST_PROMPT}"):
            self._test(self.directory / draft.filename)
        self.show_main_menu()

    def _test(self, path: Path) -> None:
        try:
            verdict = self._solver(path)
        except LibraryError:
            self.view.error(SOLVER_FAILED)
            return
        self.last_verdict = verdict
        self.view.show_result(str(verdict))

    def test_selected(self) -> None:
        """Run the solver on the file chosen in the list."""
        if self.selected is not None:
            self._test(self.directory / self.selected)

    def go_back(self) -> None:
        """Abandon any formula in progress and return to the main menu."""
        self.draft = None
        self.show_main_menu()

    def run(self) -> None:
        self.show_main_menu()
        self.view.mainloop()


class TkView:
    """Tkinter user interface for :class:`SolverApp`."""

    def __init__(self) -> None:
        import tkinter as tk
        from tkinter import messagebox

        self._tk = tk
        self._messagebox = messagebox
        self.root = tk.Tk()
        self.root.title(TITLE)
        self.root.geometry("800x700")
        self.root.configure(bg="white")
        self._font = ("Segoe UI", 11)
        self._big = ("Segoe UI", 16, "bold")
        tk.Label(
            self.root, text=TITLE, font=self._big, fg="#0000cd", bg="white"
        ).pack(pady=(30, 10))
        self._body = tk.Frame(self.root, bg="white")
        self._body.pack(fill="both", expand=True)

    def _label(self, text: str, big: bool = False, **options) -> None:
        self._tk.Label(
            self._body,
            text=text,
            font=self._big if big else self._font,
            fg="#0000cd",
            bg="white",
            **options,
        ).pack(pady=8)

    def _button(self, text: str, command: Callable[[], None], **options):
        button = self._tk.Button(
            self._body, text=text, font=self._font, width=30, command=command, **options
        )
        button.pack(pady=6)
        return button

    def _entry(self, app: SolverApp, attribute: str):
        variable = self._tk.StringVar(value=getattr(app, attribute))
        variable.trace_add(
            "write", lambda *_: setattr(app, attribute, variable.get())
        )
        entry = self._tk.Entry(
            self._body, textvariable=variable, font=self._font, width=34
        )
        entry.pack(pady=4)
        return entry

    def render(self, app: SolverApp) -> None:
        for child in self._body.winfo_children():
            child.destroy()
        pages = {
            Screen.MAIN_MENU: self._main_menu,
            Screen.FORMULA_CREATION: self._creation,
            Screen.CLAUSE_INPUT: self._clause_input,
            Screen.FORMULA_LIST: self._formula_list,
            Screen.CREDITS: self._credits,
        }
        pages[app.screen](app)

    def _main_menu(self, app: SolverApp) -> None:
        self._tk.Frame(self._body, height=40, bg="white").pack()
        self._button("Create new Formula", app.show_formula_creation)
        self._button("Test an existing Formula", app.show_formula_list)
        self._button("Show all available Formulas", app.show_formula_list)
        self._button("Show the Credits", app.show_credits)
        self._button("Exit the program", self.root.destroy)

    def _creation(self, app: SolverApp) -> None:
        self._label("Create a new Formula", big=True)
        self._label("Enter the formula Name (e.g : TEST):")
        self._entry(app, "formula_name").focus_set()
        self._label("Number of Clauses included :")
        self._entry(app, "clause_count")
        self._button("Start Adding Clauses", app.submit)
        self._button("Go back to Main Menu", app.go_back)

    def _clause_input(self, app: SolverApp) -> None:
        self._label("Enter Clause", big=True)
        self._label(app.instruction, justify="center")
        entry = self._entry(app, "clause_text")
        entry.focus_set()
        entry.bind("<Return>", lambda _event: app.submit())
        self._label(app.status, wraplength=500)
        self._button("Add Clause", app.submit)
        self._button("Go back to Main Menu", app.go_back)

    def _formula_list(self, app: SolverApp) -> None:
        tk = self._tk
        self._label("All available Formulas", big=True)
        panes = tk.Frame(self._body, bg="white")
        panes.pack(fill="both", expand=True, padx=40)
        listbox = tk.Listbox(panes, font=self._font, width=32, height=18)
        listbox.grid(row=0, column=0, rowspan=2, padx=10, sticky="ns")
        tk.Label(
            panes, text="Formula Content:", font=self._font, fg="#0000cd", bg="white"
        ).grid(row=0, column=1, sticky="w")
        preview = tk.Text(panes, font=self._font, width=32, height=16)
        preview.grid(row=1, column=1, padx=10)
        preview.configure(state="disabled")
        for name in app.files or [NO_FILES]:
            listbox.insert("end", name)
        if not app.files:
            listbox.configure(state="disabled")
        test_button = self._button(
            "Test Selected Formula", app.test_selected, state="disabled"
        )

        def on_select(_event) -> None:
            chosen = listbox.curselection()
            if not chosen:
                return
            app.selected = app.files[chosen[0]]
            test_button.configure(state="normal")
            preview.configure(state="normal")
            preview.delete("1.0", "end")
            preview.insert("1.0", app.preview)
            preview.configure(state="disabled")

        listbox.bind("<<ListboxSelect>>", on_select)
        self._button("Go back to Main Menu", app.go_back)

    def _credits(self, app: SolverApp) -> None:
        first, *rest = CREDITS
        self._label(first, big=True)
        for line in rest:
            self._label(line, relief="solid", borderwidth=1, width=50)
        self._button("Go back to Main Menu", app.go_back)

    def error(self, message: str) -> None:
        self._messagebox.showerror("Error", message, parent=self.root)

    def confirm(self, message: str) -> bool:
        return bool(self._messagebox.askyesno("Success", message, parent=self.root))

    def show_result(self, text: str) -> None:
        self._messagebox.showinfo("Logic Solver Results", text, parent=self.root)

    def mainloop(self) -> None:
        self.root.mainloop()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="resolvent-gui", description=TITLE)
    parser.add_argument(
        "directory", nargs="?", default=".", help="folder holding the .cnf files"
    )
    args = parser.parse_args(argv)
    SolverApp(args.directory).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())