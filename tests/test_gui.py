from pathlib import Path

import pytest

from resolvent.gui import (
    PREVIEW_FAILED,
    SOLVER_FAILED,
    Screen,
    SolverApp,
)
from resolvent.library import (
    FILE_HEADER,
    INVALID_CLAUSE,
    INVALID_COUNT,
    INVALID_NAME,
    MISSING_NAME,
    LibraryError,
    Verdict,
)


class FakeView:
    def __init__(self, answer=False):
        self.answer = answer
        self.screens = []
        self.errors = []
        self.prompts = []
        self.results = []
        self.loops = 0

    def render(self, app):
        self.screens.append(app.screen)

    def error(self, message):
        self.errors.append(message)

    def confirm(self, message):
        self.prompts.append(message)
        return self.answer

    def show_result(self, text):
        self.results.append(text)

    def mainloop(self):
        self.loops += 1


class FakeSolver:
    def __init__(self, verdict=Verdict.SATISFIABLE, fail=False):
        self.verdict = verdict
        self.fail = fail
        self.paths = []

    def __call__(self, path):
        self.paths.append(Path(path))
        if self.fail:
            raise LibraryError("boom")
        return self.verdict


@pytest.fixture
def view():
    return FakeView()


@pytest.fixture
def solver():
    return FakeSolver()


def make_app(tmp_path, view, solver):
    return SolverApp(tmp_path, view=view, solver=solver)


def start(app, name, count):
    app.show_formula_creation()
    app.formula_name = name
    app.clause_count = count
    app.submit()


def test_run_shows_main_menu_and_loops(tmp_path, view, solver):
    app = make_app(tmp_path, view, solver)
    app.run()
    assert view.screens == [Screen.MAIN_MENU]
    assert view.loops == 1


def test_missing_name_is_reported(tmp_path, view, solver):
    app = make_app(tmp_path, view, solver)
    start(app, "", "2")
    assert view.errors == [MISSING_NAME]
    assert app.draft is None
    assert list(tmp_path.iterdir()) == []


def test_invalid_name_is_reported(tmp_path, view, solver):
    app = make_app(tmp_path, view, solver)
    start(app, "bad name", "2")
    assert view.errors == [INVALID_NAME]
    assert app.screen is Screen.FORMULA_CREATION


def test_negative_count_is_reported(tmp_path, view, solver):
    app = make_app(tmp_path, view, solver)
    start(app, "TEST", "-2")
    assert view.errors == [INVALID_COUNT]
    assert app.draft is None


def test_empty_formula_is_saved_and_tested(tmp_path, solver):
    view = FakeView(answer=True)
    app = make_app(tmp_path, view, solver)
    start(app, "TEST", "0")
    path = tmp_path / "TEST.cnf"
    assert path.read_text() == FILE_HEADER + "\n"
    assert view.prompts[0].startswith("Empty formula saved to TEST.cnf")
    assert solver.paths == [path]
    assert view.results == ["Result: Formula is SATISFIABLE"]
    assert app.screen is Screen.MAIN_MENU


def test_declined_test_does_not_run_solver(tmp_path, view, solver):
    app = make_app(tmp_path, view, solver)
    start(app, "TEST", "abc")
    assert solver.paths == []
    assert view.results == []
    assert (tmp_path / "TEST.cnf").exists()


def test_clauses_are_entered_one_by_one(tmp_path, view, solver):
    app = make_app(tmp_path, view, solver)
    start(app, "TEST", "2")
    assert app.screen is Screen.CLAUSE_INPUT
    assert app.instruction.startswith("Enter clause 1 of 2")
    app.clause_text = "P !Q R"
    app.submit()
    assert app.status == "Clause 1 added successfully!"
    assert app.instruction.startswith("Enter clause 2 of 2")
    assert app.clause_text == ""
    app.clause_text = "!P"
    app.submit()
    assert (tmp_path / "TEST.cnf").read_text().splitlines() == [
        FILE_HEADER,
        "P !Q R",
        "!P",
    ]
    assert view.prompts[0].startswith("Formula saved to TEST.cnf")
    assert app.draft is None
    assert app.screen is Screen.MAIN_MENU


def test_invalid_clause_keeps_draft(tmp_path, view, solver):
    app = make_app(tmp_path, view, solver)
    start(app, "TEST", "1")
    app.clause_text = "P 1Q"
    app.submit()
    assert app.status == INVALID_CLAUSE
    assert app.draft.clauses == []
    assert app.screen is Screen.CLAUSE_INPUT


def test_go_back_abandons_draft_but_keeps_partial_file(tmp_path, view, solver):
    app = make_app(tmp_path, view, solver)
    start(app, "TEST", "3")
    app.clause_text = "A"
    app.submit()
    app.go_back()
    assert app.draft is None
    assert app.screen is Screen.MAIN_MENU
    assert (tmp_path / "TEST.cnf").read_text().splitlines() == [FILE_HEADER, "A"]


def test_formula_list_and_preview(tmp_path, view, solver):
    (tmp_path / "b.cnf").write_text("# header\nP !Q\n\nR\n")
    (tmp_path / "a.cnf").write_text("# header\nX\n")
    (tmp_path / "notes.txt").write_text("ignored")
    app = make_app(tmp_path, view, solver)
    app.show_formula_list()
    assert app.files == ["a.cnf", "b.cnf"]
    assert app.selected is None
    app.selected = "b.cnf"
    assert app.preview == "P V !Q ^\nR"


def test_preview_of_missing_file(tmp_path, view, solver):
    app = make_app(tmp_path, view, solver)
    app.show_formula_list()
    app.selected = "gone.cnf"
    assert app.preview == PREVIEW_FAILED


def test_test_selected_runs_solver(tmp_path, view):
    (tmp_path / "f.cnf").write_text("# header\nP\n!P\n")
    solver = FakeSolver(Verdict.UNSATISFIABLE)
    app = make_app(tmp_path, view, solver)
    app.show_formula_list()
    app.selected = "f.cnf"
    app.test_selected()
    assert solver.paths == [tmp_path / "f.cnf"]
    assert app.last_verdict is Verdict.UNSATISFIABLE
    assert view.results == ["Result: Formula is UNSATISFIABLE"]


def test_test_selected_without_selection_does_nothing(tmp_path, view, solver):
    app = make_app(tmp_path, view, solver)
    app.show_formula_list()
    app.test_selected()
    assert solver.paths == []
    assert view.results == []


def test_solver_failure_is_reported(tmp_path, view):
    (tmp_path / "f.cnf").write_text("# header\nP\n")
    solver = FakeSolver(fail=True)
    app = make_app(tmp_path, view, solver)
    app.show_formula_list()
    app.selected = "f.cnf"
    app.test_selected()
    assert view.errors == [SOLVER_FAILED]
    assert app.last_verdict is None


def test_credits_screen(tmp_path, view, solver):
    app = make_app(tmp_path, view, solver)
    app.show_credits()
    app.go_back()
    assert view.screens == [Screen.CREDITS, Screen.MAIN_MENU]