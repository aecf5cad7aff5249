"""Managing formula files: drafting, listing, previewing and testing them."""

from __future__ import annotations

import enum
import os
import re
import subprocess
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence, Union

from resolvent.solver import is_valid_symbol_name

MAX_FILES = 100
MAX_OUTPUT = 4096
FORMULA_SUFFIX = ".cnf"
FILE_HEADER = "# Formula created using the GUI solver"

INVALID_CLAUSE = "Invalid clause format! Use space-separated literals (e.g., P !Q R)"
MISSING_NAME = "Please enter a formula name!"
INVALID_NAME = (
    "Formula name can only contain letters, numbers, underscores, and hyphens!"
)
INVALID_COUNT = "Please enter a valid number of clauses (0 or greater)!"

_SEPARATORS = re.compile(r"[ \t]+")
_FORMULA_NAME = re.compile(r"[A-Za-z0-9_-]+")

PathLike = Union[str, "os.PathLike[str]"]


class LibraryError(Exception):
    """Raised when a formula cannot be drafted, stored, read or tested."""


class Verdict(enum.Enum):
    """What the solver reported about a formula."""

    SATISFIABLE = "Result: Formula is SATISFIABLE"
    UNSATISFIABLE = "Result: Formula is UNSATISFIABLE"
    UNKNOWN = "Result: Unable to determine satisfiability"

    def __str__(self) -> str:
        return self.value


def _tokens(line: str) -> list[str]:
    return [token for token in _SEPARATORS.split(line) if token]


def is_valid_clause(clause: Optional[str]) -> bool:
    """True for one or more literals separated by spaces or tabs, ``!`` negating."""
    if not clause:
        return False
    tokens = _tokens(clause)
    if not tokens:
        return False
    return all(
        is_valid_symbol_name(token[1:] if token.startswith("!") else token)
        for token in tokens
    )


def is_valid_formula_name(name: Optional[str]) -> bool:
    """True for a non-empty name of letters, digits, underscores and hyphens."""
    return bool(name) and _FORMULA_NAME.fullmatch(name) is not None


@dataclass
class FormulaDraft:
    """A formula being entered clause by clause before it is saved."""

    name: str
    total_clauses: int
    clauses: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.name:
            raise LibraryError(MISSING_NAME)
        if not is_valid_formula_name(self.name):
            raise LibraryError(INVALID_NAME)
        if self.total_clauses < 0:
            raise LibraryError(INVALID_COUNT)
        for clause in self.clauses:
            if not is_valid_clause(clause):
                raise LibraryError(INVALID_CLAUSE)

    @property
    def filename(self) -> str:
        return self.name + FORMULA_SUFFIX

    def add_clause(self, clause: str) -> int:
        """Append a clause and return how many have been added so far."""
        if self.is_complete():
            raise LibraryError("All clauses have already been entered")
        if not is_valid_clause(clause):
            raise LibraryError(INVALID_CLAUSE)
        self.clauses.append(clause)
        return len(self.clauses)

    def is_complete(self) -> bool:
        return len(self.clauses) >= self.total_clauses

    def save(self, directory: PathLike = ".") -> Path:
        """Write the formula file into ``directory`` and return its path."""
        path = Path(directory) / self.filename
        lines = [FILE_HEADER, *self.clauses]
        try:
            path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        except OSError as exc:
            raise LibraryError("Could not create formula file!") from exc
        return path


def list_formula_files(directory: PathLike = ".", limit: int = MAX_FILES) -> list[str]:
    """Names in ``directory`` that contain ``.cnf``, sorted, at most ``limit``."""
    try:
        names = sorted(os.listdir(directory))
    except OSError:
        return []
    return [name for name in names if FORMULA_SUFFIX in name][:limit]


def format_preview(text: str) -> str:
    """Render a formula file as ``a V b ^`` lines, skipping its first line."""
    lines = text.split("\n")[1:]
    clauses = [" V ".join(_tokens(line)) for line in lines if line]
    return " ^\n".join(clauses)


def preview_file(path: PathLike) -> str:
    """Read a formula file and render it with :func:`format_preview`."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise LibraryError("Error: Could not open file") from exc
    return format_preview(text)


def interpret_output(output: str) -> Verdict:
    """Extract the verdict from the solver's printed output."""
    if "UNSATISFIABLE" in output:
        return Verdict.UNSATISFIABLE
    if "SATISFIABLE" in output:
        return Verdict.SATISFIABLE
    return Verdict.UNKNOWN


def run_solver(path: PathLike, command: Optional[Sequence[str]] = None) -> Verdict:
    """Run the solver on a formula file and return its verdict.

    ``command`` is the program and its leading arguments; the file path is
    appended. By default the bundled solver module is run.
    """
    base = (
        list(command)
        if command is not None
        else [sys.executable, "-m", "resolvent.solver"]
    )
    try:
        completed = subprocess.run(
            [*base, os.fspath(path)],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except OSError as exc:
        raise LibraryError("Error executing logic solver!") from exc
    output = completed.stdout[: MAX_OUTPUT - 1].decode("utf-8", errors="replace")
    return interpret_output(output)