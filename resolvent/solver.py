"""Resolution-based satisfiability checking for propositional CNF formulas."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Union

MAX_SYMBOL_LEN = 64

_SYMBOL = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_SEPARATORS = re.compile(r"[ \t]+")

_HEADER = "\n".join(
    [
        "",
        "╔════════════════════════════════════════════════════════╗",
        "║           Propositional Logic Solver v2.0              ║",
        "╚════════════════════════════════════════════════════════╝",
        "",
    ]
)


class FormulaError(ValueError):
    """Raised when a formula cannot be read or parsed."""


@dataclass(frozen=True)
class Literal:
    """A propositional symbol, possibly negated."""

    name: str
    negated: bool = False

    def complement(self) -> "Literal":
        """Return the literal of opposite polarity."""
        return Literal(self.name, not self.negated)

    def __str__(self) -> str:
        return ("!" if self.negated else "") + self.name


@dataclass(frozen=True)
class Clause:
    """A disjunction of literals; repeated literals are kept."""

    literals: tuple[Literal, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "literals", tuple(self.literals))

    def __len__(self) -> int:
        return len(self.literals)

    def __iter__(self) -> Iterator[Literal]:
        return iter(self.literals)

    def __str__(self) -> str:
        return " ".join(str(literal) for literal in self.literals)

    def contains(self, literal: Literal) -> bool:
        return literal in self.literals

    def is_tautology(self) -> bool:
        """True if the clause holds some literal together with its complement."""
        return any(self.contains(literal.complement()) for literal in self.literals)

    def is_empty(self) -> bool:
        return not self.literals

    def same_as(self, other: "Clause") -> bool:
        """Equal length and every literal of each clause present in the other."""
        return (
            len(self) == len(other)
            and all(other.contains(literal) for literal in self)
            and all(self.contains(literal) for literal in other)
        )


@dataclass
class Formula:
    """A conjunction of clauses plus a table of known symbols."""

    clauses: list[Clause] = field(default_factory=list)
    symbols: list[str] = field(default_factory=list)

    def add_clause(self, clause: Clause) -> None:
        self.clauses.append(clause)

    def symbol_index(self, name: str) -> int:
        """Return the index of a symbol, registering it if it is new."""
        name = name[: MAX_SYMBOL_LEN - 1]
        try:
            return self.symbols.index(name)
        except ValueError:
            self.symbols.append(name)
            return len(self.symbols) - 1

    def contains(self, clause: Clause) -> bool:
        return any(existing.same_as(clause) for existing in self.clauses)


def is_valid_symbol_name(name: Optional[str]) -> bool:
    """A letter or underscore followed by letters, digits or underscores."""
    return bool(name) and _SYMBOL.fullmatch(name) is not None


def parse_clause(line: str) -> Clause:
    """Parse space- or tab-separated literals, ``!`` marking negation."""
    literals = []
    for token in _SEPARATORS.split(line):
        if not token:
            continue
        negated = token.startswith("!")
        name = token[1:] if negated else token
        if not is_valid_symbol_name(name):
            raise FormulaError(f"invalid symbol name {name!r}")
        literals.append(Literal(name[: MAX_SYMBOL_LEN - 1], negated))
    return Clause(tuple(literals))


def parse_formula(text: str) -> Formula:
    """Parse a formula, one clause per line; blank lines and ``#`` comments are skipped.

    Tautological clauses are dropped.
    """
    formula = Formula()
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.rstrip()
        if not line or line.startswith("#"):
            continue
        try:
            clause = parse_clause(line)
        except FormulaError as exc:
            raise FormulaError(f"line {number}: {exc}") from exc
        if clause.literals and not clause.is_tautology():
            formula.add_clause(clause)
    return formula


def read_formula(path: Union[str, Path]) -> Formula:
    """Read and parse a formula file."""
    try:
        text = Path(path).read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise FormulaError(f"Unable to open file {path}") from exc
    return parse_formula(text)


def resolve(first: Clause, second: Clause, literal: Literal) -> Optional[Clause]:
    """Resolve ``first`` (holding ``literal``) with ``second`` (holding its complement).

    Returns None when the resolvent is a tautology.
    """
    opposite = literal.complement()
    resolvent = Clause(
        tuple(term for term in first if term != literal)
        + tuple(term for term in second if term != opposite)
    )
    if resolvent.is_tautology():
        return None
    return resolvent


def unit_propagation(formula: Formula) -> None:
    """Simplify the formula in place using its unit clauses."""
    changed = True
    while changed:
        changed = False
        position = 0
        while position < len(formula.clauses):
            unit = formula.clauses[position]
            if len(unit) != 1:
                position += 1
                continue
            literal = unit.literals[0]
            opposite = literal.complement()
            kept: list[Clause] = []
            new_position = position
            for index, clause in enumerate(formula.clauses):
                if index == position:
                    new_position = len(kept)
                    kept.append(clause)
                    continue
                if clause.contains(literal):
                    changed = True
                    continue
                if clause.contains(opposite):
                    clause = Clause(tuple(term for term in clause if term != opposite))
                    changed = True
                kept.append(clause)
            formula.clauses[:] = kept
            position = new_position + 1


def is_satisfiable(clauses: Iterable[Clause]) -> bool:
    """Decide satisfiability by saturating under resolution."""
    work: list[Clause] = list(clauses)
    start = 0
    while start < len(work):
        end = len(work)
        for j in range(start, end):
            second = work[j]
            for first in work[:j]:
                for literal in first:
                    if not second.contains(literal.complement()):
                        continue
                    resolvent = resolve(first, second, literal)
                    if resolvent is None:
                        continue
                    if resolvent.is_empty():
                        return False
                    if not any(existing.same_as(resolvent) for existing in work):
                        work.append(resolvent)
        start = end
    return True


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    print(_HEADER)
    if len(args) != 1:
        print("Error: Please provide a CNF file path")
        print("Usage: solver <input_file.cnf>")
        return 1
    try:
        formula = read_formula(args[0])
    except FormulaError as exc:
        print(f"Error: {exc}")
        print("Error: Failed to read formula from file")
        return 1
    print("\nAnalyzing formula...")
    if is_satisfiable(formula.clauses):
        print("\nResult: Formula is SATISFIABLE")
    else:
        print("\nResult: Formula is UNSATISFIABLE")
    return 0


if __name__ == "__main__":
    sys.exit(main())