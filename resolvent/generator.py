"""Random CNF formula generator."""

from __future__ import annotations

import random
import re
import sys
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

MAX_VARIABLES = 26
MAX_CLAUSES = 100
MAX_LITERALS_PER_CLAUSE = 3

USAGE = (
    "Usage: generator <num_variables> <num_clauses> [literals_per_clause] "
    "[allow_tautologies]"
)
RANGES = "\n".join(
    [
        "Invalid parameters. Please check the ranges:",
        f"Variables: 1-{MAX_VARIABLES}",
        f"Clauses: 1-{MAX_CLAUSES}",
        f"Literals per clause: 1-{MAX_LITERALS_PER_CLAUSE}",
    ]
)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class GeneratorError(ValueError):
    """Raised for invalid generator arguments."""


@dataclass(frozen=True)
class GeneratorConfig:
    """Parameters of a generated formula; validated on construction."""

    num_variables: int
    num_clauses: int
    literals_per_clause: int = MAX_LITERALS_PER_CLAUSE
    allow_tautologies: bool = False

    def __post_init__(self) -> None:
        if not (
            0 < self.num_variables <= MAX_VARIABLES
            and 0 < self.num_clauses <= MAX_CLAUSES
            and 0 < self.literals_per_clause <= MAX_LITERALS_PER_CLAUSE
        ):
            raise GeneratorError(RANGES)


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def symbol_name(index: int) -> str:
    """Name of the variable with the given index."""
    return chr(ord("p") + index % 26)


def generate_clause(rng: random.Random, max_literals: int, num_variables: int) -> str:
    """Build one clause of 1 to ``max_literals`` random literals."""
    count = rng.randrange(max_literals) + 1
    literals = []
    for _ in range(count):
        negation = "!" if rng.randrange(2) else ""
        literals.append(negation + symbol_name(rng.randrange(num_variables)))
    return " ".join(literals)


def generate_formula(
    config: GeneratorConfig, rng: Optional[random.Random] = None
) -> Iterator[str]:
    """Yield the lines of a random formula: two header lines, then the clauses."""
    rng = rng if rng is not None else random.Random()
    yield (
        f"c Generated formula with {config.num_variables} variables "
        f"and {config.num_clauses} clauses"
    )
    yield f"p cnf {config.num_variables} {config.num_clauses}"
    for _ in range(config.num_clauses):
        yield generate_clause(rng, config.literals_per_clause, config.num_variables)


def parse_args(argv: Sequence[str]) -> GeneratorConfig:
    """Build a configuration from command-line arguments (program name excluded)."""
    if len(argv) < 2:
        raise GeneratorError(USAGE)
    literals = _atoi(argv[2]) if len(argv) > 2 else MAX_LITERALS_PER_CLAUSE
    tautologies = argv[3] == "true" if len(argv) > 3 else False
    return GeneratorConfig(_atoi(argv[0]), _atoi(argv[1]), literals, tautologies)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_args(args)
    except GeneratorError as exc:
        print(exc)
        return 1
    for line in generate_formula(config):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())