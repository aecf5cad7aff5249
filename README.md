# resolvent

A small toolkit for propositional formulas in conjunctive normal form (CNF):

* **`resolvent-solve`** decides whether a formula file is satisfiable by
  resolution refutation.
* **`resolvent-generate`** prints random CNF formulas for experiments.
* **`resolvent-gui`** is a desktop window for writing formulas clause by
  clause, browsing the formula files in a directory and testing them.

## Installation

```
pip install .
```

The package has no runtime dependencies. The desktop window uses the
standard library's `tkinter`, so the Python build needs Tk support.

## Formula files

A formula file holds one clause per line. A clause is a list of literals
separated by spaces or tabs; a leading `!` negates a literal:

```
# Formula written by hand
P !Q R
Q
!P
```

* Blank lines and lines that start with `#` are ignored.
* A symbol name starts with a letter or an underscore and continues with
  letters, digits or underscores. Names are cut to 63 characters.
* A clause that holds both a literal and its negation (a tautology) is
  always true and is dropped when the file is read.
* A line holding an invalid literal makes the whole file unreadable.

Clauses are joined by AND, the literals of a clause by OR, so the file above
reads `(P V !Q V R) ^ Q ^ !P`.

## Checking a formula

```
resolvent-solve formula.cnf
```

After a banner, the command prints `Result: Formula is SATISFIABLE` or
`Result: Formula is UNSATISFIABLE` and exits with status 0. It prints an
error and exits with status 1 if it is not given exactly one file, or if the
file cannot be opened or parsed.

The check saturates the clause set under resolution, discarding tautological
resolvents and clauses already present, and reports the formula
unsatisfiable as soon as the empty clause is derived. Resolution can grow the
clause set quickly, so it suits small and medium formulas.

## Generating random formulas

```
resolvent-generate NUM_VARIABLES NUM_CLAUSES [LITERALS_PER_CLAUSE] [ALLOW_TAUTOLOGIES]
```

* `NUM_VARIABLES`: 1 to 26. Variables are single letters starting at `p`
  and wrapping around the alphabet.
* `NUM_CLAUSES`: 1 to 100.
* `LITERALS_PER_CLAUSE`: the most literals a clause may have, 1 to 3,
  3 by default. Each clause gets between one and this many literals, each
  negated at random.
* `ALLOW_TAUTOLOGIES`: `true` sets the option; anything else, or leaving it
  out, clears it. It is recorded in the configuration but does not change
  what is generated.

Numbers are read from their leading digits, so a non-numeric argument counts
as 0. The formula goes to standard output, preceded by a `c` comment line and
a `p cnf` header line. With fewer than two arguments the command prints its
usage; with out-of-range arguments it prints the allowed ranges. Both exit
with status 1.

The `c` and `p` header lines are not comments to `resolvent-solve`; remove
them before checking a generated formula with it.

## The desktop window

```
resolvent-gui [DIRECTORY]
```

`DIRECTORY` is the folder holding the formula files, the current directory
by default. From the main menu you can:

* **Create a new formula**: give it a name (letters, digits, `_` and `-`)
  and a number of clauses, then enter the clauses one at a time. Each clause
  is checked before it is accepted. The file `NAME.cnf` is written as soon as
  the name is accepted and rewritten after every clause, so going back to the
  main menu part way leaves the clauses entered so far in it. A count of 0
  saves an empty formula at once. When the formula is complete you are
  offered to test it.
* **Test an existing formula** / **Show all available formulas**: both list
  the files whose names contain `.cnf` (sorted, at most 100), preview the
  selected one in `A V B ^` notation and test it.
* **Show the credits**.

Testing runs `python -m resolvent.solver` on the file and shows whether the
formula is satisfiable.

## Using it from Python

* `resolvent.solver` holds `Literal`, `Clause` and `Formula`; the readers
  `parse_clause`, `parse_formula` and `read_formula`, which raise
  `FormulaError` on bad input; `is_valid_symbol_name`; and the algorithms
  `resolve`, `unit_propagation` (which simplifies a `Formula` in place; the
  command does not use it) and `is_satisfiable`.
* `resolvent.generator` holds `GeneratorConfig` (which raises
  `GeneratorError` when out of range), `parse_args`, `symbol_name`,
  `generate_clause` and `generate_formula`; pass your own `random.Random`
  for reproducible output.
* `resolvent.library` holds what the desktop window is built on:
  `FormulaDraft` for writing a formula file, `is_valid_clause`,
  `is_valid_formula_name`, `list_formula_files`, `format_preview`,
  `preview_file`, and `run_solver` and `interpret_output`, which turn solver
  output into a `Verdict`. Failures raise `LibraryError`.
* `resolvent.gui` holds `SolverApp`, the screen flow of the window, which
  takes any object with `render`, `error`, `confirm`, `show_result` and
  `mainloop` methods as its view.

## Running the tests

```
pip install .[test]
pytest
```