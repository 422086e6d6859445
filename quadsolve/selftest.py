"""Built-in checks for the solver and the dynamic list."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from quadsolve.dynlist import DynamicList
from quadsolve.solvers import close_to_zero, solve_quadratic

DEFAULT_TESTS_PATH = "Tests/SolverTests"


@dataclass(frozen=True)
class SolverCase:
    """One expected outcome for ``solve_quadratic(a, b, c)``."""

    a: float
    b: float
    c: float
    x1: float
    x2: float
    n_roots: int


def _parse_int(token: str) -> int:
    try:
        return int(token, 0)
    except ValueError:
        return int(token)


def read_test_data(path: str | Path = DEFAULT_TESTS_PATH) -> list[SolverCase]:
    """Read whitespace-separated groups of six values, stopping at the first bad group."""
    tokens = Path(path).read_text().split()
    cases: list[SolverCase] = []
    for start in range(0, len(tokens) - 5, 6):
        group = tokens[start:start + 6]
        try:
            a, b, c, x1, x2 = (float(token) for token in group[:5])
            n_roots = _parse_int(group[5])
        except ValueError:
            break
        cases.append(SolverCase(a, b, c, x1, x2, n_roots))
    return cases


def _near(value: float, expected: float) -> bool:
    difference = value - expected
    return math.isfinite(difference) and close_to_zero(difference)


def check_case(case: SolverCase) -> str | None:
    """Run the solver on ``case``; return a failure description or None."""
    result = solve_quadratic(case.a, case.b, case.c)
    x1, x2 = result.x1, result.x2
    roots_match = (
        (_near(x2, case.x1) and _near(x1, case.x2))
        or (_near(x1, case.x1) and _near(x2, case.x2))
    )
    if int(result.count) == case.n_roots and roots_match:
        return None
    return (
        f"Failed: SolveQuadratic({case.a:f}, {case.b:f}, {case.c:f}) -> "
        f"{int(result.count)} ({x1:f}, {x2:f}); "
        f"Expected {case.n_roots} ({case.x1:f}, {case.x2:f})"
    )


def run_solver_tests(path: str | Path = DEFAULT_TESTS_PATH, out: TextIO | None = None) -> bool:
    """Check every case in ``path``, reporting failures; return True if all passed."""
    out = out if out is not None else sys.stdout
    try:
        cases = read_test_data(path)
    except FileNotFoundError:
        out.write("No SolverTests found")
        cases = []

    passed = True
    for case in cases:
        failure = check_case(case)
        if failure is not None:
            out.write(failure + "\n")
            passed = False

    if passed:
        out.write("Solver test: OK\n")
    return passed


def run_list_test(out: TextIO | None = None) -> bool:
    """Exercise DynamicList; report and return whether it behaved."""
    out = out if out is not None else sys.stdout
    items = DynamicList()
    checks = [len(items) == 0]

    items.append(52)
    checks.append(items[0] == 52)

    items.append(69)
    checks.append(len(items) == 2 and items[0] == 52)

    items.remove_at(0)
    checks.append(items[0] == 69)

    for k in range(100):
        items.append(k)
    checks.append(len(items) == 101)

    position = 0
    while position < len(items):
        items.remove_at(position)
        position += 2
    checks.append([items[0], items[1], items[2]] == [0, 1, 3])

    passed = all(checks)
    if passed:
        out.write("List test: OK\n")
    return passed