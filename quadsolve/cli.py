"""Interactive quadratic equation solver."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Sequence, TextIO

from quadsolve.selftest import run_list_test, run_solver_tests
from quadsolve.solvers import RootsCount, Solution, polish_output, solve_quadratic


@dataclass
class ProgramParams:
    """Switches taken from the command line."""

    test_list: bool = False
    test_solver: bool = False
    skip_main: bool = False


def _prefix_equal(first: str, second: str) -> bool:
    # Strings agree up to the end of the shorter one.
    return first.startswith(second) or second.startswith(first)


def process_args(argv: Sequence[str]) -> ProgramParams:
    """Build ProgramParams from arguments (program name excluded)."""
    params = ProgramParams()
    for arg in argv:
        if _prefix_equal(arg, "-skip_main"):
            params.skip_main = True
        if _prefix_equal(arg, "-test_solver"):
            params.test_solver = True
        if _prefix_equal(arg, "-test_list"):
            params.test_list = True
    return params


def _read_token(stream: TextIO) -> tuple[str, str]:
    ch = stream.read(1)
    while ch and ch.isspace():
        ch = stream.read(1)
    if not ch:
        raise EOFError("input ended before a number was read")
    chars = []
    while ch and not ch.isspace():
        chars.append(ch)
        ch = stream.read(1)
    return "".join(chars), ch


def _clear_line(stream: TextIO) -> None:
    while ch := stream.read(1):
        if ch == "\n":
            break


def read_number(stream: TextIO | None = None, out: TextIO | None = None) -> float:
    """Read tokens until a finite number appears; discard the rest of bad lines."""
    stream = stream if stream is not None else sys.stdin
    out = out if out is not None else sys.stdout
    while True:
        token, terminator = _read_token(stream)
        try:
            value = float(token)
        except ValueError:
            value = math.nan
        if math.isfinite(value):
            return value
        out.write("Invalid input. Enter a finite number\n")
        if terminator != "\n":
            _clear_line(stream)


def request_input(
    stream: TextIO | None = None, out: TextIO | None = None
) -> tuple[float, float, float]:
    """Prompt for and read the three coefficients."""
    out = out if out is not None else sys.stdout
    out.write("Quadratic equation solver\n----------------\n")
    out.write("Enter equation coefficients\n")
    a = read_number(stream, out)
    b = read_number(stream, out)
    c = read_number(stream, out)
    return a, b, c


def format_result(solution: Solution) -> str:
    """Describe a solution the way the program prints it."""
    x1 = polish_output(solution.x1)
    x2 = polish_output(solution.x2)
    if solution.count is RootsCount.NO_ROOTS:
        return "No roots"
    if solution.count is RootsCount.ONE_ROOT:
        return f"One root: {x1:f}"
    if solution.count is RootsCount.TWO_ROOTS:
        return f"Two roots: {x1:f}, {x2:f}"
    return "Infinite roots"


def run_app(stream: TextIO | None = None, out: TextIO | None = None) -> Solution:
    """Read coefficients, solve, and print the roots."""
    out = out if out is not None else sys.stdout
    a, b, c = request_input(stream, out)
    solution = solve_quadratic(a, b, c)
    out.write(format_result(solution) + "\n")
    return solution


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point."""
    params = process_args(sys.argv[1:] if argv is None else argv)
    if params.test_solver:
        run_solver_tests()
    if params.test_list:
        run_list_test()
    if not params.skip_main:
        try:
            run_app()
        except EOFError:
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())