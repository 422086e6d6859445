# quadsolve

A small console solver for equations of the form `a·x² + b·x + c = 0`.

If `a` is zero, the equation is solved as the linear equation `b·x + c = 0`. An equation can have no roots, one root, two roots or infinitely many roots. Any value whose magnitude is below `1e-12` counts as zero.

## Installation

```
pip install .
```

## Command line

```
quadsolve
```

The program asks for three coefficients. These are read as whitespace-separated tokens. If a token is not a finite number, the program prints `Invalid input. Enter a finite number`, discards the rest of that line and reads again. After it has all three coefficients, it prints the result:

```
Quadratic equation solver
----------------
Enter equation coefficients
1 -3 2
Two roots: 1.000000, 2.000000
```

The result is one of `No roots`, `One root: x`, `Two roots: x1, x2` or `Infinite roots`. Roots smaller in magnitude than `1e-12` are printed as zero. If the input ends before all three coefficients have been read, the command exits with status 1.

Options:

- `-skip_main`: do not run the interactive solver
- `-test_solver`: check the solver against the cases in `Tests/SolverTests`, relative to the current directory
- `-test_list`: run the self-test of the dynamic list and print `List test: OK` if it passes

Arguments match an option if one is a prefix of the other.

`Tests/SolverTests` holds whitespace-separated groups of six values, `a b c x1 x2 roots`. The `roots` value is `0`, `1`, `2` or `-1`, where `-1` means infinitely many roots. Reading stops at the first group that does not parse. Expected roots may be listed in either order. Each failing case is printed as a `Failed: ...` line. If every case passes, the program prints `Solver test: OK`. If the file is missing, it prints `No SolverTests found`.

## Library use

```python
from quadsolve.solvers import solve_quadratic, solve_linear, RootsCount

sol = solve_quadratic(1.0, -3.0, 2.0)
assert sol.count is RootsCount.TWO_ROOTS
print(sol.roots)  # (1.0, 2.0)

print(solve_linear(0.0, 0.0).count.name)  # INF_ROOTS
```

`quadsolve.solvers` provides the following:

- `solve_quadratic(a, b, c)` and `solve_linear(a, b)` return a frozen `Solution`. Its fields are `count` (a `RootsCount`), `x1` and `x2`. Its `roots` property holds the roots that were found.
- Coefficients that are not finite raise `ValueError`.
- `close_to_zero(num)` tests whether a value counts as zero.
- `polish_output(num)` rounds values that count as zero to `0.0`.

`quadsolve.dynlist.DynamicList` is a sequence that doubles its `capacity` when it fills:

- `append` returns `True` when the capacity had to grow.
- `remove_at(index)` removes an item and raises `IndexError` if the index is out of range.
- `expand()` doubles the capacity.

`quadsolve.selftest` runs the bundled checks from code:

- `read_test_data(path)` returns a list of `SolverCase`.
- `check_case(case)` returns a failure message, or `None` if the case passes.
- `run_solver_tests(path, out)` returns `True` if every case passes.
- `run_list_test(out)` returns `True` if the list behaves correctly.

`quadsolve.cli` exposes the following:

- `process_args`
- `read_number`
- `request_input`
- `format_result`
- `run_app`
- `main`

The input and output streams of the last three can be passed in, so the interactive flow can be driven from code.

## What it does not do

The package does not ship a `Tests/SolverTests` data file. You must supply one before running `-test_solver`.

## Running the tests

```
pip install .[test]
pytest
```