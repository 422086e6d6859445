import io

from quadsolve.selftest import (
    SolverCase,
    check_case,
    read_test_data,
    run_list_test,
    run_solver_tests,
)


def _write(tmp_path, text):
    path = tmp_path / "SolverTests"
    path.write_text(text)
    return path


def test_read_test_data_parses_groups(tmp_path):
    path = _write(tmp_path, "1 -3 2 1 2 2\n0 0 0 0 0 -1\n")
    cases = read_test_data(path)
    assert cases == [
        SolverCase(1.0, -3.0, 2.0, 1.0, 2.0, 2),
        SolverCase(0.0, 0.0, 0.0, 0.0, 0.0, -1),
    ]


def test_read_test_data_stops_at_incomplete_group(tmp_path):
    path = _write(tmp_path, "1 -3 2 1 2 2\n1 2 3\n")
    assert len(read_test_data(path)) == 1


def test_read_test_data_stops_at_bad_token(tmp_path):
    path = _write(tmp_path, "1 x 2 1 2 2\n1 -3 2 1 2 2\n")
    assert read_test_data(path) == []


def test_check_case_accepts_either_order():
    assert check_case(SolverCase(1, -3, 2, 1, 2, 2)) is None
    assert check_case(SolverCase(1, -3, 2, 2, 1, 2)) is None


def test_check_case_linear():
    assert check_case(SolverCase(0, 2, -4, 2, 0, 1)) is None


def test_check_case_reports_failure():
    message = check_case(SolverCase(1, -3, 2, 5, 6, 2))
    assert message.startswith("Failed: SolveQuadratic(1.000000, -3.000000, 2.000000) -> 2 (")


def test_check_case_wrong_count():
    assert check_case(SolverCase(1, 0, 1, 0, 0, 2)) is not None
    assert check_case(SolverCase(1, 0, 1, 0, 0, 0)) is None


def test_run_solver_tests_ok(tmp_path):
    path = _write(tmp_path, "1 -3 2 1 2 2\n1 0 1 0 0 0\n")
    out = io.StringIO()
    assert run_solver_tests(path, out) is True
    assert out.getvalue() == "Solver test: OK\n"


def test_run_solver_tests_failure(tmp_path):
    path = _write(tmp_path, "1 -3 2 1 2 2\n1 -3 2 7 8 2\n")
    out = io.StringIO()
    assert run_solver_tests(path, out) is False
    lines = out.getvalue().splitlines()
    assert len(lines) == 1
    assert lines[0].startswith("Failed:")


def test_run_solver_tests_missing_file(tmp_path):
    out = io.StringIO()
    assert run_solver_tests(tmp_path / "absent", out) is True
    assert out.getvalue() == "No SolverTests foundSolver test: OK\n"


def test_run_list_test():
    out = io.StringIO()
    assert run_list_test(out) is True
    assert out.getvalue() == "List test: OK\n"