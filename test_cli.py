import pytest

from circulant_cores import SearchConfig, read_solutions, core_objective
from circulant_cores.cli import build_parser, main


def test_wrong_argument_count_prints_usage(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["7", "10", "1"])
    assert exc.value.code != 0
    assert "usage:" in capsys.readouterr().err


def test_invalid_ell_is_a_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["2", "10", "1", "100", "0.5"])
    assert exc.value.code != 0
    assert "ell must be at least 3" in capsys.readouterr().err


def test_parser_positional_order():
    args = build_parser("ts").parse_args(["33", "600", "1", "10000", "0.5"])
    assert args.ell == 33
    assert args.max_time == 600.0
    assert args.seed == 1
    assert args.idle_restart_threshold == 10000
    assert args.tenure_multiplier == 0.5
    assert args.output is None
    assert not args.verbose
    assert not args.legacy_tabu


def test_legacy_tabu_flag():
    args = build_parser("ts").parse_args(["7", "1", "1", "50", "0.5", "--legacy-tabu"])
    assert args.legacy_tabu


def test_default_output_name():
    config = SearchConfig(
        ell=7, max_time=10, seed=1, idle_restart_threshold=100, tenure_multiplier=0.5
    )
    assert config.output_name("ts") == "sol-ts-7-10-1-100-0.5.txt"
    assert config.tabu_tenure == 3
    assert config.hadamard_order == 16


def test_unwritable_output_fails(tmp_path, capsys):
    output = tmp_path / "missing" / "sol.txt"
    status = main(["7", "1", "1", "100", "0.5", "--output", str(output)])
    assert status == 1
    captured = capsys.readouterr()
    assert "problems in opening file" in captured.err
    # Nothing is announced for a run that never starts
    assert captured.out == ""


def test_run_writes_solutions_and_succeeds(tmp_path, capsys):
    output = tmp_path / "sol.txt"
    status = main(["7", "0.3", "12345", "50", "0.5", "--output", str(output)])
    assert status == 0

    solutions = read_solutions(output)
    assert len(solutions) >= 1
    for a, b in solutions:
        assert core_objective(a, b) == 0

    out = capsys.readouterr().out
    assert "FOUND SOLUTION AT TIME" in out
    assert f"Solutions: {len(solutions)}" in out


def test_run_without_solution_reports_failure(tmp_path):
    output = tmp_path / "sol.txt"
    status = main(["6", "0", "1", "100", "0.5", "--output", str(output)])
    assert status == 1
    assert output.read_text() == ""
