"""Unit tests for the run_tests.py suite shortcuts."""

import sys

import pytest

import run_tests


@pytest.mark.unit
def test_fast_suite_deselects_slow_marker():
    args = run_tests.pytest_args("fast")
    assert args[:3] == [sys.executable, "-m", "pytest"]
    assert args[-3:] == ["-m", "not slow", "tests/"]


@pytest.mark.unit
def test_coverage_and_keyword_options():
    args = run_tests.pytest_args("kernels", verbose=True, coverage=True, keyword="octave")
    assert "-v" in args
    assert "--cov=pynoisy" in args
    assert args[args.index("-k") + 1] == "octave"
    assert args[-3:] == ["-m", "slow", "tests/"]


@pytest.mark.unit
def test_main_runs_requested_suites_in_order(monkeypatch):
    ran = []
    monkeypatch.setattr(run_tests, "run_suite", lambda suite, **kw: ran.append(suite) or True)

    assert run_tests.main(["cli", "unit"]) == 0
    assert ran == ["cli", "unit"]

    ran.clear()
    assert run_tests.main([]) == 0
    assert ran == list(run_tests.DEFAULT_SUITES)


@pytest.mark.unit
def test_main_reports_failed_suite(monkeypatch):
    monkeypatch.setattr(run_tests, "run_suite", lambda suite, **kw: suite != "integration")
    assert run_tests.main(["--all"]) == 1


@pytest.mark.unit
def test_main_rejects_unknown_suite():
    with pytest.raises(SystemExit):
        run_tests.main(["everything"])
