"""
Tests for the benchmark entry point and default plan.
"""
import importlib

import pytest

from hashbench.config import BenchmarkCase, default_benchmark_plan
from hashbench.runner import IntegrityViolation

main_module = importlib.import_module("hashbench.main")


def test_default_plan_warms_up_then_measures():
    plan = default_benchmark_plan()

    assert [(case.count, case.do_print) for case in plan] == [
        (1_000_000, False),
        (1_000_000, True),
    ]
    assert all(case.label == "builtins.dict" for case in plan)


def test_main_prints_only_measured_run(monkeypatch, capsys):
    calls = []
    real_bench = main_module.bench_hashmap

    def small_bench(count, do_print, **kwargs):
        calls.append((count, do_print))
        return real_bench(1_000, do_print, **kwargs)

    monkeypatch.setattr(main_module, "bench_hashmap", small_bench)

    assert main_module.main() == 0

    assert calls == [(1_000_000, False), (1_000_000, True)]
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("|builtins.dict::insert ")
    assert lines[1].startswith("|builtins.dict::lookup ")
    assert all(line.count("|") == 5 for line in lines)


def test_integrity_violation_propagates(monkeypatch, capsys):
    class Broken(dict):
        def get(self, key, default=None):
            return "wrong"

    real_bench = main_module.bench_hashmap

    def broken_bench(count, do_print, **kwargs):
        return real_bench(10, do_print, map_factory=Broken, **kwargs)

    monkeypatch.setattr(main_module, "bench_hashmap", broken_bench)

    with pytest.raises(IntegrityViolation):
        main_module.main()

    assert capsys.readouterr().out == ""


def test_run_plan_honours_case_labels(capsys):
    plan = main_module.BenchmarkPlan(
        cases=[BenchmarkCase(name="tiny", count=5, do_print=True, label="TinyMap")]
    )

    main_module.run_plan(plan)

    out = capsys.readouterr().out
    assert "|TinyMap::insert " in out
    assert "|TinyMap::lookup " in out
