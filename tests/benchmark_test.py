import csv

import pytest

from heapqueue import benchmark
from heapqueue.datastructures import PriorityQueue


def test_operations_return_queues():
    data = [5, 1, 4, 2, 3]
    for name, op in benchmark.OPERATIONS.items():
        queue = op(list(data))
        assert isinstance(queue, PriorityQueue), name


def test_bench_pop_drains_and_trim_halves():
    assert benchmark.bench_pop([3, 2, 1]).count == 0
    queue = benchmark.bench_trim_excess(list(range(10)))
    assert queue.count == 5
    assert queue.capacity == 5


def test_measure_true_space_counts_buffer():
    small = benchmark.measure_true_space(PriorityQueue())
    large = benchmark.measure_true_space(PriorityQueue.from_iterable(range(100)))
    assert large > small


def test_run_benchmarks_writes_csv(tmp_path, capsys):
    out = tmp_path / "results.csv"
    rows = benchmark.run_benchmarks(str(out), base_input=4, steps=2, iterations=2, ops=["push", "pop"])
    assert len(rows) == 4

    with open(out, newline="") as fh:
        lines = list(csv.reader(fh))
    assert lines[0][:2] == ["Input Size", "Operation"]
    assert [(line[0], line[1]) for line in lines[1:]] == [
        ("4", "push"), ("8", "push"), ("4", "pop"), ("8", "pop"),
    ]
    assert "Benchmark completed" in capsys.readouterr().out


def test_run_benchmarks_rejects_bad_arguments(tmp_path):
    with pytest.raises(ValueError):
        benchmark.run_benchmarks(str(tmp_path / "x.csv"), ops=["nope"])
    with pytest.raises(ValueError):
        benchmark.run_benchmarks(str(tmp_path / "x.csv"), base_input=0)


def test_main_parses_flags(tmp_path):
    out = tmp_path / "cli.csv"
    benchmark.main(["--output", str(out), "--base-input", "2", "--steps", "1",
                    "--iterations", "2", "--ops", "heapify", "--seed", "1"])
    with open(out, newline="") as fh:
        assert len(list(csv.reader(fh))) == 2


def test_main_rejects_unknown_op(tmp_path):
    with pytest.raises(SystemExit):
        benchmark.main(["--output", str(tmp_path / "x.csv"), "--ops", "nope"])
