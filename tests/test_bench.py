import pytest

from spscorders.bench import BenchmarkResult, main, run_benchmark


def test_run_benchmark_consumes_everything():
    result = run_benchmark(2000, 16)
    assert result.num_items == 2000
    assert result.consumed == 2000
    assert result.duration_ns > 0


def test_average_latency_counts_push_and_pop():
    result = BenchmarkResult(num_items=500, consumed=500, duration_ns=4000)
    assert result.avg_latency_ns == pytest.approx(4000 / 1000)
    assert result.duration_ms == pytest.approx(4000 / 1e6)


def test_zero_items():
    result = run_benchmark(0, 8)
    assert result.consumed == 0
    assert result.avg_latency_ns == 0.0


def test_invalid_capacity():
    with pytest.raises(ValueError):
        run_benchmark(10, 100)


def test_negative_items():
    with pytest.raises(ValueError):
        run_benchmark(-1, 8)


def test_main_output(capsys):
    assert main(["--items", "300", "--capacity", "8"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Processed 300 items."
    assert lines[1].startswith("Total time: ")
    assert lines[1].endswith(" ms")
    assert lines[2].startswith("Average latency: ")
    assert lines[2].endswith(" ns per operation (push + pop)")


def test_main_rejects_bad_capacity():
    with pytest.raises(SystemExit) as excinfo:
        main(["--items", "10", "--capacity", "10"])
    assert excinfo.value.code == 2