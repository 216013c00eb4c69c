import json

import pytest

from fibbench.benchmark import (
    AggregateResult,
    BenchmarkRunner,
    BenchmarkSample,
    BenchmarkScenario,
    BenchmarkSummary,
    MemoryPoint,
    ReportGenerator,
    ScalingRow,
)
from fibbench.core import FibMethod


@pytest.fixture
def mock_output_dir(tmp_path):
    return tmp_path / "benchmark_output"


@pytest.fixture
def sample():
    return BenchmarkSample(variant_a_ms=2.0, variant_b_ms=3.0, indices=[10, 20], iterations=5)


class TestBenchmarkModels:
    def test_sample_defaults(self):
        s = BenchmarkSample(variant_a_ms=1.0, variant_b_ms=1.0)
        assert s.variant_a_label == "SIMD"
        assert s.variant_b_label == "Scalar"
        assert s.iterations == 100

    def test_sample_speedup_is_scalar_over_simd(self, sample):
        assert sample.speedup_ratio == 1.5

    def test_sample_speedup_zero_time(self):
        assert BenchmarkSample(variant_a_ms=0.0, variant_b_ms=3.0).speedup_ratio == 0.0

    def test_sample_to_dict(self, sample):
        d = sample.to_dict()
        assert d["speedup_ratio"] == 1.5
        assert d["indices"] == [10, 20]

    def test_scenario_validation(self):
        with pytest.raises(ValueError):
            BenchmarkScenario(name="Bad")
        with pytest.raises(ValueError):
            BenchmarkScenario(name="Bad", indices=[-1])
        with pytest.raises(ValueError):
            BenchmarkScenario(name="Bad", indices=[1], runs=0)

    def test_scaling_row_speedup(self):
        assert ScalingRow(n=100, iterative_ns=400.0, matrix_ns=200.0).speedup == 2.0

    def test_empty_summary(self):
        summary = BenchmarkSummary(timestamp="now", duration=0.0)
        assert summary.total_samples == 0
        assert summary.to_dict()["aggregates"] == []


class TestBenchmarkRunner:
    def test_rejects_zero_iterations(self):
        with pytest.raises(ValueError):
            BenchmarkRunner(iterations=0)

    def test_compare_mean_per_call(self, fake_timer):
        runner = BenchmarkRunner(iterations=10, timer=fake_timer)
        result = runner.compare([10, 20, 30])
        # Each measurement spans one timer step of 1 ms over 10 calls
        assert result.variant_a_ms == pytest.approx(0.1)
        assert result.variant_b_ms == pytest.approx(0.1)
        assert result.speedup_ratio == pytest.approx(1.0)
        assert result.indices == [10, 20, 30]
        assert result.timestamp

    def test_compare_calls_each_variant_iterations_times(self, fake_timer):
        calls = {"a": 0, "b": 0}

        def variant_a(indices):
            calls["a"] += 1
            return []

        def variant_b(indices):
            calls["b"] += 1
            return []

        runner = BenchmarkRunner(iterations=7, variant_a=variant_a, variant_b=variant_b, timer=fake_timer)
        runner.compare([1])
        assert calls == {"a": 7, "b": 7}

    def test_iteration_override(self, fake_timer):
        runner = BenchmarkRunner(iterations=10, timer=fake_timer)
        assert runner.compare([5], iterations=4).iterations == 4

    def test_run_scenario_records_samples(self, fake_timer):
        runner = BenchmarkRunner(iterations=2, timer=fake_timer)
        scenario = BenchmarkScenario(name="small", indices=[1, 2, 3], iterations=2, runs=3)
        samples = runner.run_scenario(scenario)
        assert len(samples) == 3
        assert len(runner.samples["small"]) == 3

    def test_profile_method(self):
        runner = BenchmarkRunner(iterations=2)
        points = runner.profile_method(FibMethod.ITERATIVE, [10, 100])
        assert [(p.method, p.n, p.iterations) for p in points] == [("iterative", 10, 2), ("iterative", 100, 2)]
        assert all(p.mean_ns >= 0 for p in points)

    def test_profile_memory_memo_allocates_more_than_iterative(self):
        runner = BenchmarkRunner(iterations=1)
        iterative = runner.profile_memory(FibMethod.ITERATIVE, [2000])[0]
        memo = runner.profile_memory(FibMethod.RECURSIVE_MEMO, [2000])[0]
        assert (memo.method, memo.n) == ("recursive_memo", 2000)
        assert memo.peak_bytes > iterative.peak_bytes
        assert len(runner.memory_points) == 2

    def test_profile_memory_in_summary(self):
        runner = BenchmarkRunner(iterations=1)
        runner.profile_memory(FibMethod.ITERATIVE, [10])
        data = runner.aggregate_results(duration=0.1).to_dict()
        assert data["memory"][0]["method"] == "iterative"
        assert data["memory"][0]["peak_bytes"] >= 0

    def test_scaling(self):
        rows = BenchmarkRunner(iterations=2).scaling([10, 1000])
        assert [r.n for r in rows] == [10, 1000]

    def test_aggregate_results(self):
        runner = BenchmarkRunner(iterations=1)
        runner.samples["s"] = [
            BenchmarkSample(variant_a_ms=1.0, variant_b_ms=2.0),
            BenchmarkSample(variant_a_ms=2.0, variant_b_ms=2.0),
        ]
        summary = runner.aggregate_results(duration=1.5)
        assert summary.total_samples == 2
        agg = summary.aggregates[0]
        assert agg.scenario == "s"
        assert agg.avg_variant_a_ms == 1.5
        assert agg.avg_speedup == 1.5
        assert agg.min_speedup == 1.0
        assert agg.max_speedup == 2.0
        assert agg.std_variant_b_ms == 0.0

    def test_single_sample_has_zero_std(self):
        agg = BenchmarkRunner._aggregate_group("one", [BenchmarkSample(variant_a_ms=1.0, variant_b_ms=1.0)])
        assert agg.std_variant_a_ms == 0.0


class TestReportGenerator:
    def test_save_json(self, mock_output_dir, sample):
        generator = ReportGenerator(mock_output_dir)
        summary = BenchmarkSummary(timestamp="now", duration=1.0, samples={"s": [sample]})

        path = generator.save_json(summary)
        assert path.exists()
        assert "benchmark_results.json" in str(path)
        data = json.loads(path.read_text())
        assert data["total_samples"] == 1
        assert data["samples"]["s"][0]["speedup_ratio"] == 1.5

    def test_generate_markdown(self, mock_output_dir, sample):
        generator = ReportGenerator(mock_output_dir)

        agg = AggregateResult(scenario="small", num_runs=1)
        agg.avg_speedup = 1.5
        summary = BenchmarkSummary(
            timestamp="now", duration=1.0,
            samples={"small": [sample]},
            aggregates=[agg],
            scaling=[ScalingRow(n=100, iterative_ns=400.0, matrix_ns=200.0)],
            memory=[MemoryPoint(method="recursive_memo", n=1000, peak_bytes=2048)],
        )

        path = generator.generate_markdown(summary)
        assert path.exists()
        content = path.read_text()
        assert "# Fibonacci Benchmark Report" in content
        assert "| small | 1 |" in content
        assert "Scaling Analysis" in content
        assert "2.00x" in content
        assert "Method Profile" not in content
        assert "## Memory Analysis" in content
        assert "| recursive_memo | 1000 | 2,048 | 2.0 |" in content
