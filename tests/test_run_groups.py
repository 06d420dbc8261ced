"""Tests for the run group builder and its data model."""

from tensorperf.benchmarks import (
    BenchmarkTest,
    ConvGPUBenchmark,
    MatmulCPUBenchmark,
    PoolCPUBenchmark,
    PoolGPUBenchmark,
)
from tensorperf.run_groups import (
    BenchmarkRun,
    ChartPoint,
    MinSizeTransform,
    RunGroup,
    UNARY_OP_NAMES,
    get_run_groups,
    run_group_to_dict,
    run_groups_to_dicts,
    sweep_sizes,
)


class TestGetRunGroups:
    """Builder output shape and freshness."""

    def test_group_order(self, run_groups):
        names = [group.name for group in run_groups]
        assert names == [
            "Batch Normalization 3D: input [size, size, 8]",
            "Matrix Multiplication: matmul([size, size], [size, size])",
            "Convolution ops [size, size, depth]",
            "Pool Ops: input [size, size]",
            "Unary Ops: input [size, size]",
            "Reduction Ops: input [size * size]",
        ]

    def test_two_calls_are_equal_but_distinct(self):
        first = get_run_groups()
        second = get_run_groups()
        assert first == second
        assert first is not second
        for group_a, group_b in zip(first, second):
            assert group_a is not group_b
            for run_a, run_b in zip(group_a.runs, group_b.runs):
                assert run_a is not run_b
                assert run_a.chart_data is not run_b.chart_data
                assert run_a.benchmark_test is not run_b.benchmark_test

    def test_chart_data_does_not_leak_between_calls(self):
        first = get_run_groups()
        first[0].runs[0].chart_data.append(ChartPoint(x=1, y=0.5))
        second = get_run_groups()
        assert second[0].runs[0].chart_data == []

    def test_sweep_bounds_are_sane(self, run_groups):
        for group in run_groups:
            assert group.min <= group.max
            assert group.step_size > 0

    def test_selected_option_is_declared(self, run_groups):
        for group in run_groups:
            if group.options is not None:
                assert group.selected_option in group.options

    def test_parameterized_groups_cover_every_option(self, run_groups):
        for group in run_groups:
            if group.options is not None and group.params:
                for option in group.options:
                    assert option in group.params

    def test_every_benchmark_satisfies_protocol(self, run_groups):
        for group in run_groups:
            for run in group.runs:
                assert isinstance(run.benchmark_test, BenchmarkTest)

    def test_transform_is_floored_and_monotonic(self, run_groups):
        for group in run_groups:
            transform = group.step_to_size_transformation
            assert transform is not None
            floor = transform(0)
            assert floor in (1, 4)
            values = [transform(step) for step in range(0, group.max + 1)]
            assert all(value >= floor for value in values)
            assert values == sorted(values)


class TestSpecificGroups:
    """Literal configuration of individual groups."""

    def test_pool_ops_group(self, groups_by_name):
        pool = groups_by_name["Pool Ops"]
        assert pool.min == 0
        assert pool.max == 1024
        assert pool.step_size == 64
        assert pool.options == ["max", "avg"]
        assert pool.selected_option == "max"
        assert pool.step_to_size_transformation(0) == 4
        assert pool.params["max"] == {"depth": 8, "field_size": 4, "stride": 4}
        assert [type(run.benchmark_test) for run in pool.runs] == [PoolGPUBenchmark, PoolCPUBenchmark]

    def test_conv_params_merge_base_record(self, groups_by_name):
        conv = groups_by_name["Convolution ops"]
        assert conv.options == ["regular", "transposed", "depthwise"]
        assert conv.selected_option == "regular"
        base = {"in_depth": 8, "filter_size": 7, "stride": 1, "pad": "same"}
        assert conv.params["regular"] == {**base, "out_depth": 3}
        assert conv.params["transposed"] == {**base, "out_depth": 3}
        assert conv.params["depthwise"] == {**base, "channel_mul": 1}
        assert [run.name for run in conv.runs] == ["conv_gpu"]
        assert isinstance(conv.runs[0].benchmark_test, ConvGPUBenchmark)

    def test_batchnorm_group_stops_at_512(self, groups_by_name):
        batchnorm = groups_by_name["Batch Normalization 3D"]
        assert batchnorm.max == 512
        assert batchnorm.options is None
        assert batchnorm.params == {}

    def test_matmul_runs(self, groups_by_name):
        matmul = groups_by_name["Matrix Multiplication"]
        assert [run.name for run in matmul.runs] == ["mulmat_gpu", "mulmat_cpu"]
        assert isinstance(matmul.runs[1].benchmark_test, MatmulCPUBenchmark)

    def test_unary_ops_group(self, groups_by_name):
        unary = groups_by_name["Unary Ops"]
        assert len(unary.options) == 36
        assert unary.options == UNARY_OP_NAMES
        assert unary.selected_option == "log"
        assert unary.params == {}

    def test_reduction_ops_group(self, groups_by_name):
        reduction = groups_by_name["Reduction Ops"]
        assert reduction.options == ["max", "min", "argMax", "argMin", "sum", "logSumExp"]
        assert reduction.selected_option == "max"


class TestBenchmarkRun:
    """Chart data accumulation on a run."""

    def test_clear_chart_data_is_idempotent(self):
        run = BenchmarkRun("mulmat_cpu", MatmulCPUBenchmark())
        run.chart_data.extend([ChartPoint(1, 0.1), ChartPoint(64, 0.4)])
        run.clear_chart_data()
        assert run.chart_data == []
        run.clear_chart_data()
        assert run.chart_data == []

    def test_group_clear_chart_data(self, groups_by_name):
        pool = groups_by_name["Pool Ops"]
        for run in pool.runs:
            run.chart_data.append(ChartPoint(4, 1.0))
        pool.clear_chart_data()
        assert all(run.chart_data == [] for run in pool.runs)


class TestSweepSizes:
    """Sweep size derivation."""

    def test_pool_sweep(self, groups_by_name):
        sizes = sweep_sizes(groups_by_name["Pool Ops"])
        assert sizes[:3] == [4, 64, 128]
        assert sizes[-1] == 1024
        assert len(sizes) == 17

    def test_without_transform(self):
        group = RunGroup(name="raw", min=2, max=10, step_size=4, runs=[])
        assert sweep_sizes(group) == [2, 6, 10]

    def test_min_size_transform(self):
        transform = MinSizeTransform(4)
        assert transform(0) == 4
        assert transform(3) == 4
        assert transform(64) == 64

    def test_params_for_defaults_to_selected(self, groups_by_name):
        conv = groups_by_name["Convolution ops"]
        assert conv.params_for()["out_depth"] == 3
        assert conv.params_for("depthwise")["channel_mul"] == 1
        assert groups_by_name["Matrix Multiplication"].params_for() == {}


class TestExport:
    """Dictionary export for the dashboard."""

    def test_pool_group_dict(self, groups_by_name):
        data = run_group_to_dict(groups_by_name["Pool Ops"])
        assert data["step_to_size_floor"] == 4
        assert data["options"] == ["max", "avg"]
        assert data["runs"][0] == {"name": "pool_gpu", "benchmark": "PoolGPUBenchmark", "chart_data": []}
        assert data["sizes"][0] == 4

    def test_chart_data_exported(self, groups_by_name):
        pool = groups_by_name["Pool Ops"]
        pool.runs[1].chart_data.append(ChartPoint(x=64, y=2.5))
        data = run_group_to_dict(pool)
        assert data["runs"][1]["chart_data"] == [{"x": 64, "y": 2.5}]

    def test_export_all(self, run_groups):
        exported = run_groups_to_dicts(run_groups)
        assert [entry["name"] for entry in exported] == [group.name for group in run_groups]
