from benchmarks.bench_render import main, run_benchmark


def test_benchmark_small_grid():
    res = run_benchmark(rows=12, cols=10, repeats=2)
    assert res["cells"] == 120.0
    # 2 triangles per quad minus the demo hole, doubled for the wireframe pass
    assert 0 < res["primitives"] <= 2 * 2 * 11 * 9
    assert res["mean_render_s"] >= 0.0


def test_benchmark_cli(capsys):
    assert main(["--rows", "8", "--cols", "8", "--repeats", "1"]) == 0
    assert "primitives:" in capsys.readouterr().out
