"""
Benchmarks for micrograd_mlp construction, forward pass and DOT export.

Run with: python benchmarks/benchmark_forward.py
"""

import os
import random
import tempfile
import time

from micrograd_mlp import MLP, build_graph, visualize_graph

ITERS = 100
WARMUP = 5


def benchmark_shape(nin, nouts, out_dir):
    """Time each stage for one network shape; returns ms per call keyed by stage."""
    rng = random.Random(0)
    model = MLP(nin, nouts, rng=rng)
    x = [rng.uniform(-1, 1) for _ in range(nin)]
    path = os.path.join(out_dir, "bench.dot")

    stages = {
        "construct": lambda: MLP(nin, nouts, rng=rng),
        "forward": lambda: model(x),
        "build_graph": lambda: build_graph(model),
        "visualize": lambda: visualize_graph(model, path),
    }

    results = {}
    for stage, fn in stages.items():
        for _ in range(WARMUP):
            fn()
        t0 = time.perf_counter()
        for _ in range(ITERS):
            fn()
        results[stage] = (time.perf_counter() - t0) * 1000.0 / ITERS
        print(f"{stage:<15} {results[stage]:>10.3f} ms")
    print(f"{'parameters':<15} {len(model.parameters()):>10d}")
    return results


def main():
    shapes = [
        (2, [2, 2]),
        (3, [4, 4, 1]),
        (16, [32, 32, 8]),
        (64, [64, 64, 10]),
    ]
    with tempfile.TemporaryDirectory() as out_dir:
        for nin, nouts in shapes:
            print(f"\n--- MLP({nin}, {nouts}) ---")
            benchmark_shape(nin, nouts, out_dir)


if __name__ == "__main__":
    main()
