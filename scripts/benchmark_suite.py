import sys
import os
import time

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from knmaze.core.grid import Grid
from knmaze.core.complexity import MazeAnalyzer
from knmaze.api import ALGORITHMS


def benchmark_size(width: int, height: int):
    print(f"\n--- Benchmarking {width}x{height} ({width*height/1e6:.2f}M cells) ---")

    for name, cls in ALGORITHMS.items():
        grid = Grid(width, height)
        algo = cls(grid, seed=42)

        gen_start = time.time()
        algo.run_all()
        gen_time = time.time() - gen_start

        stats = MazeAnalyzer.calculate_stats(grid)
        print(f"{name:<8} | {gen_time:>8.4f}s | {(width*height)/gen_time:>12,.0f} cells/sec | "
              f"dead ends {stats['dead_end_percent']:.1f}%")


def run_suite():
    sizes = [
        (50, 50),
        (200, 200),
        (500, 500),
    ]

    for w, h in sizes:
        benchmark_size(w, h)


if __name__ == "__main__":
    run_suite()
