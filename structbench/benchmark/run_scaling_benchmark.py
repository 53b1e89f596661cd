#!/usr/bin/env python3

from .benchmark import BenchmarkConfig, create_case_benchmark
from .cases import (
    DUPLICATE_CHECKING_ALL_CONTAINERS,
    FREQUENCY_COUNTING_ALL_CONTAINERS,
    SORTING_PERFORMANCE,
)

# Exponential sizes up to the full dataset sizes of the cases
ALL_SIZES = [100, 500, 1000, 5000, 10000, 50000, 100000, 500000, 1000000]

# Bubble sort is quadratic on every input; the pairwise check stops at the
# first repeat, which random data of this range hits after ~1,000 elements
SIZE_LIMITS = {
    "Bubble sort": 5_000,
}

STYLES = [("blue", "-"), ("green", "-"), ("red", "--"), ("orange", "--")]


def run_scaling_benchmark(show_plots: bool = False, seed: int = 42):
    """Sweep every case from 100 elements to its full dataset size"""
    print(f"Benchmark sizes: {len(ALL_SIZES)} points")
    print("Sizes:", ", ".join(f"{s:,}" for s in ALL_SIZES))
    print("Size limits:", SIZE_LIMITS)

    runners = []
    for case, plot_name in [
        (DUPLICATE_CHECKING_ALL_CONTAINERS, "duplicate-checking"),
        (FREQUENCY_COUNTING_ALL_CONTAINERS, "frequency-counting"),
        (SORTING_PERFORMANCE, "sorting"),
    ]:
        print("\n" + "=" * 60)
        print(case.name.upper())
        print("=" * 60)

        config = BenchmarkConfig(
            x_vals=[s for s in ALL_SIZES if s <= case.dataset_size],
            plot_name=plot_name,
            styles=STYLES,
            size_limits=SIZE_LIMITS,
            warmup_runs=1,
            measure_runs=3,
            seed=seed,
        )
        benchmark = create_case_benchmark(case, config)
        runners.append(benchmark.run(show_plots=show_plots, print_data=True))

    print("\nScaling benchmark completed! Plots saved as *.png")
    return runners


if __name__ == "__main__":
    run_scaling_benchmark()
