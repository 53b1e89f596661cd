import os
import statistics
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import matplotlib.pyplot as plt
import psutil

from ..data.generate import generate_random_integers
from .cases import BenchmarkCase


@dataclass
class BenchmarkConfig:
    """Configuration for a scaling sweep, similar to triton.testing.Benchmark"""

    x_vals: List[int]
    plot_name: str
    x_name: str = "N"
    line_names: List[str] = field(default_factory=list)
    styles: List[Tuple[str, str]] = field(default_factory=list)
    ylabel: str = "Time (ms)"
    size_limits: Dict[str, int] = field(default_factory=dict)
    warmup_runs: int = 1
    measure_runs: int = 3
    min_runtime_ms: float = 0.0
    measure_memory: bool = True
    log_scale: bool = True
    seed: Optional[int] = None

    def __post_init__(self):
        if self.measure_runs < 1:
            raise ValueError("measure_runs must be at least 1")
        if self.warmup_runs < 0:
            raise ValueError("warmup_runs must be non-negative")


@dataclass
class BenchmarkResult:
    """Result of a single benchmark measurement"""

    value: float
    std_dev: float
    measurements: List[float]
    config_name: str
    x_value: Union[int, float]
    memory_usage: Optional[float] = None


def current_memory_mb() -> float:
    """Resident set size of this process in MB."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1024 / 1024


class BenchmarkRunner:
    """Core benchmarking runner that handles timing and statistics"""

    def __init__(self, config: BenchmarkConfig):
        self.config = config
        self.results: Dict[str, List[BenchmarkResult]] = {}
        self.line_vals: List[str] = []
        self.current_algorithm: Optional[str] = None
        self.current_size: Optional[int] = None
        self.total_steps: int = 0
        self.current_step: int = 0
        self._datasets: Dict[int, List[int]] = {}

    def do_bench(
        self,
        fn: Callable[[Any], Any],
        setup: Optional[Callable[[], Any]] = None,
    ) -> Tuple[float, float, List[float]]:
        """
        Time a function call multiple times and return statistics.

        `setup` runs before every call, outside the timed region, and its
        return value is passed to `fn`.
        """
        # Warmup runs
        for _ in range(self.config.warmup_runs):
            fn(setup() if setup else None)

        # Measurement runs
        times: List[float] = []
        total_runtime = 0.0

        while (
            len(times) < self.config.measure_runs
            or total_runtime < self.config.min_runtime_ms
        ):
            arg = setup() if setup else None
            start = time.perf_counter()
            fn(arg)
            end = time.perf_counter()

            runtime_ms = (end - start) * 1000
            times.append(runtime_ms)
            total_runtime += runtime_ms

        # Calculate statistics
        mean_time = statistics.mean(times)
        std_dev = statistics.stdev(times) if len(times) > 1 else 0.0

        return mean_time, std_dev, times

    def _dataset(self, case: BenchmarkCase, size: int) -> List[int]:
        """One dataset per size, shared by copy among all strategies"""
        if size not in self._datasets:
            self._datasets[size] = generate_random_integers(
                size, case.upper_bound, self.config.seed
            )
        return self._datasets[size]

    def run_benchmark(self, case: BenchmarkCase) -> None:
        """Sweep every strategy of the case over the configured sizes"""
        algorithms = case.make_strategies()
        self.line_vals = [algorithm.get_algorithm_name() for algorithm in algorithms]

        self.total_steps = sum(
            1
            for name in self.line_vals
            for x_val in self.config.x_vals
            if not self._exceeds_limit(name, x_val)
        )
        self.current_step = 0

        print(f"\nStarting benchmark: {self.config.plot_name}")
        print(
            f"Testing {len(algorithms)} strategies on {len(self.config.x_vals)} sizes"
        )
        print(f"Started at {datetime.now().strftime('%H:%M:%S')}")
        print("=" * 80)

        try:
            for i, algorithm in enumerate(algorithms):
                line_val = self.line_vals[i]
                self.current_algorithm = line_val
                line_results = []

                print(f"\n[{i + 1}/{len(algorithms)}] Testing {self._line_name(i)}")
                print("-" * 60)

                for x_val in self.config.x_vals:
                    if self._exceeds_limit(line_val, x_val):
                        continue

                    self.current_step += 1
                    self.current_size = x_val

                    progress = (self.current_step / self.total_steps) * 100
                    print(
                        f"[{self.current_step:2d}/{self.total_steps}] "
                        f"N={x_val:>12,} ({progress:5.1f}%) ",
                        end="",
                        flush=True,
                    )

                    start_time = time.time()

                    try:
                        numbers = self._dataset(case, x_val)
                        mean_time, std_dev, measurements = self.do_bench(
                            algorithm.execute, setup=lambda: list(numbers)
                        )
                        memory_usage = (
                            current_memory_mb() if self.config.measure_memory else None
                        )

                        line_results.append(
                            BenchmarkResult(
                                value=mean_time,
                                std_dev=std_dev,
                                measurements=measurements,
                                config_name=line_val,
                                x_value=x_val,
                                memory_usage=memory_usage,
                            )
                        )

                        elapsed = time.time() - start_time
                        print(
                            f"→ {mean_time:8.3f}ms (±{std_dev:6.3f}) [{elapsed:4.1f}s]"
                        )

                    except Exception as e:
                        elapsed = time.time() - start_time
                        print(f"→ FAILED: {str(e)[:50]}... [{elapsed:4.1f}s]")
                        # Keep a placeholder so the line still has this size
                        line_results.append(
                            BenchmarkResult(
                                value=float("inf"),
                                std_dev=0.0,
                                measurements=[],
                                config_name=line_val,
                                x_value=x_val,
                            )
                        )

                self.results[line_val] = line_results

        finally:
            self._datasets.clear()

        print("\n" + "=" * 80)
        print(f"Benchmark completed at {datetime.now().strftime('%H:%M:%S')}")

    def _exceeds_limit(self, algorithm: str, size: int) -> bool:
        limit = self.config.size_limits.get(algorithm)
        return limit is not None and size > limit

    def _line_name(self, index: int) -> str:
        if index < len(self.config.line_names):
            return self.config.line_names[index]
        return self.line_vals[index]

    def generate_plot(self, show_plots: bool = True, save_plot: bool = True) -> None:
        """Generate performance plot with error bars"""
        self._generate_single_plot(
            "Run Time",
            self.config.ylabel,
            lambda r: r.value,
            lambda r: r.std_dev,
            show_plots,
            save_plot,
        )

        if self.config.measure_memory:
            self._generate_single_plot(
                "Memory Usage",
                "Memory (MB)",
                lambda r: r.memory_usage,
                lambda r: 0,
                show_plots,
                save_plot,
                suffix="-memory",
            )

    def _generate_single_plot(
        self,
        title_suffix: str,
        ylabel: str,
        value_fn: Callable,
        error_fn: Callable,
        show_plots: bool,
        save_plot: bool,
        suffix: str = "",
    ) -> None:
        """Generate a single plot"""
        plt.figure(figsize=(12, 8))

        for i, line_val in enumerate(self.line_vals):
            if line_val not in self.results:
                continue

            results = [
                r
                for r in self.results[line_val]
                if value_fn(r) is not None and value_fn(r) != float("inf")
            ]
            if not results:
                continue

            color, style = (
                self.config.styles[i] if i < len(self.config.styles) else (None, "-")
            )

            plt.errorbar(
                [r.x_value for r in results],
                [value_fn(r) for r in results],
                yerr=[error_fn(r) for r in results],
                color=color,
                linestyle=style,
                marker="o",
                label=self._line_name(i),
                capsize=5,
                capthick=2,
            )

        if self.config.log_scale:
            plt.xscale("log")
            plt.yscale("log")

        plt.xlabel(self.config.x_name)
        plt.ylabel(ylabel)
        plt.title(f"{self.config.plot_name} - {title_suffix}")
        plt.legend()
        plt.grid(True, alpha=0.3)
        plt.tight_layout()

        if save_plot:
            filename = f"{self.config.plot_name}{suffix}.png"
            plt.savefig(filename, dpi=300, bbox_inches="tight")

        if show_plots:
            plt.show()
        else:
            plt.close()

    def print_data(self) -> None:
        """Print detailed benchmark results"""
        print(f"\n{self.config.plot_name} Benchmark Results")
        print("=" * 80)

        for i, line_val in enumerate(self.line_vals):
            if line_val not in self.results:
                continue

            print(f"\n{self._line_name(i)}:")

            header = f"{'N':<10} {'Time (ms)':<12} {'Std Dev':<10}"
            if self.config.measure_memory:
                header += f" {'Memory (MB)':<12}"
            print(header)
            print("-" * len(header))

            for result in self.results[line_val]:
                row = f"{result.x_value:<10} {result.value:<12.4f} {result.std_dev:<10.4f}"
                if self.config.measure_memory and result.memory_usage is not None:
                    row += f" {result.memory_usage:<12.2f}"
                elif self.config.measure_memory:
                    row += f" {'N/A':<12}"

                print(row)


def perf_report(config: BenchmarkConfig):
    """Decorator for performance reporting, similar to triton.testing.perf_report

    The decorated function returns the BenchmarkCase to sweep.
    """

    def decorator(func: Callable[..., BenchmarkCase]):
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        def run(
            show_plots: bool = True, print_data: bool = True, save_plot: bool = True
        ):
            runner = BenchmarkRunner(config)
            runner.run_benchmark(func())

            if print_data:
                runner.print_data()
            if show_plots or save_plot:
                runner.generate_plot(show_plots=show_plots, save_plot=save_plot)

            return runner

        wrapper.run = run
        wrapper.config = config
        return wrapper

    return decorator


def create_case_benchmark(case: BenchmarkCase, config: BenchmarkConfig) -> Callable:
    """Create a sweep benchmark for a case"""

    @perf_report(config)
    def benchmark() -> BenchmarkCase:
        return case

    return benchmark
