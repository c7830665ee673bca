"""
PriorityQueue benchmark command-line tool

Times the queue's main operations across exponentially growing input
sizes and records average time and estimated memory per run.

Usage examples:
    python -m heapqueue.benchmark
    python -m heapqueue.benchmark --output pq.csv --base-input 1000 --steps 8
    python -m heapqueue.benchmark --ops push pop --iterations 3
"""

import argparse
import csv
import random
import statistics
import sys
import time

from .datastructures import PriorityQueue


# ----------------------------
# Helper Functions
# ----------------------------

def generate_random_list(size: int):
    """Generate a list of random integers of given size."""
    return [random.randint(0, 1000000) for _ in range(size)]


def measure_true_space(queue: PriorityQueue) -> int:
    """Estimate total memory of a queue: the object, its ctypes buffer and live items."""
    total = sys.getsizeof(queue)
    total += sys.getsizeof(queue._buf)
    for item in queue.to_list():
        total += sys.getsizeof(item)
    return total


def measure_operation(operation, input_size: int, iterations: int = 5):
    """Run the operation multiple times and return avg/std time (ms) and avg/std space (bytes)."""
    times = []
    space_used = []
    for _ in range(iterations):
        data = generate_random_list(input_size)
        start = time.perf_counter()
        queue = operation(data)
        end = time.perf_counter()
        times.append((end - start) * 1000)  # convert to milliseconds
        space_used.append(measure_true_space(queue))

    avg_time = statistics.mean(times)
    std_time = statistics.stdev(times) if len(times) > 1 else 0.0
    avg_space = statistics.mean(space_used)
    std_space = statistics.stdev(space_used) if len(space_used) > 1 else 0.0
    return avg_time, std_time, avg_space, std_space


# ----------------------------
# Operations to Benchmark
# ----------------------------

def bench_push(data):
    queue = PriorityQueue()
    for item in data:
        queue.push(item)
    return queue


def bench_pop(data):
    queue = PriorityQueue.from_iterable(data)
    while queue:
        queue.pop()
    return queue


def bench_peek(data):
    queue = PriorityQueue.from_iterable(data)
    for _ in range(min(3, len(data))):
        _ = queue.peek()
    return queue


def bench_heapify(data):
    return PriorityQueue.from_iterable(data)


def bench_heapify_unsized(data):
    # A generator has no len(), so the queue grows one slot at a time
    return PriorityQueue.from_iterable(item for item in data)


def bench_trim_excess(data):
    queue = bench_push(data)
    for _ in range(len(data) // 2):
        queue.pop()
    queue.trim_excess()
    return queue


OPERATIONS = {
    "push": bench_push,
    "pop": bench_pop,
    "peek": bench_peek,
    "heapify": bench_heapify,
    "heapify_unsized": bench_heapify_unsized,
    "trim_excess": bench_trim_excess,
}


# ----------------------------
# Benchmark Runner
# ----------------------------

def run_benchmarks(output_file: str, base_input: int = 100, steps: int = 12,
                   iterations: int = 5, ops=None):
    """Run exponential performance tests for PriorityQueue operations."""
    names = ops or list(OPERATIONS)
    unknown = [name for name in names if name not in OPERATIONS]
    if unknown:
        raise ValueError(f"unknown operation(s): {', '.join(unknown)}")
    if base_input < 1 or steps < 1 or iterations < 1:
        raise ValueError("base_input, steps and iterations must be >= 1")

    input_sizes = [base_input * (2 ** i) for i in range(steps)]
    rows = []

    with open(output_file, "w", newline="") as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow([
            "Input Size",
            "Operation",
            "Average Time (ms)",
            "Std Dev Time (ms)",
            "Average Space (bytes)",
            "Std Dev Space (bytes)"
        ])

        for op_name in names:
            op_func = OPERATIONS[op_name]
            for size in input_sizes:
                avg_time, std_time, avg_space, std_space = measure_operation(op_func, size, iterations)
                row = [size, op_name, f"{avg_time:.3f}", f"{std_time:.3f}", f"{avg_space:.0f}", f"{std_space:.0f}"]
                writer.writerow(row)
                rows.append(row)
                print(f"{op_name:<16} | Size: {size:<8} | Avg Time: {avg_time:.3f} ms | Std Time: {std_time:.3f} ms | "
                      f"Avg Space: {avg_space:.0f} B | Std Space: {std_space:.0f} B")

    print(f"\nBenchmark completed. Results saved to {output_file}")
    return rows


# -------------------------------------------------------------------
# CLI
# -------------------------------------------------------------------
def build_parser():
    p = argparse.ArgumentParser(prog="heapqueue.benchmark", description="PriorityQueue benchmarks")
    p.add_argument("--output", default="priority_queue_performance.csv",
                   help="CSV file to write results to")
    p.add_argument("--base-input", type=int, default=100,
                   help="Smallest input size; each step doubles it")
    p.add_argument("--steps", type=int, default=12)
    p.add_argument("--iterations", type=int, default=5,
                   help="Runs averaged per (operation, size)")
    p.add_argument("--ops", nargs="+", choices=sorted(OPERATIONS), default=None,
                   help="Subset of operations to run (default: all)")
    p.add_argument("--seed", type=int, default=None, help="Seed for reproducible inputs")
    return p


def main(argv=None):
    """CLI entry point when invoked via `python -m heapqueue.benchmark`."""
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.seed is not None:
        random.seed(args.seed)
    try:
        run_benchmarks(args.output, base_input=args.base_input, steps=args.steps,
                       iterations=args.iterations, ops=args.ops)
    except ValueError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
