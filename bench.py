"""Benchmark render() on generated input.

Outputs a row with the columns:
  Input Size | Escapes | Render Time | Throughput | Output Size
"""

import argparse
import random
import time

from bytescape import generate_input, render


def format_bytes(num_bytes: float) -> str:
    """Format bytes to human-readable string."""
    for unit in ["B", "KB", "MB", "GB"]:
        if num_bytes < 1024.0:
            return f"{num_bytes:.2f} {unit}"
        num_bytes /= 1024.0
    return f"{num_bytes:.2f} TB"


def main() -> None:
    """Run the render benchmark and print a table row."""
    parser = argparse.ArgumentParser(description="Benchmark bytescape render().")
    parser.add_argument(
        "--segments",
        type=int,
        default=100_000,
        help="Number of escapes in the generated input (default: 100,000).",
    )
    parser.add_argument(
        "--repeat",
        type=int,
        default=5,
        help="Number of timed runs; the fastest is reported (default: 5).",
    )
    parser.add_argument("--seed", type=int, default=0, help="Generator seed.")
    args = parser.parse_args()

    source = generate_input(args.segments, rng=random.Random(args.seed)).encode("utf-8")

    best = float("inf")
    rendered = b""
    for _ in range(args.repeat):
        t0 = time.perf_counter()
        rendered = render(source)
        best = min(best, time.perf_counter() - t0)

    throughput = len(source) / best

    print()
    print(
        f"| {'Input Size':12} | {'Escapes':10} | {'Render Time':12} "
        f"| {'Throughput':14} | {'Output Size':12} |"
    )
    print(f"| {'-' * 12} | {'-' * 10} | {'-' * 12} | {'-' * 14} | {'-' * 12} |")
    print(
        f"| {format_bytes(len(source)):12} | {args.segments:10,} | {f'{best * 1000:.1f} ms':12} "
        f"| {format_bytes(throughput) + '/sec':14} | {format_bytes(len(rendered)):12} |"
    )
    print()


if __name__ == "__main__":
    main()
