"""Throughput benchmark: one producer and one consumer thread share a queue."""

from __future__ import annotations

import argparse
import threading
import time
from dataclasses import dataclass
from typing import Optional, Sequence

from spscorders.order import Order, OrderType, Side
from spscorders.spsc_queue import SPSCQueue


@dataclass(frozen=True)
class BenchmarkResult:
    num_items: int
    consumed: int
    duration_ns: int

    @property
    def duration_ms(self) -> float:
        return self.duration_ns / 1e6

    @property
    def avg_latency_ns(self) -> float:
        """Mean time per operation, a push and a pop per item."""
        return self.duration_ns / (2 * self.num_items) if self.num_items else 0.0


def run_benchmark(num_items: int = 1_000_000, capacity: int = 8192) -> BenchmarkResult:
    """Pass ``num_items`` orders through a queue from one thread to another."""
    if num_items < 0:
        raise ValueError("num_items must not be negative")
    queue = SPSCQueue(capacity)
    done = threading.Event()
    consumed = 0

    def produce() -> None:
        for i in range(num_items):
            order = Order("BENCH", i, Side.BUY, OrderType.LIMIT, 100.0, 10)
            while not queue.push(order):
                time.sleep(0)
        done.set()

    def consume() -> None:
        nonlocal consumed
        while not done.is_set() or not queue.empty():
            if queue.pop() is not None:
                consumed += 1
            else:
                time.sleep(0)

    start = time.perf_counter_ns()
    threads = [threading.Thread(target=produce), threading.Thread(target=consume)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return BenchmarkResult(num_items, consumed, time.perf_counter_ns() - start)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark the SPSC order queue.")
    parser.add_argument("--items", type=int, default=1_000_000)
    parser.add_argument("--capacity", type=int, default=8192)
    args = parser.parse_args(argv)
    try:
        result = run_benchmark(args.items, args.capacity)
    except ValueError as exc:
        parser.error(str(exc))
    print(f"Processed {result.num_items} items.")
    print(f"Total time: {result.duration_ms:g} ms")
    print(f"Average latency: {result.avg_latency_ns:g} ns per operation (push + pop)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())