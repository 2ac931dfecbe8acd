# spscorders

A bounded single-producer, single-consumer ring queue, a fixed-layout
`Order` record with a packed binary form, and a small throughput benchmark.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The queue

`spscorders.spsc_queue.SPSCQueue(capacity)` is a ring buffer meant for one
thread that pushes and one thread that pops. `capacity` must be a power of
two (`is_power_of_two` checks this), or `ValueError` is raised. One slot is
always left free, so the queue holds at most `capacity - 1` items.

```python
from spscorders.spsc_queue import SPSCQueue

queue = SPSCQueue(8)
queue.push(42)        # True; False when the queue is full
queue.pop()           # 42; None when the queue is empty
queue.empty()         # True
queue.full()          # False
queue.size()          # number of stored items, also len(queue)
queue.capacity        # 8
queue.debug_print()   # prints "Head: 1, Tail: 1, Empty: yes, Full: no"
```

`debug_print` takes an optional `file` to write to instead of standard
output. `raw_buffer()` returns a tuple snapshot of every slot in the ring,
including slots whose items have already been popped.

Because `pop` signals an empty queue with `None`, `None` itself should not
be pushed as an item.

## Orders

`spscorders.order.Order` is a frozen dataclass with the fields `symbol`,
`order_id`, `side` (`Side.BUY` or `Side.SELL`), `order_type`
(`OrderType.LIMIT` or `OrderType.MARKET`), `price` and `quantity`.

```python
from spscorders.order import Order, OrderType, Side

order = Order("AAPL", 12345, Side.BUY, OrderType.LIMIT, 150.25, 100)
data = order.to_bytes()            # 30-byte little-endian record
assert Order.from_bytes(data) == order
```

The symbol must be ASCII, at most 8 bytes, with no NUL characters;
`order_id` must fit in 64 unsigned bits and `quantity` in 32. Anything else
raises `ValueError`, as does `from_bytes` when given other than 30 bytes
(`ORDER_SIZE`).

## Benchmark

```
spsc-bench
spsc-bench --items 100000 --capacity 1024
```

One thread pushes `--items` orders (default 1,000,000) into a queue of
`--capacity` slots (default 8192) while another pops them. The command then
prints the item count, the total time in milliseconds and the mean time per
operation, counting one push and one pop per item.

From code, `spscorders.bench.run_benchmark(num_items, capacity)` does the
same run and returns a `BenchmarkResult` with `num_items`, `consumed`,
`duration_ns`, `duration_ms` and `avg_latency_ns`.

## What this package does not do

It provides the queue and the order record only. It does not route orders
by symbol, match or execute them, generate order streams, or offer any
publish/subscribe messaging or pooled memory between components.