"""Single-producer single-consumer ring queue, fixed-layout orders and a benchmark."""

__version__ = "0.1.0"
__all__ = ["order", "spsc_queue", "bench"]