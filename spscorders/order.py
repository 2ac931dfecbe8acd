"""Fixed-layout order records and their packed binary form."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum

_LAYOUT = struct.Struct("<8sQBBdI")
SYMBOL_SIZE = 8
ORDER_SIZE = _LAYOUT.size


class Side(IntEnum):
    BUY = 0
    SELL = 1


class OrderType(IntEnum):
    LIMIT = 0
    MARKET = 1


@dataclass(frozen=True, slots=True)
class Order:
    """A single order; immutable so it can be handed between threads."""

    symbol: str
    order_id: int
    side: Side
    order_type: OrderType
    price: float
    quantity: int

    def __post_init__(self) -> None:
        encoded = self.symbol.encode("ascii")
        if len(encoded) > SYMBOL_SIZE or b"\0" in encoded:
            raise ValueError(f"invalid symbol {self.symbol!r}")
        if not 0 <= self.order_id < 2**64 or not 0 <= self.quantity < 2**32:
            raise ValueError("order_id or quantity out of range")
        object.__setattr__(self, "side", Side(self.side))
        object.__setattr__(self, "order_type", OrderType(self.order_type))
        object.__setattr__(self, "price", float(self.price))

    def to_bytes(self) -> bytes:
        """Pack the order into its 30-byte little-endian form."""
        return _LAYOUT.pack(
            self.symbol.encode("ascii"),
            self.order_id,
            self.side,
            self.order_type,
            self.price,
            self.quantity,
        )

    @classmethod
    def from_bytes(cls, data: bytes) -> Order:
        """Unpack an order from its packed form."""
        if len(data) != ORDER_SIZE:
            raise ValueError(f"expected {ORDER_SIZE} bytes, got {len(data)}")
        symbol, order_id, side, order_type, price, quantity = _LAYOUT.unpack(data)
        return cls(
            symbol.split(b"\0", 1)[0].decode("ascii"),
            order_id,
            Side(side),
            OrderType(order_type),
            price,
            quantity,
        )