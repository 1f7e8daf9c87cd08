import bisect
import itertools
import threading
from typing import Dict, List, Optional, Tuple

from models import Order, utc_now
from services.order_lifecycle import ORDER_STATUSES, is_valid_status

DEFAULT_RECENT_LIMIT = 10


class OrderRepositoryError(ValueError):
    pass


class DuplicateOrderError(OrderRepositoryError):
    def __init__(self, order_id: str) -> None:
        super().__init__(f"Order {order_id} already exists")
        self.order_id = order_id


class InvalidStatusError(OrderRepositoryError):
    def __init__(self, status: object) -> None:
        super().__init__(f"Invalid order status: {status!r}")
        self.status = status


class OrderRepository:
    """In-memory order store with recency and status indexes.

    The order map and both indexes are guarded by a single lock so they are
    always observed in agreement with each order's ``status`` and
    ``timestamp``.
    """

    def __init__(self) -> None:
        self._orders: Dict[str, Order] = {}
        # (-timestamp, insertion sequence, order_id); ascending key order is
        # newest first, ties in insertion order.
        self._by_time: List[Tuple[float, int, str]] = []
        # dicts used as insertion-ordered sets
        self._by_status: Dict[str, Dict[str, None]] = {
            status: {} for status in ORDER_STATUSES
        }
        self._sequence = itertools.count()
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)

    def __contains__(self, order_id: object) -> bool:
        with self._lock:
            return order_id in self._orders

    def add(self, order: Order) -> Order:
        if not is_valid_status(order.status):
            raise InvalidStatusError(order.status)
        with self._lock:
            if order.order_id in self._orders:
                raise DuplicateOrderError(order.order_id)
            self._orders[order.order_id] = order
            key = (-order.timestamp.timestamp(), next(self._sequence), order.order_id)
            bisect.insort(self._by_time, key)
            self._by_status[order.status][order.order_id] = None
        return order

    def get(self, order_id: str) -> Optional[Order]:
        with self._lock:
            return self._orders.get(order_id)

    def update_status(self, order_id: str, status: str) -> Optional[Order]:
        change = self.change_status(order_id, status)
        return None if change is None else change[0]

    def change_status(self, order_id: str, status: str) -> Optional[Tuple[Order, str]]:
        """Like ``update_status`` but also returns the status the order left."""
        if not is_valid_status(status):
            raise InvalidStatusError(status)
        with self._lock:
            order = self._orders.get(order_id)
            if order is None:
                return None
            previous_status = order.status
            self._by_status[previous_status].pop(order_id, None)
            order.status = status
            order.status_updated_at = utc_now()
            self._by_status[status][order_id] = None
            return order, previous_status

    def recent_orders(self, limit: int = DEFAULT_RECENT_LIMIT) -> List[Order]:
        if limit <= 0:
            return []
        with self._lock:
            return [self._orders[order_id] for _, _, order_id in self._by_time[:limit]]

    def orders_by_status(self, status: str) -> List[Order]:
        if not is_valid_status(status):
            raise InvalidStatusError(status)
        with self._lock:
            return [self._orders[order_id] for order_id in self._by_status[status]]
