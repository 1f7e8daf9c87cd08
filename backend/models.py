from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Union


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Order:
    """A submitted order as held by the repository.

    ``items``, ``total`` and ``customer_info`` are stored and returned as
    given. ``status`` and ``status_updated_at`` change only through
    ``OrderRepository.update_status``.
    """

    order_id: str
    items: List[Dict[str, Any]]
    total: Union[int, float]
    customer_info: Any
    timestamp: datetime = field(default_factory=utc_now)
    status: str = "pending"
    status_updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.status_updated_at is None:
            self.status_updated_at = self.timestamp


@dataclass
class Notification:
    id: str
    type: str
    data: Dict[str, Any]
    timestamp: datetime = field(default_factory=utc_now)
    read: bool = False
