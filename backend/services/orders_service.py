import logging
import secrets
import string
from datetime import datetime
from typing import Any, Dict, List, Optional

from models import Notification, Order, utc_now
from repositories.order_repository import InvalidStatusError, OrderRepository
from schemas import NotificationOut, OrderCreate, OrderOut
from services.notification_service import (
    DEFAULT_NOTIFICATIONS_LIMIT,
    NEW_ORDER,
    STATUS_CHANGE,
    AdminNotifier,
)
from services.order_lifecycle import DEFAULT_STATUS, is_valid_status

logger = logging.getLogger("turbo-menu")

ORDER_ID_PREFIX = "TURBO"
ADMIN_ORDERS_LIMIT = 20
_BASE36_ALPHABET = string.digits + string.ascii_lowercase


def _to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, remainder = divmod(value, 36)
        digits.append(_BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def _epoch_millis(moment: datetime) -> int:
    return int(moment.timestamp() * 1000)


def generate_order_id(now: Optional[datetime] = None) -> str:
    moment = now or utc_now()
    suffix = "".join(secrets.choice(_BASE36_ALPHABET) for _ in range(5))
    return f"{ORDER_ID_PREFIX}-{_to_base36(_epoch_millis(moment))}-{suffix}"


def guest_customer(now: Optional[datetime] = None) -> Dict[str, Any]:
    moment = now or utc_now()
    return {"id": f"guest-{_epoch_millis(moment)}"}


def format_order(order: Order) -> OrderOut:
    return OrderOut(
        orderId=order.order_id,
        items=order.items,
        total=order.total,
        customerInfo=order.customer_info,
        timestamp=order.timestamp,
        status=order.status,
        statusUpdatedAt=order.status_updated_at,
    )


def format_notification(notification: Notification) -> NotificationOut:
    return NotificationOut(
        id=notification.id,
        type=notification.type,
        data=notification.data,
        timestamp=notification.timestamp,
        read=notification.read,
    )


def create_order(
    repository: OrderRepository,
    notifier: AdminNotifier,
    payload: OrderCreate,
) -> Order:
    now = utc_now()
    order = Order(
        order_id=generate_order_id(now),
        items=[item.model_dump() for item in payload.items],
        total=payload.total,
        customer_info=(
            payload.customerInfo
            if payload.customerInfo is not None
            else guest_customer(now)
        ),
        timestamp=now,
        status=DEFAULT_STATUS,
        status_updated_at=now,
    )
    repository.add(order)
    logger.info("Order %s stored with %d item(s)", order.order_id, len(order.items))
    notifier.add_notification(
        NEW_ORDER,
        {
            "orderId": order.order_id,
            "total": order.total,
            "items": len(order.items),
        },
    )
    return order


def get_order(repository: OrderRepository, order_id: str) -> Optional[Order]:
    return repository.get(order_id)


def update_order_status(
    repository: OrderRepository,
    notifier: AdminNotifier,
    order_id: str,
    status_value: str,
) -> Optional[Order]:
    if not is_valid_status(status_value):
        raise InvalidStatusError(status_value)
    change = repository.change_status(order_id, status_value)
    if change is None:
        return None
    order, previous_status = change
    logger.info("Order %s status %s -> %s", order_id, previous_status, order.status)
    notifier.add_notification(
        STATUS_CHANGE,
        {
            "orderId": order.order_id,
            "status": order.status,
            "previousStatus": previous_status,
        },
    )
    return order


def list_orders(
    repository: OrderRepository,
    status_value: Optional[str] = None,
    limit: int = ADMIN_ORDERS_LIMIT,
) -> List[Order]:
    if status_value:
        return repository.orders_by_status(status_value)
    return repository.recent_orders(limit)


def list_notifications(
    notifier: AdminNotifier,
    limit: int = DEFAULT_NOTIFICATIONS_LIMIT,
) -> List[Notification]:
    return notifier.get_recent_notifications(limit)


def mark_notification_read(
    notifier: AdminNotifier,
    notification_id: str,
) -> Optional[Notification]:
    if not notifier.mark_as_read(notification_id):
        return None
    return notifier.find(notification_id)
