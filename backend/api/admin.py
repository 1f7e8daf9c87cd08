from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from api.dependencies import get_notifier, get_order_repository, get_settings
from config import Settings
from repositories.order_repository import InvalidStatusError, OrderRepository
from schemas import NotificationListResponse, NotificationResponse, OrderListResponse
from services import orders_service
from services.notification_service import AdminNotifier

# Unauthenticated, same as the order status endpoint.
router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/orders", response_model=OrderListResponse)
async def list_orders(
    status_filter: Optional[str] = Query(default=None, alias="status"),
    repository: OrderRepository = Depends(get_order_repository),
    app_settings: Settings = Depends(get_settings),
) -> OrderListResponse:
    try:
        orders = orders_service.list_orders(
            repository, status_filter, limit=app_settings.admin_orders_limit
        )
    except InvalidStatusError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid status value",
        ) from exc
    return OrderListResponse(orders=[orders_service.format_order(order) for order in orders])


@router.get("/notifications", response_model=NotificationListResponse)
async def list_notifications(
    limit: Optional[int] = Query(default=None, ge=1),
    notifier: AdminNotifier = Depends(get_notifier),
    app_settings: Settings = Depends(get_settings),
) -> NotificationListResponse:
    notifications = orders_service.list_notifications(
        notifier, limit or app_settings.notifications_limit
    )
    return NotificationListResponse(
        unread=notifier.unread_count(),
        notifications=[orders_service.format_notification(item) for item in notifications],
    )


@router.post("/notifications/{notification_id}/read", response_model=NotificationResponse)
async def mark_notification_read(
    notification_id: str,
    notifier: AdminNotifier = Depends(get_notifier),
) -> NotificationResponse:
    notification = orders_service.mark_notification_read(notifier, notification_id)
    if notification is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Notification not found",
        )
    return NotificationResponse(notification=orders_service.format_notification(notification))
