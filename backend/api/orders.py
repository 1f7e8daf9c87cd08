import logging

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_notifier, get_order_repository, get_settings
from config import Settings
from repositories.order_repository import InvalidStatusError, OrderRepository
from schemas import OrderCreate, OrderResponse, OrderStatusUpdate, OrderSubmitResponse
from services import orders_service
from services.notification_service import AdminNotifier
from services.order_lifecycle import is_valid_status

logger = logging.getLogger("turbo-menu")

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderSubmitResponse, status_code=status.HTTP_201_CREATED)
async def submit_order(
    payload: OrderCreate,
    repository: OrderRepository = Depends(get_order_repository),
    notifier: AdminNotifier = Depends(get_notifier),
    app_settings: Settings = Depends(get_settings),
) -> OrderSubmitResponse:
    try:
        order = orders_service.create_order(repository, notifier, payload)
    except Exception as exc:
        logger.exception("Error submitting order: %s", exc)
        detail = str(exc) if app_settings.is_development else "Internal server error"
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to process order: {detail}",
        ) from exc
    return OrderSubmitResponse(
        message="Order submitted successfully",
        order=orders_service.format_order(order),
    )


@router.get("/{order_id}", response_model=OrderResponse)
async def read_order(
    order_id: str,
    repository: OrderRepository = Depends(get_order_repository),
) -> OrderResponse:
    order = orders_service.get_order(repository, order_id)
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    return OrderResponse(order=orders_service.format_order(order))


# Admin action; no authentication is performed.
@router.put("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: str,
    payload: OrderStatusUpdate,
    repository: OrderRepository = Depends(get_order_repository),
    notifier: AdminNotifier = Depends(get_notifier),
) -> OrderResponse:
    if not is_valid_status(payload.status):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid status value",
        )
    try:
        order = orders_service.update_order_status(
            repository, notifier, order_id, payload.status
        )
    except InvalidStatusError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid status value",
        ) from exc
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    return OrderResponse(order=orders_service.format_order(order))
