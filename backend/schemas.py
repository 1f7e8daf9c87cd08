from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator

MAX_FLAVORS_PER_MIX = 3


class MixItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["mix"]


class CustomItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: Literal["custom"]
    hookah: Any = Field(..., description="Hookah the custom mix is prepared on")
    flavors: List[Union[StrictInt, str]] = Field(
        ...,
        min_length=1,
        max_length=MAX_FLAVORS_PER_MIX,
        description="Flavor labels, at most three per custom mix",
    )

    @field_validator("hookah")
    @classmethod
    def _require_hookah(cls, value: Any) -> Any:
        # None, "", 0 and False do not name a hookah
        if value is None or value in ("", 0):
            raise ValueError("custom mix requires a hookah")
        return value


OrderItem = Annotated[Union[MixItem, CustomItem], Field(discriminator="type")]

# ints stay ints so totals round-trip unchanged
Amount = Union[StrictInt, float]


class OrderCreate(BaseModel):
    items: List[OrderItem] = Field(..., min_length=1)
    total: Amount
    customerInfo: Optional[Any] = Field(
        default=None, description="Customer details; a guest id is assigned when absent"
    )


class OrderStatusUpdate(BaseModel):
    status: str


class OrderOut(BaseModel):
    orderId: str
    items: List[Dict[str, Any]]
    total: Amount
    customerInfo: Any
    timestamp: datetime
    status: str
    statusUpdatedAt: datetime


class OrderSubmitResponse(BaseModel):
    success: bool = True
    message: str
    order: OrderOut


class OrderResponse(BaseModel):
    success: bool = True
    order: OrderOut


class OrderListResponse(BaseModel):
    success: bool = True
    orders: List[OrderOut]


class NotificationOut(BaseModel):
    id: str
    type: str
    data: Dict[str, Any]
    timestamp: datetime
    read: bool


class NotificationListResponse(BaseModel):
    success: bool = True
    unread: int
    notifications: List[NotificationOut]


class NotificationResponse(BaseModel):
    success: bool = True
    notification: NotificationOut


class HealthResponse(BaseModel):
    status: str
    time: datetime
