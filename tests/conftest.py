from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from models import Order
from repositories.order_repository import OrderRepository
from services.notification_service import AdminNotifier

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_order(order_id: str, *, minutes: int = 0, status: str = "pending") -> Order:
    return Order(
        order_id=order_id,
        items=[{"type": "mix", "name": "House mix"}],
        total=12.5,
        customer_info={"id": "guest-1"},
        timestamp=BASE_TIME + timedelta(minutes=minutes),
        status=status,
    )


@pytest.fixture()
def repository():
    return OrderRepository()


@pytest.fixture()
def notifier():
    return AdminNotifier()


@pytest.fixture()
def app_settings():
    return Settings(
        environment="test",
        max_notifications=100,
        admin_orders_limit=20,
        notifications_limit=20,
        allowed_origins=["http://localhost:3000"],
    )


@pytest.fixture()
def app(app_settings):
    return create_app(app_settings)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client
