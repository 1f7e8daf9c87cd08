from fastapi import Request

from config import Settings
from repositories.order_repository import OrderRepository
from services.notification_service import AdminNotifier


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_order_repository(request: Request) -> OrderRepository:
    return request.app.state.order_repository


def get_notifier(request: Request) -> AdminNotifier:
    return request.app.state.notifier
