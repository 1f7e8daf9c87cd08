import contextlib
import logging
import time
from typing import Optional
from uuid import uuid4

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from api import admin_router, info_router, orders_router
from config import Settings, settings
from models import Notification
from repositories.order_repository import OrderRepository
from services.notification_service import AdminNotifier

logger = logging.getLogger("turbo-menu")


def _log_notification(notification: Notification) -> None:
    logger.info(
        "Admin notification %s %s %s",
        notification.type,
        notification.id,
        notification.data,
    )


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    app_settings = app_settings or settings

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI):
        unsubscribe = app.state.notifier.subscribe(_log_notification)
        logger.info("Turbo Menu API server running on port %s", app_settings.port)
        logger.info("Environment: %s", app_settings.environment)
        logger.warning(
            "Admin endpoints are unauthenticated; keep the service on a trusted network."
        )
        logger.info("Ready to accept orders...")
        try:
            yield
        finally:
            unsubscribe()

    app = FastAPI(title="Turbo Menu API", lifespan=lifespan)
    app.state.settings = app_settings
    app.state.order_repository = OrderRepository()
    app.state.notifier = AdminNotifier(max_notifications=app_settings.max_notifications)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.include_router(info_router)
    app.include_router(orders_router)
    app.include_router(admin_router)

    @app.middleware("http")
    async def track_request(request: Request, call_next):
        request_id = str(uuid4())
        started = time.perf_counter()
        logger.info("[%s] %s %s", request_id, request.method, request.url.path)
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        response.headers["X-Request-ID"] = request_id
        logger.info(
            "[%s] Completed %s in %.0fms", request_id, response.status_code, elapsed_ms
        )
        return response

    return app


app = create_app()


def run() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
