from .admin import router as admin_router
from .info import router as info_router
from .orders import router as orders_router

__all__ = [
    "admin_router",
    "info_router",
    "orders_router",
]
