import itertools
import logging
import threading
from collections import deque
from typing import Any, Callable, Deque, Dict, List, Optional
from uuid import uuid4

from models import Notification, utc_now

logger = logging.getLogger("turbo-menu")

MAX_NOTIFICATIONS = 100
DEFAULT_NOTIFICATIONS_LIMIT = 20

NEW_ORDER = "new-order"
STATUS_CHANGE = "status-change"

Listener = Callable[[Notification], None]


class AdminNotifier:
    """Bounded, most-recent-first notification buffer with synchronous fan-out.

    Listeners run in subscription order on the publishing thread. A failing
    listener is logged and skipped. Listeners must not publish or subscribe
    on this notifier from inside the callback.
    """

    def __init__(self, max_notifications: int = MAX_NOTIFICATIONS) -> None:
        if max_notifications <= 0:
            raise ValueError("max_notifications must be positive")
        self.max_notifications = max_notifications
        self._notifications: Deque[Notification] = deque(maxlen=max_notifications)
        self._listeners: Dict[int, Listener] = {}
        self._tokens = itertools.count(1)
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._notifications)

    def add_notification(self, type: str, data: Dict[str, Any]) -> Notification:
        notification = Notification(
            id=str(uuid4()),
            type=type,
            data=data,
            timestamp=utc_now(),
        )
        with self._lock:
            # deque(maxlen) drops the oldest entry from the right
            self._notifications.appendleft(notification)
            listeners = list(self._listeners.values())
        for listener in listeners:
            try:
                listener(notification)
            except Exception:
                logger.exception(
                    "Notification listener %r failed for %s %s",
                    listener,
                    notification.type,
                    notification.id,
                )
        return notification

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        with self._lock:
            token = next(self._tokens)
            self._listeners[token] = listener

        def unsubscribe() -> None:
            with self._lock:
                self._listeners.pop(token, None)

        return unsubscribe

    def listener_count(self) -> int:
        with self._lock:
            return len(self._listeners)

    def get_recent_notifications(
        self, limit: int = DEFAULT_NOTIFICATIONS_LIMIT
    ) -> List[Notification]:
        if limit <= 0:
            return []
        with self._lock:
            return list(itertools.islice(self._notifications, limit))

    def find(self, notification_id: str) -> Optional[Notification]:
        with self._lock:
            for notification in self._notifications:
                if notification.id == notification_id:
                    return notification
        return None

    def mark_as_read(self, notification_id: str) -> bool:
        with self._lock:
            notification = self.find(notification_id)
            if notification is None:
                return False
            notification.read = True
            return True

    def unread_count(self) -> int:
        with self._lock:
            return sum(1 for notification in self._notifications if not notification.read)
