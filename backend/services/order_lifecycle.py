from typing import Any

ORDER_STATUSES = ("pending", "confirmed", "preparing", "ready", "completed")
DEFAULT_STATUS = ORDER_STATUSES[0]

# Any status may follow any other; there is no transition table.


def is_valid_status(value: Any) -> bool:
    return isinstance(value, str) and value in ORDER_STATUSES
