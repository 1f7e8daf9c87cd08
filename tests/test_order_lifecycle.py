import pytest

from services.order_lifecycle import DEFAULT_STATUS, ORDER_STATUSES, is_valid_status


def test_known_statuses_in_progression_order():
    assert ORDER_STATUSES == ("pending", "confirmed", "preparing", "ready", "completed")
    assert DEFAULT_STATUS == "pending"


@pytest.mark.parametrize("value", ORDER_STATUSES)
def test_known_statuses_are_valid(value):
    assert is_valid_status(value)


@pytest.mark.parametrize("value", ["", "PENDING", "cancelled", None, 3, ["pending"]])
def test_unknown_values_are_rejected(value):
    assert not is_valid_status(value)
