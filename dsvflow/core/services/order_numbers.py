"""Sequential, date-scoped order numbers."""

from collections.abc import Iterable
from datetime import date

ORDER_NUMBER_PREFIX = "DSV"


def generate_order_number(existing_numbers: Iterable[str], today: date) -> str:
    """
    Build the next order number for today, e.g. ``DSV-20261019-003``.

    The sequence is derived by counting existing numbers that already carry
    today's date, so it is only safe with a single writer.
    """
    date_str = today.strftime("%Y%m%d")
    todays = sum(1 for number in existing_numbers if date_str in number)
    return f"{ORDER_NUMBER_PREFIX}-{date_str}-{todays + 1:03d}"
