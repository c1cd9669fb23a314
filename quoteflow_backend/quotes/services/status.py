# quotes/services/status.py

"""
QUOTE REQUEST STATUS RULES

States: pending (initial), processed, rejected.
Every state may move to every other state; none is terminal.
The merchant triggers all transitions by hand.
"""

from __future__ import annotations

from common.exceptions import ValidationError
from quotes.models import QuoteRequest

QUOTE_STATUSES = (
    QuoteRequest.STATUS_PENDING,
    QuoteRequest.STATUS_PROCESSED,
    QuoteRequest.STATUS_REJECTED,
)
INITIAL_STATUS = QuoteRequest.STATUS_PENDING

# List filter value meaning "no filter".
STATUS_FILTER_ALL = "all"

INVALID_STATUS_MESSAGE = "Invalid status. Must be one of: pending, processed, rejected"


def is_valid_status(value) -> bool:
    return isinstance(value, str) and value in QUOTE_STATUSES


def can_transition(current: str, target: str) -> bool:
    return is_valid_status(current) and is_valid_status(target)


def require_status(value) -> str:
    if not is_valid_status(value):
        raise ValidationError(INVALID_STATUS_MESSAGE, field="status")
    return value


def parse_status_filter(value) -> str | None:
    """
    None / "" / "all" -> None (unfiltered). Anything else must be a real status.
    """
    if value is None:
        return None

    value = str(value).strip().lower()
    if not value or value == STATUS_FILTER_ALL:
        return None

    return require_status(value)
