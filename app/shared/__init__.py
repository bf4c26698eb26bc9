"""Shared utilities: request context, logging and datetime helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from app.shared.context import get_request_id, reset_request_id, set_request_id
from app.shared.utils import ensure_utc, utc_now

__all__ = [
    "ensure_utc",
    "get_request_id",
    "reset_request_id",
    "set_request_id",
    "utc_now",
]
