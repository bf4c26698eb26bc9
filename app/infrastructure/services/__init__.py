"""Infrastructure implementations of application service interfaces."""

from app.infrastructure.services.id_generator import CuidIdGenerator
from app.infrastructure.services.system_clock import SystemClock

__all__ = [
    "CuidIdGenerator",
    "SystemClock",
]
