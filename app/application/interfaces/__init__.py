"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import IDocumentRepository
from app.application.interfaces.services import (
    IClientGateway,
    IClock,
    IIdGenerator,
)

__all__ = [
    "IClientGateway",
    "IClock",
    "IDocumentRepository",
    "IIdGenerator",
]
