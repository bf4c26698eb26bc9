"""Client backend integration: HTTP gateway that exchanges documents for access codes."""

from app.infrastructure.external.client_backend.http_gateway import HttpClientGateway

__all__ = ["HttpClientGateway"]
