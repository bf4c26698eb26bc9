"""Client backend gateway over HTTP (httpx).

Posts a finalized document to ``{base_url}/v1/documents`` and returns the
access code issued by the client backend. One attempt per call; failures are
mapped to ExternalServiceException with an upstream status classification.
"""

from contextlib import asynccontextmanager
from typing import Any

import httpx

from app.application.dtos.document import ClientDocumentPayload, ClientDocumentResponse
from app.domain.exceptions import ExternalServiceException
from app.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

DOCUMENTS_PATH = "/v1/documents"
DEFAULT_TIMEOUT_SECONDS = 5.0


def _classify_upstream_status(upstream_status: int | None) -> int:
    """Upstream 5xx -> 500; any other failure -> 502 (bad gateway)."""
    if upstream_status is not None and upstream_status >= 500:
        return 500
    return 502


class HttpClientGateway:
    """IClientGateway implementation using httpx.AsyncClient."""

    def __init__(
        self,
        base_url: str | None,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._base_url = base_url
        self._shared_http = http_client
        self._timeout = timeout_seconds

    @asynccontextmanager
    async def _http_cm(self):
        """Yield shared HTTP client or a short-lived one (connection reuse when shared)."""
        if self._shared_http is not None:
            yield self._shared_http
            return
        async with httpx.AsyncClient() as client:
            yield client

    async def send_document(
        self, payload: ClientDocumentPayload
    ) -> ClientDocumentResponse:
        if not self._base_url:
            raise ExternalServiceException(
                "Client backend URL is not configured", status_code=500
            )
        endpoint = self._base_url.rstrip("/") + DOCUMENTS_PATH
        body = {"id": payload.id, "title": payload.title, "content": payload.content}

        try:
            async with self._http_cm() as client:
                response = await client.post(endpoint, json=body, timeout=self._timeout)
            response.raise_for_status()
            data: Any = response.json()
        except httpx.HTTPStatusError as e:
            upstream = e.response.status_code
            logger.warning(
                "Client backend rejected document %s: HTTP %d", payload.id, upstream
            )
            raise ExternalServiceException(
                "Failed to send document to client backend",
                status_code=_classify_upstream_status(upstream),
            ) from e
        except httpx.HTTPError as e:
            logger.warning(
                "Client backend unreachable for document %s: %s", payload.id, e
            )
            raise ExternalServiceException(
                "Failed to send document to client backend",
                status_code=_classify_upstream_status(None),
            ) from e
        except ValueError as e:
            raise ExternalServiceException(
                "Client backend returned an invalid response", status_code=502
            ) from e

        access_code = data.get("accessCode") if isinstance(data, dict) else None
        if not isinstance(access_code, str) or access_code.strip() == "":
            raise ExternalServiceException(
                "Client backend returned an invalid response", status_code=502
            )
        return ClientDocumentResponse(access_code=access_code.strip())
