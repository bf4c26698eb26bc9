"""POST /send over HTTP with a fake client gateway."""

import pytest
from httpx import AsyncClient

from app.api.v1.dependencies import get_client_gateway
from app.application.dtos.document import ClientDocumentPayload, ClientDocumentResponse
from app.domain.exceptions import ExternalServiceException
from app.main import app


class FakeClientGateway:
    def __init__(self, access_code: str = "ACCESS-1", error: Exception | None = None) -> None:
        self.access_code = access_code
        self.error = error
        self.sent: list[ClientDocumentPayload] = []

    async def send_document(self, payload: ClientDocumentPayload) -> ClientDocumentResponse:
        self.sent.append(payload)
        if self.error is not None:
            raise self.error
        return ClientDocumentResponse(access_code=self.access_code)


@pytest.fixture
def gateway() -> FakeClientGateway:
    fake = FakeClientGateway()
    app.dependency_overrides[get_client_gateway] = lambda: fake
    return fake


async def _final_document(client: AsyncClient) -> str:
    created = await client.post(
        "/api/v1/documents", json={"title": "Offer", "content": "Welcome"}
    )
    doc_id = created.json()["id"]
    await client.put(f"/api/v1/documents/{doc_id}", json={"status": "final"})
    return doc_id


async def test_send_final_document(client: AsyncClient, gateway: FakeClientGateway) -> None:
    doc_id = await _final_document(client)

    response = await client.post("/api/v1/send", json={"document_id": doc_id})

    assert response.status_code == 200
    assert response.json() == {"access_code": "ACCESS-1"}
    assert gateway.sent == [ClientDocumentPayload(id=doc_id, title="Offer", content="Welcome")]
    stored = await client.get(f"/api/v1/documents/{doc_id}")
    assert stored.json()["access_code"] == "ACCESS-1"


async def test_send_twice_returns_400(client: AsyncClient, gateway: FakeClientGateway) -> None:
    doc_id = await _final_document(client)
    await client.post("/api/v1/send", json={"document_id": doc_id})

    response = await client.post("/api/v1/send", json={"document_id": doc_id})

    assert response.status_code == 400
    assert response.json()["message"] == "Document already has an access code"
    assert len(gateway.sent) == 1


async def test_send_draft_returns_400(client: AsyncClient, gateway: FakeClientGateway) -> None:
    created = await client.post("/api/v1/documents", json={"title": "T", "content": "C"})
    response = await client.post(
        "/api/v1/send", json={"document_id": created.json()["id"]}
    )
    assert response.status_code == 400
    assert gateway.sent == []


async def test_send_missing_document_returns_404(
    client: AsyncClient, gateway: FakeClientGateway
) -> None:
    response = await client.post("/api/v1/send", json={"document_id": "missing"})
    assert response.status_code == 404


@pytest.mark.parametrize("status_code", [500, 502])
async def test_gateway_failure_maps_to_its_status(
    client: AsyncClient, gateway: FakeClientGateway, status_code: int
) -> None:
    doc_id = await _final_document(client)
    gateway.error = ExternalServiceException(
        "Failed to send document to client backend", status_code=status_code
    )

    response = await client.post("/api/v1/send", json={"document_id": doc_id})

    assert response.status_code == status_code
    assert response.json()["error"] == "EXTERNAL_SERVICE_ERROR"
    stored = await client.get(f"/api/v1/documents/{doc_id}")
    assert stored.json()["access_code"] is None


async def test_send_requires_document_id(client: AsyncClient) -> None:
    response = await client.post("/api/v1/send", json={})
    assert response.status_code == 422
