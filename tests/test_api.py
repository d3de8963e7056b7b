"""
Tests for the HTTP surface using FastAPI's TestClient.
"""
import base64
import random
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from aura.config import get_settings
from aura.main import app
from aura.services.runtime import (
    get_command_router,
    get_document_scanner,
    get_response_orchestrator,
)
from aura.services.scan.document_scan import DOCUMENT_CATALOG, DocumentScanStub

CATALOG_TYPES = {profile.document_type for profile in DOCUMENT_CATALOG}


@pytest.fixture
def client(command_router, offline_orchestrator, test_settings):
    app.dependency_overrides[get_command_router] = lambda: command_router
    app.dependency_overrides[get_response_orchestrator] = lambda: offline_orchestrator
    app.dependency_overrides[get_document_scanner] = lambda: DocumentScanStub(random.Random(11))
    app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


class TestProcessEndpoint:
    """POST /api/aura/process"""

    def test_system_command(self, client):
        response = client.post(
            "/api/aura/process",
            json={"command": "start work session", "mode": "normal", "userId": "u1"},
        )
        data = response.json()

        assert response.status_code == 200
        assert data["success"] is True
        assert data["commandType"] == "system_command"
        assert data["api_used"] == "internal_system"
        assert data["response"]["status"] == "timer_started"
        assert data["timestamp"]

    def test_conversation(self, client):
        data = client.post("/api/aura/process", json={"command": "Explain programming to me"}).json()

        assert data["success"] is True
        assert data["commandType"] == "ai_conversation"
        assert data["api_used"] == "local_fallback"
        assert data["response"]["status"] == "conversation"
        assert data["response"]["message"].startswith("Programming is the art")

    def test_user_id_defaults(self, client, timers):
        client.post("/api/aura/process", json={"command": "begin session"})
        assert timers.get("default") is not None

    def test_missing_command_is_rejected(self, client):
        response = client.post("/api/aura/process", json={"mode": "normal"})
        assert response.status_code == 422


class TestVoiceEndpoint:
    """POST /api/voice/process"""

    def test_voice_conversation(self, client):
        data = client.post("/api/voice/process", json={"command": "hello", "audioData": None}).json()

        assert data["success"] is True
        assert data["inputType"] == "voice"
        assert data["response"]["status"] == "conversation"
        assert "voiceMessage" in data["response"]

    def test_voice_scan_request(self, client):
        data = client.post("/api/voice/process", json={"command": "scan this document"}).json()
        assert data["response"]["status"] == "scan_request"


class TestScanEndpoints:
    """POST /api/scan/image and /api/scan/document"""

    def test_image_scan(self, client):
        image = base64.b64encode(b"\xff\xd8\xff fake jpeg").decode()

        data = client.post("/api/scan/image", json={"imageData": image, "imageType": "base64"}).json()

        assert data["success"] is True
        assert data["inputType"] == "camera_scan"
        scan = data["scan"]
        assert scan["documentType"] in CATALOG_TYPES
        assert 70 <= scan["confidencePercent"] <= 100
        assert scan["confidence"] == scan["confidencePercent"]
        assert scan["ocrAccuracy"] == f"{scan['confidence']}%"
        assert scan["voiceMessage"].startswith("I've scanned the document.")

    def test_image_missing(self, client):
        response = client.post("/api/scan/image", json={})
        data = response.json()

        assert response.status_code == 200
        assert data["success"] is False
        assert data["error"] == "No image data provided"
        assert data["voiceMessage"]

    def test_image_not_base64(self, client):
        data = client.post("/api/scan/image", json={"imageData": "%%%"}).json()
        assert data["success"] is False

    def test_document_upload_is_scanned_and_deleted(self, client, test_settings):
        response = client.post(
            "/api/scan/document",
            files={"document": ("page.png", b"\x89PNG\r\n fake", "image/png")},
        )
        data = response.json()

        assert data["success"] is True
        assert data["inputType"] == "document_scan"
        assert data["scan"]["visualData"]["documentType"] in CATALOG_TYPES
        # cleanup delay is 0 in tests; background task has run
        assert list(Path(test_settings.upload_dir).iterdir()) == []

    def test_document_missing(self, client):
        data = client.post("/api/scan/document").json()
        assert data["success"] is False
        assert data["error"] == "No document image provided"

    def test_document_too_large_is_never_stored(self, client, test_settings):
        # a stored file would outlive the request with a long cleanup delay
        test_settings.upload_cleanup_delay = 3600
        oversized = b"x" * (test_settings.max_upload_bytes * 50)

        data = client.post(
            "/api/scan/document",
            files={"document": ("big.png", oversized, "image/png")},
        ).json()

        assert data["success"] is False
        assert data["error"] == f"Uploaded document exceeds {test_settings.max_upload_bytes} byte limit"
        upload_dir = Path(test_settings.upload_dir)
        assert not upload_dir.exists() or list(upload_dir.iterdir()) == []

    def test_document_at_limit_is_accepted(self, client, test_settings):
        exact = b"x" * test_settings.max_upload_bytes
        data = client.post(
            "/api/scan/document",
            files={"document": ("page.png", exact, "image/png")},
        ).json()
        assert data["success"] is True


class TestStatusEndpoints:
    """GET /api/status and GET /api"""

    def test_status(self, client):
        data = client.get("/api/status").json()

        assert data["currentActiveAPI"] == "groq"
        assert data["availableAPIs"] == []
        assert data["systemStatus"] == "operational"
        assert data["features"]["autoAPISwitch"] is True
        assert data["timestamp"]

    def test_service_info(self, client):
        data = client.get("/api").json()
        assert data["status"] == "online"
        assert data["activeAPI"] == "groq"
