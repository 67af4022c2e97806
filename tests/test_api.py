"""Tests for the HTTP API."""

import httpx
import pytest
from fastapi.testclient import TestClient

from app.dependencies import get_reversal_registry
from app.main import create_app
from app.services.reversal import Md5LookupProvider, ReversalRegistry


class RecordingHandler:
    def __init__(self, body: bytes = b"hello"):
        self.body = body
        self.calls = 0

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls += 1
        return httpx.Response(200, content=self.body)


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def client(handler):
    app = create_app()
    provider = Md5LookupProvider(
        base_url="https://lookup.test/md5db",
        client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )
    registry = ReversalRegistry(providers=[provider], default_timeout=5.0)
    app.dependency_overrides[get_reversal_registry] = lambda: registry

    with TestClient(app) as test_client:
        yield test_client


class TestIdentifyEndpoint:
    """Test POST /identify."""

    def test_md5(self, client, md5_hash):
        """A 32-hex hash is ambiguous, led by reversible MD5."""
        response = client.post("/api/v1/identify", json={"hash": f" {md5_hash} "})

        assert response.status_code == 200
        data = response.json()
        assert data["hash"] == md5_hash
        assert data["ambiguous"] is True
        assert data["candidates"][0]["name"] == "MD5"
        assert data["candidates"][0]["reversible"] is True
        assert data["candidates"][1]["reversible"] is False

    def test_bcrypt(self, client, bcrypt_hash):
        """A bcrypt hash is a single fixed-length candidate with markers."""
        response = client.post("/api/v1/identify", json={"hash": bcrypt_hash})

        data = response.json()
        assert data["ambiguous"] is False
        assert len(data["candidates"]) == 1
        candidate = data["candidates"][0]
        assert candidate["name"] == "BCrypt"
        assert candidate["length"] == 60
        assert candidate["variable_length"] is False
        assert candidate["markers"] == ["$2a$", "$2b$", "$2y$"]
        assert candidate["signature"] == "$2a$ / $2b$ / $2y$ followed by 2 fields"

    def test_variable_length_family(self, client):
        """Variable-length families report a null length."""
        response = client.post("/api/v1/identify", json={"hash": "$scrypt$abc.def/ghi$XYZ"})

        candidate = response.json()["candidates"][0]
        assert candidate["length"] is None
        assert candidate["variable_length"] is True

    def test_no_match(self, client):
        """Free text yields an empty candidate list."""
        response = client.post("/api/v1/identify", json={"hash": "not a hash"})

        assert response.status_code == 200
        assert response.json()["candidates"] == []

    def test_empty_input(self, client):
        """Blank input yields an empty candidate list."""
        response = client.post("/api/v1/identify", json={"hash": "   "})

        assert response.status_code == 200
        assert response.json()["candidates"] == []

    def test_too_long(self, client):
        """Oversized input is rejected with 400."""
        response = client.post("/api/v1/identify", json={"hash": "a" * 5000})
        assert response.status_code == 400


class TestReverseEndpoint:
    """Test POST /reverse."""

    def test_found(self, client, handler, md5_hash):
        """An MD5 hash known to the lookup service is found."""
        response = client.post("/api/v1/reverse", json={"hash": md5_hash})

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "found"
        assert data["plaintext"] == "hello"
        assert data["candidates"][0] == "MD5"
        assert handler.calls == 1

    def test_not_found(self, client, handler, md5_hash):
        """An empty lookup body is reported as not_found."""
        handler.body = b""

        data = client.post("/api/v1/reverse", json={"hash": md5_hash}).json()

        assert data["status"] == "not_found"
        assert data["plaintext"] is None

    def test_unsupported(self, client, handler, sha256_hash):
        """A hash without a reversal provider makes no lookup."""
        data = client.post("/api/v1/reverse", json={"hash": sha256_hash}).json()

        assert data["status"] == "unsupported"
        assert data["reason"] == "no reversal support for matched families"
        assert handler.calls == 0

    def test_empty_input(self, client):
        """Blank input is rejected with 400."""
        response = client.post("/api/v1/reverse", json={"hash": "  "})
        assert response.status_code == 400

    def test_invalid_timeout(self, client, md5_hash):
        """A non-positive timeout fails validation."""
        response = client.post("/api/v1/reverse", json={"hash": md5_hash, "timeout": 0})
        assert response.status_code == 422


class TestFamiliesEndpoint:
    """Test GET /families."""

    def test_list(self, client):
        """The full catalog is listed with MD5 as the only reversible family."""
        data = client.get("/api/v1/families").json()

        assert data["total"] == len(data["families"]) == 33
        assert data["families"][0]["name"] == "BCrypt"
        reversible = [f["name"] for f in data["families"] if f["reversible"]]
        assert reversible == ["MD5"]

    def test_get(self, client):
        """A single family is returned by name."""
        response = client.get("/api/v1/families/RIPEMD-320")

        assert response.status_code == 200
        assert response.json()["confidence"] == 80
        assert response.json()["signature"] == "80 hex characters"

    def test_get_unknown(self, client):
        """An unknown family name is 404."""
        response = client.get("/api/v1/families/Unknown")
        assert response.status_code == 404
