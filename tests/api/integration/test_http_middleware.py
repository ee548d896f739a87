"""
Integration Tests: HTTP middleware (body size limit, security headers)
"""

from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

import config
from middleware.body_limit import BodySizeLimitMiddleware
from middleware.security_headers import SecurityHeadersMiddleware


def make_client(max_body_size: int) -> TestClient:
    app = FastAPI()
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(BodySizeLimitMiddleware, max_body_size=max_body_size)

    @app.post("/echo")
    async def echo(request: Request):
        return {"size": len(await request.body())}

    return TestClient(app)


class TestBodySizeLimit:

    def test_small_body_passes(self):
        response = make_client(100).post("/echo", content=b"x" * 50)

        assert response.status_code == 200
        assert response.json() == {"size": 50}

    def test_large_body_rejected(self):
        response = make_client(100).post("/echo", content=b"x" * 101)

        assert response.status_code == 413
        assert response.json() == {"error": "Request body too large"}

    def test_default_limit_is_ten_megabytes(self):
        assert config.MAX_BODY_SIZE_BYTES == 10 * 1024 * 1024


class TestSecurityHeaders:

    def test_disabled_by_default(self):
        response = make_client(100).post("/echo", content=b"")

        assert "X-Content-Type-Options" not in response.headers

    def test_enabled(self, monkeypatch):
        monkeypatch.setattr(config, "SECURITY_HEADERS_ENABLED", True)

        response = make_client(100).post("/echo", content=b"")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
