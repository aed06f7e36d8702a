"""Application wiring, middleware and health endpoint tests."""

from unittest.mock import Mock

from fastapi.testclient import TestClient

from src.catalog.api.http.app import create_app
from src.catalog.api.http.app_data import ApplicationDependencies


class TestAppWiring:
    """Test routes and middleware registered by the factory."""

    def test_root_redirects_to_products(self, client: TestClient):
        response = client.get("/", follow_redirects=False)

        assert response.status_code in (302, 303, 307)
        assert response.headers["location"] == "/products/"

    def test_request_id_header(self, client: TestClient):
        response = client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_generated(self, client: TestClient):
        response = client.get("/health")

        assert response.headers["X-Request-ID"]

    def test_security_headers(self, client: TestClient):
        response = client.get("/products/")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_unhandled_error_becomes_500(self, app_dependencies: ApplicationDependencies):
        failing_service = Mock()
        failing_service.list_products.side_effect = RuntimeError("database exploded")
        deps = ApplicationDependencies(
            database_service=app_dependencies.database_service,
            product_repository=app_dependencies.product_repository,
            product_service=failing_service,
        )
        client = TestClient(create_app(deps))

        response = client.get("/products/", headers={"X-Request-ID": "req-500"})

        assert response.status_code == 500
        assert response.json() == {
            "detail": "Internal Server Error",
            "request_id": "req-500",
        }


class TestHealth:
    """GET /health and /health/ready"""

    def test_liveness(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness(self, client: TestClient):
        response = client.get("/health/ready")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ready"
        assert body["checks"]["database"] == {"status": "healthy", "type": "sqlite"}

    def test_not_ready_when_database_down(self, app_dependencies: ApplicationDependencies):
        database_service = Mock()
        database_service.health_check.return_value = False
        deps = ApplicationDependencies(
            database_service=database_service,
            product_repository=app_dependencies.product_repository,
            product_service=app_dependencies.product_service,
        )
        client = TestClient(create_app(deps))

        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"
