"""HTTP-level tests for the category and product routes."""

import pytest
from fastapi.testclient import TestClient

from wms.infrastructure.api.app import create_app
from wms.infrastructure.persistence.orm import ProductRow


@pytest.fixture
def client(configured_db):
    with TestClient(create_app()) as client:
        yield client


def _category(client, name="Tools") -> dict:
    response = client.post("/api/categories", json={"name": name})
    assert response.status_code == 201, response.text
    return response.json()


def _product(client, name, category_id) -> dict:
    response = client.post("/api/products", json={"name": name, "categoryId": category_id})
    assert response.status_code == 201, response.text
    return response.json()


class TestCategoryRoutes:

    def test_create_and_get(self, client):
        created = _category(client)
        assert created == {"id": 1, "name": "Tools"}

        response = client.get(f"/api/categories/{created['id']}")
        assert response.status_code == 200
        assert response.json()["name"] == "Tools"

    def test_create_sets_location(self, client):
        response = client.post("/api/categories", json={"name": "Tools"})
        assert response.headers["location"].endswith("/api/categories/1")

    def test_duplicate_is_409(self, client):
        _category(client)
        response = client.post("/api/categories", json={"name": "Tools"})
        assert response.status_code == 409
        assert "already exists" in response.json()["message"]

    def test_invalid_body_is_400(self, client):
        response = client.post("/api/categories", json={"name": "T"})
        assert response.status_code == 400

    def test_missing_is_404(self, client):
        response = client.get("/api/categories/99")
        assert response.status_code == 404
        assert response.json() == {"message": "Category with ID 99 not found"}

    def test_list_uses_camel_case_metadata(self, client):
        for i in range(12):
            _category(client, f"Category {i:02d}")

        body = client.get("/api/categories", params={"page": 2, "pageSize": 5}).json()
        assert [c["id"] for c in body["data"]] == [6, 7, 8, 9, 10]
        assert body["currentPage"] == 2
        assert body["pageSize"] == 5
        assert body["totalCount"] == 12
        assert body["totalPages"] == 3
        assert body["hasNextPage"] is True
        assert body["hasPreviousPage"] is True

    def test_list_clamps_paging(self, client):
        _category(client)
        body = client.get("/api/categories", params={"page": 0, "pageSize": 500}).json()
        assert body["currentPage"] == 1
        assert body["pageSize"] == 100

    def test_update(self, client):
        created = _category(client)
        response = client.put(f"/api/categories/{created['id']}", json={"name": "Hand tools"})
        assert response.status_code == 200
        assert response.json()["name"] == "Hand tools"

    def test_delete_guarded_by_products(self, client):
        category = _category(client)
        product = _product(client, "Hammer", category["id"])

        response = client.delete(f"/api/categories/{category['id']}")
        assert response.status_code == 400

        assert client.delete(f"/api/products/{product['id']}").status_code == 204
        assert client.delete(f"/api/categories/{category['id']}").status_code == 204
        assert client.get(f"/api/categories/{category['id']}").status_code == 404


class TestProductRoutes:

    def test_create_resolves_category_name(self, client):
        category = _category(client)
        product = _product(client, "Hammer", category["id"])
        assert product["categoryId"] == category["id"]
        assert product["categoryName"] == "Tools"
        assert "dateAdded" in product

    def test_create_in_missing_category_is_404(self, client):
        response = client.post("/api/products", json={"name": "Hammer", "categoryId": 5})
        assert response.status_code == 404

    def test_same_name_per_category(self, client):
        tools = _category(client, "Tools")
        gifts = _category(client, "Gifts")
        _product(client, "Hammer", tools["id"])
        _product(client, "Hammer", gifts["id"])

        response = client.post("/api/products", json={"name": "Hammer", "categoryId": tools["id"]})
        assert response.status_code == 409

    def test_partial_update_keeps_category(self, client):
        tools = _category(client, "Tools")
        product = _product(client, "Hammer", tools["id"])

        response = client.put(f"/api/products/{product['id']}", json={"name": "Claw hammer"})
        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "Claw hammer"
        assert body["categoryId"] == tools["id"]
        assert body["dateAdded"] == product["dateAdded"]

    def test_update_to_missing_category_is_404(self, client):
        tools = _category(client)
        product = _product(client, "Hammer", tools["id"])
        response = client.put(f"/api/products/{product['id']}", json={"categoryId": 42})
        assert response.status_code == 404

    def test_by_category(self, client):
        tools = _category(client, "Tools")
        gifts = _category(client, "Gifts")
        _product(client, "Hammer", tools["id"])
        _product(client, "Mug", gifts["id"])

        body = client.get(f"/api/products/by-category/{gifts['id']}").json()
        assert [p["name"] for p in body["data"]] == ["Mug"]
        assert body["totalCount"] == 1

        assert client.get("/api/products/by-category/99").status_code == 404

    def test_delete_missing_is_404(self, client):
        assert client.delete("/api/products/1").status_code == 404


class TestPagingBounds:

    def test_largest_page_number_is_an_empty_page(self, client):
        _category(client)
        body = client.get("/api/categories", params={"page": 2**31 - 1, "pageSize": 100}).json()
        assert body["data"] == []
        assert body["totalCount"] == 1
        assert body["hasNextPage"] is False

    @pytest.mark.parametrize(
        "path", ["/api/categories", "/api/products", "/api/products/by-category/1"]
    )
    def test_page_number_beyond_bound_is_400(self, client, path):
        _category(client)
        response = client.get(path, params={"page": 10**18, "pageSize": 100})
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid request"


def test_storage_failure_is_500_without_details(client, configured_db):
    ProductRow.__table__.drop(configured_db)

    response = client.get("/api/products")
    assert response.status_code == 500
    assert response.json() == {"message": "Internal storage error"}
