"""Health probes and generated API documentation."""

from products_api.main import app


async def test_liveness_returns_200(client):
    res = await client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_with_database(client):
    res = await client.get("/health/ready")
    assert res.status_code == 200
    assert res.json()["checks"]["database"] == "healthy"


async def test_readiness_without_database(client):
    app.state.db_manager = None
    res = await client.get("/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_openapi_documents_all_product_operations(client):
    res = await client.get("/openapi.json")
    assert res.status_code == 200
    spec = res.json()
    assert spec["info"]["title"] == "Products CRUD API"
    paths = spec["paths"]
    assert set(paths["/products"]) == {"get", "post"}
    assert set(paths["/products/{id}"]) == {"get", "patch", "delete"}


async def test_openapi_product_schema_uses_json_names(client):
    schemas = (await client.get("/openapi.json")).json()["components"]["schemas"]
    create = schemas["ProductCreate"]
    assert set(create["required"]) == {
        "title", "description", "category", "isAvailable", "image", "price",
    }
    assert "createdAt" in schemas["ProductResponse"]["properties"]


async def test_swagger_ui_served_at_docs(client):
    res = await client.get("/docs")
    assert res.status_code == 200
    assert "swagger" in res.text.lower()


async def test_openapi_lists_contact_and_license(client):
    info = (await client.get("/openapi.json")).json()["info"]
    assert info["contact"]["name"] == "Products API maintainers"
    assert info["license"]["name"] == "MIT"
