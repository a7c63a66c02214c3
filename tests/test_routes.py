import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from routes.components import router as components_router
from routes.history import router as history_router
from routes.pages import router as pages_router


def _app(services=None):
    app = FastAPI()
    app.include_router(components_router)
    app.include_router(history_router)
    app.include_router(pages_router)
    if services is not None:
        app.state.services = services
    return app


@pytest.fixture
def client(services):
    """Provides a test client over routers wired to the offline service graph."""
    with TestClient(_app(services)) as test_client:
        yield test_client


def _generate(client, prompt):
    response = client.post("/api/components/generate", json={"prompt": prompt})
    assert response.status_code == 200
    return response.json()


def test_generate_returns_camel_case_component(client):
    body = _generate(client, "glow button")

    assert body["success"] is True
    assert body["name"] == "Glow Button"
    assert body["metadata"]["source"] == "Template Library (Context Enhanced)"
    assert body["metadata"]["contextAware"] is True
    assert body["metadata"]["historyId"].startswith("comp_")


def test_generate_rejects_empty_prompt(client):
    response = client.post("/api/components/generate", json={"prompt": ""})
    assert response.status_code == 422


def test_unmatched_prompt_uses_fallback_generator(client):
    body = _generate(client, "enterprise pricing table")
    assert body["metadata"]["source"] == "Fallback Generator"
    assert '"popular": true' in body["code"]


def test_missing_services_is_unavailable():
    with TestClient(_app()) as test_client:
        response = test_client.get("/api/components/status")
    assert response.status_code == 503


def test_status_and_context(client):
    status = client.get("/api/components/status").json()
    assert status["templateCount"] == 6
    assert status["remoteConfigured"] is False

    context = client.post("/api/components/context/refresh").json()
    assert context["recommendations"]["compatibilityScore"] == 0.85

    suggestions = client.get("/api/components/suggestions", params={"prompt": "rounded card"}).json()
    assert suggestions["compatibility"] == [
        "Framework: React",
        "Styling: Custom CSS modules",
        "State: Stateless components",
    ]


def test_variations_fallback(client):
    response = client.post("/api/components/variations", json={"prompt": "glass card", "count": 2})
    assert response.status_code == 200
    body = response.json()
    assert body["total"] == 1
    assert body["variations"][0]["note"] == "Fallback to single component due to variations API error"


def test_history_lifecycle(client):
    """Generated components can be listed, favorited, rated and deleted."""
    component_id = _generate(client, "login form")["metadata"]["historyId"]

    listed = client.get("/api/history").json()
    assert [entry["id"] for entry in listed] == [component_id]
    assert listed[0]["metadata"]["category"] == "forms"

    assert client.post(f"/api/history/{component_id}/favorite").json() == {"id": component_id, "favorite": True}
    assert len(client.get("/api/history", params={"favorites": "true"}).json()) == 1

    rated = client.post(f"/api/history/{component_id}/rating", json={"rating": 5}).json()
    assert rated["stats"]["rating"] == 5
    assert client.post(f"/api/history/{component_id}/rating", json={"rating": 9}).status_code == 422

    assert client.get(f"/api/history/{component_id}").json()["stats"]["usageCount"] == 1
    assert client.delete(f"/api/history/{component_id}").status_code == 200
    assert client.get(f"/api/history/{component_id}").status_code == 404


def test_export_and_import(client):
    component_id = _generate(client, "glass card")["metadata"]["historyId"]

    exported = client.get(f"/api/history/{component_id}/export")
    assert exported.headers["content-type"].startswith("application/json")

    imported = client.post("/api/history/import", content=exported.text)
    assert imported.status_code == 201
    assert imported.json()["version"] == 2

    assert client.post("/api/history/import", content="{broken").status_code == 400


def test_collections(client):
    component_id = _generate(client, "glass card")["metadata"]["historyId"]

    created = client.post("/api/collections", json={"name": "Cards"})
    assert created.status_code == 201
    collection_id = created.json()["id"]

    added = client.post(f"/api/collections/{collection_id}/components/{component_id}")
    assert added.json()["components"] == [component_id]
    assert client.post(f"/api/collections/{collection_id}/components/{component_id}").status_code == 400

    removed = client.delete(f"/api/collections/{collection_id}/components/{component_id}")
    assert removed.json()["components"] == []
    assert client.get("/api/collections/coll_missing").status_code == 404


def test_statistics(client):
    _generate(client, "glass card")
    stats = client.get("/api/history/statistics").json()
    assert stats["totalComponents"] == 1
    assert stats["categoriesBreakdown"] == {"cards": 1}


def test_page_routes(client):
    templates = client.get("/api/pages/templates").json()
    assert [template["id"] for template in templates] == ["landing-startup", "dashboard-analytics", "ecommerce-products"]
    assert client.get("/api/pages/templates/missing").status_code == 404

    page = client.post("/api/pages/generate", json={"templateId": "dashboard-analytics"})
    assert page.status_code == 200
    assert page.json()["metadata"]["template"] == "dashboard-analytics"
    assert "fullPageCode" in page.json()

    assert client.post("/api/pages/generate", json={"templateId": "missing"}).status_code == 404
    assert client.post("/api/pages/sections/footer/preview").status_code == 200
    assert client.post("/api/pages/sections/carousel/preview").status_code == 400
