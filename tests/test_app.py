from fastapi.testclient import TestClient

from recipe_api import crud, models
from recipe_api.app import create_app
from recipe_api.config import Settings
from recipe_api.db import Store
from recipe_api.results import Failure


def test_store_failure_is_generic_500(client, monkeypatch):
    monkeypatch.setattr(
        crud, "list_ingredients",
        lambda db, search=None: Failure("listing ingredients: OperationalError"),
    )
    res = client.get("/api/ingredients")
    assert res.status_code == 500
    assert res.json() == {"error": "Internal Server Error"}


def test_unhandled_error_is_generic_500(app, monkeypatch):
    def boom(db, ingredient_id):
        raise RuntimeError("secret connection string")

    monkeypatch.setattr(crud, "get_ingredient", boom)
    client = TestClient(app, raise_server_exceptions=False)
    res = client.get("/api/ingredients/anything")
    assert res.status_code == 500
    assert res.json() == {"error": "Internal Server Error"}
    assert "secret" not in res.text


def test_missing_tables_surface_as_500():
    store = Store("sqlite:///:memory:")
    app = create_app(store=store, settings=Settings())
    try:
        res = TestClient(app).get("/api/ingredients")
        assert res.status_code == 500
        assert res.json() == {"error": "Internal Server Error"}
    finally:
        store.dispose()


def test_bootstrap_seeds_in_test_mode():
    store = Store("sqlite:///:memory:")
    app = create_app(store=store, settings=Settings(env="test"))
    try:
        with TestClient(app) as client:
            res = client.get("/api/ingredients?search=onion")
            assert [i["name"] for i in res.json()] == ["Onion"]
    finally:
        store.dispose()


def test_bootstrap_never_seeds_in_production():
    store = Store("sqlite:///:memory:")
    app = create_app(
        store=store, settings=Settings(env="production", seed_on_startup=True)
    )
    try:
        with TestClient(app) as client:
            assert client.get("/api/ingredients").json() == []
        session = store.session()
        assert session.query(models.Recipe).count() == 0
        session.close()
    finally:
        store.dispose()


def test_unknown_route_uses_error_body(client):
    res = client.get("/api/nope")
    assert res.status_code == 404
    assert res.json() == {"error": "Not Found"}


def test_wrong_method_uses_error_body(client):
    res = client.put("/api/ingredients")
    assert res.status_code == 405
    assert res.json() == {"error": "Method Not Allowed"}
    assert "GET" in res.headers["allow"]
