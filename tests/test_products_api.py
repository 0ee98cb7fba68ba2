# tests/test_products_api.py
import sqlite3
from contextlib import contextmanager

from product_catalog_api.app.services import product_service


def create(client, name="Banana", price=2.5, sku="B1"):
    return client.post("/products", json={"name": name, "price": price, "sku": sku})


def test_create_banana_then_duplicate(client):
    r = create(client)
    assert r.status_code == 201
    body = r.json()
    assert isinstance(body["id"], int)
    assert body == {"id": body["id"], "name": "Banana", "price": 2.5, "sku": "B1", "missingLetter": "c"}

    r2 = create(client, name="Plantain", price=1)
    assert r2.status_code == 400
    assert r2.json() == {"errors": ["SKU already exists"]}


def test_create_trims_name_and_sku(client):
    body = create(client, name="  Kiwi  ", sku="  K1 ").json()
    assert body["name"] == "Kiwi"
    assert body["sku"] == "K1"


def test_create_reports_every_validation_error(client):
    r = client.post("/products", json={"name": "  ", "price": 0, "sku": ""})
    assert r.status_code == 400
    assert r.json() == {"errors": [
        "Name is required",
        "Price must be greater than zero",
        "SKU is required",
    ]}


def test_create_with_empty_body(client):
    r = client.post("/products", json={})
    assert r.status_code == 400
    assert len(r.json()["errors"]) == 3


def test_non_numeric_price_is_a_validation_error(client):
    r = create(client, price="abc")
    assert r.status_code == 400
    assert r.json() == {"errors": ["Price must be greater than zero"]}


def test_numeric_string_price_is_accepted(client):
    r = create(client, price="2.5")
    assert r.status_code == 201
    assert r.json()["price"] == 2.5


def test_malformed_json_body(client):
    r = client.post("/products", content="not json", headers={"Content-Type": "application/json"})
    assert r.status_code == 400
    assert r.json() == {"errors": ["Request body must be a JSON object"]}


def test_list_sorted_by_name(client):
    create(client, name="Zeta", sku="Z")
    create(client, name="Alpha", sku="A")
    r = client.get("/products")
    assert r.status_code == 200
    products = r.json()
    assert [p["name"] for p in products] == ["Alpha", "Zeta"]
    assert [p["missingLetter"] for p in products] == ["b", "b"]


def test_list_empty(client):
    r = client.get("/products")
    assert r.status_code == 200
    assert r.json() == []


def test_get_product(client):
    pid = create(client).json()["id"]
    r = client.get(f"/products/{pid}")
    assert r.status_code == 200
    assert r.json()["sku"] == "B1"
    assert r.json()["missingLetter"] == "c"


def test_get_unknown_and_malformed_ids(client):
    assert client.get("/products/999").status_code == 404
    assert client.get("/products/999").json() == {"error": "Product not found"}
    assert client.get("/products/abc").status_code == 404


def test_update_product(client):
    pid = create(client).json()["id"]
    r = client.put(f"/products/{pid}", json={"name": "Apple", "price": 3.75, "sku": "A1"})
    assert r.status_code == 200
    assert r.json() == {"id": pid, "name": "Apple", "price": 3.75, "sku": "A1", "missingLetter": "b"}
    assert client.get(f"/products/{pid}").json()["name"] == "Apple"


def test_update_unknown_id_is_404(client):
    r = client.put("/products/12345", json={"name": "Ghost", "price": 1, "sku": "G1"})
    assert r.status_code == 404
    assert r.json() == {"error": "Product not found"}


def test_update_validation_runs_first(client):
    r = client.put("/products/12345", json={"name": "", "price": -1, "sku": "G1"})
    assert r.status_code == 400
    assert r.json()["errors"] == ["Name is required", "Price must be greater than zero"]


def test_update_duplicate_sku(client):
    create(client)
    pid = create(client, name="Apple", sku="A1").json()["id"]
    r = client.put(f"/products/{pid}", json={"name": "Apple", "price": 1, "sku": "B1"})
    assert r.status_code == 400
    assert r.json() == {"errors": ["SKU already exists"]}


def test_delete_twice(client):
    pid = create(client).json()["id"]
    r = client.delete(f"/products/{pid}")
    assert r.status_code == 204
    assert r.content == b""
    r2 = client.delete(f"/products/{pid}")
    assert r2.status_code == 404
    assert client.get("/products").json() == []


def test_sku_is_free_again_after_delete(client):
    pid = create(client).json()["id"]
    client.delete(f"/products/{pid}")
    assert create(client).status_code == 201


def test_store_failure_is_generic_500(client, monkeypatch):
    @contextmanager
    def broken_cursor():
        raise sqlite3.OperationalError("disk I/O error")
        yield

    monkeypatch.setattr(product_service, "get_cursor", broken_cursor)
    r = client.get("/products")
    assert r.status_code == 500
    assert r.json() == {"error": "Internal server error"}
    assert "disk" not in r.text


def test_cors_allows_any_origin(client):
    r = client.get("/products", headers={"Origin": "http://example.com"})
    assert r.headers["access-control-allow-origin"] == "*"

    pre = client.options("/products", headers={
        "Origin": "http://example.com",
        "Access-Control-Request-Method": "POST",
    })
    assert pre.status_code == 200


def test_index_and_health(client):
    r = client.get("/")
    assert r.status_code == 200
    assert "text/html" in r.headers["content-type"]
    assert "Product Catalog" in r.text
    assert client.get("/health").json() == {"status": "ok"}


def test_bad_price_type_still_reports_other_fields(client):
    r = client.post("/products", json={"name": "Banana", "price": "abc", "sku": ""})
    assert r.status_code == 400
    assert r.json() == {"errors": ["Price must be greater than zero", "SKU is required"]}


def test_bad_name_type_with_every_other_field_wrong(client):
    r = client.post("/products", json={"name": 123, "price": -2, "sku": "   "})
    assert r.status_code == 400
    assert r.json() == {"errors": [
        "Name is required",
        "Price must be greater than zero",
        "SKU is required",
    ]}


def test_bad_type_on_update_reports_every_field(client):
    pid = create(client).json()["id"]
    r = client.put(f"/products/{pid}", json={"name": "", "price": "abc", "sku": "B1"})
    assert r.status_code == 400
    assert r.json() == {"errors": ["Name is required", "Price must be greater than zero"]}


def test_non_object_body(client):
    r = client.post("/products", json=["Banana", 2.5, "B1"])
    assert r.status_code == 400
    assert r.json() == {"errors": ["Request body must be a JSON object"]}


def test_out_of_range_id_is_404(client):
    huge = "99999999999999999999999"
    assert client.get(f"/products/{huge}").status_code == 404
    r = client.put(f"/products/{huge}", json={"name": "Ghost", "price": 1, "sku": "G1"})
    assert r.status_code == 404
    assert r.json() == {"error": "Product not found"}
    assert client.delete(f"/products/{huge}").status_code == 404
    assert client.delete(f"/products/-{huge}").status_code == 404


def test_list_order_folds_non_ascii_case(client, view):
    # NOCASE would put "Éz" before "éa"; full case folding does not
    create(client, name="Éz", sku="E1")
    create(client, name="éa", sku="E2")
    create(client, name="apple", sku="A1")
    names = [p["name"] for p in client.get("/products").json()]
    assert names == ["apple", "éa", "Éz"]
    view.load()
    assert [p["name"] for p in view.products] == names
