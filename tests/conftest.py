# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from product_catalog_api.app.core.db import reset_db
from product_catalog_api.app.main import app
from product_catalog_client import ProductCatalogClient, ProductCatalogView


@pytest.fixture(autouse=True)
def fresh_store():
    # every test starts from an empty in-memory catalog
    reset_db()
    yield


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def catalog_client(client):
    return ProductCatalogClient(base_url="http://testserver", session=client)


@pytest.fixture
def view(catalog_client):
    return ProductCatalogView(catalog_client)
