"""
Pytest fixtures and configuration for the Product Inventory API tests

Every test gets its own application and therefore its own product store,
seeded with the default products.
"""
import pytest
from fastapi.testclient import TestClient

from app.dao.product_store import ProductStore
from app.main import create_app
from app.models.product import Product


@pytest.fixture
def application():
    """
    Provides a freshly built application

    Scope: function (new store per test)
    """
    return create_app()


@pytest.fixture
def client(application):
    """
    Provides a test client bound to the application, lifespan included
    """
    with TestClient(application) as test_client:
        yield test_client


@pytest.fixture
def product_store():
    """
    Provides a seeded store without the HTTP layer
    """
    return ProductStore.seeded()


@pytest.fixture
def sample_product_data():
    """
    Provides a product body as a client would send it
    """
    return {"Name": "testobject", "quantity": 3}


@pytest.fixture
def sample_product(sample_product_data):
    return Product.model_validate(sample_product_data)
