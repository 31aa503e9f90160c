# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock

from backoffice.core.config import Settings
from backoffice.dependencies import get_reorder_service
from backoffice.main import app
from backoffice.schemas.reorder import LowStockGroup, LowStockProduct, SupplierInfo
from backoffice.services.backoffice_api.client import BackofficeAPIClient
from backoffice.services.reorder.aggregator import aggregate_low_stock
from backoffice.services.reorder_service import ReorderSuggestionService


def make_product(product_id, stock, threshold, reorder_quantity=10, price=12.5, **extra):
    """Build a LowStockProduct the way the inventory service reports it"""
    return LowStockProduct(
        product_id=product_id,
        current_stock_level=stock,
        reorder_threshold=threshold,
        reorder_quantity=reorder_quantity,
        purchase_price=price,
        **extra,
    )


@pytest.fixture(scope="session")
def settings():
    """Provide test settings"""
    return Settings(
        API_BASE_URL="http://backoffice.test",
        API_TOKEN="test_token",
        HTTP_TIMEOUT=5.0,
        SUGGESTIONS_PAGE_SIZE=7,
    )


@pytest.fixture
def s1_group():
    """Supplier 1: one out of stock, one low, one adequate"""
    return LowStockGroup(
        supplier_id=1,
        products=[
            make_product(101, 0, 5, product_name="Paracetamol 500mg", product_code="PCM500"),
            make_product(102, 3, 5, product_name="Amoxicillin 250mg", product_code="AMX250"),
            make_product(103, 10, 5, product_name="Cetirizine 10mg", product_code="CTZ10"),
        ],
    )


@pytest.fixture
def s2_group():
    return LowStockGroup(
        supplier_id=2,
        products=[
            make_product(201, 2, 20, product_name="Insulin Glargine"),
            make_product(202, 0, 4, product_name="Metformin 500mg"),
        ],
    )


@pytest.fixture
def directory():
    return [
        SupplierInfo(id=1, name="Medline Distributors", contact_details="9876543210", email="orders@medline.test"),
        SupplierInfo(id=2, name="Apex Pharma", contact_details="9123456780", email="sales@apex.test"),
    ]


@pytest.fixture
def s1_supplier(s1_group, directory):
    return aggregate_low_stock([s1_group], directory)[0]


@pytest.fixture
def mock_api_client(s1_group, s2_group, directory):
    """Provide a mocked BackofficeAPIClient returning two suppliers"""
    client = MagicMock(spec=BackofficeAPIClient)
    client.get_low_stock_alerts = AsyncMock(return_value=[s1_group, s2_group])
    client.get_suppliers = AsyncMock(return_value=directory)
    client.create_manual_purchase_order = AsyncMock()
    return client


@pytest.fixture
def reorder_service(settings, mock_api_client):
    return ReorderSuggestionService(settings, client=mock_api_client)


@pytest.fixture
def test_client(reorder_service):
    """Provide a test client with the reorder service overridden"""
    app.dependency_overrides[get_reorder_service] = lambda: reorder_service
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def product_factory():
    return make_product
