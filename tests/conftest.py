"""Shared fixtures: a fresh store and client per test."""

import pytest
from fastapi.testclient import TestClient

from egov_portal_api.app.core.config import APP_DIR
from egov_portal_api.app.core.store import DataStore
from egov_portal_api.app.main import create_app


DATA_DIR = APP_DIR / "data"


@pytest.fixture
def store() -> DataStore:
    return DataStore.from_directory(str(DATA_DIR))


@pytest.fixture
def app(store):
    return create_app(store)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def services_data():
    """A small catalog for exercising the query helpers."""
    return [
        {"id": "a", "name": "Cấp Căn cước", "shortDescription": "Thẻ chip", "categoryId": "cu-tru", "status": "online", "views": 5},
        {"id": "b", "name": "Đăng ký khai sinh", "shortDescription": "Cho trẻ mới sinh", "categoryId": "ho-tich", "status": "online", "views": 50},
        {"id": "c", "name": "Đăng ký kết hôn", "shortDescription": "Tại UBND xã", "categoryId": "ho-tich", "status": "partial", "views": 20},
        {"id": "d", "name": "Đổi GPLX", "shortDescription": "Giấy phép lái xe", "categoryId": "giao-thong", "status": "offline", "views": 20},
    ]
