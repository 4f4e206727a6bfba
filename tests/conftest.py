# tests/conftest.py

import os
import tempfile

# settings читаются при импорте app.config, поэтому окружение задаём заранее
_boot_dir = tempfile.mkdtemp(prefix="shop-api-")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{os.path.join(_boot_dir, 'boot.db')}")
os.environ.setdefault("LOG_DIR", os.path.join(_boot_dir, "log"))
os.environ.setdefault("LOG_PRINT", "0")

import pytest
from fastapi.testclient import TestClient

from app.config import settings
from app.main import app


@pytest.fixture
def client(tmp_path, monkeypatch):
    """Клиент с отдельной SQLite базой и каталогом логов на каждый тест."""
    monkeypatch.setattr(settings, "DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'shop.db'}")
    monkeypatch.setattr(settings, "LOG_DIR", str(tmp_path / "log"))
    monkeypatch.setattr(settings, "LOG_PRINT", "0")
    with TestClient(app) as c:
        yield c


@pytest.fixture
def order_payload():
    return {
        "customerName": "Asha Rao",
        "phoneNumber": "+91 98765 43210",
        "address": "12 MG Road, Pune",
        "paymentMethod": "UPI",
        "upiScreenshot": "data:image/png;base64,iVBORw0KGgo=",
        "products": [
            {"id": 1700000000000, "name": "Mug", "price": "9.99", "quantity": 2},
            {"id": 1700000000001, "name": "Plate", "price": "4.50", "quantity": 1},
        ],
        "total": 24.48,
    }
