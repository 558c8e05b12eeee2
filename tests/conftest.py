import itertools

import pytest
from fastapi.testclient import TestClient

from src.app import create_app
from src.model.ReceiptItemModel import ReceiptItem
from src.model.ReceiptModel import Receipt
from src.service.processor import ReceiptProcessor
from src.store.ReceiptStore import ReceiptStore

TARGET_PAYLOAD = {
    "retailer": "Target",
    "purchaseDate": "2022-01-01",
    "purchaseTime": "13:01",
    "items": [
        {"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
        {"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
        {"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
        {"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
        {"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
    ],
    "total": "35.35",
}

CORNER_MARKET_PAYLOAD = {
    "retailer": "M&M Corner Market",
    "purchaseDate": "2022-03-20",
    "purchaseTime": "14:33",
    "items": [
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
        {"shortDescription": "Gatorade", "price": "2.25"},
    ],
    "total": "9.00",
}


def make_receipt(retailer="Shop", purchase_date="2022-01-02", purchase_time="10:00",
                 total="1.23", items=(("Item", "1.00"),)):
    return Receipt(
        retailer=retailer,
        purchase_date=purchase_date,
        purchase_time=purchase_time,
        total=total,
        items=tuple(ReceiptItem(description=d, price=p) for d, p in items),
    )


@pytest.fixture
def sequential_ids():
    counter = itertools.count(1)
    return lambda: f"receipt-{next(counter)}"


@pytest.fixture
def store(sequential_ids):
    return ReceiptStore(id_factory=sequential_ids)


@pytest.fixture
def processor(store):
    return ReceiptProcessor(store)


@pytest.fixture
def client(processor):
    return TestClient(create_app(processor))
