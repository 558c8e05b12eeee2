"""Tests for receipt validation and the processor boundary."""

import pytest

from src.errors import InvalidReceiptError, MalformedReceiptIdError, ReceiptNotFoundError
from src.schema.ReceiptSchema import ReceiptSchema
from src.service.processor import build_receipt, validate_receipt_id
from tests.conftest import CORNER_MARKET_PAYLOAD, TARGET_PAYLOAD


def test_build_receipt_maps_payload_fields():
    receipt = build_receipt(ReceiptSchema(**TARGET_PAYLOAD))
    assert receipt.retailer == "Target"
    assert receipt.purchase_date == "2022-01-01"
    assert receipt.purchase_time == "13:01"
    assert receipt.total == "35.35"
    assert len(receipt.items) == 5
    assert receipt.items[0].description == "Mountain Dew 12PK"
    assert receipt.items[0].price == "6.49"
    assert isinstance(receipt.items, tuple)


@pytest.mark.parametrize("field", ["retailer", "purchaseDate", "purchaseTime", "total", "items"])
def test_missing_field_is_invalid(field):
    payload = {k: v for k, v in TARGET_PAYLOAD.items() if k != field}
    with pytest.raises(InvalidReceiptError):
        build_receipt(ReceiptSchema(**payload))


@pytest.mark.parametrize("field,value", [
    ("retailer", ""),
    ("total", ""),
    ("items", []),
])
def test_empty_field_is_invalid(field, value):
    payload = dict(TARGET_PAYLOAD, **{field: value})
    with pytest.raises(InvalidReceiptError):
        build_receipt(ReceiptSchema(**payload))


def test_items_with_blank_fields_are_accepted():
    payload = dict(TARGET_PAYLOAD, items=[{"shortDescription": "", "price": "1.00"}])
    receipt = build_receipt(ReceiptSchema(**payload))
    assert receipt.items[0].description == ""


@pytest.mark.parametrize("receipt_id", ["", " ", "abc def", "abc\n", "\t"])
def test_malformed_receipt_ids(receipt_id):
    with pytest.raises(MalformedReceiptIdError):
        validate_receipt_id(receipt_id)


def test_well_formed_receipt_id():
    assert validate_receipt_id("7fb1377b-b223-49d9-a31a-5a02701dd310") == \
        "7fb1377b-b223-49d9-a31a-5a02701dd310"


def test_submit_then_points(processor):
    target_id = processor.submit(ReceiptSchema(**TARGET_PAYLOAD))
    market_id = processor.submit(ReceiptSchema(**CORNER_MARKET_PAYLOAD))
    assert processor.points(target_id) == 28
    assert processor.points(market_id) == 109


def test_invalid_submit_stores_nothing(processor):
    payload = {k: v for k, v in TARGET_PAYLOAD.items() if k != "total"}
    with pytest.raises(InvalidReceiptError):
        processor.submit(ReceiptSchema(**payload))
    assert len(processor.store) == 0


def test_points_for_unknown_id(processor):
    with pytest.raises(ReceiptNotFoundError):
        processor.points("missing")


def test_points_for_malformed_id_skips_lookup(processor, monkeypatch):
    def fail(receipt_id):
        raise AssertionError("store should not be consulted")

    monkeypatch.setattr(processor.store, "get", fail)
    with pytest.raises(MalformedReceiptIdError):
        processor.points("has space")


def test_receipt_id_whitespace_check_is_ascii_only():
    # no-break space is not ASCII whitespace
    assert validate_receipt_id("abc\u00a0def") == "abc\u00a0def"
