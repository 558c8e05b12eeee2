import logging
import re
from typing import Optional

from src.errors import InvalidReceiptError, MalformedReceiptIdError
from src.model.ReceiptItemModel import ReceiptItem
from src.model.ReceiptModel import Receipt
from src.points.calculator import calculate_points
from src.schema.ReceiptSchema import ReceiptSchema
from src.store.ReceiptStore import ReceiptStore

logger = logging.getLogger(__name__)

RECEIPT_ID_PATTERN = re.compile(r'\S+', re.ASCII)


def build_receipt(payload: ReceiptSchema) -> Receipt:
    """Turn a decoded payload into a Receipt, rejecting missing required fields."""
    missing = [
        name for name in ("retailer", "purchaseDate", "purchaseTime", "total")
        if not getattr(payload, name)
    ]
    if not payload.items:
        missing.append("items")
    if missing:
        logger.warning("Rejected receipt, missing %s", ", ".join(missing),
                       extra={"error_code": InvalidReceiptError.code})
        raise InvalidReceiptError()

    items = tuple(
        ReceiptItem(description=item.shortDescription or "", price=item.price or "")
        for item in payload.items
    )
    return Receipt(
        retailer=payload.retailer,
        purchase_date=payload.purchaseDate,
        purchase_time=payload.purchaseTime,
        total=payload.total,
        items=items,
    )


def validate_receipt_id(receipt_id: str) -> str:
    if receipt_id is None or not RECEIPT_ID_PATTERN.fullmatch(receipt_id):
        raise MalformedReceiptIdError()
    return receipt_id


class ReceiptProcessor:
    def __init__(self, store: Optional[ReceiptStore] = None):
        self.store = store if store is not None else ReceiptStore()

    def submit(self, payload: ReceiptSchema) -> str:
        receipt = build_receipt(payload)
        receipt_id = self.store.insert(receipt)
        logger.info("Stored receipt from %s", receipt.retailer, extra={"receipt_id": receipt_id})
        return receipt_id

    def points(self, receipt_id: str) -> int:
        receipt = self.store.get(validate_receipt_id(receipt_id))
        points = calculate_points(receipt)
        logger.info("Computed points", extra={"receipt_id": receipt_id, "points": points})
        return points
