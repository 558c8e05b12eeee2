from typing import List, Optional

from pydantic import BaseModel


class ItemSchema(BaseModel):
    shortDescription: Optional[str] = None
    price: Optional[str] = None


class ReceiptSchema(BaseModel):
    """Receipt body as posted to /receipts/process.

    Every field may be absent or null here; required fields are enforced when
    the payload is turned into a Receipt.
    """

    retailer: Optional[str] = None
    purchaseDate: Optional[str] = None
    purchaseTime: Optional[str] = None
    total: Optional[str] = None
    items: Optional[List[ItemSchema]] = None
