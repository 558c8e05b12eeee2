import threading
import uuid
from typing import Callable, Dict

from src.errors import ReceiptNotFoundError
from src.model.ReceiptModel import Receipt

IdFactory = Callable[[], str]


def new_receipt_id() -> str:
    return str(uuid.uuid4())


class ReceiptStore:
    """In-memory receipts keyed by a generated identifier.

    Every access to the backing dict happens under a single lock, held only
    for the dict operation itself. Stored receipts are frozen, so callers of
    get() never see a mutable view into the store.
    """

    def __init__(self, id_factory: IdFactory = new_receipt_id):
        self._id_factory = id_factory
        self._receipts: Dict[str, Receipt] = {}
        self._lock = threading.Lock()

    def insert(self, receipt: Receipt) -> str:
        receipt_id = self._id_factory()
        with self._lock:
            if receipt_id in self._receipts:
                raise ValueError(f"Receipt id already in use: {receipt_id}")
            self._receipts[receipt_id] = receipt
        return receipt_id

    def get(self, receipt_id: str) -> Receipt:
        with self._lock:
            receipt = self._receipts.get(receipt_id)
        if receipt is None:
            raise ReceiptNotFoundError(receipt_id)
        return receipt

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)
