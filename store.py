from threading import Lock
from typing import Callable, Dict, Optional
from uuid import uuid4

from models import Receipt


def generate_receipt_id() -> str:
    return str(uuid4())


class ReceiptStore:
    """
    In-memory, append-only receipt store. Receipts are published under a
    lock only after they are fully built, so a lookup never sees a
    half-written entry. Ids come from the generator and are not checked
    against existing keys.
    """

    def __init__(self, id_factory: Callable[[], str] = generate_receipt_id):
        self._id_factory = id_factory
        self._receipts: Dict[str, Receipt] = {}
        self._lock = Lock()

    def add(self, receipt: Receipt) -> str:
        receipt_id = self._id_factory()
        with self._lock:
            self._receipts[receipt_id] = receipt
        return receipt_id

    def get(self, receipt_id: str) -> Optional[Receipt]:
        with self._lock:
            return self._receipts.get(receipt_id)

    def __contains__(self, receipt_id: str) -> bool:
        with self._lock:
            return receipt_id in self._receipts

    def __len__(self) -> int:
        with self._lock:
            return len(self._receipts)
