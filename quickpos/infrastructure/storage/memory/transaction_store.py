"""In-memory transaction history."""

import threading
from datetime import datetime

from quickpos.config import get_logger
from quickpos.core.entities.transaction import Transaction
from quickpos.core.interfaces.transaction_store import ITransactionStore

logger = get_logger(__name__)


class InMemoryTransactionStore(ITransactionStore):
    """Process-lifetime, append-only list of committed transactions."""

    def __init__(self) -> None:
        self._transactions: list[Transaction] = []
        self._by_id: dict[str, Transaction] = {}
        self._lock = threading.Lock()

    def add(self, transaction: Transaction) -> Transaction:
        with self._lock:
            if transaction.id in self._by_id:
                raise ValueError(f"Duplicate transaction id: {transaction.id}")
            self._transactions.append(transaction)
            self._by_id[transaction.id] = transaction
        return transaction

    def discard(self, transaction_id: str) -> None:
        with self._lock:
            if self._by_id.pop(transaction_id, None) is None:
                return
            self._transactions = [
                tx for tx in self._transactions if tx.id != transaction_id
            ]
        logger.warning("transaction_discarded", transaction_id=transaction_id)

    def get(self, transaction_id: str) -> Transaction | None:
        return self._by_id.get(transaction_id)

    def list_transactions(
        self,
        since: datetime | None = None,
        until: datetime | None = None,
        limit: int | None = None,
    ) -> list[Transaction]:
        with self._lock:
            result = [
                tx
                for tx in self._transactions
                if (since is None or tx.created_at >= since)
                and (until is None or tx.created_at < until)
            ]
        if limit is not None:
            result = result[-limit:]
        return result

    def count(self) -> int:
        return len(self._transactions)
