"""Abstract interface for transaction history storage."""

from abc import ABC, abstractmethod
from datetime import datetime

from quickpos.core.entities.transaction import Transaction


class ITransactionStore(ABC):
    """Append-only history of committed transactions."""

    @abstractmethod
    def add(self, transaction: Transaction) -> Transaction:
        """Append a committed transaction."""
        pass

    @abstractmethod
    def discard(self, transaction_id: str) -> None:
        """Drop a transaction whose commit was rolled back."""
        pass

    @abstractmethod
    def get(self, transaction_id: str) -> Transaction | None:
        """Get transaction by ID."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        since: datetime | None = None,
        until: datetime | None = None,
        limit: int | None = None,
    ) -> list[Transaction]:
        """List transactions in commit order within [since, until); limit keeps the newest."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored transactions."""
        pass
