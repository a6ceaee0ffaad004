"""In-memory storage implementations."""

from quickpos.infrastructure.storage.memory.transaction_store import (
    InMemoryTransactionStore,
)

__all__ = ["InMemoryTransactionStore"]
