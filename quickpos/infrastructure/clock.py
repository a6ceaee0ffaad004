"""System time and UUID-based id generation."""

import uuid
from datetime import UTC, datetime

from quickpos.core.interfaces.clock import IClock, IIdGenerator


class SystemClock(IClock):
    def now(self) -> datetime:
        return datetime.now(UTC)


class UUIDGenerator(IIdGenerator):
    """Random 12-hex-digit ids; collisions are negligible at POS volumes."""

    def new_id(self, prefix: str = "") -> str:
        return f"{prefix}{uuid.uuid4().hex[:12]}"
