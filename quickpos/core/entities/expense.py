"""Expense domain entity."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class Expense(BaseModel):
    """Cash paid out of the drawer for running costs."""

    model_config = ConfigDict(frozen=True)

    id: str
    description: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0)
    created_at: datetime
