"""Cart domain entities."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from quickpos.core.money import to_money


class CatalogItem(BaseModel):
    """Product reference supplied by the catalog when adding to a cart."""

    model_config = ConfigDict(frozen=True)

    product_id: str = Field(..., min_length=1)
    name: str
    unit_price: Decimal = Field(..., ge=0)
    notes: str | None = None

    @field_validator("unit_price")
    @classmethod
    def round_price(cls, v: Decimal) -> Decimal:
        return to_money(v)


class Customer(BaseModel):
    """Customer attached to the next transaction."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    phone: str | None = None


class CartLine(BaseModel):
    """A single working line in the cart. Quantity is always at least 1."""

    model_config = ConfigDict(validate_assignment=True)

    product_id: str
    name: str
    unit_price: Decimal = Field(..., ge=0)
    quantity: int = Field(default=1, ge=1)
    notes: str | None = None

    @property
    def line_total(self) -> Decimal:
        """unit_price * quantity."""
        return to_money(self.unit_price * self.quantity)


class CartSnapshot(BaseModel):
    """Frozen copy of the cart taken when a payment amount is fixed."""

    model_config = ConfigDict(frozen=True)

    lines: tuple[CartLine, ...] = ()
    customer: Customer | None = None

    @property
    def is_empty(self) -> bool:
        return not self.lines
