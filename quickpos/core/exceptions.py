"""
Domain exceptions for the QuickPOS transaction core.

Every validation failure is raised before any state is mutated, so callers
can present the condition and let the cashier retry or upgrade.
"""

from typing import Any


class POSError(Exception):
    """Base exception for all QuickPOS errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Cart Exceptions
class CartError(POSError):
    """Base exception for cart operations."""

    pass


class EmptyCartError(CartError):
    """Checkout attempted with no line items."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot check out an empty cart",
            code="EMPTY_CART",
        )


# Subscription Exceptions
class SubscriptionError(POSError):
    """Base exception for plan quota and feature checks."""

    pass


class QuotaExceededError(SubscriptionError):
    """Monthly transaction limit of the current plan has been reached."""

    def __init__(self, plan: str, limit: int, used: int):
        super().__init__(
            f"Transaction limit reached for plan '{plan}' ({used}/{limit})",
            code="QUOTA_EXCEEDED",
            details={"plan": plan, "limit": limit, "used": used},
        )


class FeatureLockedError(SubscriptionError):
    """Feature is not enabled on the current plan."""

    def __init__(self, feature: str, plan: str, required_plan: str | None):
        super().__init__(
            f"Feature '{feature}' is not available on plan '{plan}'",
            code="FEATURE_LOCKED",
            details={
                "feature": feature,
                "plan": plan,
                "required_plan": required_plan,
            },
        )


# Shift Exceptions
class ShiftError(POSError):
    """Base exception for cashier shift operations."""

    pass


class ShiftRequiredError(ShiftError):
    """An open shift is required for this operation."""

    def __init__(self) -> None:
        super().__init__(
            "No open shift. Open a shift before checking out",
            code="SHIFT_REQUIRED",
        )


class ShiftClosedError(ShiftError):
    """Attempt to record against a shift that has been closed."""

    def __init__(self, shift_id: str):
        super().__init__(
            f"Shift {shift_id} is closed",
            code="SHIFT_CLOSED",
            details={"shift_id": shift_id},
        )


# Payment Exceptions
class PaymentError(POSError):
    """Base exception for payment sessions."""

    pass


class SessionExpiredError(PaymentError):
    """Payment session ran out of time before being confirmed."""

    def __init__(self, session_id: str):
        super().__init__(
            f"Payment session {session_id} has expired. Start a new session",
            code="SESSION_EXPIRED",
            details={"session_id": session_id},
        )


class PaymentProcessorError(PaymentError):
    """Payment processor could not be reached."""

    def __init__(self, processor: str, reason: str):
        super().__init__(
            f"Payment processor {processor} failed: {reason}",
            code="PAYMENT_PROCESSOR_ERROR",
            details={"processor": processor, "reason": reason},
        )


# State machine Exceptions
class InvalidTransitionError(POSError):
    """Operation is not permitted from the current state."""

    def __init__(self, machine: str, state: str, action: str):
        super().__init__(
            f"Cannot {action} {machine} in state '{state}'",
            code="INVALID_TRANSITION",
            details={"machine": machine, "state": state, "action": action},
        )


# Lookup Exceptions
class NotFoundError(POSError):
    """Base exception for missing records."""

    pass


class ShiftNotFoundError(NotFoundError):
    """Shift id is unknown."""

    def __init__(self, shift_id: str):
        super().__init__(
            f"Shift not found: {shift_id}",
            code="SHIFT_NOT_FOUND",
            details={"shift_id": shift_id},
        )


class ExpenseNotFoundError(NotFoundError):
    """Expense id is unknown."""

    def __init__(self, expense_id: str):
        super().__init__(
            f"Expense not found: {expense_id}",
            code="EXPENSE_NOT_FOUND",
            details={"expense_id": expense_id},
        )


class TransactionNotFoundError(NotFoundError):
    """Transaction id is unknown."""

    def __init__(self, transaction_id: str):
        super().__init__(
            f"Transaction not found: {transaction_id}",
            code="TRANSACTION_NOT_FOUND",
            details={"transaction_id": transaction_id},
        )


# Validation Exceptions
class ValidationError(POSError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class InvalidAmountError(ValidationError):
    """Money amount is out of the permitted range."""

    def __init__(self, field: str, amount: Any, message: str = "must not be negative"):
        super().__init__(field=field, message=message, value=amount)
        self.code = "INVALID_AMOUNT"


class ConfigurationError(POSError):
    """Configuration error."""

    pass
