"""Subscription plan domain entities and the fixed feature tables."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SubscriptionPlan(str, Enum):
    """Plans in ascending tier order."""

    FREE = "free"
    BASIC = "basic"
    PRO = "pro"
    ADVANCE = "advance"

    @property
    def rank(self) -> int:
        return list(SubscriptionPlan).index(self)

    def includes(self, other: "SubscriptionPlan") -> bool:
        """True if this plan is at or above `other`."""
        return self.rank >= other.rank


class Feature(str, Enum):
    """Named entries of a plan's feature table."""

    TRANSACTION_LIMIT = "transaction_limit"
    MAX_USERS = "max_users"
    DAILY_REPORT = "daily_report"
    DAILY_BACKUP = "daily_backup"
    OPEN_CLOSE_DAILY = "open_close_daily"
    REPORT_EXPORT = "report_export"
    RECEIPT_EXPORT = "receipt_export"
    PRIORITY_SUPPORT = "priority_support"
    MULTI_OUTLET = "multi_outlet"
    SPLIT_VIEW = "split_view"
    SALES_ORDER = "sales_order"
    CUSTOM_FEATURES = "custom_features"


class PlanFeatures(BaseModel):
    """Feature table of a plan. Every field is required."""

    model_config = ConfigDict(frozen=True)

    name: str
    price: str
    transaction_limit: int | None  # None = unlimited
    max_users: int
    daily_report: bool
    daily_backup: bool
    open_close_daily: bool
    report_export: bool
    receipt_export: bool
    priority_support: bool
    multi_outlet: bool
    split_view: bool
    sales_order: bool
    custom_features: bool

    def allows(self, feature: Feature) -> bool:
        """Booleans as-is, numbers when > 0, unlimited (None) always."""
        value = getattr(self, feature.value)
        if value is None:
            return True
        if isinstance(value, bool):
            return value
        return value > 0


PLAN_FEATURES: dict[SubscriptionPlan, PlanFeatures] = {
    SubscriptionPlan.FREE: PlanFeatures(
        name="Free",
        price="Rp 0",
        transaction_limit=25,
        max_users=1,
        daily_report=False,
        daily_backup=False,
        open_close_daily=False,
        report_export=False,
        receipt_export=False,
        priority_support=False,
        multi_outlet=False,
        split_view=False,
        sales_order=False,
        custom_features=False,
    ),
    SubscriptionPlan.BASIC: PlanFeatures(
        name="Basic",
        price="Rp 60K/mo",
        transaction_limit=None,
        max_users=1,
        daily_report=True,
        daily_backup=True,
        open_close_daily=True,
        report_export=False,
        receipt_export=False,
        priority_support=False,
        multi_outlet=False,
        split_view=False,
        sales_order=False,
        custom_features=False,
    ),
    SubscriptionPlan.PRO: PlanFeatures(
        name="Pro",
        price="Rp 120K/mo",
        transaction_limit=None,
        max_users=3,
        daily_report=True,
        daily_backup=True,
        open_close_daily=True,
        report_export=True,
        receipt_export=True,
        priority_support=True,
        multi_outlet=False,
        split_view=False,
        sales_order=False,
        custom_features=False,
    ),
    SubscriptionPlan.ADVANCE: PlanFeatures(
        name="Advance",
        price="From Rp 160K/mo",
        transaction_limit=None,
        max_users=999,
        daily_report=True,
        daily_backup=True,
        open_close_daily=True,
        report_export=True,
        receipt_export=True,
        priority_support=True,
        multi_outlet=True,
        split_view=True,
        sales_order=True,
        custom_features=True,
    ),
}


def features_for(plan: SubscriptionPlan) -> PlanFeatures:
    """Feature table of a plan."""
    return PLAN_FEATURES[plan]


def required_plan(feature: Feature) -> SubscriptionPlan | None:
    """Lowest plan that enables `feature`, or None if no plan does."""
    for plan in SubscriptionPlan:
        if PLAN_FEATURES[plan].allows(feature):
            return plan
    return None


class UsageCounter(BaseModel):
    """Rolling monthly transaction usage."""

    monthly_transaction_count: int = Field(default=0, ge=0)
    period_started_at: datetime | None = None
