"""
Subscription gate: active plan, feature flags and monthly quota.

A single process-wide instance is shared by every terminal. The lock lets
the transaction recorder evaluate can_transact() and call record_usage()
as one atomic step.
"""

import threading

from quickpos.config import get_logger
from quickpos.core.entities.subscription import (
    Feature,
    PlanFeatures,
    SubscriptionPlan,
    UsageCounter,
    features_for,
    required_plan,
)
from quickpos.core.exceptions import FeatureLockedError, QuotaExceededError, ValidationError
from quickpos.core.interfaces.clock import IClock

logger = get_logger(__name__)


class SubscriptionGate:
    """Answers quota and feature questions for the current plan."""

    def __init__(
        self,
        plan: SubscriptionPlan = SubscriptionPlan.FREE,
        clock: IClock | None = None,
        usage: UsageCounter | None = None,
    ):
        self._plan = plan
        self._clock = clock
        self._usage = usage or UsageCounter(
            period_started_at=clock.now() if clock else None
        )
        self.lock = threading.RLock()

    @property
    def current_plan(self) -> SubscriptionPlan:
        return self._plan

    @property
    def features(self) -> PlanFeatures:
        return features_for(self._plan)

    @property
    def monthly_transaction_count(self) -> int:
        return self._usage.monthly_transaction_count

    @property
    def usage(self) -> UsageCounter:
        return self._usage.model_copy()

    def set_plan(self, plan: SubscriptionPlan) -> None:
        """Switch plans. Takes effect immediately, including downgrades."""
        with self.lock:
            previous = self._plan
            self._plan = plan

        logger.info(
            "plan_changed",
            previous=previous,
            plan=plan,
            can_transact=self.can_transact(),
        )

    def has_feature(self, feature: Feature | str) -> bool:
        """Whether the current plan enables `feature`."""
        return self.features.allows(self._coerce(feature))

    def require_feature(self, feature: Feature | str) -> None:
        """
        Raise unless the current plan enables `feature`.

        Raises:
            FeatureLockedError: naming the lowest plan that unlocks it
        """
        flag = self._coerce(feature)
        if not self.features.allows(flag):
            unlock = required_plan(flag)
            logger.warning("feature_locked", feature=flag, plan=self._plan)
            raise FeatureLockedError(
                feature=flag.value,
                plan=self._plan.value,
                required_plan=unlock.value if unlock else None,
            )

    def can_transact(self) -> bool:
        """True while the monthly count is below the plan limit."""
        with self.lock:
            limit = self.features.transaction_limit
            if limit is None:
                return True
            return self._usage.monthly_transaction_count < limit

    def ensure_can_transact(self) -> None:
        """
        Raise if the quota is exhausted.

        Raises:
            QuotaExceededError: If the plan limit has been reached
        """
        with self.lock:
            if not self.can_transact():
                limit = self.features.transaction_limit
                raise QuotaExceededError(
                    plan=self._plan.value,
                    limit=limit if limit is not None else 0,
                    used=self._usage.monthly_transaction_count,
                )

    def remaining(self) -> int | None:
        """Transactions left this month, or None when unlimited."""
        with self.lock:
            limit = self.features.transaction_limit
            if limit is None:
                return None
            return max(0, limit - self._usage.monthly_transaction_count)

    def record_usage(self) -> int:
        """Count one committed transaction. Returns the new count."""
        with self.lock:
            self._usage.monthly_transaction_count += 1
            return self._usage.monthly_transaction_count

    def reset_monthly_count(self) -> None:
        """Start a new billing period."""
        with self.lock:
            previous = self._usage.monthly_transaction_count
            self._usage = UsageCounter(
                period_started_at=self._clock.now() if self._clock else None
            )

        logger.info("usage_reset", previous_count=previous, plan=self._plan)

    @staticmethod
    def _coerce(feature: Feature | str) -> Feature:
        if isinstance(feature, Feature):
            return feature
        try:
            return Feature(feature)
        except ValueError:
            raise ValidationError("feature", "unknown feature", feature) from None
