"""
Subscription endpoints: plan, quota usage and feature checks.
"""

from fastapi import APIRouter, Depends

from quickpos.api.dependencies import get_gate
from quickpos.application.dto.requests import SetPlanRequest
from quickpos.application.dto.responses import FeatureCheckResponse, SubscriptionResponse
from quickpos.core.entities import Feature, required_plan
from quickpos.core.services import SubscriptionGate

router = APIRouter(prefix="/api/subscription", tags=["subscription"])


def _to_response(gate: SubscriptionGate) -> SubscriptionResponse:
    features = gate.features
    return SubscriptionResponse(
        plan=gate.current_plan.value,
        name=features.name,
        price=features.price,
        transaction_limit=features.transaction_limit,
        monthly_transaction_count=gate.monthly_transaction_count,
        remaining_transactions=gate.remaining(),
        can_transact=gate.can_transact(),
        features={feature.value: gate.has_feature(feature) for feature in Feature},
    )


@router.get("", response_model=SubscriptionResponse)
async def get_subscription(gate: SubscriptionGate = Depends(get_gate)) -> SubscriptionResponse:
    return _to_response(gate)


@router.put("/plan", response_model=SubscriptionResponse)
async def set_plan(
    request: SetPlanRequest,
    gate: SubscriptionGate = Depends(get_gate),
) -> SubscriptionResponse:
    """Switch plans. Downgrades apply immediately."""
    gate.set_plan(request.plan)
    return _to_response(gate)


@router.get("/features/{feature}", response_model=FeatureCheckResponse)
async def check_feature(
    feature: str,
    gate: SubscriptionGate = Depends(get_gate),
) -> FeatureCheckResponse:
    """Whether the current plan enables `feature`, and the lowest plan that does."""
    enabled = gate.has_feature(feature)
    minimum = required_plan(Feature(feature))
    return FeatureCheckResponse(
        feature=feature,
        enabled=enabled,
        required_plan=minimum.value if minimum else None,
    )


@router.post("/reset-usage", response_model=SubscriptionResponse)
async def reset_usage(gate: SubscriptionGate = Depends(get_gate)) -> SubscriptionResponse:
    """Start a new billing period."""
    gate.reset_monthly_count()
    return _to_response(gate)
