"""Endpoints for farmer subscriptions."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from agrilink.application.use_cases.subscriptions import (
    PlanNotFoundError,
    expire_subscriptions,
    get_subscription_status,
    subscribe,
)
from agrilink.domain.entities import SUBSCRIPTION_PLANS, Subscription, SubscriptionPlan, User
from agrilink.infrastructure.database import get_db
from agrilink.interfaces.api.dependencies import (
    get_current_user,
    get_optional_user,
    verify_cron_secret,
)
from agrilink.interfaces.api.schemas import (
    ErrorResponse,
    SubscribeRequest,
    SubscriptionPlanListRead,
    SubscriptionPlanRead,
    SubscriptionRead,
    SubscriptionStatusRead,
    SubscriptionSweepRead,
)

router = APIRouter(prefix="/subscriptions", tags=["subscriptions"])
cron_router = APIRouter(prefix="/cron", tags=["cron"])
logger = logging.getLogger(__name__)


def _subscription_to_schema(subscription: Subscription | None) -> SubscriptionRead | None:
    if subscription is None:
        return None
    return SubscriptionRead.model_validate(subscription)


def _plan_to_schema(plan: SubscriptionPlan) -> SubscriptionPlanRead:
    return SubscriptionPlanRead(
        id=plan.id,
        name=plan.name,
        description=plan.description,
        price=plan.price,
        duration=plan.duration_days,
        features=list(plan.features),
    )


@router.get(
    "/status",
    response_model=SubscriptionStatusRead,
    response_model_exclude_unset=True,
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def read_subscription_status(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Report whether the caller holds an active subscription and for how long."""

    try:
        report = get_subscription_status(db, current_user.id)
    except SQLAlchemyError:
        logger.exception("Get subscription status failed for user %s", current_user.id)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error"},
        )

    if not report.is_active:
        return SubscriptionStatusRead(is_active=False, subscription=None, days_remaining=0)
    return SubscriptionStatusRead(
        is_active=True,
        subscription=_subscription_to_schema(report.subscription),
        days_remaining=report.days_remaining,
        expires_at=report.expires_at,
    )


@router.get("/plans", response_model=SubscriptionPlanListRead)
def read_plans(
    db: Session = Depends(get_db),
    current_user: User | None = Depends(get_optional_user),
) -> SubscriptionPlanListRead:
    """List the purchasable plans and, when signed in, the caller's current one."""

    current = None
    if current_user is not None:
        current = get_subscription_status(db, current_user.id).subscription
    return SubscriptionPlanListRead(
        plans=[_plan_to_schema(plan) for plan in SUBSCRIPTION_PLANS],
        current_subscription=_subscription_to_schema(current),
    )


@router.post(
    "/subscribe",
    response_model=SubscriptionRead,
    status_code=status.HTTP_201_CREATED,
)
def create_subscription(
    payload: SubscribeRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SubscriptionRead:
    """Purchase ``payload.plan_id`` for the caller."""

    try:
        subscription = subscribe(
            db,
            user=current_user,
            plan_id=payload.plan_id,
            payment_id=payload.payment_id,
        )
    except PlanNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return SubscriptionRead.model_validate(subscription)


@cron_router.post(
    "/subscriptions",
    response_model=SubscriptionSweepRead,
    dependencies=[Depends(verify_cron_secret)],
)
def run_subscription_sweep(db: Session = Depends(get_db)) -> SubscriptionSweepRead:
    """Expire ended subscriptions and warn owners of those about to end."""

    result = expire_subscriptions(db)
    if not (result.expired or result.warned):
        return SubscriptionSweepRead(message="No expired subscriptions")
    return SubscriptionSweepRead(
        message="Cron job completed",
        expired=result.expired,
        downgraded=result.downgraded,
        warned=result.warned,
    )
