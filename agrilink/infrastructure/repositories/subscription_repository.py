"""Persistence helpers for subscription entities."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from agrilink.domain.entities import Subscription, SubscriptionStatus
from agrilink.infrastructure.models import SubscriptionModel
from agrilink.utils import ensure_app_naive_datetime, ensure_app_timezone


class SubscriptionRepository:
    """Provide CRUD operations for :class:`Subscription` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_current_active(
        self, user_id: int, *, now: datetime, exclude_id: int | None = None
    ) -> Subscription | None:
        """Return the active subscription of ``user_id`` that ends last."""

        query = (
            self.session.query(SubscriptionModel)
            .filter(SubscriptionModel.user_id == user_id)
            .filter(SubscriptionModel.status == SubscriptionStatus.ACTIVE.value)
            .filter(SubscriptionModel.end_date > ensure_app_naive_datetime(now))
        )
        if exclude_id is not None:
            query = query.filter(SubscriptionModel.id != exclude_id)
        model = query.order_by(SubscriptionModel.end_date.desc()).first()
        return self._to_entity(model) if model else None

    def list_expired_active(self, *, now: datetime) -> Sequence[Subscription]:
        """Return subscriptions still flagged active whose period already ended."""

        query = (
            self.session.query(SubscriptionModel)
            .filter(SubscriptionModel.status == SubscriptionStatus.ACTIVE.value)
            .filter(SubscriptionModel.end_date < ensure_app_naive_datetime(now))
            .order_by(SubscriptionModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def list_active_ending_between(
        self, *, start: datetime, end: datetime
    ) -> Sequence[Subscription]:
        """Return active subscriptions whose end falls in ``(start, end]``."""

        query = (
            self.session.query(SubscriptionModel)
            .filter(SubscriptionModel.status == SubscriptionStatus.ACTIVE.value)
            .filter(SubscriptionModel.end_date > ensure_app_naive_datetime(start))
            .filter(SubscriptionModel.end_date <= ensure_app_naive_datetime(end))
            .order_by(SubscriptionModel.end_date.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, subscription: Subscription) -> Subscription:
        model = SubscriptionModel()
        self._apply_entity_to_model(model, subscription)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def set_status(
        self, subscription_id: int, status: SubscriptionStatus, *, commit: bool = True
    ) -> None:
        self.session.query(SubscriptionModel).filter(
            SubscriptionModel.id == subscription_id
        ).update({SubscriptionModel.status: status.value}, synchronize_session=False)
        if commit:
            self.session.commit()

    @staticmethod
    def _apply_entity_to_model(
        model: SubscriptionModel, subscription: Subscription
    ) -> None:
        model.user_id = subscription.user_id
        model.plan_id = subscription.plan_id
        model.status = SubscriptionStatus(subscription.status).value
        model.start_date = ensure_app_naive_datetime(subscription.start_date)
        model.end_date = ensure_app_naive_datetime(subscription.end_date)
        model.amount = subscription.amount
        model.payment_id = subscription.payment_id
        if subscription.created_at is not None:
            model.created_at = ensure_app_naive_datetime(subscription.created_at)

    @staticmethod
    def _to_entity(model: SubscriptionModel) -> Subscription:
        return Subscription(
            id=model.id,
            user_id=model.user_id,
            plan_id=model.plan_id,
            status=SubscriptionStatus(model.status),
            start_date=ensure_app_timezone(model.start_date),
            end_date=ensure_app_timezone(model.end_date),
            amount=model.amount,
            payment_id=model.payment_id,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["SubscriptionRepository"]
