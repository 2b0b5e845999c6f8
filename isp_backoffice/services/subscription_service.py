"""
Services for subscriptions (plain CRUD, delete restricted by contracts).
"""
from __future__ import annotations

from typing import List

from isp_backoffice.errors import NotFound
from isp_backoffice.models import Subscription
from isp_backoffice.services.business_rules import delete_restricted
from isp_backoffice.services.dto import SubscriptionRequest
from isp_backoffice.services.logging import log_structured_event
from isp_backoffice.services.unit_of_work import UnitOfWork


def _get_or_404(uow: UnitOfWork, subscription_id: int) -> Subscription:
    subscription = uow.subscriptions.get_by_id(subscription_id)
    if subscription is None:
        raise NotFound("Subscription", subscription_id)
    return subscription


def list_subscriptions() -> List[Subscription]:
    with UnitOfWork() as uow:
        return uow.subscriptions.list_all()


def get_subscription(subscription_id: int) -> Subscription:
    with UnitOfWork() as uow:
        return _get_or_404(uow, subscription_id)


def create_subscription(request: SubscriptionRequest) -> Subscription:
    with UnitOfWork() as uow:
        subscription = uow.subscriptions.create(request.to_fields())
        uow.commit()

    log_structured_event(
        "create_subscription",
        subscription_id=subscription.id,
        subscription_type=subscription.subscription_type,
    )
    return subscription


def update_subscription(subscription_id: int, request: SubscriptionRequest) -> Subscription:
    with UnitOfWork() as uow:
        subscription = _get_or_404(uow, subscription_id)
        uow.subscriptions.update(subscription, request.to_fields())
        uow.commit()

    log_structured_event("update_subscription", subscription_id=subscription_id)
    return subscription


def delete_subscription(subscription_id: int) -> None:
    with UnitOfWork() as uow:
        subscription = _get_or_404(uow, subscription_id)
        if uow.subscriptions.has_contracts(subscription_id):
            raise delete_restricted("Subscription", subscription_id, "contracts")
        uow.subscriptions.delete(subscription)
        uow.commit()

    log_structured_event("delete_subscription", subscription_id=subscription_id)
