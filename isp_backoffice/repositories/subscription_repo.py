"""
Subscription repository.
"""
from isp_backoffice.models import Contract, Subscription
from isp_backoffice.repositories.base import SqlAlchemyRepository


class SubscriptionRepository(SqlAlchemyRepository[Subscription]):
    def __init__(self, session):
        super().__init__(session, Subscription)

    def has_contracts(self, subscription_id: int) -> bool:
        return (
            self.session.query(Contract.id)
            .filter(Contract.subscription_id == subscription_id)
            .first()
            is not None
        )
