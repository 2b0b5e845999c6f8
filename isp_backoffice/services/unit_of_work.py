"""
Unit of Work Pattern.
Owns the atomic database transaction and gives access to the repositories.
"""
import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from isp_backoffice.errors import StoreFailure
from isp_backoffice.extensions import db
from isp_backoffice.repositories import (
    ContractRepository,
    CustomerRepository,
    InvoiceRepository,
    PaymentRepository,
    SubscriptionRepository,
)

logger = logging.getLogger(__name__)


class UnitOfWork:
    def __init__(self):
        self.session = db.session
        self._customers: Optional[CustomerRepository] = None
        self._subscriptions: Optional[SubscriptionRepository] = None
        self._contracts: Optional[ContractRepository] = None
        self._invoices: Optional[InvoiceRepository] = None
        self._payments: Optional[PaymentRepository] = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type:
            self.rollback()
            if issubclass(exc_type, SQLAlchemyError):
                logger.error(
                    "Database error, transaction rolled back",
                    exc_info=(exc_type, exc_val, exc_tb),
                    extra={"component": "unit_of_work"},
                )
                raise StoreFailure(exc_val) from exc_val
            return False
        # Flask-SQLAlchemy removes the session at teardown, do not close here

    @property
    def customers(self) -> CustomerRepository:
        if self._customers is None:
            self._customers = CustomerRepository(self.session)
        return self._customers

    @property
    def subscriptions(self) -> SubscriptionRepository:
        if self._subscriptions is None:
            self._subscriptions = SubscriptionRepository(self.session)
        return self._subscriptions

    @property
    def contracts(self) -> ContractRepository:
        if self._contracts is None:
            self._contracts = ContractRepository(self.session)
        return self._contracts

    @property
    def invoices(self) -> InvoiceRepository:
        if self._invoices is None:
            self._invoices = InvoiceRepository(self.session)
        return self._invoices

    @property
    def payments(self) -> PaymentRepository:
        if self._payments is None:
            self._payments = PaymentRepository(self.session)
        return self._payments

    def commit(self):
        try:
            self.session.commit()
        except SQLAlchemyError as exc:
            self.rollback()
            logger.error(
                "Commit failed, transaction rolled back",
                exc_info=True,
                extra={"component": "unit_of_work"},
            )
            raise StoreFailure(exc) from exc

    def rollback(self):
        self.session.rollback()
