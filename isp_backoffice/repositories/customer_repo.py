"""
Customer repository.
"""
from typing import List

from isp_backoffice.models import Contract, Customer, Invoice, STATUS_UNPAID
from isp_backoffice.repositories.base import SqlAlchemyRepository


class CustomerRepository(SqlAlchemyRepository[Customer]):
    def __init__(self, session):
        super().__init__(session, Customer)

    def list_contracts(self, customer_id: int) -> List[Contract]:
        """Contracts signed by a customer."""
        return (
            self.session.query(Contract)
            .filter(Contract.customer_id == customer_id)
            .order_by(Contract.start_date.asc(), Contract.id.asc())
            .all()
        )

    def list_unpaid_invoices(self, customer_id: int) -> List[Invoice]:
        """Unpaid invoices of a customer, across all of its contracts."""
        return (
            self.session.query(Invoice)
            .join(Contract, Invoice.contract_id == Contract.id)
            .filter(
                Contract.customer_id == customer_id,
                Invoice.status == STATUS_UNPAID,
            )
            .order_by(Invoice.due_date.asc(), Invoice.id.asc())
            .all()
        )

    def has_contracts(self, customer_id: int) -> bool:
        return (
            self.session.query(Contract.id)
            .filter(Contract.customer_id == customer_id)
            .first()
            is not None
        )
