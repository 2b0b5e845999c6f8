"""
Contract repository.
"""
from typing import List, Optional

from isp_backoffice.models import Contract, Invoice
from isp_backoffice.repositories.base import SqlAlchemyRepository


class ContractRepository(SqlAlchemyRepository[Contract]):
    def __init__(self, session):
        super().__init__(session, Contract)

    def get_for_invoice_creation(self, contract_id: int) -> Optional[Contract]:
        """Contract whose validity window bounds a new invoice."""
        return self.get_by_id(contract_id)

    def list_invoices(self, contract_id: int) -> List[Invoice]:
        """Invoices issued on a contract, oldest first."""
        return (
            self.session.query(Invoice)
            .filter(Invoice.contract_id == contract_id)
            .order_by(Invoice.issue_date.asc(), Invoice.id.asc())
            .all()
        )

    def has_invoices(self, contract_id: int) -> bool:
        return (
            self.session.query(Invoice.id)
            .filter(Invoice.contract_id == contract_id)
            .first()
            is not None
        )
