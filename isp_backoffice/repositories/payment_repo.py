"""
Payment repository.
Inherits add, get and list from SqlAlchemyRepository.
"""
from isp_backoffice.models import Payment
from isp_backoffice.repositories.base import SqlAlchemyRepository


class PaymentRepository(SqlAlchemyRepository[Payment]):
    def __init__(self, session):
        super().__init__(session, Payment)
