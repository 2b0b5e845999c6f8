"""
Services for contracts.

Creation order: customer reference, subscription reference, date rules,
insert. Re-dating a contract is checked against the same date rules and
must keep every existing invoice inside the new period.
"""
from __future__ import annotations

from typing import List

from isp_backoffice.errors import NotFound
from isp_backoffice.models import Contract, Invoice
from isp_backoffice.services import validation
from isp_backoffice.services.business_rules import (
    check_contract_covers_invoices,
    check_contract_dates,
    delete_restricted,
    raise_first,
)
from isp_backoffice.services.dto import CreateContractRequest, UpdateContractRequest
from isp_backoffice.services.logging import log_structured_event
from isp_backoffice.services.unit_of_work import UnitOfWork


def _get_or_404(uow: UnitOfWork, contract_id: int) -> Contract:
    contract = uow.contracts.get_by_id(contract_id)
    if contract is None:
        raise NotFound("Contract", contract_id)
    return contract


def list_contracts() -> List[Contract]:
    with UnitOfWork() as uow:
        return uow.contracts.list_all()


def get_contract(contract_id: int) -> Contract:
    with UnitOfWork() as uow:
        return _get_or_404(uow, contract_id)


def create_contract(request: CreateContractRequest) -> Contract:
    """
    Creates a contract after checking both references and the date rules.

    Raises ReferenceNotFound for a missing customer (checked first) or
    subscription, BusinessRuleViolation for inconsistent dates.
    """
    with UnitOfWork() as uow:
        validation.require_customer(uow, request.customer_id)
        validation.require_subscription(uow, request.subscription_id)

        raise_first(
            check_contract_dates(
                request.start_date,
                request.end_date,
                now=validation.utcnow(),
                enforce_future_dates=validation.future_dates_enforced(),
            )
        )

        contract = uow.contracts.create(request.to_fields())
        uow.commit()

    log_structured_event(
        "create_contract",
        contract_id=contract.id,
        customer_id=contract.customer_id,
        subscription_id=contract.subscription_id,
    )
    return contract


def update_contract(contract_id: int, request: UpdateContractRequest) -> Contract:
    with UnitOfWork() as uow:
        contract = _get_or_404(uow, contract_id)

        raise_first(
            check_contract_dates(
                request.start_date,
                request.end_date,
                now=validation.utcnow(),
                enforce_future_dates=validation.future_dates_enforced(),
            )
            + check_contract_covers_invoices(
                request.start_date,
                request.end_date,
                uow.contracts.list_invoices(contract_id),
            )
        )

        uow.contracts.update(contract, request.to_fields())
        uow.commit()

    log_structured_event("update_contract", contract_id=contract_id)
    return contract


def delete_contract(contract_id: int) -> None:
    with UnitOfWork() as uow:
        contract = _get_or_404(uow, contract_id)
        if uow.contracts.has_invoices(contract_id):
            raise delete_restricted("Contract", contract_id, "invoices")
        uow.contracts.delete(contract)
        uow.commit()

    log_structured_event("delete_contract", contract_id=contract_id)


def list_contract_invoices(contract_id: int) -> List[Invoice]:
    with UnitOfWork() as uow:
        _get_or_404(uow, contract_id)
        return uow.contracts.list_invoices(contract_id)
