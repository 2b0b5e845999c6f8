"""
JSON API for contracts.

GET    /api/contract
GET    /api/contract/<id>
POST   /api/contract              {customer_id, subscription_id, start_date, end_date}
PUT    /api/contract/<id>         {start_date, end_date}
DELETE /api/contract/<id>
GET    /api/contract/<id>/invoice
"""

from __future__ import annotations

from flask import Blueprint, jsonify

from isp_backoffice.api.serializers import contract_to_dict, invoice_to_dict, many
from isp_backoffice.api.utils import json_body
from isp_backoffice.services import contract_service
from isp_backoffice.services.dto import CreateContractRequest, UpdateContractRequest

api_contracts_bp = Blueprint("api_contracts", __name__)


@api_contracts_bp.route("", methods=["GET"])
def api_list_contracts():
    return jsonify(many(contract_to_dict, contract_service.list_contracts()))


@api_contracts_bp.route("/<int:contract_id>", methods=["GET"])
def api_get_contract(contract_id: int):
    return jsonify(contract_to_dict(contract_service.get_contract(contract_id)))


@api_contracts_bp.route("", methods=["POST"])
def api_create_contract():
    """
    Creates a contract.

    404 if the customer or the subscription does not exist (customer checked
    first), 400 if the dates are inconsistent.
    """
    payload = CreateContractRequest.from_json(json_body())
    contract = contract_service.create_contract(payload)
    return jsonify(contract_to_dict(contract)), 201


@api_contracts_bp.route("/<int:contract_id>", methods=["PUT"])
def api_update_contract(contract_id: int):
    payload = UpdateContractRequest.from_json(json_body())
    contract = contract_service.update_contract(contract_id, payload)
    return jsonify(contract_to_dict(contract))


@api_contracts_bp.route("/<int:contract_id>", methods=["DELETE"])
def api_delete_contract(contract_id: int):
    contract_service.delete_contract(contract_id)
    return "", 204


@api_contracts_bp.route("/<int:contract_id>/invoice", methods=["GET"])
def api_list_contract_invoices(contract_id: int):
    invoices = contract_service.list_contract_invoices(contract_id)
    return jsonify(many(invoice_to_dict, invoices))
