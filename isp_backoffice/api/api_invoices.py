"""
JSON API for invoices.

GET    /api/invoice
GET    /api/invoice/<id>
POST   /api/invoice               {contract_id, issue_date, due_date, amount}
PUT    /api/invoice/<id>          {issue_date, due_date, amount}
DELETE /api/invoice/<id>
GET    /api/invoice/<id>/payment
"""

from __future__ import annotations

from flask import Blueprint, jsonify

from isp_backoffice.api.serializers import invoice_to_dict, many, payment_to_dict
from isp_backoffice.api.utils import json_body
from isp_backoffice.services import invoice_service
from isp_backoffice.services.dto import CreateInvoiceRequest, UpdateInvoiceRequest

api_invoices_bp = Blueprint("api_invoices", __name__)


@api_invoices_bp.route("", methods=["GET"])
def api_list_invoices():
    return jsonify(many(invoice_to_dict, invoice_service.list_invoices()))


@api_invoices_bp.route("/<int:invoice_id>", methods=["GET"])
def api_get_invoice(invoice_id: int):
    return jsonify(invoice_to_dict(invoice_service.get_invoice(invoice_id)))


@api_invoices_bp.route("", methods=["POST"])
def api_create_invoice():
    """
    Creates an UNPAID invoice.

    404 if the contract does not exist, 400 if the billing period is not
    contained in the contract period.
    """
    payload = CreateInvoiceRequest.from_json(json_body())
    invoice = invoice_service.create_invoice(payload)
    return jsonify(invoice_to_dict(invoice)), 201


@api_invoices_bp.route("/<int:invoice_id>", methods=["PUT"])
def api_update_invoice(invoice_id: int):
    payload = UpdateInvoiceRequest.from_json(json_body())
    invoice = invoice_service.update_invoice(invoice_id, payload)
    return jsonify(invoice_to_dict(invoice))


@api_invoices_bp.route("/<int:invoice_id>", methods=["DELETE"])
def api_delete_invoice(invoice_id: int):
    invoice_service.delete_invoice(invoice_id)
    return "", 204


@api_invoices_bp.route("/<int:invoice_id>/payment", methods=["GET"])
def api_list_invoice_payments(invoice_id: int):
    payments = invoice_service.list_invoice_payments(invoice_id)
    return jsonify(many(payment_to_dict, payments))
