"""
JSON API for payments (append-only: no update, no delete).

GET  /api/payment
GET  /api/payment/<id>
POST /api/payment    {invoice_id, payment_date, amount}
"""

from __future__ import annotations

from flask import Blueprint, jsonify

from isp_backoffice.api.serializers import many, payment_to_dict
from isp_backoffice.api.utils import json_body
from isp_backoffice.services import payment_service
from isp_backoffice.services.dto import CreatePaymentRequest

api_payments_bp = Blueprint("api_payments", __name__)


@api_payments_bp.route("", methods=["GET"])
def api_list_payments():
    return jsonify(many(payment_to_dict, payment_service.list_payments()))


@api_payments_bp.route("/<int:payment_id>", methods=["GET"])
def api_get_payment(payment_id: int):
    return jsonify(payment_to_dict(payment_service.get_payment(payment_id)))


@api_payments_bp.route("", methods=["POST"])
def api_create_payment():
    """
    Records a payment on an invoice.

    404 if the invoice does not exist; 400 if the payment date precedes the
    issue date, the invoice is already paid or the amount exceeds the
    outstanding balance.
    """
    payload = CreatePaymentRequest.from_json(json_body())
    payment = payment_service.create_payment(payload)
    return jsonify(payment_to_dict(payment)), 201
