"""
JSON API for customers.

GET    /api/customer
GET    /api/customer/<id>
POST   /api/customer
PUT    /api/customer/<id>
DELETE /api/customer/<id>
GET    /api/customer/<id>/invoice    unpaid invoices of the customer
GET    /api/customer/<id>/contract   contracts of the customer
"""

from __future__ import annotations

from flask import Blueprint, jsonify

from isp_backoffice.api.serializers import (
    contract_to_dict,
    customer_to_dict,
    invoice_to_dict,
    many,
)
from isp_backoffice.api.utils import json_body
from isp_backoffice.services import customer_service
from isp_backoffice.services.dto import CustomerRequest

api_customers_bp = Blueprint("api_customers", __name__)


@api_customers_bp.route("", methods=["GET"])
def api_list_customers():
    return jsonify(many(customer_to_dict, customer_service.list_customers()))


@api_customers_bp.route("/<int:customer_id>", methods=["GET"])
def api_get_customer(customer_id: int):
    return jsonify(customer_to_dict(customer_service.get_customer(customer_id)))


@api_customers_bp.route("", methods=["POST"])
def api_create_customer():
    payload = CustomerRequest.from_json(json_body())
    customer = customer_service.create_customer(payload)
    return jsonify(customer_to_dict(customer)), 201


@api_customers_bp.route("/<int:customer_id>", methods=["PUT"])
def api_update_customer(customer_id: int):
    payload = CustomerRequest.from_json(json_body())
    customer = customer_service.update_customer(customer_id, payload)
    return jsonify(customer_to_dict(customer))


@api_customers_bp.route("/<int:customer_id>", methods=["DELETE"])
def api_delete_customer(customer_id: int):
    customer_service.delete_customer(customer_id)
    return "", 204


@api_customers_bp.route("/<int:customer_id>/invoice", methods=["GET"])
def api_list_customer_unpaid_invoices(customer_id: int):
    invoices = customer_service.list_customer_unpaid_invoices(customer_id)
    return jsonify(many(invoice_to_dict, invoices))


@api_customers_bp.route("/<int:customer_id>/contract", methods=["GET"])
def api_list_customer_contracts(customer_id: int):
    contracts = customer_service.list_customer_contracts(customer_id)
    return jsonify(many(contract_to_dict, contracts))
