"""
JSON API for subscriptions.

GET    /api/subscription
GET    /api/subscription/<id>
POST   /api/subscription
PUT    /api/subscription/<id>
DELETE /api/subscription/<id>
"""

from __future__ import annotations

from flask import Blueprint, jsonify

from isp_backoffice.api.serializers import many, subscription_to_dict
from isp_backoffice.api.utils import json_body
from isp_backoffice.services import subscription_service
from isp_backoffice.services.dto import SubscriptionRequest

api_subscriptions_bp = Blueprint("api_subscriptions", __name__)


@api_subscriptions_bp.route("", methods=["GET"])
def api_list_subscriptions():
    return jsonify(many(subscription_to_dict, subscription_service.list_subscriptions()))


@api_subscriptions_bp.route("/<int:subscription_id>", methods=["GET"])
def api_get_subscription(subscription_id: int):
    subscription = subscription_service.get_subscription(subscription_id)
    return jsonify(subscription_to_dict(subscription))


@api_subscriptions_bp.route("", methods=["POST"])
def api_create_subscription():
    payload = SubscriptionRequest.from_json(json_body())
    subscription = subscription_service.create_subscription(payload)
    return jsonify(subscription_to_dict(subscription)), 201


@api_subscriptions_bp.route("/<int:subscription_id>", methods=["PUT"])
def api_update_subscription(subscription_id: int):
    payload = SubscriptionRequest.from_json(json_body())
    subscription = subscription_service.update_subscription(subscription_id, payload)
    return jsonify(subscription_to_dict(subscription))


@api_subscriptions_bp.route("/<int:subscription_id>", methods=["DELETE"])
def api_delete_subscription(subscription_id: int):
    subscription_service.delete_subscription(subscription_id)
    return "", 204
