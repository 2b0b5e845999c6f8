"""
Main package of the ISP back-office Flask application.
"""

from flask import Flask, jsonify
from config import DevConfig
from .extensions import init_extensions


def create_app(config_class=DevConfig) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_class)
    # Keep the field order of the serializers in responses
    app.json.sort_keys = False
    init_extensions(app)

    from .api import register_error_handlers
    register_error_handlers(app)

    _register_blueprints(app)

    app.logger.info("Flask application initialised.")

    @app.route("/health")
    def healthcheck():
        return jsonify({"status": "ok"}), 200

    return app


def _register_blueprints(app: Flask) -> None:
    from .api import (
        api_customers_bp,
        api_subscriptions_bp,
        api_contracts_bp,
        api_invoices_bp,
        api_payments_bp,
    )

    app.register_blueprint(api_customers_bp, url_prefix="/api/customer")
    app.register_blueprint(api_subscriptions_bp, url_prefix="/api/subscription")
    app.register_blueprint(api_contracts_bp, url_prefix="/api/contract")
    app.register_blueprint(api_invoices_bp, url_prefix="/api/invoice")
    app.register_blueprint(api_payments_bp, url_prefix="/api/payment")
