#!/usr/bin/env python3
"""
Entry point for the ISP back-office Flask application.

Usage:
    python manage.py runserver   # Start the development server
    python manage.py create-db   # Create the database tables
    python manage.py seed-db     # Insert a small demo data set
"""

import argparse
import logging
import os
from datetime import datetime, timedelta
from decimal import Decimal

from sqlalchemy.exc import OperationalError as SAOperationalError
from pymysql.err import OperationalError as MySQLOperationalError

from isp_backoffice import create_app
from isp_backoffice.errors import BackofficeError
from isp_backoffice.extensions import db
from config import DevConfig

# ---------------------------------------------------------------------
# CLI logger (outside the Flask context)
# ---------------------------------------------------------------------
cli_logger = logging.getLogger("manage_cli")
cli_logger.setLevel(logging.INFO)

if not cli_logger.handlers:
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(levelname)s: %(name)s: %(message)s")
    )
    cli_logger.addHandler(handler)


# ---------------------------------------------------------------------
# Utility
# ---------------------------------------------------------------------
def _import_all_models() -> None:
    """Makes sure every model is registered before create_all()."""
    import isp_backoffice.models  # noqa: F401


# ---------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------
def create_db(app) -> None:
    """Creates every table defined by the SQLAlchemy models."""
    with app.app_context():
        cli_logger.info("Creating all database tables...")
        try:
            _import_all_models()
            db.create_all()
            cli_logger.info("Database created.")
        except (SAOperationalError, MySQLOperationalError) as e:
            cli_logger.error("MySQL connection or permission error: %s", e)
            cli_logger.info(
                "Check that MySQL is running and that user '%s' can access '%s'.",
                app.config.get("DB_USER"),
                app.config.get("DB_NAME"),
            )


def seed_db(app) -> None:
    """Inserts one customer with a running contract and an open invoice."""
    from isp_backoffice.services import (
        contract_service,
        customer_service,
        invoice_service,
        subscription_service,
    )
    from isp_backoffice.services.dto import (
        CreateContractRequest,
        CreateInvoiceRequest,
        CustomerRequest,
        SubscriptionRequest,
    )

    start = datetime.utcnow().replace(microsecond=0) + timedelta(days=1)

    with app.app_context():
        try:
            customer = customer_service.create_customer(
                CustomerRequest(
                    name="jdoe",
                    fullname="John Doe",
                    address="1 Main Street",
                    phone="+40712345678",
                    cnp="1900101123456",
                )
            )
            subscription = subscription_service.create_subscription(
                SubscriptionRequest(
                    description="Fiber 1000",
                    subscription_type="FIXED_INTERNET",
                    traffic=1000,
                    price=Decimal("49.90"),
                    extra_traffic_price=Decimal("0"),
                )
            )
            contract = contract_service.create_contract(
                CreateContractRequest(
                    customer_id=customer.id,
                    subscription_id=subscription.id,
                    start_date=start,
                    end_date=start + timedelta(days=365),
                )
            )
            invoice = invoice_service.create_invoice(
                CreateInvoiceRequest(
                    contract_id=contract.id,
                    issue_date=start,
                    due_date=start + timedelta(days=30),
                    amount=Decimal("49.90"),
                )
            )
        except BackofficeError as e:
            cli_logger.error("Seeding failed: %s", e.message)
            return

        cli_logger.info(
            "Seeded customer %s, contract %s, invoice %s.",
            customer.id,
            contract.id,
            invoice.id,
        )


def run_server(app) -> None:
    """Starts the Flask development server."""
    host = os.environ.get("FLASK_RUN_HOST", "0.0.0.0")
    port = int(os.environ.get("FLASK_RUN_PORT", "8000"))
    debug = app.config.get("DEBUG", False)

    app.logger.info("Starting server on http://%s:%s", host, port)
    app.run(host=host, port=port, debug=debug)


# ---------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------
def main() -> None:
    parser = argparse.ArgumentParser(
        description="Management commands for the ISP back-office application."
    )
    parser.add_argument(
        "command",
        choices=["runserver", "create-db", "seed-db"],
        help="Command to run.",
    )

    args = parser.parse_args()

    app = create_app(DevConfig)

    if args.command == "runserver":
        run_server(app)
    elif args.command == "create-db":
        create_db(app)
    elif args.command == "seed-db":
        seed_db(app)


if __name__ == "__main__":
    main()
