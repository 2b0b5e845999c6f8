"""
Quick start of the Flask app with a single command:

    python run_app.py

Uses the create_app() factory and the development configuration.
"""

from __future__ import annotations

import os

from isp_backoffice import create_app
from config import DevConfig


def main() -> None:
    app = create_app(DevConfig)
    host = os.environ.get("FLASK_RUN_HOST", "0.0.0.0")
    port = int(os.environ.get("FLASK_RUN_PORT", "8000"))

    app.logger.info("Starting the application from run_app.py", extra={"component": "launcher"})
    app.run(host=host, port=port, debug=app.config.get("DEBUG", False))


if __name__ == "__main__":
    main()
