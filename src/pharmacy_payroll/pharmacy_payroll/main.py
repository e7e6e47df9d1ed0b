from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .core.exceptions import DomainError, ValidationError
from .payroll.controller import register as register_payroll

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        container = build_container(
            db_config=db_config,
            rate_url=getattr(settings, "EXCHANGE_RATE_URL"),
            rate_timeout=float(getattr(settings, "EXCHANGE_RATE_TIMEOUT")),
            fallback_rate=float(getattr(settings, "FALLBACK_EXCHANGE_RATE")),
        )

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        status = 400 if isinstance(e, ValidationError) else 500
        if status == 500:
            logger.error("domain error: %s", e)
        return jsonify({"success": False, "message": str(e)}), status

    register_attendance(app, container)
    register_payroll(app, container)

    return app
