"""FinLedger application factory."""

from __future__ import annotations

from importlib import import_module
from typing import Iterable

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException, InternalServerError

from . import cli as _cli
from .config import BaseConfig, DevConfig, TestConfig
from .errors import FinLedgerError
from .extensions import init_db
from .logging_config import get_logger, setup_logging

_CONFIG_MAP = {
    "development": DevConfig,
    "testing": TestConfig,
    "default": BaseConfig,
}

logger = get_logger(__name__)


def _resolve_config(name: str | None) -> type[BaseConfig]:
    """Return the config class for the provided environment name."""

    if not name:
        return BaseConfig
    return _CONFIG_MAP.get(name.lower(), BaseConfig)


def _blueprint_paths() -> Iterable[str]:
    """Yield blueprint import paths served by the JSON API."""

    yield "finledger.blueprints.income"
    yield "finledger.blueprints.expenses"
    yield "finledger.blueprints.budgets"
    yield "finledger.blueprints.analysis"
    yield "finledger.blueprints.entrepreneurship"
    yield "finledger.blueprints.loan"
    yield "finledger.blueprints.catalog"


def create_app(config_name: str | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__, instance_relative_config=True)
    config_cls = _resolve_config(config_name)
    config_obj = config_cls()
    app.config.from_object(config_obj)
    app.config["FINLEDGER_CONFIG"] = config_obj

    setup_logging(config_obj)
    _register_blueprints(app)
    _register_error_handlers(app)

    init_db(app)
    _cli.init_app(app)
    return app


def _register_blueprints(app: Flask) -> None:
    """Import and register all blueprints declared in `_blueprint_paths`."""

    for dotted_path in _blueprint_paths():
        module = import_module(dotted_path)
        blueprint = getattr(module, "bp")
        app.register_blueprint(blueprint)


def _register_error_handlers(app: Flask) -> None:
    """Render domain and HTTP errors as JSON bodies."""

    @app.errorhandler(FinLedgerError)
    def handle_domain_error(exc: FinLedgerError):
        logger.warning(
            "Request rejected",
            extra={"error_code": exc.error_code, "status": exc.status_code, "reason": exc.message},
        )
        return jsonify(exc.payload()), exc.status_code

    @app.errorhandler(InternalServerError)
    def handle_server_error(exc: InternalServerError):
        original = getattr(exc, "original_exception", None) or exc
        logger.error("Unhandled request error", exc_info=original)
        return jsonify({"error": "Internal server error"}), 500

    @app.errorhandler(HTTPException)
    def handle_http_error(exc: HTTPException):
        return jsonify({"error": exc.description or exc.name}), exc.code


__all__ = ["BaseConfig", "DevConfig", "TestConfig", "create_app"]
