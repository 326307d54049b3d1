"""Flask REST API exposing the expense ledger services."""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request
from flask_cors import CORS

from ledger.exceptions import InvalidRangeError, ValidationError
from ledger.scheduler import SummaryScheduler
from ledger.services import ExpenseService

_FALSEY = {"0", "false", "no", "off"}


def _scheduler_enabled(explicit: Optional[bool]) -> bool:
    if explicit is not None:
        return explicit
    return os.getenv("EXPENSE_LEDGER_SCHEDULER", "1").strip().lower() not in _FALSEY


def create_app(
    service: Optional[ExpenseService] = None,
    *,
    enable_scheduler: Optional[bool] = None,
) -> Flask:
    app = Flask(__name__)
    # Aggregation maps are keyed in first-seen order; keep it on the wire.
    app.json.sort_keys = False

    env_name = os.getenv("EXPENSE_LEDGER_ENV", "prod").lower()
    if env_name in {"dev", "development"}:
        CORS(app, resources={r"/*": {"origins": "*"}}, supports_credentials=True)
    else:
        allowed_origins = os.getenv("EXPENSE_LEDGER_ALLOWED_ORIGINS")
        if allowed_origins:
            origins = [origin.strip() for origin in allowed_origins.split(",") if origin.strip()]
            CORS(app, resources={r"/*": {"origins": origins}}, supports_credentials=True)
        else:
            CORS(app)

    expense_service = service or ExpenseService()
    scheduler = SummaryScheduler(expense_service)
    if _scheduler_enabled(enable_scheduler):
        scheduler.start()
    app.extensions["expense_ledger"] = {"service": expense_service, "scheduler": scheduler}

    def _success(payload: Any, status: int = 200):
        return jsonify({"status": "success", "data": payload, "error": None}), status

    def _handle_error(exc: Exception, status: int, message: str):
        app.logger.error("%s: %s", message, exc)
        body = {"status": "error", "data": None, "error": message, "details": str(exc)}
        return jsonify(body), status

    @app.errorhandler(ValidationError)
    def handle_validation_error(exc: ValidationError):
        return _handle_error(exc, 400, "Invalid expense data")

    @app.errorhandler(InvalidRangeError)
    def handle_invalid_range(exc: InvalidRangeError):
        return _handle_error(exc, 400, "Invalid date range")

    def _json_body() -> Dict[str, Any]:
        if not request.is_json:
            raise ValidationError("Request content must be application/json")
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise ValidationError("Malformed JSON body")
        return data

    def _filters() -> Dict[str, Optional[str]]:
        return {
            "category": request.args.get("category"),
            "start_date": request.args.get("startDate"),
            "end_date": request.args.get("endDate"),
        }

    @app.get("/categories")
    def list_categories():
        return _success(list(expense_service.categories()))

    @app.post("/expenses")
    def create_expense():
        payload = _json_body()
        expense = expense_service.create_expense(payload)
        return _success(expense.to_dict(), 201)

    @app.get("/expenses")
    def list_expenses():
        expenses = expense_service.list_expenses(**_filters())
        return _success([expense.to_dict() for expense in expenses])

    @app.get("/expenses/analysis")
    def analyze_expenses():
        analysis = expense_service.analyze(**_filters())
        return _success(analysis.to_dict())

    return app
