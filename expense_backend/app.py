# expense_backend/app.py

import logging
import sqlite3
from datetime import date

from flask import Flask, jsonify, request
from flask_cors import CORS
from flask_jwt_extended import JWTManager, jwt_required

from . import db, store
from .auth import auth_bp, current_owner_id
from .categories import accepted_categories, describe
from .config import Config
from .errors import ExpenseTrackerError, ValidationError
from .expenses import bp as expenses_bp
from .summaries import dashboard_summary, today_summary, window_summary

# ---------------- Configuration ----------------
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("expense-backend")

MAX_WINDOW_DAYS = 366
NAMED_WINDOWS = {"comparison": 3, "week": 7, "last30days": 30}


def parse_window_length(raw):
    try:
        length = int(raw)
    except (TypeError, ValueError):
        raise ValidationError("days must be a whole number")
    if not 1 <= length <= MAX_WINDOW_DAYS:
        raise ValidationError(f"days must be between 1 and {MAX_WINDOW_DAYS}")
    return length


# ---------------- Flask App Factory ----------------
def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))

    jwt = JWTManager(app)

    @jwt.unauthorized_loader
    def missing_token(reason):
        return jsonify({"msg": "Unauthorized: Please log in first.", "detail": reason}), 401

    @jwt.invalid_token_loader
    def invalid_token(reason):
        return jsonify({"msg": "Unauthorized: invalid token.", "detail": reason}), 401

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        return jsonify({"msg": "Unauthorized: token expired, please log in again."}), 401

    # CORS
    CORS(app, resources={r"/*": {"origins": app.config["CORS_ORIGINS"]}}, supports_credentials=True)

    # Blueprints
    app.register_blueprint(auth_bp, url_prefix='/auth')
    app.register_blueprint(expenses_bp)

    # Initialize DB
    db.init_db(app.config["DATABASE"])
    logger.info(f"Database initialized at {app.config['DATABASE']}")

    app.teardown_appcontext(db.close_db)

    # ---------------- Errors ----------------
    @app.errorhandler(ExpenseTrackerError)
    def handle_client_error(e):
        if e.status_code == 404:
            logger.warning(f"{request.method} {request.path}: {e.message}")
        return jsonify({"msg": e.message}), e.status_code

    @app.errorhandler(sqlite3.Error)
    def handle_store_error(e):
        logger.exception(f"Store failure on {request.method} {request.path}")
        return jsonify({"msg": "Internal server error"}), 500

    # ---------------- Core Endpoints ----------------
    @app.route('/')
    def root():
        return jsonify({"msg": "Expense tracker backend root"})

    @app.route('/health')
    def health():
        return jsonify({"status": "ok"})

    @app.route('/categories')
    def categories():
        accepted = accepted_categories(app.config.get("EXPENSE_CATEGORIES"))
        return jsonify({"categories": describe(accepted)})

    # ---------------- Reports ----------------
    @app.route('/reports/today', methods=['GET'])
    @jwt_required()
    def report_today():
        owner_id = current_owner_id()
        user = store.get_user(owner_id)
        summary = today_summary(
            store.list_expenses(owner_id),
            owner_id,
            user.username if user else None,
            date.today(),
        )
        return jsonify(summary)

    @app.route('/reports/monthly', methods=['GET'])
    @jwt_required()
    def report_monthly():
        owner_id = current_owner_id()
        summary = dashboard_summary(
            store.list_expenses(owner_id),
            store.list_savings(owner_id),
            owner_id,
            date.today(),
        )
        return jsonify(summary)

    @app.route('/reports/<any(comparison, week, last30days):window>', methods=['GET'])
    @jwt_required()
    def report_named_window(window):
        owner_id = current_owner_id()
        series = window_summary(store.list_expenses(owner_id), owner_id, date.today(), NAMED_WINDOWS[window])
        return jsonify(series.to_dict())

    @app.route('/reports/window', methods=['GET'])
    @jwt_required()
    def report_window():
        owner_id = current_owner_id()
        length = parse_window_length(request.args.get('days', 7))
        series = window_summary(store.list_expenses(owner_id), owner_id, date.today(), length)
        return jsonify(series.to_dict())

    return app
