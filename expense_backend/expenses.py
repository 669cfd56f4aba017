# expense_backend/expenses.py

import logging
from datetime import date

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import jwt_required

from . import store
from .auth import current_owner_id
from .budget import REFUSAL_MESSAGE, OwnerLocks, check_admission
from .categories import accepted_categories
from .datekeys import parse_date_input
from .filters import filter_by_category, filter_by_owner_and_range
from .validation import (
    expense_from_payload,
    expense_patch_from_payload,
    savings_from_payload,
)

logger = logging.getLogger("expense-backend")

bp = Blueprint("expenses", __name__)

admission_locks = OwnerLocks()


def _accepted():
    return accepted_categories(current_app.config.get("EXPENSE_CATEGORIES"))


@bp.route("/expenses", methods=["GET"])
@jwt_required()
def list_expenses():
    owner_id = current_owner_id()
    expenses = store.list_expenses(owner_id)

    start, end = request.args.get("start"), request.args.get("end")
    if start or end:
        expenses = filter_by_owner_and_range(
            expenses,
            owner_id,
            parse_date_input(start) if start else None,
            parse_date_input(end) if end else None,
        )
    expenses = filter_by_category(expenses, request.args.get("category"))
    return jsonify([e.to_dict() for e in expenses])


@bp.route("/expenses", methods=["POST"])
@jwt_required()
def add_expense():
    owner_id = current_owner_id()
    record = expense_from_payload(owner_id, request.get_json(silent=True), _accepted())

    with admission_locks.hold(owner_id):
        check = check_admission(
            record.amount,
            store.list_expenses(owner_id),
            store.list_savings(owner_id),
            owner_id,
            date.today(),
            current_app.config.get("BUDGET_EXPENSE_SCOPE", "all_time"),
        )
        if not check.admitted:
            return jsonify({"msg": REFUSAL_MESSAGE, "budget": check.to_dict()}), 409
        saved = store.insert(record)

    logger.info(f"Expense {saved.id} added for user {owner_id}: {saved.amount} {saved.category}")
    return jsonify(saved.to_dict()), 201


@bp.route("/expenses/<int:expense_id>", methods=["PUT"])
@jwt_required()
def update_expense(expense_id):
    owner_id = current_owner_id()
    patch = expense_patch_from_payload(request.get_json(silent=True), _accepted())
    updated = store.update_by_id(expense_id, owner_id, patch)
    logger.info(f"Expense {expense_id} updated for user {owner_id}: {sorted(patch)}")
    return jsonify(updated.to_dict())


@bp.route("/expenses/<int:expense_id>", methods=["DELETE"])
@jwt_required()
def delete_expense(expense_id):
    owner_id = current_owner_id()
    store.delete_by_id(expense_id, owner_id)
    logger.info(f"Expense {expense_id} deleted for user {owner_id}")
    return jsonify({"msg": "deleted", "id": expense_id})


@bp.route("/savings", methods=["GET"])
@jwt_required()
def list_savings():
    return jsonify([s.to_dict() for s in store.list_savings(current_owner_id())])


@bp.route("/savings", methods=["POST"])
@jwt_required()
def add_savings():
    owner_id = current_owner_id()
    saved = store.insert(savings_from_payload(owner_id, request.get_json(silent=True)))
    logger.info(f"Savings {saved.id} added for user {owner_id}: {saved.amount}")
    return jsonify(saved.to_dict()), 201
