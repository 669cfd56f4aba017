# expense_backend/auth.py
import logging
import sqlite3

from flask import Blueprint, jsonify, request
from flask_jwt_extended import create_access_token, get_jwt_identity, jwt_required
from werkzeug.security import check_password_hash, generate_password_hash

from . import store
from .errors import RecordNotFound, ValidationError
from .validation import require_json

logger = logging.getLogger("expense-backend")

auth_bp = Blueprint("auth", __name__)


def current_owner_id():
    """Owner id carried by the request's access token."""
    return int(get_jwt_identity())


@auth_bp.route("/register", methods=["POST"])
def register():
    data = require_json(request.get_json(silent=True))
    username = (data.get("username") or "").strip()
    email = (data.get("email") or "").strip().lower()
    password = data.get("password") or ""
    confirm = data.get("confirm_password", data.get("confirmPassword"))

    if not username or not email or not password:
        raise ValidationError("username, email and password are required")
    if password != confirm:
        raise ValidationError("Passwords do not match.")
    if store.find_user_by_email(email):
        raise ValidationError("Email already registered. Please use another email.")
    if store.find_user_by_username(username):
        raise ValidationError("Username already taken.")

    try:
        user_id = store.create_user(username, email, generate_password_hash(password))
    except sqlite3.IntegrityError:
        raise ValidationError("Username or email already registered.")

    logger.info(f"Registered user {user_id} ({username})")
    return jsonify({"msg": "Registration Successful", "user_id": user_id}), 201


@auth_bp.route("/login", methods=["POST"])
def login():
    data = require_json(request.get_json(silent=True))
    username = (data.get("username") or "").strip()
    password = data.get("password") or ""

    user = store.find_user_by_username(username)
    if not user or not check_password_hash(user.password_hash, password):
        logger.warning(f"Failed login for {username!r}")
        return jsonify({"msg": "Invalid username or password"}), 401

    token = create_access_token(identity=str(user.id))
    return jsonify({"access_token": token, "username": user.username})


@auth_bp.route("/profile", methods=["GET"])
@jwt_required()
def profile():
    user = store.get_user(current_owner_id())
    if not user:
        raise RecordNotFound("User not found.")
    return jsonify({"username": user.username, "email": user.email})
