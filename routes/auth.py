# routes/auth.py
from flask import Blueprint, jsonify, current_app

from controllers.auth_controller import register_user, login_user
from utils.request_utils import read_json

bp = Blueprint("auth", __name__, url_prefix="/api/auth")


@bp.route("/register", methods=["POST"])
def register():
    user = register_user(read_json(), current_app)
    current_app.logger.info("Registered user %s", user["id"])
    return jsonify({**user, "message": "Registered successfully"}), 201


@bp.route("/login", methods=["POST"])
def login():
    user = login_user(read_json())
    return jsonify({"message": "Login successful", "user": user})
