# routes/marks.py
from flask import Blueprint, jsonify

from controllers.marks_controller import calculate_user_marks, get_user_marks

bp = Blueprint("marks", __name__, url_prefix="/api/marks")


@bp.route("/<int:user_id>", methods=["GET"])
def fetch(user_id):
    return jsonify(get_user_marks(user_id))


@bp.route("/calculate/<int:user_id>", methods=["POST"])
def calculate(user_id):
    weights, created = calculate_user_marks(user_id)
    message = "Marks calculated successfully" if created else "Marks updated successfully"
    return jsonify({"message": message, "weights": weights.to_api()})
