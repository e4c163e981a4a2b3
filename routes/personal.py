# routes/personal.py
from flask import Blueprint, request, jsonify

from controllers.personal_controller import save_personal, get_personal, delete_personal

bp = Blueprint("personal", __name__, url_prefix="/api/personal")


@bp.route("/<int:user_id>", methods=["POST"])
def save(user_id):
    # multipart form (photo upload); plain JSON is accepted as well
    form = request.form if request.form else (request.get_json(silent=True) or {})
    save_personal(user_id, form, request.files.get("photo"))
    return jsonify({"message": "Personal Data Saved/Updated"})


@bp.route("/<int:user_id>", methods=["GET"])
def fetch(user_id):
    return jsonify(get_personal(user_id))


@bp.route("/<int:user_id>", methods=["DELETE"])
def delete(user_id):
    delete_personal(user_id)
    return jsonify({"message": "Personal data deleted successfully"})
