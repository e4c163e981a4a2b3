# routes/phd.py
from flask import Blueprint, jsonify

from controllers.phd_controller import get_phd, upsert_phd, update_phd, delete_phd
from utils.request_utils import read_json

bp = Blueprint("phd", __name__, url_prefix="/api/phd")


@bp.route("/<int:user_id>", methods=["GET"])
def fetch(user_id):
    return jsonify(get_phd(user_id))


@bp.route("", methods=["POST"])
@bp.route("/", methods=["POST"])
def upsert():
    created = upsert_phd(read_json())
    return jsonify({"message": "PhD record saved successfully", "created": created}), 201 if created else 200


@bp.route("/<int:user_id>", methods=["PUT"])
def update(user_id):
    phd = update_phd(user_id, read_json())
    return jsonify({"message": "PhD record updated successfully", "phd": phd})


@bp.route("/<int:user_id>", methods=["DELETE"])
def delete(user_id):
    delete_phd(user_id)
    return jsonify({"message": "PhD record deleted successfully"})
