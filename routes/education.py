# routes/education.py
from flask import Blueprint, jsonify

from controllers.education_controller import (
    get_education, upsert_education, update_education, delete_education,
)
from utils.request_utils import read_json

bp = Blueprint("education", __name__, url_prefix="/api/education")


@bp.route("/<int:user_id>", methods=["GET"])
def fetch(user_id):
    return jsonify(get_education(user_id))


@bp.route("", methods=["POST"])
@bp.route("/", methods=["POST"])
def upsert():
    created = upsert_education(read_json())
    return jsonify({"message": "Education record inserted/updated successfully", "created": created})


@bp.route("/<int:record_id>", methods=["PUT"])
def update(record_id):
    education = update_education(record_id, read_json())
    return jsonify({"message": "Education record updated successfully", "education": education})


@bp.route("/<int:user_id>", methods=["DELETE"])
def delete(user_id):
    delete_education(user_id)
    return jsonify({"message": "Education record deleted successfully"})
