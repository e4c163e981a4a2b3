# routes/experience.py
from flask import Blueprint, jsonify

from controllers.experience_controller import (
    get_experiences, save_experiences, update_experience, delete_experience,
)
from utils.request_utils import read_json

bp = Blueprint("experience", __name__, url_prefix="/api/experience")


@bp.route("/<int:user_id>", methods=["GET"])
def fetch(user_id):
    return jsonify(get_experiences(user_id))


@bp.route("/<int:user_id>", methods=["POST"])
def save(user_id):
    experiences = save_experiences(user_id, read_json(expect=(list, dict)))
    return jsonify({"message": "Experience Saved", "experiences": experiences})


@bp.route("/entry/<int:entry_id>", methods=["PUT"])
def update(entry_id):
    experience = update_experience(entry_id, read_json())
    return jsonify({"message": "Experience updated successfully", "experience": experience})


@bp.route("/entry/<int:entry_id>", methods=["DELETE"])
def delete(entry_id):
    delete_experience(entry_id)
    return jsonify({"message": "Experience deleted successfully"})
