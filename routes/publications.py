# routes/publications.py
from flask import Blueprint, jsonify

from controllers.publication_controller import (
    get_publications, save_publications, update_publication, delete_publication,
)
from utils.request_utils import read_json

bp = Blueprint("publications", __name__, url_prefix="/api/publications")


@bp.route("/<int:user_id>", methods=["GET"])
def fetch(user_id):
    return jsonify(get_publications(user_id))


@bp.route("/<int:user_id>", methods=["POST"])
def save(user_id):
    publications = save_publications(user_id, read_json(expect=(list, dict)))
    return jsonify({"message": "Publications saved successfully", "publications": publications})


@bp.route("/entry/<int:entry_id>", methods=["PUT"])
def update(entry_id):
    publication = update_publication(entry_id, read_json())
    return jsonify({"message": "Publication updated successfully", "publication": publication})


@bp.route("/entry/<int:entry_id>", methods=["DELETE"])
def delete(entry_id):
    delete_publication(entry_id)
    return jsonify({"message": "Publication deleted successfully"})
