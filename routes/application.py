# routes/application.py
from flask import Blueprint, jsonify, current_app

from controllers.application_controller import submit_application

bp = Blueprint("application", __name__, url_prefix="/api/application")


@bp.route("/<int:user_id>/submit", methods=["POST"])
def submit(user_id):
    user, weights = submit_application(user_id, current_app)
    current_app.logger.info("Application submitted by user %s", user_id)
    return jsonify({
        "message": "Application submitted successfully",
        "user": user,
        "weights": weights.to_api(),
    })
