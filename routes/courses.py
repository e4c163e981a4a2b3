# routes/courses.py
from flask import Blueprint, jsonify

from controllers.course_controller import (
    get_courses, save_courses, delete_course, get_additional_info, save_additional_info,
)
from utils.request_utils import read_json

bp = Blueprint("courses", __name__, url_prefix="/api/courses")
info_bp = Blueprint("user_info", __name__, url_prefix="/api/user-info")


@bp.route("/<int:user_id>", methods=["GET"])
def fetch(user_id):
    return jsonify(get_courses(user_id))


@bp.route("/<int:user_id>", methods=["POST"])
def save(user_id):
    courses = save_courses(user_id, read_json(expect=(list, dict)))
    return jsonify({"message": "Courses saved successfully", "courses": courses})


@bp.route("/entry/<int:course_id>", methods=["DELETE"])
def delete(course_id):
    delete_course(course_id)
    return jsonify({"message": "Course deleted successfully"})


@info_bp.route("/<int:user_id>", methods=["GET"])
def fetch_info(user_id):
    return jsonify(get_additional_info(user_id))


@info_bp.route("/<int:user_id>", methods=["POST"])
def save_info(user_id):
    info, _ = save_additional_info(user_id, read_json())
    return jsonify({"message": "Additional information saved successfully", "info": info})
