# controllers/application_controller.py
from db.database import session_scope
from models.user import User
from controllers.auth_controller import user_to_dict
from controllers.marks_controller import calculate_user_marks
from utils.email_service import send_email_async, submission_email, admin_submission_email


def submit_application(user_id: int, flask_app):
    """
    Final submission: recalculate marks and flag the user as submitted in one
    transaction, then enqueue the confirmation email.
    Returns (user dict, WeightBreakdown).
    """
    weights, _ = calculate_user_marks(user_id, submit=True)

    with session_scope() as session:
        user_data = user_to_dict(session.get(User, user_id))

    subject, html_body, text_body = submission_email(user_data["name"], weights.total_weight)
    admin_email = flask_app.config.get("ADMIN_EMAIL")
    try:
        send_email_async(flask_app, subject, [user_data["email"]], html_body, text_body)
        if admin_email:
            admin_subject, admin_html, admin_text = admin_submission_email(
                user_data["name"], user_data["email"], weights.total_weight
            )
            send_email_async(flask_app, admin_subject, [admin_email], admin_html, admin_text)
    except Exception:
        flask_app.logger.exception("Failed to enqueue submission email for user %s", user_id)

    return user_data, weights
