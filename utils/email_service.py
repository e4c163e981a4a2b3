# utils/email_service.py
import html
from threading import Thread

from flask import current_app
from flask_mail import Mail, Message

mail = Mail()

def init_mail(app):
    mail.init_app(app)

def _send_async_email(app, msg: Message):
    """Runs in a background thread. Logs success or the full exception."""
    with app.app_context():
        try:
            mail.send(msg)
            app.logger.info("Email sent to %s (subject=%s)", msg.recipients, msg.subject)
        except Exception:
            app.logger.exception("Failed to send email to %s (subject=%s)", msg.recipients, msg.subject)

def send_email_async(app, subject: str, recipients: list, html_body: str, text_body: str = None, sender: str = None, reply_to: str = None):
    """
    Fire-and-forget email using a thread.
    Returns the Thread object in case caller wants to join/check it in tests.
    """
    default_sender = (
        current_app.config.get("MAIL_DEFAULT_SENDER")
        or current_app.config.get("FROM_EMAIL")
        or current_app.config.get("NO_REPLY_EMAIL")
    )
    msg = Message(
        subject=subject,
        recipients=recipients,
        sender=sender or default_sender,
        reply_to=reply_to or current_app.config.get("NO_REPLY_EMAIL"),
    )
    if text_body:
        msg.body = text_body
    msg.html = html_body

    current_app.logger.debug(
        "Preparing email send: sender=%s reply_to=%s recipients=%s subject=%s",
        msg.sender, msg.reply_to, recipients, subject,
    )

    thr = Thread(target=_send_async_email, args=(current_app._get_current_object(), msg))
    thr.daemon = True
    thr.start()
    return thr


# ---- Message bodies ----
def registration_email(name: str):
    subject = "Faculty Recruitment Portal: registration received"
    text = (
        f"Dear {name},\n\n"
        "Your account on the faculty recruitment portal has been created.\n"
        "Sign in to complete the personal, education, experience, publication, "
        "PhD and course sections, then submit your application.\n\n"
        "Regards,\n"
        "Recruitment Cell\n"
    )
    body = f"""
    <html><body>
      <p>Dear {html.escape(name)},</p>
      <p>Your account on the <strong>faculty recruitment portal</strong> has been created.</p>
      <p>Sign in to complete the personal, education, experience, publication, PhD and course
      sections, then submit your application.</p>
      <p>Regards,<br/>Recruitment Cell</p>
    </body></html>
    """
    return subject, body, text


def submission_email(name: str, total_weight: float):
    subject = "Faculty Recruitment Portal: application submitted"
    text = (
        f"Dear {name},\n\n"
        "Your application has been submitted.\n"
        f"Eligibility weight computed from your record: {total_weight:g}\n\n"
        "Regards,\n"
        "Recruitment Cell\n"
    )
    body = f"""
    <html><body>
      <p>Dear {html.escape(name)},</p>
      <p>Your application has been submitted.</p>
      <p>Eligibility weight computed from your record: <strong>{total_weight:g}</strong></p>
      <p>Regards,<br/>Recruitment Cell</p>
    </body></html>
    """
    return subject, body, text


def admin_submission_email(name: str, email: str, total_weight: float):
    subject = f"New faculty application submitted: {name}"
    text = (
        "A candidate has submitted an application.\n\n"
        f"Name: {name}\n"
        f"Email: {email}\n"
        f"Total weight: {total_weight:g}\n"
    )
    body = f"""
    <html><body>
      <p>A candidate has submitted an application.</p>
      <table cellpadding="4" cellspacing="0" border="0">
        <tr><td><strong>Name:</strong></td><td>{html.escape(name)}</td></tr>
        <tr><td><strong>Email:</strong></td><td><a href="mailto:{html.escape(email)}">{html.escape(email)}</a></td></tr>
        <tr><td><strong>Total weight:</strong></td><td>{total_weight:g}</td></tr>
      </table>
    </body></html>
    """
    return subject, body, text
