from utils.email_service import mail, registration_email, send_email_async


def test_send_email_async_dispatches_in_background(app):
    subject, html_body, text_body = registration_email("Meena <R>")

    with app.app_context():
        with mail.record_messages() as outbox:
            thread = send_email_async(app, subject, ["meena@annauniv.edu"], html_body, text_body)
            thread.join(timeout=5)

    assert len(outbox) == 1
    message = outbox[0]
    assert message.recipients == ["meena@annauniv.edu"]
    assert message.sender == "noreply@recruitment.ac.in"
    assert "Meena &lt;R&gt;" in message.html
    assert "Meena <R>" in message.body
