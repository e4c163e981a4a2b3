# app.py
from flask import Flask, jsonify
from flask_cors import CORS
from pydantic import ValidationError
from sqlalchemy import text
from werkzeug.exceptions import HTTPException

from config.config import Config
from db.database import init_db, auto_migrate, SessionLocal
from utils.email_service import init_mail
from utils.errors import AppError
from utils.logging_config import setup_logging
from routes.auth import bp as auth_bp
from routes.personal import bp as personal_bp
from routes.education import bp as education_bp
from routes.experience import bp as experience_bp
from routes.publications import bp as publications_bp
from routes.phd import bp as phd_bp
from routes.courses import bp as courses_bp, info_bp as user_info_bp
from routes.marks import bp as marks_bp
from routes.application import bp as application_bp

BLUEPRINTS = (
    auth_bp,
    personal_bp,
    education_bp,
    experience_bp,
    publications_bp,
    phd_bp,
    courses_bp,
    user_info_bp,
    marks_bp,
    application_bp,
)


def register_error_handlers(app):
    @app.errorhandler(AppError)
    def handle_app_error(err):
        if err.status_code >= 500:
            app.logger.error("%s: %s", err.message, err.detail)
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(ValidationError)
    def handle_validation_error(err):
        # Return pydantic validation errors in a simple format
        return jsonify({
            "message": "Validation failed",
            "detail": err.errors(include_url=False, include_context=False, include_input=False),
        }), 422

    @app.errorhandler(Exception)
    def handle_unexpected(err):
        if isinstance(err, HTTPException):
            return jsonify({"message": err.description}), err.code
        app.logger.exception("Unhandled error")
        return jsonify({"message": "Internal server error"}), 500


def create_app(overrides=None):
    app = Flask(__name__)

    # Load config values from Config
    app.config["DEBUG"] = Config.DEBUG
    app.config["MAX_CONTENT_LENGTH"] = Config.MAX_CONTENT_LENGTH
    app.config["LOG_LEVEL"] = Config.LOG_LEVEL
    app.config["LOG_DIR"] = Config.LOG_DIR
    app.config["FROM_EMAIL"] = Config.FROM_EMAIL
    app.config["ADMIN_EMAIL"] = Config.ADMIN_EMAIL
    app.config["NO_REPLY_EMAIL"] = Config.NO_REPLY_EMAIL

    # Flask-Mail config
    app.config["MAIL_SERVER"] = Config.MAIL_SERVER
    app.config["MAIL_PORT"] = Config.MAIL_PORT
    app.config["MAIL_USERNAME"] = Config.MAIL_USERNAME
    app.config["MAIL_PASSWORD"] = Config.MAIL_PASSWORD
    app.config["MAIL_USE_TLS"] = Config.MAIL_USE_TLS
    app.config["MAIL_USE_SSL"] = Config.MAIL_USE_SSL
    app.config["MAIL_DEFAULT_SENDER"] = Config.MAIL_DEFAULT_SENDER

    if overrides:
        app.config.update(overrides)

    setup_logging(app)

    # CORS
    CORS(app, origins=Config.ALLOWED_ORIGINS, supports_credentials=True)

    # Ensure DB schema exists and apply safe auto-migrations (adds missing tables/columns)
    try:
        auto_migrate()
    except Exception:
        app.logger.exception("auto_migrate failed, falling back to init_db()")
        init_db()

    # init mail (after overrides so TESTING suppresses sending)
    init_mail(app)

    for blueprint in BLUEPRINTS:
        app.register_blueprint(blueprint)

    register_error_handlers(app)

    @app.teardown_appcontext
    def remove_session(exc=None):
        SessionLocal.remove()

    @app.route("/", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/health/db", methods=["GET"])
    def health_db():
        """Simple DB health check endpoint.
        Returns 200 if DB is reachable and a basic select 1 works, otherwise returns 503.
        """
        from db.database import engine
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return jsonify({"db": "ok"})
        except Exception as e:
            app.logger.exception("DB health check failed: %s", e)
            return jsonify({"db": "error", "error": str(e)}), 503

    return app

if __name__ == "__main__":
    app = create_app()
    app.run(host=Config.APP_HOST, port=Config.APP_PORT, debug=Config.DEBUG)
