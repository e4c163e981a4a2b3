# controllers/auth_controller.py
from pydantic import BaseModel, EmailStr, Field, field_validator
from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash, check_password_hash

from db.database import SessionLocal
from models.user import User
from utils.email_service import send_email_async, registration_email
from utils.errors import Conflict, Unauthorized


# ---- Pydantic models ----
class RegisterSchema(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value):
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value


class LoginSchema(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


def user_to_dict(user: User):
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "formsubmitted": bool(user.form_submitted),
    }


# ---- DB helpers ----
def save_user(payload: dict):
    """
    Save a new user. Raises Conflict if the email is already registered.
    """
    session = SessionLocal()
    try:
        existing = session.query(User).filter(User.email == payload["email"]).first()
        if existing:
            raise Conflict("Email already registered")

        user = User(
            name=payload["name"],
            email=payload["email"],
            password_hash=generate_password_hash(payload["password"]),
            form_submitted=False,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user_to_dict(user)
    except IntegrityError:
        session.rollback()
        raise Conflict("Email already registered")
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


# ---- Main controller ----
def register_user(payload: dict, flask_app):
    """
    Validates payload, saves user, enqueues the welcome email.
    May raise pydantic.ValidationError on invalid input.
    """
    validated = RegisterSchema(**payload).model_dump()
    user = save_user(validated)

    subject, html_body, text_body = registration_email(user["name"])
    try:
        send_email_async(flask_app, subject, [user["email"]], html_body, text_body)
    except Exception:
        flask_app.logger.exception("Failed to enqueue registration email")

    return user


def login_user(payload: dict):
    credentials = LoginSchema(**payload)

    session = SessionLocal()
    try:
        user = session.query(User).filter(User.email == credentials.email).first()
        if user is None or not check_password_hash(user.password_hash, credentials.password):
            raise Unauthorized("Invalid credentials")
        return user_to_dict(user)
    finally:
        session.close()
