# utils/errors.py
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError


class AppError(Exception):
    """Base class for errors a route turns into a JSON response."""
    status_code = 500

    def __init__(self, message: str, detail: str = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_dict(self):
        body = {"message": self.message}
        if self.detail:
            body["error"] = self.detail
        return body


class BadRequest(AppError):
    status_code = 400


class NotFound(AppError):
    status_code = 404


class Conflict(AppError):
    status_code = 409


class Unauthorized(AppError):
    status_code = 401


class StorageError(AppError):
    """A database failure, tagged with the stage that failed."""
    status_code = 500


@contextmanager
def storage_stage(message: str):
    """
    Re-raise any SQLAlchemy failure inside the block as StorageError(message).

        with storage_stage("Error fetching education data"):
            row = session.query(Education)...
    """
    try:
        yield
    except SQLAlchemyError as exc:
        raise StorageError(message, detail=str(exc.__cause__ or exc)) from exc


def require_user_id(payload: dict) -> int:
    """user_id carried in a JSON body, as posted by the education and PhD forms."""
    value = payload.get("user_id")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise BadRequest("user_id is required")
