# controllers/phd_controller.py
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from db.database import session_scope
from models.base import row_to_dict
from models.phd import Phd
from utils.errors import NotFound, require_user_id
from utils.validators import blank_to_none, check_year


class PhdSchema(BaseModel):
    university: str = Field(..., min_length=1, max_length=255)
    title: str = Field(..., min_length=1, max_length=500)
    guide_name: str = Field(..., min_length=1, max_length=200)
    guide_college: str = Field(..., min_length=1, max_length=255)
    status: Literal["Pursuing", "Thesis submitted", "Viva voce completed", "Degree Awarded"]
    year_of_registration: int
    year_of_completion: Optional[int] = None
    no_of_publications_during_phd: int = Field(..., ge=0)
    no_of_publications_post_phd: int = Field(..., ge=0)
    post_phd_experience: str = Field(..., min_length=1)

    @field_validator("*", mode="before")
    @classmethod
    def empty_as_missing(cls, value):
        if isinstance(value, str):
            value = value.strip()
        return blank_to_none(value)

    @field_validator("year_of_registration", "year_of_completion", mode="before")
    @classmethod
    def valid_year(cls, value):
        return check_year(value, earliest=1900)

    @model_validator(mode="after")
    def completion_matches_status(self):
        if self.year_of_completion is None:
            if self.status != "Pursuing":
                raise ValueError("Completion year is required unless the PhD is being pursued")
        elif self.year_of_completion < self.year_of_registration:
            raise ValueError("Completion year cannot be before registration year")
        return self


def get_phd(user_id: int):
    """List of zero or one row; the client reads the first element."""
    with session_scope() as session:
        row = session.query(Phd).filter(Phd.user_id == user_id).first()
        return [row_to_dict(row)] if row is not None else []


def upsert_phd(payload: dict, user_id: Optional[int] = None):
    if user_id is None:
        user_id = require_user_id(payload)
    validated = PhdSchema.model_validate(payload).model_dump()

    with session_scope() as session:
        row = session.query(Phd).filter(Phd.user_id == user_id).first()
        created = row is None
        if created:
            row = Phd(user_id=user_id)
            session.add(row)
        for key, value in validated.items():
            setattr(row, key, value)
    return created


def update_phd(user_id: int, payload: dict):
    validated = PhdSchema.model_validate(payload).model_dump()

    with session_scope() as session:
        row = session.query(Phd).filter(Phd.user_id == user_id).first()
        if row is None:
            raise NotFound("PhD record not found")
        for key, value in validated.items():
            setattr(row, key, value)
        return row_to_dict(row)


def delete_phd(user_id: int):
    with session_scope() as session:
        deleted = session.query(Phd).filter(Phd.user_id == user_id).delete()
    if not deleted:
        raise NotFound("PhD record not found")
