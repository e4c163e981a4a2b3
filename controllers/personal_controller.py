# controllers/personal_controller.py
import base64
from datetime import date
from typing import Optional, Literal

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from db.database import session_scope
from models.personal import Personal
from utils.errors import BadRequest, NotFound
from utils.validators import blank_to_none

ALLOWED_PHOTO_TYPES = {"image/jpeg", "image/png", "image/webp"}


class PersonalSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    full_name: str = Field(..., min_length=1, max_length=200)
    reference_number: Optional[str] = Field(None, max_length=100)
    date_of_birth: Optional[date] = None
    age: Optional[int] = Field(None, ge=0, le=120)
    gender: Optional[Literal["Male", "Female", "Other"]] = None
    communication_address: Optional[str] = None
    permanent_address: Optional[str] = None
    religion: Optional[str] = Field(None, max_length=100)
    community: Optional[str] = Field(None, max_length=100)
    caste: Optional[str] = Field(None, max_length=100)
    email: Optional[EmailStr] = None
    mobile_number: Optional[str] = Field(None, min_length=10, max_length=20)
    post: Optional[str] = Field(None, max_length=200)
    department: Optional[str] = Field(None, max_length=200)
    applied_date: Optional[date] = None

    @field_validator("*", mode="before")
    @classmethod
    def empty_as_missing(cls, value):
        return blank_to_none(value)


def personal_to_dict(row: Personal):
    data = {}
    for name in PersonalSchema.model_fields:
        value = getattr(row, name)
        data[to_camel(name)] = value.isoformat() if isinstance(value, date) else value
    data["userId"] = row.user_id
    data["photo"] = base64.b64encode(row.photo).decode("ascii") if row.photo else None
    data["photoMimetype"] = row.photo_mimetype
    return data


def save_personal(user_id: int, form: dict, photo=None):
    """
    Upsert the personal record. `photo` is a werkzeug FileStorage or None;
    without a new upload the stored photo is kept.
    """
    # the client echoes the base64 photo back in the form; never trust it
    form = form.to_dict() if hasattr(form, "to_dict") else dict(form)
    fields = {k: v for k, v in form.items() if k not in ("photo", "photoMimetype", "userId")}
    validated = PersonalSchema.model_validate(fields).model_dump()

    photo_bytes = None
    if photo is not None and photo.filename:
        if photo.mimetype not in ALLOWED_PHOTO_TYPES:
            raise BadRequest(f"Unsupported photo type: {photo.mimetype}")
        photo_bytes = photo.read()

    with session_scope() as session:
        row = session.query(Personal).filter(Personal.user_id == user_id).first()
        created = row is None
        if created:
            row = Personal(user_id=user_id)
            session.add(row)
        for key, value in validated.items():
            setattr(row, key, value)
        if photo_bytes:
            row.photo = photo_bytes
            row.photo_mimetype = photo.mimetype
    return created


def get_personal(user_id: int):
    with session_scope() as session:
        row = session.query(Personal).filter(Personal.user_id == user_id).first()
        if row is None:
            raise NotFound("No personal data found")
        return personal_to_dict(row)


def delete_personal(user_id: int):
    with session_scope() as session:
        deleted = session.query(Personal).filter(Personal.user_id == user_id).delete()
    if not deleted:
        raise NotFound("No personal data found")
