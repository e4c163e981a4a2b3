# controllers/experience_controller.py
from datetime import date
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator
from pydantic.alias_generators import to_camel

from db.database import session_scope
from models.experience import Experience
from utils.errors import NotFound


class ExperienceSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    experience_type: Literal["Teaching", "Industry"]
    organization: str = Field(..., min_length=1, max_length=255)
    post_held: str = Field(..., min_length=1, max_length=200)
    salary_drawn: float = Field(..., ge=0)
    from_date: date
    to_date: date

    @field_validator("organization", "post_held", mode="before")
    @classmethod
    def strip_text(cls, value):
        return value.strip() if isinstance(value, str) else value

    @model_validator(mode="after")
    def dates_in_order(self):
        if self.to_date < self.from_date:
            raise ValueError("To date cannot be before from date")
        return self


_experience_list = TypeAdapter(List[ExperienceSchema])


def experience_to_dict(row: Experience):
    return {
        "id": row.id,
        "userId": row.user_id,
        "experienceType": row.experience_type,
        "organization": row.organization,
        "postHeld": row.post_held,
        "salaryDrawn": row.salary_drawn,
        "fromDate": row.from_date.isoformat() if row.from_date else None,
        "toDate": row.to_date.isoformat() if row.to_date else None,
    }


def get_experiences(user_id: int):
    with session_scope() as session:
        rows = (
            session.query(Experience)
            .filter(Experience.user_id == user_id)
            .order_by(Experience.from_date, Experience.id)
            .all()
        )
        return [experience_to_dict(r) for r in rows]


def save_experiences(user_id: int, payload):
    """
    Replace the user's experience list with `payload` (the whole list the
    form holds, edited and unedited entries alike).
    """
    if isinstance(payload, dict):
        payload = payload.get("experiences", [])
    entries = _experience_list.validate_python(payload)

    with session_scope() as session:
        session.query(Experience).filter(Experience.user_id == user_id).delete()
        rows = [Experience(user_id=user_id, **entry.model_dump()) for entry in entries]
        session.add_all(rows)
        session.flush()
        return [experience_to_dict(r) for r in rows]


def update_experience(entry_id: int, payload: dict):
    validated = ExperienceSchema.model_validate(payload).model_dump()

    with session_scope() as session:
        row = session.get(Experience, entry_id)
        if row is None:
            raise NotFound("Experience entry not found")
        for key, value in validated.items():
            setattr(row, key, value)
        return experience_to_dict(row)


def delete_experience(entry_id: int):
    with session_scope() as session:
        deleted = session.query(Experience).filter(Experience.id == entry_id).delete()
    if not deleted:
        raise NotFound("Experience entry not found")
