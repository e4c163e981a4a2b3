# controllers/course_controller.py
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

from db.database import session_scope
from models.course import Course, AdditionalInfo
from utils.errors import NotFound
from utils.validators import blank_to_none


class CourseSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    course_name: str = Field(..., min_length=1, max_length=255)
    platform: str = Field("NPTEL", max_length=100)
    duration: Literal["4 weeks", "8 weeks", "12 weeks", "16 weeks", "20 weeks"] = "4 weeks"
    score_earned: Optional[str] = Field(None, max_length=20)

    @field_validator("course_name", "platform", "score_earned", mode="before")
    @classmethod
    def strip_text(cls, value):
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            value = str(value)
        return value.strip() if isinstance(value, str) else value

    @field_validator("platform", mode="before")
    @classmethod
    def default_platform(cls, value):
        return value or "NPTEL"


class AdditionalInfoSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    family: Optional[str] = None
    reference: Optional[str] = None
    any_other_info: Optional[str] = None
    awards_details: Optional[str] = None
    no_of_awards: int = Field(0, ge=0)

    @field_validator("family", "reference", "any_other_info", "awards_details", mode="before")
    @classmethod
    def empty_as_missing(cls, value):
        return blank_to_none(value)

    @field_validator("no_of_awards", mode="before")
    @classmethod
    def default_awards(cls, value):
        return 0 if blank_to_none(value) is None else value


_course_list = TypeAdapter(List[CourseSchema])


def course_to_dict(row: Course):
    return {
        "courseId": row.id,
        "id": str(row.id),
        "courseName": row.course_name,
        "platform": row.platform,
        "duration": row.duration,
        "scoreEarned": row.score_earned,
    }


def info_to_dict(row: AdditionalInfo):
    return {
        "user_id": row.user_id,
        "family": row.family,
        "reference": row.reference,
        "any_other_info": row.any_other_info,
        "awards_details": row.awards_details,
        "no_of_awards": row.no_of_awards,
    }


# ---- Courses ----
def get_courses(user_id: int):
    with session_scope() as session:
        rows = session.query(Course).filter(Course.user_id == user_id).order_by(Course.id).all()
        return [course_to_dict(r) for r in rows]


def save_courses(user_id: int, payload):
    """Replace the user's course list with payload['courses']."""
    if isinstance(payload, dict):
        payload = payload.get("courses", [])
    entries = _course_list.validate_python(payload)

    with session_scope() as session:
        session.query(Course).filter(Course.user_id == user_id).delete()
        rows = [Course(user_id=user_id, **entry.model_dump()) for entry in entries]
        session.add_all(rows)
        session.flush()
        return [course_to_dict(r) for r in rows]


def delete_course(course_id: int):
    with session_scope() as session:
        deleted = session.query(Course).filter(Course.id == course_id).delete()
    if not deleted:
        raise NotFound("Course not found")


# ---- Additional info ----
def get_additional_info(user_id: int):
    with session_scope() as session:
        row = session.query(AdditionalInfo).filter(AdditionalInfo.user_id == user_id).first()
        if row is None:
            raise NotFound("No additional information found")
        return info_to_dict(row)


def save_additional_info(user_id: int, payload: dict):
    validated = AdditionalInfoSchema.model_validate(payload).model_dump()

    with session_scope() as session:
        row = session.query(AdditionalInfo).filter(AdditionalInfo.user_id == user_id).first()
        created = row is None
        if created:
            row = AdditionalInfo(user_id=user_id)
            session.add(row)
        for key, value in validated.items():
            setattr(row, key, value)
        session.flush()
        return info_to_dict(row), created
