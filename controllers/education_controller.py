# controllers/education_controller.py
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from db.database import session_scope
from models.base import row_to_dict
from models.education import Education, EDUCATION_LEVELS, OPTIONAL_LEVELS, LEVEL_FIELDS
from utils.errors import NotFound, require_user_id
from utils.validators import blank_to_none, check_grade, check_year, parse_yes_no


# ---- Pydantic models ----
class LevelSchema(BaseModel):
    """One academic level (10th, 12th, UG, PG or M.Phil); every field required."""
    institution: str = Field(..., min_length=1, max_length=255)
    university: str = Field(..., min_length=1, max_length=255)
    medium: str = Field(..., min_length=1, max_length=50)
    specialization: str = Field(..., min_length=1, max_length=255)
    cgpa_percentage: str
    first_attempt: bool
    year: int

    @field_validator("*", mode="before")
    @classmethod
    def strip_text(cls, value):
        if isinstance(value, str):
            value = value.strip()
        return value

    @field_validator("cgpa_percentage", mode="before")
    @classmethod
    def valid_grade(cls, value):
        if blank_to_none(value) is None:
            raise ValueError("CGPA/Percentage is required")
        return check_grade(value)

    @field_validator("first_attempt", mode="before")
    @classmethod
    def yes_no(cls, value):
        if blank_to_none(value) is None:
            raise ValueError("Please select Yes/No")
        return parse_yes_no(value)

    @field_validator("year", mode="before")
    @classmethod
    def valid_year(cls, value):
        if blank_to_none(value) is None:
            raise ValueError("Year of completion is required")
        return check_year(value, earliest=1950, label="Year")


class EducationSchema(BaseModel):
    """
    Accepts the flat column layout the client posts (tenth_institution,
    ug_cgpa_percentage, ...) and groups it per level. The four core levels are
    mandatory; M.Phil is either complete or absent.
    """
    tenth: LevelSchema
    twelfth: LevelSchema
    ug: LevelSchema
    pg: LevelSchema
    mphil: Optional[LevelSchema] = None
    pg_degree: Optional[str] = Field(None, max_length=50)

    @model_validator(mode="before")
    @classmethod
    def group_levels(cls, values):
        if not isinstance(values, dict):
            return values
        grouped = {"pg_degree": blank_to_none(values.get("pg_degree"))}
        for level in EDUCATION_LEVELS + OPTIONAL_LEVELS:
            if isinstance(values.get(level), dict):
                grouped[level] = values[level]
                continue
            fields = {f: blank_to_none(values.get(f"{level}_{f}")) for f in LEVEL_FIELDS}
            if level in OPTIONAL_LEVELS and all(v is None for v in fields.values()):
                grouped[level] = None
            else:
                grouped[level] = fields
        return grouped

    def to_columns(self) -> dict:
        columns = {"pg_degree": self.pg_degree}
        for level in EDUCATION_LEVELS + OPTIONAL_LEVELS:
            record = getattr(self, level)
            for f in LEVEL_FIELDS:
                columns[f"{level}_{f}"] = getattr(record, f) if record is not None else None
        return columns


def education_to_dict(row: Education):
    return row_to_dict(row, exclude=("updated_at",))


# ---- Controller ----
def get_education(user_id: int):
    """Stored record, or an empty dict when the user has not filled it in."""
    with session_scope() as session:
        row = session.query(Education).filter(Education.user_id == user_id).first()
        return education_to_dict(row) if row is not None else {}


def upsert_education(payload: dict):
    """Insert or update the single education row keyed by payload['user_id']."""
    user_id = require_user_id(payload)
    columns = EducationSchema.model_validate(payload).to_columns()

    with session_scope() as session:
        row = session.query(Education).filter(Education.user_id == user_id).first()
        created = row is None
        if created:
            row = Education(user_id=user_id)
            session.add(row)
        for key, value in columns.items():
            setattr(row, key, value)
    return created


def update_education(record_id: int, payload: dict):
    columns = EducationSchema.model_validate(payload).to_columns()

    with session_scope() as session:
        row = session.get(Education, record_id)
        if row is None:
            raise NotFound("Education record not found")
        for key, value in columns.items():
            setattr(row, key, value)
        return education_to_dict(row)


def delete_education(user_id: int):
    with session_scope() as session:
        deleted = session.query(Education).filter(Education.user_id == user_id).delete()
    if not deleted:
        raise NotFound("Education record not found")
