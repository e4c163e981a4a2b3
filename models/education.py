# models/education.py
from sqlalchemy import Column, Integer, String, Boolean, DateTime
from datetime import datetime

from models.base import Base

EDUCATION_LEVELS = ("tenth", "twelfth", "ug", "pg")
OPTIONAL_LEVELS = ("mphil",)
LEVEL_FIELDS = (
    "institution",
    "university",
    "medium",
    "specialization",
    "cgpa_percentage",
    "first_attempt",
    "year",
)


class Education(Base):
    """One pivoted row per user: every level's fields side by side."""
    __tablename__ = "user_education"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, unique=True, index=True)

    tenth_institution = Column(String(255))
    tenth_university = Column(String(255))
    tenth_medium = Column(String(50))
    tenth_specialization = Column(String(255))
    tenth_cgpa_percentage = Column(String(10))
    tenth_first_attempt = Column(Boolean)
    tenth_year = Column(Integer)

    twelfth_institution = Column(String(255))
    twelfth_university = Column(String(255))
    twelfth_medium = Column(String(50))
    twelfth_specialization = Column(String(255))
    twelfth_cgpa_percentage = Column(String(10))
    twelfth_first_attempt = Column(Boolean)
    twelfth_year = Column(Integer)

    ug_institution = Column(String(255))
    ug_university = Column(String(255))
    ug_medium = Column(String(50))
    ug_specialization = Column(String(255))
    ug_cgpa_percentage = Column(String(10))
    ug_first_attempt = Column(Boolean)
    ug_year = Column(Integer)

    pg_degree = Column(String(50))
    pg_institution = Column(String(255))
    pg_university = Column(String(255))
    pg_medium = Column(String(50))
    pg_specialization = Column(String(255))
    pg_cgpa_percentage = Column(String(10))
    pg_first_attempt = Column(Boolean)
    pg_year = Column(Integer)

    mphil_institution = Column(String(255))
    mphil_university = Column(String(255))
    mphil_medium = Column(String(50))
    mphil_specialization = Column(String(255))
    mphil_cgpa_percentage = Column(String(10))
    mphil_first_attempt = Column(Boolean)
    mphil_year = Column(Integer)

    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
