# models/course.py
from sqlalchemy import Column, Integer, String, Text

from models.base import Base

class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)

    course_name = Column(String(255), nullable=False)
    platform = Column(String(100), nullable=False, default="NPTEL")
    duration = Column(String(20), nullable=False, default="4 weeks")
    score_earned = Column(String(20), nullable=True)


class AdditionalInfo(Base):
    """Family / reference / awards block saved next to the course list."""
    __tablename__ = "user_info"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, unique=True, index=True)

    family = Column(Text, nullable=True)
    reference = Column(Text, nullable=True)
    any_other_info = Column(Text, nullable=True)
    awards_details = Column(Text, nullable=True)
    no_of_awards = Column(Integer, nullable=False, default=0)
