# models/__init__.py
from models.base import Base, row_to_dict
from models.user import User
from models.personal import Personal
from models.education import Education
from models.experience import Experience
from models.publication import Publication
from models.phd import Phd
from models.course import Course, AdditionalInfo
from models.marks import Marks

__all__ = [
    "Base",
    "row_to_dict",
    "User",
    "Personal",
    "Education",
    "Experience",
    "Publication",
    "Phd",
    "Course",
    "AdditionalInfo",
    "Marks",
]
