# models/phd.py
from sqlalchemy import Column, Integer, String, Text

from models.base import Base

class Phd(Base):
    __tablename__ = "phd"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, unique=True, index=True)

    university = Column(String(255), nullable=False)
    title = Column(String(500), nullable=False)
    guide_name = Column(String(200), nullable=False)
    guide_college = Column(String(255), nullable=False)
    status = Column(String(30), nullable=False)
    year_of_registration = Column(Integer, nullable=False)
    year_of_completion = Column(Integer, nullable=True)  # only while Pursuing
    no_of_publications_during_phd = Column(Integer, nullable=False, default=0)
    no_of_publications_post_phd = Column(Integer, nullable=False, default=0)
    post_phd_experience = Column(Text, nullable=True)
