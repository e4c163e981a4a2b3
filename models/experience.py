# models/experience.py
from sqlalchemy import Column, Integer, String, Date, Float

from models.base import Base

class Experience(Base):
    __tablename__ = "experience"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)

    experience_type = Column(String(20), nullable=False)  # Teaching / Industry
    organization = Column(String(255), nullable=False)
    post_held = Column(String(200), nullable=False)
    salary_drawn = Column(Float, nullable=False)
    from_date = Column(Date, nullable=False)
    to_date = Column(Date, nullable=False)
