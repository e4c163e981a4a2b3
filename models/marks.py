# models/marks.py
from sqlalchemy import Column, Integer, Float, DateTime
from datetime import datetime

from models.base import Base

class Marks(Base):
    __tablename__ = "marks"

    id = Column(Integer, primary_key=True, index=True)
    # one row per user; the unique constraint backs the upsert
    user_id = Column(Integer, nullable=False, unique=True, index=True)

    medium_weight = Column(Float, nullable=False, default=0)
    hsc_weight = Column(Float, nullable=False, default=0)
    ug_degree_weight = Column(Float, nullable=False, default=0)
    pg_degree_weight = Column(Float, nullable=False, default=0)
    mphil_weight = Column(Float, nullable=False, default=0)
    ug_first_attempt_weight = Column(Float, nullable=False, default=0)
    pg_first_attempt_weight = Column(Float, nullable=False, default=0)
    experience_weight = Column(Float, nullable=False, default=0)
    publications_weight = Column(Float, nullable=False, default=0)
    total_weight = Column(Float, nullable=False, default=0)

    calculated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
