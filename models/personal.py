# models/personal.py
from sqlalchemy import Column, Integer, String, Date, Text, LargeBinary, DateTime
from datetime import datetime

from models.base import Base

class Personal(Base):
    __tablename__ = "personal"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, unique=True, index=True)

    full_name = Column(String(200), nullable=False)
    reference_number = Column(String(100), nullable=True)
    date_of_birth = Column(Date, nullable=True)
    age = Column(Integer, nullable=True)
    gender = Column(String(20), nullable=True)
    communication_address = Column(Text, nullable=True)
    permanent_address = Column(Text, nullable=True)
    religion = Column(String(100), nullable=True)
    community = Column(String(100), nullable=True)
    caste = Column(String(100), nullable=True)
    email = Column(String(255), nullable=True)
    mobile_number = Column(String(20), nullable=True)
    post = Column(String(200), nullable=True)
    department = Column(String(200), nullable=True)
    applied_date = Column(Date, nullable=True)

    # raw image bytes as uploaded
    photo = Column(LargeBinary(length=16 * 1024 * 1024), nullable=True)
    photo_mimetype = Column(String(100), nullable=True)

    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
