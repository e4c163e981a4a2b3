# models/publication.py
from sqlalchemy import Column, Integer, String, Date, Float

from models.base import Base

class Publication(Base):
    __tablename__ = "publications"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)

    journal_type = Column(String(20), nullable=True)  # SCI / Scopus
    journal_name = Column(String(255), nullable=False)
    publisher = Column(String(255), nullable=True)
    paper_title = Column(String(500), nullable=False)
    vol_no = Column(String(50), nullable=True)
    doi = Column(String(255), nullable=True)
    publication_date = Column(Date, nullable=True)
    impact_factor = Column(Float, nullable=True)
