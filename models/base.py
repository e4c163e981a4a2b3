# models/base.py
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def row_to_dict(row, exclude=()):
    """Plain column -> value dict for a mapped row."""
    return {
        col.name: getattr(row, col.key)
        for col in row.__table__.columns
        if col.name not in exclude
    }
