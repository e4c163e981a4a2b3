# controllers/publication_controller.py
from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from pydantic.alias_generators import to_camel

from db.database import session_scope
from models.publication import Publication
from utils.errors import NotFound
from utils.validators import blank_to_none


class PublicationSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    journal_type: Optional[Literal["SCI", "Scopus"]] = None
    journal_name: str = Field(..., min_length=1, max_length=255)
    publisher: Optional[str] = Field(None, max_length=255)
    paper_title: str = Field(..., min_length=1, max_length=500)
    vol_no: Optional[str] = Field(None, max_length=50)
    doi: Optional[str] = Field(None, max_length=255)
    publication_date: Optional[date] = None
    impact_factor: Optional[float] = Field(None, ge=0)

    @field_validator("*", mode="before")
    @classmethod
    def empty_as_missing(cls, value):
        if isinstance(value, str):
            value = value.strip()
        return blank_to_none(value)


_publication_list = TypeAdapter(List[PublicationSchema])


def publication_to_dict(row: Publication):
    return {
        "id": row.id,
        "userId": row.user_id,
        "journalType": row.journal_type,
        "journalName": row.journal_name,
        "publisher": row.publisher,
        "paperTitle": row.paper_title,
        "volNo": row.vol_no,
        "doi": row.doi,
        "publicationDate": row.publication_date.isoformat() if row.publication_date else None,
        "impactFactor": row.impact_factor,
    }


def get_publications(user_id: int):
    with session_scope() as session:
        rows = (
            session.query(Publication)
            .filter(Publication.user_id == user_id)
            .order_by(Publication.id)
            .all()
        )
        return [publication_to_dict(r) for r in rows]


def save_publications(user_id: int, payload):
    """Replace the user's publications with payload['publications']."""
    if isinstance(payload, dict):
        payload = payload.get("publications", [])
    entries = _publication_list.validate_python(payload)

    with session_scope() as session:
        session.query(Publication).filter(Publication.user_id == user_id).delete()
        rows = [Publication(user_id=user_id, **entry.model_dump()) for entry in entries]
        session.add_all(rows)
        session.flush()
        return [publication_to_dict(r) for r in rows]


def update_publication(entry_id: int, payload: dict):
    validated = PublicationSchema.model_validate(payload).model_dump()

    with session_scope() as session:
        row = session.get(Publication, entry_id)
        if row is None:
            raise NotFound("Publication not found")
        for key, value in validated.items():
            setattr(row, key, value)
        return publication_to_dict(row)


def delete_publication(entry_id: int):
    with session_scope() as session:
        deleted = session.query(Publication).filter(Publication.id == entry_id).delete()
    if not deleted:
        raise NotFound("Publication not found")
