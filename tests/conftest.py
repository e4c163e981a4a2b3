import os
import tempfile

# Point the app at a throwaway SQLite file before anything imports the engine
_db_fd, _db_path = tempfile.mkstemp(suffix=".db")
os.close(_db_fd)
os.environ["DATABASE_URL"] = f"sqlite:///{_db_path}"
os.environ.pop("LOG_DIR", None)

import pytest

from app import create_app
from db.database import engine
from models import Base


@pytest.fixture
def app():
    app = create_app({
        "TESTING": True,
        "MAIL_DEFAULT_SENDER": "noreply@recruitment.ac.in",
    })
    yield app
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture
def client(app):
    return app.test_client()


def level(prefix, **overrides):
    fields = {
        f"{prefix}_institution": f"{prefix.upper()} Institution",
        f"{prefix}_university": "Anna University",
        f"{prefix}_medium": "English",
        f"{prefix}_specialization": "Science",
        f"{prefix}_cgpa_percentage": "80",
        f"{prefix}_first_attempt": "yes",
        f"{prefix}_year": "2010",
    }
    fields.update({f"{prefix}_{k}": v for k, v in overrides.items()})
    return fields


@pytest.fixture
def education_payload():
    def build(user_id, mphil=False, **overrides):
        payload = {"user_id": user_id, "pg_degree": "M.Sc"}
        payload.update(level("tenth", year="2008"))
        payload.update(level("twelfth", year="2010"))
        payload.update(level("ug", year="2013", specialization="Physics"))
        payload.update(level("pg", year="2015", specialization="Physics"))
        if mphil:
            payload.update(level("mphil", year="2016", specialization="Physics"))
        payload.update(overrides)
        return payload
    return build


@pytest.fixture
def experience_entry():
    def build(**overrides):
        entry = {
            "experienceType": "Teaching",
            "organization": "PSG College of Technology",
            "postHeld": "Assistant Professor",
            "salaryDrawn": "45000",
            "fromDate": "2016-06-01",
            "toDate": "2019-05-31",
        }
        entry.update(overrides)
        return entry
    return build


@pytest.fixture
def publication_entry():
    def build(**overrides):
        entry = {
            "journalType": "SCI",
            "journalName": "Journal of Applied Physics",
            "publisher": "AIP",
            "paperTitle": "Thin film growth kinetics",
            "volNo": "12",
            "doi": "10.1063/1.0000001",
            "publicationDate": "2018-03-15",
            "impactFactor": "2.7",
        }
        entry.update(overrides)
        return entry
    return build
