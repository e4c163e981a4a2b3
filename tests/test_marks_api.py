import gc
import threading

import pytest
from sqlalchemy.exc import OperationalError

import controllers.marks_controller as marks_controller
from db.database import session_scope
from models.education import Education
from models.experience import Experience
from models.marks import Marks
from models.phd import Phd
from models.publication import Publication


def seed_candidate(client, education_payload, experience_entry, publication_entry, user_id=1):
    payload = education_payload(
        user_id,
        mphil=True,
        tenth_medium="english",
        twelfth_medium="english",
        twelfth_cgpa_percentage="97",
        ug_cgpa_percentage="92",
        pg_cgpa_percentage="85",
        mphil_year="2020",
    )
    assert client.post("/api/education", json=payload).status_code == 200
    resp = client.post(f"/api/experience/{user_id}", json=[experience_entry() for _ in range(3)])
    assert resp.status_code == 200
    resp = client.post(
        f"/api/publications/{user_id}",
        json={"publications": [publication_entry(), publication_entry(paperTitle="Second paper")]},
    )
    assert resp.status_code == 200


def marks_rows(user_id):
    with session_scope() as session:
        return session.query(Marks).filter(Marks.user_id == user_id).count()


def test_calculate_reference_candidate(client, education_payload, experience_entry, publication_entry):
    seed_candidate(client, education_payload, experience_entry, publication_entry)

    resp = client.post("/api/marks/calculate/1")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["message"] == "Marks calculated successfully"
    assert body["weights"] == {
        "mediumWeight": 5,
        "hscWeight": 5,
        "ugDegreeWeight": 10,
        "pgDegreeWeight": 12.5,
        "mphilWeight": 5,
        "ugFirstAttemptWeight": 5,
        "pgFirstAttemptWeight": 5,
        "experienceWeight": 6,
        "publicationsWeight": 3,
        "totalWeight": 56.5,
    }


def test_stored_marks_use_snake_case(client, education_payload, experience_entry, publication_entry):
    seed_candidate(client, education_payload, experience_entry, publication_entry)
    client.post("/api/marks/calculate/1")

    resp = client.get("/api/marks/1")

    assert resp.status_code == 200
    row = resp.get_json()
    assert row["user_id"] == 1
    assert row["experience_weight"] == 6
    assert row["total_weight"] == 56.5


def test_recalculation_updates_in_place(client, education_payload, experience_entry, publication_entry):
    seed_candidate(client, education_payload, experience_entry, publication_entry)

    first = client.post("/api/marks/calculate/1").get_json()
    second = client.post("/api/marks/calculate/1").get_json()

    assert second["message"] == "Marks updated successfully"
    assert second["weights"] == first["weights"]
    assert marks_rows(1) == 1


def test_recalculation_picks_up_changed_data(client, education_payload, experience_entry, publication_entry):
    seed_candidate(client, education_payload, experience_entry, publication_entry)
    client.post("/api/marks/calculate/1")

    client.post("/api/experience/1", json=[experience_entry()])
    weights = client.post("/api/marks/calculate/1").get_json()["weights"]

    assert weights["experienceWeight"] == 2
    assert weights["totalWeight"] == 52.5


def test_missing_education_is_not_found(client, experience_entry):
    client.post("/api/experience/7", json=[experience_entry()])

    resp = client.post("/api/marks/calculate/7")

    assert resp.status_code == 404
    assert resp.get_json()["message"] == "User education data not found"
    assert marks_rows(7) == 0


def test_education_only_scores_zero_for_lists(client, education_payload):
    client.post("/api/education", json=education_payload(3))

    weights = client.post("/api/marks/calculate/3").get_json()["weights"]

    assert weights["experienceWeight"] == 0
    assert weights["publicationsWeight"] == 0
    assert weights["totalWeight"] == sum(v for k, v in weights.items() if k != "totalWeight")


def test_get_marks_not_found(client):
    resp = client.get("/api/marks/99")

    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Marks not found"}


def test_storage_failure_names_the_stage(client, education_payload, monkeypatch):
    client.post("/api/education", json=education_payload(4))

    def broken(session, user_id):
        raise OperationalError("SELECT marks", {}, Exception("connection lost"))

    monkeypatch.setattr(marks_controller, "_existing_marks", broken)
    resp = client.post("/api/marks/calculate/4")

    assert resp.status_code == 500
    body = resp.get_json()
    assert body["message"] == "Error checking existing marks"
    assert "connection lost" in body["error"]
    assert marks_rows(4) == 0


def test_concurrent_calculations_keep_one_row(app, client, education_payload):
    client.post("/api/education", json=education_payload(5))
    errors = []

    def worker():
        try:
            marks_controller.calculate_user_marks(5)
        except Exception as exc:  # collected for the assertion below
            errors.append(exc)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert marks_rows(5) == 1


class FailingReads:
    """Session stand-in whose reads of one model hit a dead connection."""

    def __init__(self, session, model):
        self._session = session
        self._model = model

    def query(self, model, *args):
        if model is self._model:
            raise OperationalError("SELECT", {}, Exception("connection lost"))
        return self._session.query(model, *args)

    def __getattr__(self, name):
        return getattr(self._session, name)


@pytest.mark.parametrize("model, stage", [
    (Education, "Error fetching education data"),
    (Experience, "Error fetching experience data"),
    (Publication, "Error fetching publications data"),
    (Phd, "Error fetching PhD data"),
])
def test_fetch_failure_names_the_stage(client, education_payload, monkeypatch, model, stage):
    client.post("/api/education", json=education_payload(6))
    real_session = marks_controller.SessionLocal
    monkeypatch.setattr(marks_controller, "SessionLocal", lambda: FailingReads(real_session(), model))

    resp = client.post("/api/marks/calculate/6")

    assert resp.status_code == 500
    body = resp.get_json()
    assert body["message"] == stage
    assert "connection lost" in body["error"]
    assert marks_rows(6) == 0


def test_user_locks_are_released_after_calls(client, education_payload):
    client.post("/api/education", json=education_payload(8))

    for user_id in range(100, 150):
        assert client.post(f"/api/marks/calculate/{user_id}").status_code == 404
    assert client.post("/api/marks/calculate/8").status_code == 200
    gc.collect()

    assert len(marks_controller._user_locks) == 0
