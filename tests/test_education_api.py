def test_get_before_save_returns_empty_object(client):
    resp = client.get("/api/education/1")

    assert resp.status_code == 200
    assert resp.get_json() == {}


def test_upsert_then_fetch(client, education_payload):
    resp = client.post("/api/education", json=education_payload(1, ug_cgpa_percentage="8.75"))
    assert resp.status_code == 200
    assert resp.get_json()["created"] is True

    row = client.get("/api/education/1").get_json()
    assert row["user_id"] == 1
    assert row["ug_cgpa_percentage"] == "8.75"
    assert row["ug_first_attempt"] is True
    assert row["pg_year"] == 2015
    assert row["mphil_year"] is None


def test_second_post_updates_the_same_row(client, education_payload):
    client.post("/api/education", json=education_payload(1))
    first_id = client.get("/api/education/1").get_json()["id"]

    resp = client.post("/api/education", json=education_payload(1, pg_cgpa_percentage="91%"))

    assert resp.get_json()["created"] is False
    row = client.get("/api/education/1").get_json()
    assert row["id"] == first_id
    assert row["pg_cgpa_percentage"] == "91%"


def test_missing_core_level_is_rejected(client, education_payload):
    payload = education_payload(1)
    for key in [k for k in payload if k.startswith("pg_") and k != "pg_degree"]:
        payload[key] = ""

    resp = client.post("/api/education", json=payload)

    assert resp.status_code == 422
    locations = {tuple(err["loc"])[:1] for err in resp.get_json()["detail"]}
    assert ("pg",) in locations
    assert client.get("/api/education/1").get_json() == {}


def test_partial_mphil_is_rejected(client, education_payload):
    payload = education_payload(1, mphil_institution="Madras Christian College")

    resp = client.post("/api/education", json=payload)

    assert resp.status_code == 422


def test_complete_mphil_is_stored(client, education_payload):
    client.post("/api/education", json=education_payload(1, mphil=True))

    row = client.get("/api/education/1").get_json()

    assert row["mphil_year"] == 2016
    assert row["mphil_university"] == "Anna University"


def test_grade_and_year_validation(client, education_payload):
    bad_grade = client.post("/api/education", json=education_payload(1, ug_cgpa_percentage="120"))
    bad_year = client.post("/api/education", json=education_payload(1, tenth_year="1890"))
    short_year = client.post("/api/education", json=education_payload(1, tenth_year="99"))

    assert bad_grade.status_code == 422
    assert bad_year.status_code == 422
    assert short_year.status_code == 422


def test_first_attempt_must_be_yes_or_no(client, education_payload):
    resp = client.post("/api/education", json=education_payload(1, ug_first_attempt="maybe"))

    assert resp.status_code == 422


def test_user_id_is_required(client, education_payload):
    payload = education_payload(1)
    del payload["user_id"]

    resp = client.post("/api/education", json=payload)

    assert resp.status_code == 400
    assert resp.get_json()["message"] == "user_id is required"


def test_put_by_record_id(client, education_payload):
    client.post("/api/education", json=education_payload(2))
    record_id = client.get("/api/education/2").get_json()["id"]

    resp = client.put(f"/api/education/{record_id}", json=education_payload(2, twelfth_medium="Tamil"))

    assert resp.status_code == 200
    assert resp.get_json()["education"]["twelfth_medium"] == "Tamil"


def test_put_unknown_record(client, education_payload):
    resp = client.put("/api/education/404", json=education_payload(2))

    assert resp.status_code == 404


def test_delete(client, education_payload):
    client.post("/api/education", json=education_payload(1))

    assert client.delete("/api/education/1").status_code == 200
    assert client.get("/api/education/1").get_json() == {}
    assert client.delete("/api/education/1").status_code == 404


def test_malformed_json(client):
    resp = client.post("/api/education", data="{not json", content_type="application/json")

    assert resp.status_code == 400


def test_whitespace_year_reads_as_missing(client, education_payload):
    resp = client.post("/api/education", json=education_payload(1, tenth_year="   "))

    assert resp.status_code == 422
    messages = [err["msg"] for err in resp.get_json()["detail"]]
    assert any("Year of completion is required" in msg for msg in messages)
