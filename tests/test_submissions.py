from datetime import datetime
from types import SimpleNamespace

from server.core.export import content_disposition, format_submitted_at, iter_submissions_csv


def _submit(client, **overrides):
    payload = {"name": "Ada Lovelace", "email": "ada@example.com", "coreValues": ["Integrity", "Courage"]}
    payload.update(overrides)
    return client.post("/api/submissions", json=payload)


def test_public_submission(client):
    r = _submit(client, companyCode="ACME")
    assert r.status_code == 201
    data = r.json()["data"]
    assert data["coreValues"] == ["Integrity", "Courage"]
    assert data["companyCode"] == "ACME"
    assert data["createdAt"]


def test_blank_company_code_stored_as_null(client):
    r = _submit(client, companyCode="  ")
    assert r.status_code == 201
    assert r.json()["data"]["companyCode"] is None


def test_invalid_submission(client):
    r = client.post("/api/submissions", json={"email": "not-an-email", "coreValues": []})
    assert r.status_code == 400
    body = r.json()
    assert body["message"] == "Invalid submission data"
    assert '"name"' in body["errors"]
    assert '"email"' in body["errors"]
    assert '"coreValues"' in body["errors"]


def test_list_and_filter(client, auth_headers):
    _submit(client, companyCode="ACME")
    _submit(client, name="Grace Hopper", email="grace@example.com", coreValues=["Honesty"])
    _submit(client, name="Alan Turing", email="alan@example.com", companyCode="acme", coreValues=["Curiosity"])

    r = client.get("/api/submissions", headers=auth_headers)
    assert r.status_code == 200
    assert len(r.json()) == 3

    r = client.get("/api/submissions/company/ACME", headers=auth_headers)
    assert [s["name"] for s in r.json()] == ["Ada Lovelace"]

    r = client.get("/api/submissions/company-codes", headers=auth_headers)
    assert r.json() == ["ACME", "acme"]


def test_export_all(client, auth_headers):
    _submit(client, companyCode="ACME")
    _submit(client, name="Grace Hopper", email="grace@example.com", coreValues=["Honesty"])

    r = client.get("/api/submissions/export", headers=auth_headers)
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/csv")
    assert r.headers["content-disposition"] == 'attachment; filename="submissions.csv"'

    lines = r.text.strip().split("\n")
    assert lines[0] == "Name,Email,Company Code,Core Values,Date Submitted"
    assert len(lines) == 3
    assert any(line.startswith('"Ada Lovelace","ada@example.com","ACME","Integrity, Courage","') for line in lines)
    assert any(line.startswith('"Grace Hopper","grace@example.com","","Honesty","') for line in lines)


def test_export_filtered(client, auth_headers):
    _submit(client, companyCode="ACME")
    _submit(client, name="Grace Hopper", email="grace@example.com", coreValues=["Honesty"])

    r = client.get("/api/submissions/export", params={"companyCode": "ACME"}, headers=auth_headers)
    assert r.status_code == 200
    assert r.headers["content-disposition"] == 'attachment; filename="submissions_ACME.csv"'
    lines = r.text.strip().split("\n")
    assert len(lines) == 2
    assert "Ada Lovelace" in lines[1]

    r = client.get("/api/submissions/export", params={"companyCode": "all"}, headers=auth_headers)
    assert len(r.text.strip().split("\n")) == 3


def test_csv_rows():
    rows = [
        SimpleNamespace(
            name='Ada "The Countess"',
            email="ada@example.com",
            company_code=None,
            core_values=["Integrity", "Courage"],
            created_at=datetime(2026, 10, 17, 14, 30),
        ),
        SimpleNamespace(
            name="Grace",
            email="grace@example.com",
            company_code="NAVY",
            core_values=None,
            created_at=datetime(2026, 1, 5, 9, 5),
        ),
    ]
    assert "".join(iter_submissions_csv(rows)) == (
        "Name,Email,Company Code,Core Values,Date Submitted\n"
        '"Ada ""The Countess""","ada@example.com","","Integrity, Courage","Oct 17, 2026, 02:30 PM"\n'
        '"Grace","grace@example.com","NAVY","No values","Jan 5, 2026, 09:05 AM"\n'
    )


def test_date_format():
    assert format_submitted_at(datetime(2026, 3, 9, 0, 7)) == "Mar 9, 2026, 12:07 AM"


def test_export_non_ascii_company_code(client, auth_headers):
    _submit(client, companyCode="東京")

    r = client.get("/api/submissions/export", params={"companyCode": "東京"}, headers=auth_headers)
    assert r.status_code == 200
    assert r.headers["content-disposition"] == (
        "attachment; filename=\"submissions___.csv\"; filename*=UTF-8''submissions_%E6%9D%B1%E4%BA%AC.csv"
    )
    lines = r.text.strip().split("\n")
    assert len(lines) == 2
    assert '"東京"' in lines[1]


def test_content_disposition_escapes_quotes():
    assert content_disposition('submissions_a"b.csv') == (
        "attachment; filename=\"submissions_a_b.csv\"; filename*=UTF-8''submissions_a%22b.csv"
    )
    assert content_disposition("submissions.csv") == 'attachment; filename="submissions.csv"'
