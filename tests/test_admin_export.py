import pytest

from app.ui import admin


class FakeStreamlit:
    """Records the widgets a render touches."""

    def __init__(self, clicked=False):
        self.session_state = {}
        self.clicked = clicked
        self.downloads = []
        self.errors = []
        self.reruns = 0

    def button(self, label):
        return self.clicked

    def download_button(self, label, data, file_name, mime):
        self.downloads.append((file_name, data))

    def error(self, message):
        self.errors.append(message)

    def rerun(self):
        self.reruns += 1


@pytest.fixture()
def fake_st(monkeypatch):
    fake = FakeStreamlit()
    monkeypatch.setattr(admin, "st", fake)
    return fake


@pytest.fixture()
def exports(monkeypatch):
    calls = []

    def fake_export(token, company_code=None):
        calls.append(company_code)
        return (f"submissions_{company_code}.csv" if company_code else "submissions.csv", b"csv")

    monkeypatch.setattr(admin, "export_submissions_csv", fake_export)
    return calls


def test_render_does_not_download(fake_st, exports):
    admin.handle_export("tok", "all", None)
    admin.handle_export("tok", "all", None)
    assert exports == []
    assert fake_st.downloads == []


def test_export_fetched_once_per_filter(fake_st, exports):
    fake_st.clicked = True
    admin.handle_export("tok", "ACME", "ACME")
    assert exports == ["ACME"]
    assert fake_st.reruns == 1

    fake_st.clicked = False
    admin.handle_export("tok", "ACME", "ACME")
    admin.handle_export("tok", "ACME", "ACME")
    assert exports == ["ACME"]
    assert fake_st.downloads[-1] == ("submissions_ACME.csv", b"csv")

    admin.handle_export("tok", "all", None)
    assert "csv_export" not in fake_st.session_state
    assert exports == ["ACME"]


def test_failed_export_shows_error(fake_st, monkeypatch):
    monkeypatch.setattr(admin, "export_submissions_csv", lambda token, company_code=None: None)
    fake_st.clicked = True
    admin.handle_export("tok", "all", None)
    assert fake_st.errors == ["Export failed."]
    assert "csv_export" not in fake_st.session_state
