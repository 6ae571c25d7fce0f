# app/services/api.py

import base64
import os
import requests
from dotenv import load_dotenv

load_dotenv()

# Base URL of the FastAPI backend
API_SERVER_URL = os.getenv("API_SERVER_URL", "http://localhost:8000").rstrip("/")
REQUEST_TIMEOUT = 15


def _url(path: str) -> str:
    return f"{API_SERVER_URL}/{path.lstrip('/')}"


def _headers(token=None):
    """
    Attaches the bearer token when the session has one.
    """
    return {"Authorization": f"Bearer {token}"} if token else {}


def _error(res):
    try:
        data = res.json()
        message = data.get("message") or data.get("error") or res.reason
    except ValueError:
        message = res.text or res.reason
    return {"error": message, "status": res.status_code}


def _send(method, path, token=None, timeout=REQUEST_TIMEOUT, **kwargs):
    """
    Returns the response, or {"error", "status": None} when the backend is unreachable.
    """
    try:
        return requests.request(method, _url(path), headers=_headers(token), timeout=timeout, **kwargs)
    except requests.RequestException as e:
        return {"error": str(e), "status": None}


def _json(method, path, expected=200, token=None, **kwargs):
    res = _send(method, path, token=token, **kwargs)
    if isinstance(res, dict):
        return res
    return res.json() if res.status_code == expected else _error(res)


# -------------------------------
# Authentication-related functions
# -------------------------------

def login_user(username, password):
    """
    Logs in a user. Returns {"user", "token"} or {"error", "status"}.
    """
    return _json("POST", "/api/login", json={"username": username, "password": password})


def register_user(username, password):
    return _json("POST", "/api/register", expected=201, json={"username": username, "password": password})


def get_user_info(access_token):
    """
    Retrieves the current user. Returns the user dict or {"error", "status"}.
    """
    return _json("GET", "/api/user", token=access_token)


def logout_user(access_token):
    return _json("POST", "/api/logout", token=access_token)


# -------------------------
# Leadership Values
# -------------------------

def list_leadership_values():
    return _json("GET", "/api/leadership-values")


def create_leadership_value(access_token, value, description):
    return _json(
        "POST",
        "/api/leadership-values",
        expected=201,
        token=access_token,
        json={"value": value, "description": description},
    )


def update_leadership_value(access_token, value_id, value, description):
    return _json(
        "PUT",
        f"/api/leadership-values/{value_id}",
        token=access_token,
        json={"value": value, "description": description},
    )


def delete_leadership_value(access_token, value_id):
    return _json("DELETE", f"/api/leadership-values/{value_id}", token=access_token)


# -------------------------
# Submissions
# -------------------------

def submit_assessment(name, email, core_values, company_code=None):
    payload = {"name": name, "email": email, "coreValues": core_values}
    if company_code:
        payload["companyCode"] = company_code
    return _json("POST", "/api/submissions", expected=201, json=payload)


def list_submissions(access_token, company_code=None):
    path = f"/api/submissions/company/{company_code}" if company_code else "/api/submissions"
    return _json("GET", path, token=access_token)


def list_company_codes(access_token):
    return _json("GET", "/api/submissions/company-codes", token=access_token)


def export_submissions_csv(access_token, company_code=None):
    """
    Downloads the CSV export. Returns (filename, bytes) or None on failure.
    """
    params = {"companyCode": company_code} if company_code else None
    res = _send("GET", "/api/submissions/export", token=access_token, params=params)
    if isinstance(res, dict) or res.status_code != 200:
        return None
    filename = f"submissions_{company_code}.csv" if company_code else "submissions.csv"
    return filename, res.content


def send_pdf_email(pdf_bytes, name, email, core_values):
    """
    Relays an already rendered PDF to the respondent.
    `core_values` is a list of {"value", "description"} dicts.
    """
    payload = {
        "pdfBase64": "data:application/pdf;base64," + base64.b64encode(pdf_bytes).decode("ascii"),
        "userInfo": {"name": name, "email": email},
        "coreValues": core_values,
    }
    res = _send("POST", "/api/send-pdf-email", timeout=60, json=payload)
    if isinstance(res, dict):
        return False
    return res.status_code == 200 and res.json().get("success", False)
