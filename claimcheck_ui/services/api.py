# claimcheck_ui/services/api.py

import os
import requests
from dotenv import load_dotenv


load_dotenv()

# Base URL of the FastAPI backend
API_URL = os.getenv("CLAIMCHECK_API_URL", "http://localhost:5000").rstrip("/")

REQUEST_TIMEOUT = 120


def _request(method, path, token=None, **kwargs):
    """
    Calls the backend and returns the decoded JSON body with `ok` and `status` added.
    Network errors come back as a dict too, so pages only have to check `ok`.
    """
    headers = {"Authorization": f"Bearer {token}"} if token else {}
    try:
        res = requests.request(method, f"{API_URL}{path}", headers=headers, timeout=REQUEST_TIMEOUT, **kwargs)
    except requests.RequestException as e:
        return {"ok": False, "status": None, "error": str(e)}

    try:
        data = res.json()
    except ValueError:
        data = {}
    if not isinstance(data, dict):
        data = {"data": data}

    data["ok"] = res.status_code == 200
    data["status"] = res.status_code
    return data


def error_message(result, default="Request failed"):
    return result.get("message") or result.get("error") or default


def accounts_enabled():
    """
    Asks the backend whether sign-in is available. A server started with
    ENABLE_ACCOUNTS=false only serves /analyze.
    """
    result = _request("GET", "/")
    return result.get("accountsEnabled", True) if result["ok"] else True


# -------------------------------
# Authentication-related functions
# -------------------------------

def signup(username, email, password):
    return _request("POST", "/auth/signup", json={"username": username, "email": email, "password": password})


def login(username, password):
    """
    Logs in with a username or email. On success the result carries `token` and `user`.
    """
    return _request("POST", "/auth/login", json={"username": username, "password": password})


def forgot_username(email):
    return _request("POST", "/auth/forgot-username", json={"email": email})


def forgot_password(username, email):
    return _request("POST", "/auth/forgot-password", json={"username": username, "email": email})


def reset_password(token, password):
    return _request("POST", "/auth/reset-password", json={"token": token, "password": password})


# -------------------------
# Analysis & Search History
# -------------------------

def analyze_claim(text, token=None):
    """
    Sends a claim for analysis; the markdown explanation is under `analysis`.
    """
    return _request("POST", "/analyze", token=token, json={"text": text})


def get_history(token):
    return _request("GET", "/api/search-history", token=token)


def clear_history(token):
    return _request("DELETE", "/api/search-history", token=token)
