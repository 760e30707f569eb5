"""Extract TrueCoach API credentials from the Ember Simple Auth session cookie.

The browser keeps the login in a cookie named ``ember_simple_auth-session`` whose
value is URL-encoded JSON::

    {"authenticated": {"access_token": "...", "user_id": 12345, ...}}

Paste the ``document.cookie`` string of an app.truecoach.co tab to get it.
"""

import json
from typing import Optional
from urllib.parse import unquote

from src.config import SESSION_COOKIE_NAME
from src.domain.errors import CredentialIncomplete, CredentialMalformed, CredentialMissing
from src.domain.model import SessionCredentials


def find_cookie(cookie_header: str, name: str = SESSION_COOKIE_NAME) -> Optional[str]:
    """Return the raw (still encoded) value of the named cookie, or None."""
    for entry in (cookie_header or "").split(";"):
        key, sep, value = entry.strip().partition("=")
        if sep and key == name:
            return value
    return None


def decode_session(raw_value: str) -> dict:
    try:
        decoded = unquote(raw_value, errors="strict")
        data = json.loads(decoded)
    except (UnicodeDecodeError, ValueError) as exc:
        raise CredentialMalformed(f"Session cookie could not be decoded ({exc}).") from exc
    if not isinstance(data, dict):
        raise CredentialMalformed("Session cookie does not hold a JSON object.")
    return data


def extract_credentials(cookie_header: str, name: str = SESSION_COOKIE_NAME) -> SessionCredentials:
    """Parse the cookie header into an access token and account id.

    Raises CredentialMissing, CredentialMalformed or CredentialIncomplete.
    """
    raw_value = find_cookie(cookie_header, name)
    if raw_value is None:
        raise CredentialMissing(f"No {name} cookie found.")

    session = decode_session(raw_value)
    authenticated = session.get("authenticated")
    if not isinstance(authenticated, dict):
        authenticated = {}

    access_token = _text(authenticated.get("access_token"))
    account_id = _text(authenticated.get("user_id"))

    missing = []
    if not access_token:
        missing.append("access_token")
    if not account_id:
        missing.append("user_id")
    if missing:
        raise CredentialIncomplete(missing)

    return SessionCredentials(access_token=access_token, account_id=account_id)


def _text(value) -> str:
    # bools are JSON true/false, never a usable token or id
    if value is None or isinstance(value, (bool, dict, list)):
        return ""
    return str(value).strip()
