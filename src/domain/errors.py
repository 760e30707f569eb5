"""Errors that abort an export run."""

from typing import Optional

RELOGIN_HINT = "Log into TrueCoach again and copy a fresh cookie from the browser tab."

# statuses meaning the stored session is no longer accepted
SESSION_REJECTED_STATUSES = (401, 403)


class ExportError(Exception):
    """Base class for fatal export failures."""


class CredentialError(ExportError):
    def __init__(self, message: str):
        super().__init__(f"{message} {RELOGIN_HINT}")


class CredentialMissing(CredentialError):
    pass


class CredentialMalformed(CredentialError):
    pass


class CredentialIncomplete(CredentialError):
    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        super().__init__(f"Session cookie is missing {', '.join(self.missing)}.")


class FetchFailed(ExportError):
    """A page request did not succeed; the whole run is aborted."""

    def __init__(self, page: int, status: Optional[int], reason: str = ""):
        self.page = page
        self.status = status
        self.reason = reason
        detail = f"status {status}" if status is not None else "no response"
        if reason:
            detail = f"{detail}: {reason}"
        super().__init__(
            f"Fetching page {page} failed ({detail}). "
            "Make sure you are still logged into TrueCoach."
        )
