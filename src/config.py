"""Configuration: TrueCoach endpoints, export constants, and run settings."""

from dataclasses import dataclass

# TrueCoach session
SESSION_COOKIE_NAME = "ember_simple_auth-session"

# TrueCoach API
DEFAULT_BASE_URL = "https://app.truecoach.co"
WORKOUTS_PATH = "/proxy/api/clients/{account_id}/workouts"
REFERER_PATH = "/client/workouts?_=true"
DEFAULT_PER_PAGE = 20
DEFAULT_STATES = "completed"  # also accepted: missed, pending (comma separated)
DEFAULT_REQUEST_DELAY_S = 0.2  # pause between page fetches
DEFAULT_REQUEST_TIMEOUT_S = 30.0

# Export file
HEADER_ROW = ("date", "exercise_name", "instructions", "result", "state", "workout_title")
EXPORT_FILENAME_PREFIX = "truecoach-workouts-"
EXPORT_MIME_TYPE = "text/csv"
DEFAULT_OUTPUT_DIR = "."


@dataclass(frozen=True)
class ExportSettings:
    base_url: str = DEFAULT_BASE_URL
    per_page: int = DEFAULT_PER_PAGE
    states: str = DEFAULT_STATES
    request_delay_s: float = DEFAULT_REQUEST_DELAY_S
    request_timeout_s: float = DEFAULT_REQUEST_TIMEOUT_S
    output_dir: str = DEFAULT_OUTPUT_DIR

    @classmethod
    def from_config(cls, cfg: dict) -> "ExportSettings":
        """Build typed settings from a loaded config dict, falling back to defaults."""
        return cls(
            base_url=str(cfg.get("base_url") or DEFAULT_BASE_URL).rstrip("/"),
            per_page=int(cfg.get("per_page") or DEFAULT_PER_PAGE),
            states=str(cfg.get("states") or DEFAULT_STATES),
            request_delay_s=_non_negative(cfg.get("request_delay_s"), DEFAULT_REQUEST_DELAY_S),
            request_timeout_s=float(cfg.get("request_timeout_s") or DEFAULT_REQUEST_TIMEOUT_S),
            output_dir=str(cfg.get("output_dir") or DEFAULT_OUTPUT_DIR),
        )


def _non_negative(value, default: float) -> float:
    if value is None or value == "":
        return default
    return max(float(value), 0.0)
