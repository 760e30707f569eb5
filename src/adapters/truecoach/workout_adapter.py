"""TrueCoach adapter for fetching pages of workouts and workout items."""

import logging
from typing import Optional

import requests

from src.config import (
    DEFAULT_BASE_URL,
    DEFAULT_PER_PAGE,
    DEFAULT_REQUEST_TIMEOUT_S,
    DEFAULT_STATES,
    REFERER_PATH,
    WORKOUTS_PATH,
)
from src.domain.errors import FetchFailed
from src.domain.model import PageResponse, SessionCredentials, Workout, WorkoutItem
from src.domain.ports import WorkoutSourcePort

logger = logging.getLogger("truecoach_export.truecoach")


class TrueCoachWorkoutAdapter(WorkoutSourcePort):

    def __init__(
        self,
        credentials: SessionCredentials,
        per_page: int = DEFAULT_PER_PAGE,
        states: str = DEFAULT_STATES,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ):
        self.credentials = credentials
        self.per_page = per_page
        self.states = states
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    @property
    def url(self) -> str:
        return self.base_url + WORKOUTS_PATH.format(account_id=self.credentials.account_id)

    def headers(self) -> dict:
        return {
            "Accept": "application/json",
            "Authorization": f"Bearer {self.credentials.access_token}",
            "Dnt": "1",
            "Referer": self.base_url + REFERER_PATH,
            "Role": "Client",
        }

    def params(self, page: int) -> dict:
        return {
            "states": self.states,
            "per_page": self.per_page,
            "page": page,
            "order": "desc",
        }

    def fetch_page(self, page: int) -> PageResponse:
        logger.debug("GET %s page=%s per_page=%s states=%s", self.url, page, self.per_page, self.states)
        try:
            response = self.session.get(
                self.url,
                params=self.params(page),
                headers=self.headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise FetchFailed(page, None, str(exc)) from exc

        if not 200 <= response.status_code < 300:
            raise FetchFailed(page, response.status_code, response.reason or "")

        try:
            data = response.json()
        except ValueError as exc:
            raise FetchFailed(page, response.status_code, "response is not valid JSON") from exc
        if not isinstance(data, dict):
            raise FetchFailed(page, response.status_code, "unexpected response shape")

        try:
            return parse_page(data)
        except (TypeError, ValueError, AttributeError) as exc:
            raise FetchFailed(page, response.status_code, "unexpected response shape") from exc


def parse_page(data: dict) -> PageResponse:
    """Map a workouts API payload to a PageResponse; absent arrays count as empty."""
    meta = data.get("meta") or {}
    total_pages = meta.get("total_pages")
    total_count = meta.get("total_count")
    return PageResponse(
        workouts=[Workout.from_api(w) for w in data.get("workouts") or []],
        workout_items=[WorkoutItem.from_api(i) for i in data.get("workout_items") or []],
        total_pages=int(total_pages) if total_pages is not None else 1,
        total_count=int(total_count) if total_count is not None else 0,
    )
