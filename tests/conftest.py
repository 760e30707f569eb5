"""Shared in-memory adapters and fixtures for all bounded contexts."""

import json
from typing import Optional
from urllib.parse import quote

import pytest

from src.domain.errors import FetchFailed
from src.domain.model import PageResponse, Workout, WorkoutItem
from src.domain.ports import ExportSinkPort, PacerPort, WorkoutSourcePort


# ── In-memory adapters ──────────────────────────────────────────────


class InMemoryWorkoutSource(WorkoutSourcePort):
    def __init__(self, pages: dict[int, PageResponse], failures: Optional[dict[int, int]] = None):
        self.pages = pages
        self.failures = failures or {}
        self.requested: list[int] = []

    def fetch_page(self, page: int) -> PageResponse:
        self.requested.append(page)
        if page in self.failures:
            raise FetchFailed(page, self.failures[page], "simulated")
        return self.pages.get(page, PageResponse(total_pages=0))


class RecordingPacer(PacerPort):
    def __init__(self, source: Optional[InMemoryWorkoutSource] = None):
        self.source = source
        self.waits = 0
        # number of pages already requested at each wait
        self.after_pages: list[int] = []

    def wait(self) -> None:
        self.waits += 1
        if self.source is not None:
            self.after_pages.append(len(self.source.requested))


class FakeSecretStore:
    def __init__(self, available: bool = True):
        self.available = available
        self.data: dict[str, str] = {}

    def get(self, key: str):
        return self.data.get(key)

    def set(self, key: str, value: str) -> bool:
        if not self.available:
            return False
        if value:
            self.data[key] = value
        else:
            self.data.pop(key, None)
        return True


class InMemorySink(ExportSinkPort):
    def __init__(self):
        self.deliveries: list[tuple[bytes, str]] = []

    def deliver(self, content: bytes, filename: str) -> str:
        self.deliveries.append((content, filename))
        return f"memory://{filename}"


# ── Helpers ─────────────────────────────────────────────────────────


def make_cookie_header(session, name: str = "ember_simple_auth-session") -> str:
    value = session if isinstance(session, str) else json.dumps(session)
    return f"_ga=GA1.2.3; {name}={quote(value)}; theme=dark"


def page(workouts=(), items=(), total_pages=1, total_count=0) -> PageResponse:
    return PageResponse(
        workouts=[Workout.from_api(w) for w in workouts],
        workout_items=[WorkoutItem.from_api(i) for i in items],
        total_pages=total_pages,
        total_count=total_count,
    )


# ── Shared fixtures ─────────────────────────────────────────────────


@pytest.fixture
def session_cookie():
    return make_cookie_header({
        "authenticated": {
            "authenticator": "authenticator:truecoach",
            "access_token": "tok-abc123",
            "user_id": 4242,
        }
    })


@pytest.fixture
def leg_day_pages():
    return {
        1: page(
            workouts=[{"id": 5, "due": "2024-01-01", "title": "Leg Day"}],
            items=[{"id": 9, "workout_id": 5, "name": "Squat", "result": "5x5", "state": "completed"}],
            total_pages=2,
            total_count=1,
        ),
        2: page(total_pages=2, total_count=1),
    }


@pytest.fixture
def sink():
    return InMemorySink()


@pytest.fixture
def cookie_for():
    return make_cookie_header


@pytest.fixture
def make_page():
    return page


@pytest.fixture
def source_for():
    return InMemoryWorkoutSource


@pytest.fixture
def pacer_for():
    return RecordingPacer


@pytest.fixture
def secret_store():
    return FakeSecretStore()


@pytest.fixture
def unavailable_secret_store():
    return FakeSecretStore(available=False)
