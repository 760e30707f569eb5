"""Pure domain objects, no framework dependency."""

from dataclasses import dataclass, field
from typing import Any, NamedTuple, Optional


@dataclass(frozen=True)
class SessionCredentials:
    access_token: str
    account_id: str


@dataclass
class Workout:
    id: Any
    due: Optional[str] = None
    title: Optional[str] = None
    raw: dict = field(default_factory=dict, repr=False)

    @classmethod
    def from_api(cls, data: dict) -> "Workout":
        return cls(
            id=data.get("id"),
            due=data.get("due"),
            title=data.get("title"),
            raw=data,
        )


@dataclass
class WorkoutItem:
    id: Any
    workout_id: Any
    name: Optional[str] = None
    info: Optional[str] = None
    result: Optional[str] = None
    state: Optional[str] = None
    raw: dict = field(default_factory=dict, repr=False)

    @classmethod
    def from_api(cls, data: dict) -> "WorkoutItem":
        return cls(
            id=data.get("id"),
            workout_id=data.get("workout_id"),
            name=data.get("name"),
            info=data.get("info"),
            result=data.get("result"),
            state=data.get("state"),
            raw=data,
        )


@dataclass
class PageResponse:
    workouts: list[Workout] = field(default_factory=list)
    workout_items: list[WorkoutItem] = field(default_factory=list)
    total_pages: int = 1
    total_count: int = 0


@dataclass
class WorkoutCollection:
    workouts: list[Workout] = field(default_factory=list)
    workout_items: list[WorkoutItem] = field(default_factory=list)
    total_pages: int = 0
    total_count: int = 0
    pages_fetched: int = 0


class JoinedRow(NamedTuple):
    date: Any
    exercise_name: Any
    instructions: Any
    result: Any
    state: Any
    workout_title: Any


@dataclass
class JoinResult:
    rows: list[JoinedRow] = field(default_factory=list)
    orphans: list = field(default_factory=list)

    @property
    def orphan_count(self) -> int:
        return len(self.orphans)


@dataclass
class ExportReport:
    filename: str
    location: str
    row_count: int
    workouts_fetched: int
    items_fetched: int
    total_count: int
    orphans: list = field(default_factory=list)
