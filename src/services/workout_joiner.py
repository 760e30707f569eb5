"""Join workout items to their parent workout."""

import logging
from typing import Iterable

from src.domain.model import JoinedRow, JoinResult, Workout, WorkoutItem

logger = logging.getLogger("truecoach_export.joiner")


def join_workouts(workouts: Iterable[Workout], workout_items: Iterable[WorkoutItem]) -> JoinResult:
    """Produce one JoinedRow per workout item whose workout is known.

    Items pointing at an unknown workout are skipped and reported as orphans.
    Duplicate workout ids keep the last workout seen.
    """
    by_id: dict = {}
    for workout in workouts:
        by_id[workout.id] = workout

    result = JoinResult()
    for item in workout_items:
        workout = by_id.get(item.workout_id)
        if workout is None:
            logger.warning("Orphan workout item: %s (workout_id=%s)", item.id, item.workout_id)
            result.orphans.append(item.id)
            continue

        result.rows.append(JoinedRow(
            date=_or_empty(workout.due),
            exercise_name=_or_empty(item.name),
            instructions=_or_empty(item.info),
            result=_or_empty(item.result),
            state=_or_empty(item.state),
            workout_title=_or_empty(workout.title),
        ))

    return result


def _or_empty(value):
    return "" if value is None else value
