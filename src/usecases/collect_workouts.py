"""Use case: read every page of workouts and workout items."""

import logging

from src.domain.model import WorkoutCollection
from src.domain.ports import PacerPort, WorkoutSourcePort

logger = logging.getLogger("truecoach_export.collector")


class CollectWorkoutsUseCase:

    def __init__(self, source: WorkoutSourcePort, pacer: PacerPort):
        self.source = source
        self.pacer = pacer

    def execute(self) -> WorkoutCollection:
        """Fetch pages 1..total_pages in order.

        total_pages is read from page 1 only; later pages cannot extend or
        shorten the run. Any FetchFailed propagates and nothing is returned.
        """
        collection = WorkoutCollection()
        page = 1
        total_pages = 1

        while page <= total_pages:
            if page > 1:
                self.pacer.wait()

            response = self.source.fetch_page(page)

            if page == 1:
                total_pages = response.total_pages
                collection.total_pages = total_pages
                collection.total_count = response.total_count
                logger.info("Found %s workouts across %s pages", response.total_count, total_pages)

            logger.info("Fetched page %s of %s", page, max(total_pages, 1))
            collection.workouts.extend(response.workouts)
            collection.workout_items.extend(response.workout_items)
            collection.pages_fetched += 1
            page += 1

        logger.info(
            "Fetched %s workouts and %s exercises",
            len(collection.workouts),
            len(collection.workout_items),
        )
        return collection
