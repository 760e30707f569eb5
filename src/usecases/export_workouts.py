"""Use case: export the whole TrueCoach workout history to one CSV file."""

import logging
from datetime import date, datetime, timezone
from typing import Callable, Optional, Sequence

from src.auth.session_cookie import extract_credentials
from src.config import EXPORT_FILENAME_PREFIX, HEADER_ROW
from src.domain.model import ExportReport, SessionCredentials
from src.domain.ports import ExportSinkPort, PacerPort, WorkoutSourcePort
from src.services.table_serializer import serialize_table
from src.services.workout_joiner import join_workouts
from src.usecases.collect_workouts import CollectWorkoutsUseCase

logger = logging.getLogger("truecoach_export.export")

SourceFactory = Callable[[SessionCredentials], WorkoutSourcePort]


def build_export_filename(today: Optional[date] = None) -> str:
    today = today or datetime.now(timezone.utc).date()
    return f"{EXPORT_FILENAME_PREFIX}{today.isoformat()}.csv"


class ExportWorkoutsUseCase:

    def __init__(
        self,
        source_factory: SourceFactory,
        sink: ExportSinkPort,
        pacer: PacerPort,
        header: Sequence[str] = HEADER_ROW,
    ):
        self.source_factory = source_factory
        self.sink = sink
        self.pacer = pacer
        self.header = header

    def execute(self, cookie_header: str, today: Optional[date] = None) -> ExportReport:
        # Credential errors surface here, before a source (or a connection) exists.
        credentials = extract_credentials(cookie_header)
        logger.info("Session credentials extracted (account=%s)", credentials.account_id)

        source = self.source_factory(credentials)
        collection = CollectWorkoutsUseCase(source, self.pacer).execute()

        joined = join_workouts(collection.workouts, collection.workout_items)
        if joined.orphans:
            logger.warning("Skipped %s orphan workout items", joined.orphan_count)

        content = serialize_table(joined.rows, header=self.header)
        filename = build_export_filename(today)
        location = self.sink.deliver(content, filename)
        logger.info("Export complete (rows=%s, file=%s)", len(joined.rows), location)

        return ExportReport(
            filename=filename,
            location=location,
            row_count=len(joined.rows),
            workouts_fetched=len(collection.workouts),
            items_fetched=len(collection.workout_items),
            total_count=collection.total_count,
            orphans=list(joined.orphans),
        )
