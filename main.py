"""Entry point for TrueCoach Export: save your workout history as a CSV file."""

import logging
import sys


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    from src.adapters.config.json_config_adapter import JsonConfigAdapter
    from src.config import ExportSettings
    from src.version import __version__

    print(f"TrueCoach Export {__version__} - Starting...")
    config = JsonConfigAdapter()

    # First launch: ask for the cookie string of a logged-in TrueCoach tab
    if not config.is_configured():
        print("Log into https://app.truecoach.co, open DevTools > Console and run: document.cookie")
        cookie = input("Paste the cookie string here: ").strip()
        if not cookie:
            print("Setup cancelled.")
            sys.exit(0)
        cfg = config.load()
        cfg["session_cookie"] = cookie
        config.save(cfg)

    cfg = config.load()
    settings = ExportSettings.from_config(cfg)

    from src.adapters.pacing.sleep_pacer import build_pacer
    from src.adapters.sink.file_sink import FileSinkAdapter
    from src.adapters.truecoach.workout_adapter import TrueCoachWorkoutAdapter
    from src.domain.errors import SESSION_REJECTED_STATUSES, CredentialError, ExportError, FetchFailed
    from src.usecases.export_workouts import ExportWorkoutsUseCase

    def source_factory(credentials):
        return TrueCoachWorkoutAdapter(
            credentials,
            per_page=settings.per_page,
            states=settings.states,
            base_url=settings.base_url,
            timeout=settings.request_timeout_s,
        )

    use_case = ExportWorkoutsUseCase(
        source_factory=source_factory,
        sink=FileSinkAdapter(settings.output_dir),
        pacer=build_pacer(settings.request_delay_s),
    )

    try:
        report = use_case.execute(cfg["session_cookie"])
    except CredentialError as e:
        print(f"Could not read your TrueCoach session: {e}")
        config.forget_session()
        sys.exit(1)
    except FetchFailed as e:
        print(f"Export failed: {e}")
        if e.status in SESSION_REJECTED_STATUSES:
            config.forget_session()
        sys.exit(1)
    except ExportError as e:
        print(f"Export failed: {e}")
        sys.exit(1)

    print(f"Export complete! Saved {report.row_count} exercise records.")
    if report.orphans:
        print(f"Skipped {len(report.orphans)} exercises without a matching workout.")
    print(f"File: {report.location}")


if __name__ == "__main__":
    main()
