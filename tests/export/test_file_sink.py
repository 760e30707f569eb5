"""File sink and export filename."""

import logging
import os
from datetime import date

from src.adapters.sink.file_sink import FileSinkAdapter
from src.usecases.export_workouts import build_export_filename


def test_sink_writes_bytes_to_output_dir(tmp_path):
    sink = FileSinkAdapter(str(tmp_path / "downloads"))

    location = sink.deliver(b"date\r\n", "truecoach-workouts-2024-01-01.csv")

    assert location == os.path.join(str(tmp_path / "downloads"), "truecoach-workouts-2024-01-01.csv")
    with open(location, "rb") as f:
        assert f.read() == b"date\r\n"


def test_filename_uses_iso_date():
    assert build_export_filename(date(2024, 3, 7)) == "truecoach-workouts-2024-03-07.csv"


def test_filename_defaults_to_today():
    name = build_export_filename()

    assert name.startswith("truecoach-workouts-")
    assert name.endswith(".csv")
    assert len(name) == len("truecoach-workouts-YYYY-MM-DD.csv")


def test_sink_logs_content_type(tmp_path, caplog):
    caplog.set_level(logging.INFO, logger="truecoach_export.sink")

    FileSinkAdapter(str(tmp_path)).deliver(b"date\r\n", "export.csv")

    assert "text/csv" in caplog.text
