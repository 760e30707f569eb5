"""File-system sink: write the finished export next to the user's other downloads."""

import logging
import os

from src.config import EXPORT_MIME_TYPE
from src.domain.ports import ExportSinkPort

logger = logging.getLogger("truecoach_export.sink")


class FileSinkAdapter(ExportSinkPort):

    def __init__(self, output_dir: str = "."):
        self.output_dir = output_dir

    def deliver(self, content: bytes, filename: str) -> str:
        os.makedirs(self.output_dir, exist_ok=True)
        path = os.path.join(self.output_dir, filename)
        with open(path, "wb") as f:
            f.write(content)
        logger.info("Wrote %s bytes of %s to %s", len(content), EXPORT_MIME_TYPE, path)
        return path
