"""Destinations for weather reports."""

import os
import sys
import tempfile
from pathlib import Path
from typing import Optional, TextIO, Union

from weatherterm.errors import WriteFailure
from weatherterm.utils.logger import setup_logger

logger = setup_logger(__name__)


class StdoutSink:
    """Print each report as one line."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def write(self, message: str) -> None:
        try:
            self.stream.write(message + "\n")
            self.stream.flush()
        except (OSError, ValueError) as e:
            raise WriteFailure(f"unable to write weather to stdout: {e}") from e


class FileSink:
    """Overwrite a file with the latest report.

    The report is written to a temporary file in the same directory and moved
    into place, so readers never see a half-written report.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def write(self, message: str) -> None:
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(message)
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, self.path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise WriteFailure(f"unable to write weather to file: {e}") from e

        logger.debug(f"Wrote report to {self.path}")


def make_sink(file: Optional[str]):
    """Get the sink for an output file setting; empty means stdout."""
    if not file:
        return StdoutSink()
    return FileSink(file)
