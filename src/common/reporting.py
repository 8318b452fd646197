"""Single-writer console sink for per-package result lines.

Worker threads never touch the output stream. They hand records to a
``QueueHandler``; one ``QueueListener`` thread drains the queue and writes
complete lines, so lines from different workers never interleave.
"""
from __future__ import annotations

import itertools
import logging
import logging.handlers
import queue
import sys
from typing import IO, Optional

from constants import Constants

_REPORT_LOGGER = "pkgprobe.report"
_reporter_ids = itertools.count()


class ConsoleReporter:
    """Formats package events and writes them through one writer thread.

    Args:
        verbose: Emit diagnostic lines as well as results.
        stream: Destination stream, stdout by default.
    """

    def __init__(self, verbose: bool = False, stream: Optional[IO[str]] = None):
        self.verbose = verbose
        self._queue: "queue.Queue[logging.LogRecord]" = queue.Queue()
        handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
        handler.setFormatter(logging.Formatter(Constants.REPORT_FORMAT))
        self._listener = logging.handlers.QueueListener(self._queue, handler)

        # One logger per reporter so tests and nested runs stay isolated
        self._logger = logging.getLogger(f"{_REPORT_LOGGER}.{next(_reporter_ids)}")
        self._logger.propagate = False
        self._logger.setLevel(logging.DEBUG if verbose else logging.INFO)
        self._queue_handler = logging.handlers.QueueHandler(self._queue)
        self._logger.addHandler(self._queue_handler)
        self._started = False

    def start(self) -> "ConsoleReporter":
        if not self._started:
            self._listener.start()
            self._started = True
        return self

    def stop(self) -> None:
        """Drain pending lines and stop the writer thread."""
        if self._started:
            self._listener.stop()
            self._started = False
        self._logger.removeHandler(self._queue_handler)

    def __enter__(self) -> "ConsoleReporter":
        return self.start()

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def result(self, package: str, message: str) -> None:
        """Always shown: a finding the user asked for."""
        self._logger.info("%s: %s", package, message)

    def diagnostic(self, package: str, message: str) -> None:
        """Shown only in verbose mode."""
        self._logger.debug("%s: %s", package, message)

    def message(self, text: str) -> None:
        """A line that is not tied to a package."""
        self._logger.info("%s", text)
