"""Line source and output sink backed by files or stdin/stdout."""

from __future__ import annotations

import io
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

import structlog

from .errors import InputSourceError, OutputSinkError, PipelineError

log = structlog.get_logger()

STDIO = "-"


class LineSource:
    """Single-use iterator over the raw lines of an open text stream.

    The stream is closed once exhausted or on ``close()``, unless it was
    borrowed (stdin).
    """

    def __init__(self, handle: TextIO, owned: bool = True) -> None:
        self._handle = handle
        self._owned = owned
        self._closed = False

    def __iter__(self) -> LineSource:
        return self

    def __next__(self) -> str:
        if self._closed:
            raise StopIteration
        try:
            return next(self._handle)
        except StopIteration:
            self.close()
            raise

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owned:
            self._handle.close()

    def __enter__(self) -> LineSource:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def read_hostnames(path: str | Path) -> LineSource:
    """Open ``path`` now and return a lazy iterator over its raw lines.

    The file is opened eagerly so a missing input fails before processing
    starts. ``-`` reads stdin. Lines end at ``\\n`` only; undecodable bytes are
    replaced.
    """
    if str(path) == STDIO:
        if isinstance(sys.stdin, io.TextIOWrapper):
            sys.stdin.reconfigure(encoding="utf-8", errors="replace", newline="\n")
        return LineSource(sys.stdin, owned=False)

    path = Path(path)
    if not path.is_file():
        raise InputSourceError(f"File does not exist: {path}")
    try:
        handle = open(path, encoding="utf-8", errors="replace", newline="\n")
    except OSError as exc:
        raise InputSourceError(f"Unable to open input file: {path}") from exc

    log.info("input_opened", path=str(path))
    return LineSource(handle)


@contextmanager
def open_output(path: str | Path) -> Iterator[TextIO]:
    """Open ``path`` for writing, truncating it. ``-`` writes to stdout.

    Errors from the final flush are raised as ``PipelineError``.
    """
    if str(path) == STDIO:
        yield sys.stdout
        try:
            sys.stdout.flush()
        except OSError as exc:
            raise PipelineError(f"Unable to flush output to stdout: {exc}") from exc
        return

    try:
        handle = open(path, "w", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise OutputSinkError(f"Could not open file for writing: {path}") from exc

    log.info("output_opened", path=str(path))
    try:
        yield handle
    finally:
        try:
            handle.close()
        except OSError as exc:
            log.error("output_close_failed", path=str(path), error=str(exc))
            raise PipelineError(f"Unable to write output file {path}: {exc}") from exc
