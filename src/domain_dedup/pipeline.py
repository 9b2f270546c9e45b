"""Streaming dedup: validate each line and write every new canonical name once."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

import structlog

from .errors import PipelineError
from .models import RunStats
from .validator import DomainValidator

log = structlog.get_logger()

DEFAULT_PROGRESS_INTERVAL = 100_000


class DedupPipeline:
    """Single-pass consumer of raw hostname lines.

    Owns the seen-set for one run. Only valid names are ever added to it, and a
    name is written to the sink the first time it is seen, so output keeps
    first-occurrence order.
    """

    def __init__(self, validator: DomainValidator, progress_interval: int = DEFAULT_PROGRESS_INTERVAL) -> None:
        self.validator = validator
        self.progress_interval = progress_interval
        self.stats = RunStats()
        self._seen: set[str] = set()

    @property
    def seen(self) -> frozenset[str]:
        return frozenset(self._seen)

    def process(self, line: str) -> str | None:
        """Validate one raw line; return the canonical name if it is new and valid."""
        result = self.validator.validate(line)
        self.stats.lines_processed += 1

        if not result.valid:
            self.stats.invalid_count += 1
            return None

        self.stats.valid_count += 1
        if result.name in self._seen:
            self.stats.duplicate_count += 1
            return None

        self._seen.add(result.name)
        self.stats.unique_count += 1
        return result.name

    def run(self, lines: Iterable[str], sink: TextIO) -> RunStats:
        """Consume ``lines`` to exhaustion, writing new names to ``sink``."""
        try:
            for line in lines:
                name = self.process(line)
                if name is not None:
                    sink.write(f"{name}\n")
                self._report_progress()
        except OSError as exc:
            log.exception("pipeline_io_failed", lines_processed=self.stats.lines_processed)
            raise PipelineError(f"I/O failure after {self.stats.lines_processed} lines: {exc}") from exc

        return self.stats

    def _report_progress(self) -> None:
        n = self.stats.lines_processed
        if self.progress_interval > 0 and n % self.progress_interval == 0:
            log.info("progress", lines_processed=n, unique=self.stats.unique_count)
