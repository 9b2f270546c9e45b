"""Exceptions raised for setup and mid-stream failures.

An invalid hostname is never an error; it is reported through
``ValidationResult.valid``.
"""

from __future__ import annotations


class DomainDedupError(Exception):
    """Base class for failures that abort a run."""


class SuffixTableError(DomainDedupError):
    """TLD reference data is missing, unreadable or empty."""


class InputSourceError(DomainDedupError):
    """Input file is missing or cannot be opened for reading."""


class OutputSinkError(DomainDedupError):
    """Output file cannot be opened for writing."""


class PipelineError(DomainDedupError):
    """Read or write failure after processing started."""
