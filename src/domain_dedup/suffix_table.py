"""TLD and registrable second-level domain lookup tables."""

from __future__ import annotations

from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path

import structlog

from .errors import SuffixTableError

log = structlog.get_logger()

# IANA root zone list, upper-case, one label per line
BUNDLED_TLD_FILE = Path(__file__).parent / "data" / "tlds-alpha-by-domain.txt"

# Second-level labels that only form a complete name with a subdomain in front
# (example.com.br, example.co.uk)
REGISTRABLE_SLDS = frozenset({"AC", "CO", "COM", "EDU", "GOV", "ID", "ME", "NET", "ORG"})


def load_tld_file(path: str | Path) -> frozenset[str]:
    """Parse an IANA-style TLD list, skipping comments and blank lines."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SuffixTableError(f"Unable to read TLD file: {path}") from exc

    tlds = frozenset(
        line.strip().upper()
        for line in text.splitlines()
        if line.strip() and not line.lstrip().startswith("#")
    )
    if not tlds:
        raise SuffixTableError(f"TLD file contains no entries: {path}")

    log.debug("tld_file_loaded", path=str(path), count=len(tlds))
    return tlds


class SuffixTable:
    """Immutable, case-insensitive membership checks for TLDs and registrable SLDs."""

    __slots__ = ("_tlds", "_slds")

    def __init__(self, valid_tlds: Iterable[str], registrable_slds: Iterable[str] = REGISTRABLE_SLDS) -> None:
        self._tlds = frozenset(t.upper() for t in valid_tlds)
        self._slds = frozenset(s.upper() for s in registrable_slds)

    @classmethod
    def from_file(
        cls, path: str | Path | None = None, registrable_slds: Iterable[str] = REGISTRABLE_SLDS
    ) -> SuffixTable:
        return cls(load_tld_file(path or BUNDLED_TLD_FILE), registrable_slds)

    @property
    def valid_tlds(self) -> frozenset[str]:
        return self._tlds

    @property
    def registrable_slds(self) -> frozenset[str]:
        return self._slds

    def is_tld(self, candidate: str) -> bool:
        return candidate.upper() in self._tlds

    def is_registrable_sld(self, candidate: str) -> bool:
        return candidate.upper() in self._slds


@lru_cache(maxsize=1)
def default_table() -> SuffixTable:
    """Table built from the bundled TLD list, loaded once per process."""
    return SuffixTable.from_file()
