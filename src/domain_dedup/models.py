from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DomainParts(BaseModel):
    """Trailing subdomain/domain/tld labels of a hostname."""

    model_config = ConfigDict(frozen=True)

    subdomain: str = ""
    domain: str
    tld: str

    @property
    def registered_name(self) -> str:
        return f"{self.domain}.{self.tld}"

    @property
    def full_name(self) -> str:
        if not self.subdomain:
            return self.registered_name
        return f"{self.subdomain}.{self.domain}.{self.tld}"


class ValidationResult(BaseModel):
    """Canonical name for one hostname and whether it may be emitted."""

    model_config = ConfigDict(frozen=True)

    name: str
    valid: bool


class RunStats(BaseModel):
    """Statistics for a single dedup run."""

    lines_processed: int = 0
    valid_count: int = 0
    invalid_count: int = 0
    duplicate_count: int = 0
    unique_count: int = 0
