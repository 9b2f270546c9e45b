"""Classify hostnames against the suffix table and build their canonical name."""

from __future__ import annotations

from .models import ValidationResult
from .parser import parse_hostname
from .suffix_table import SuffixTable, default_table


class DomainValidator:
    """Stateless hostname validator.

    The canonical name is ``domain.tld`` for everything except names under a
    registrable SLD (``example.com.br``), which keep their subdomain label.
    Label case is preserved; lookups are case-insensitive.
    """

    def __init__(self, strict: bool = False, table: SuffixTable | None = None) -> None:
        self.strict = strict
        self.table = table if table is not None else default_table()

    def validate(self, hostname: str) -> ValidationResult:
        hostname = hostname.strip()
        parts = parse_hostname(hostname, self.strict)

        if parts is None:
            return ValidationResult(name=hostname, valid=False)

        if not self.table.is_tld(parts.tld):
            return ValidationResult(name=parts.registered_name, valid=False)

        if self.table.is_registrable_sld(parts.domain):
            # com.br alone is not a registrable name, sub.com.br is
            if not parts.subdomain:
                return ValidationResult(name=parts.registered_name, valid=False)
            return ValidationResult(name=parts.full_name, valid=True)

        return ValidationResult(name=parts.registered_name, valid=True)
