from __future__ import annotations

import pytest
import structlog

from domain_dedup.suffix_table import SuffixTable
from domain_dedup.validator import DomainValidator


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


@pytest.fixture
def table() -> SuffixTable:
    return SuffixTable(["COM", "ORG", "NET", "BR", "UK", "io"])


@pytest.fixture
def validator(table: SuffixTable) -> DomainValidator:
    return DomainValidator(table=table)
