from __future__ import annotations

import re

from .models import DomainParts

_ALLOWED_CHARS = re.compile(r"[A-Za-z0-9._-]+")


def parse_hostname(hostname: str, strict: bool = False) -> DomainParts | None:
    """Split a trimmed hostname into its trailing subdomain, domain and tld labels.

    Only the last three labels are considered; anything to the left is dropped.
    Returns None when fewer than two labels remain, or when ``strict`` is set and
    the hostname has characters outside ``[A-Za-z0-9._-]``.
    """
    if strict and not _ALLOWED_CHARS.fullmatch(hostname):
        return None

    labels = hostname.split(".")[-3:]
    if len(labels) < 2:
        return None

    tld = labels.pop()
    domain = labels.pop()
    subdomain = labels.pop() if labels else ""
    return DomainParts(subdomain=subdomain, domain=domain, tld=tld)
