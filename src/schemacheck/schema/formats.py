"""String format checks and the literal tables shared by the formatter and
the example generator."""

import ipaddress
import re
from collections.abc import Callable
from datetime import datetime
from urllib.parse import urlparse

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
UUID_RE = re.compile(
    r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
)
DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
DATE_TIME_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|z|[+-]\d{2}:\d{2})$")
TIME_RE = re.compile(r"^\d{2}:\d{2}:\d{2}(\.\d+)?(Z|z|[+-]\d{2}:\d{2})?$")
URI_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*$")

SSN_PATTERN = r"^\d{3}-\d{2}-\d{4}$"
PHONE_PATTERN = r"^\d{3}-\d{3}-\d{4}$"
SSN_RE = re.compile(SSN_PATTERN)
PHONE_RE = re.compile(PHONE_PATTERN)

# Canonical example literal per format
FORMAT_EXAMPLES: dict[str, str] = {
    "email": "user@example.com",
    "uri": "https://example.com",
    "url": "https://example.com",
    "uuid": "123e4567-e89b-12d3-a456-426614174000",
    "date": "2024-01-15",
    "date-time": "2024-01-15T10:30:00Z",
    "time": "10:30:00",
    "ssn": "123-45-6789",
    "phone": "555-123-4567",
    "ipv4": "192.168.1.1",
    "ipv6": "2001:db8::1",
}

# Human description used in fix suggestions
FORMAT_LABELS: dict[str, str] = {
    "email": "email address",
    "uri": "URI",
    "url": "URI",
    "uuid": "UUID",
    "date": "date in ISO format",
    "date-time": "date-time in ISO format",
    "time": "time in ISO format",
    "ipv4": "IPv4 address",
    "ipv6": "IPv6 address",
}

# Formats described by a digit template rather than an example literal
FORMAT_TEMPLATES: dict[str, tuple[str, str]] = {
    "ssn": ("XXX-XX-XXXX", "123-45-6789"),
    "phone": ("XXX-XXX-XXXX", "555-123-4567"),
}


def template_for_pattern(pattern: str) -> tuple[str, str] | None:
    """Return the (template, example) pair for a recognised SSN or phone regex."""
    if r"\d{3}-\d{2}-\d{4}" in pattern:
        return FORMAT_TEMPLATES["ssn"]
    if r"\d{3}-\d{3}-\d{4}" in pattern:
        return FORMAT_TEMPLATES["phone"]
    return None


def _is_uri(value: str) -> bool:
    parsed = urlparse(value)
    if not parsed.scheme or not URI_SCHEME_RE.fullmatch(parsed.scheme):
        return False
    return bool(parsed.netloc or parsed.path)


def _is_date(value: str) -> bool:
    if not DATE_RE.fullmatch(value):
        return False
    try:
        datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        return False
    return True


def _is_date_time(value: str) -> bool:
    if not DATE_TIME_RE.fullmatch(value):
        return False
    try:
        datetime.fromisoformat(value.replace("Z", "+00:00").replace("z", "+00:00"))
    except ValueError:
        return False
    return True


def _is_ip(version: int) -> Callable[[str], bool]:
    def check(value: str) -> bool:
        try:
            return ipaddress.ip_address(value).version == version
        except ValueError:
            return False

    return check


FORMAT_CHECKERS: dict[str, Callable[[str], bool]] = {
    "email": lambda value: bool(EMAIL_RE.fullmatch(value)),
    "uri": _is_uri,
    "url": _is_uri,
    "uuid": lambda value: bool(UUID_RE.fullmatch(value)),
    "date": _is_date,
    "date-time": _is_date_time,
    "time": lambda value: bool(TIME_RE.fullmatch(value)),
    "ssn": lambda value: bool(SSN_RE.fullmatch(value)),
    "phone": lambda value: bool(PHONE_RE.fullmatch(value)),
    "ipv4": _is_ip(4),
    "ipv6": _is_ip(6),
}


def check_format(format_name: str, value: str) -> bool:
    """Check ``value`` against a named format. Unknown formats always pass."""
    checker = FORMAT_CHECKERS.get(format_name)
    if checker is None:
        return True
    return checker(value)
