"""Statistics — endpoint calls, calls per minute, calls per status code."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

from access_stats.parser import LogRecord

# Bucket for records whose timestamp is not a real instant
INVALID_MINUTE = "NaN:NaN"


@dataclass
class AccessStats:
    total_records: int = 0
    endpoint_calls: dict[str, int] = field(default_factory=dict)
    calls_per_minute: dict[str, int] = field(default_factory=dict)
    calls_by_status_code: dict[int, int] = field(default_factory=dict)


def count_endpoint_calls(records: Iterable[LogRecord]) -> Counter:
    """Count calls per 'METHOD PATH', in first-seen order."""
    counter = Counter()
    for record in records:
        if record.endpoint:
            counter[record.endpoint] += 1
    return counter


def minute_label(record: LogRecord) -> str:
    """Local 'hour:minute' without zero padding, e.g. '9:5'."""
    if record.timestamp is None:
        return INVALID_MINUTE
    local = record.timestamp.astimezone()
    return f"{local.hour}:{local.minute}"


def count_calls_per_minute(records: Iterable[LogRecord]) -> Counter:
    """Count calls per minute of day. Every record lands in some bucket."""
    counter = Counter()
    for record in records:
        counter[minute_label(record)] += 1
    return counter


def count_calls_by_status_code(records: Iterable[LogRecord]) -> Counter:
    """Count calls per status code, in first-seen order."""
    counter = Counter()
    for record in records:
        if record.status_code is not None:
            counter[record.status_code] += 1
    return counter


def compute_stats(records: list[LogRecord]) -> AccessStats:
    """Run all three counters over the same record store."""
    return AccessStats(
        total_records=len(records),
        endpoint_calls=dict(count_endpoint_calls(records)),
        calls_per_minute=dict(count_calls_per_minute(records)),
        calls_by_status_code=dict(count_calls_by_status_code(records)),
    )
