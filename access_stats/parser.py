"""Access log line parser — frozen dataclass + compiled regex."""

import math
import re
from dataclasses import dataclass
from datetime import datetime

# 2024-01-01 10:05 +00:00: <filler> [123] "GET /foo HTTP/1.1" 200 <rest>
LOG_PATTERN = re.compile(
    r'(?P<timestamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2} \+\d{2}:\d{2}): .*? '
    r'(?:\[(?P<request_id>\d+)\] )?'
    r'"(?P<method>[^\s"]+) (?P<path>[^\s"]+) .*?" '
    r'(?P<status>\d{3}) ',
    re.ASCII,
)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M %z"


@dataclass(frozen=True)
class LogRecord:
    timestamp: datetime | None
    endpoint: str | None = None
    status_code: int | None = None

    @property
    def epoch_millis(self) -> float:
        """Milliseconds since the epoch, NaN for an invalid instant."""
        if self.timestamp is None:
            return math.nan
        return self.timestamp.timestamp() * 1000


def parse_timestamp(text: str) -> datetime | None:
    """Parse 'YYYY-MM-DD HH:MM +HH:MM' into an aware datetime.

    Returns None when the text is shaped right but is not a real instant
    (e.g. month 13); the caller still keeps the record.
    """
    try:
        return datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError:
        return None


def parse_line(line: str) -> LogRecord | None:
    """Parse a single access log line. Returns None for lines that don't match."""
    match = LOG_PATTERN.search(line)
    if not match:
        return None

    return LogRecord(
        timestamp=parse_timestamp(match.group("timestamp")),
        endpoint=f"{match.group('method')} {match.group('path')}",
        status_code=int(match.group("status")),
    )
