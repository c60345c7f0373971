"""Whole-file reading and record store assembly."""

import logging

from access_stats.errors import FileAccessError
from access_stats.parser import LogRecord, parse_line

logger = logging.getLogger(__name__)

MAX_RECORDS = 20


def read_log_text(path: str, encoding: str = "utf-8") -> str:
    """Read the entire log file as text.

    Raises FileAccessError if the file is missing, unreadable, or not valid
    text in the given encoding.
    """
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
        raise FileAccessError(path, reason) from exc


def split_lines(text: str) -> list[str]:
    """Split on line feeds only; carriage returns stay with their line."""
    return text.split("\n")


def build_record_store(text: str, limit: int = MAX_RECORDS) -> list[LogRecord]:
    """Parse every line in order and keep the first `limit` records."""
    records = [r for r in map(parse_line, split_lines(text)) if r is not None]
    logger.debug("Parsed %d records, keeping %d", len(records), min(len(records), limit))
    return records[:limit]


def load_records(path: str, limit: int = MAX_RECORDS, encoding: str = "utf-8") -> list[LogRecord]:
    """Read a log file and build its record store."""
    text = read_log_text(path, encoding=encoding)
    logger.debug("Read %d characters from %s", len(text), path)
    return build_record_store(text, limit=limit)
