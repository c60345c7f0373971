"""Output formatters — titled text tables and JSON."""

import json
from typing import Any, Mapping

from access_stats.stats import AccessStats

ENDPOINT_TITLE = "Endpoint Calls"
MINUTE_TITLE = "API Calls Per Minute"
STATUS_CODE_TITLE = "API Calls Per Status Code"

NO_DATA = "No data found."

HEADERS = ("(index)", "index", "count")


def to_rows(counts: Mapping[Any, int]) -> list[dict[str, Any]]:
    """[{index: key, count: value}, ...] in mapping order."""
    return [{"index": key, "count": count} for key, count in counts.items()]


def format_table(counts: Mapping[Any, int], title: str) -> str:
    """Render one frequency table, preceded by its title.

    Columns are the row number, the bucket key and its count. An empty
    mapping renders as the NO_DATA notice.
    """
    lines = ["", title]
    if not counts:
        lines.append(NO_DATA)
        return "\n".join(lines)

    cells = [
        (str(i), str(row["index"]), str(row["count"]))
        for i, row in enumerate(to_rows(counts))
    ]
    widths = [
        max(len(HEADERS[col]), *(len(cell[col]) for cell in cells))
        for col in range(len(HEADERS))
    ]

    border = "+" + "+".join("-" * (w + 2) for w in widths) + "+"

    def _row(values) -> str:
        return "| " + " | ".join(v.ljust(w) for v, w in zip(values, widths)) + " |"

    lines.append(border)
    lines.append(_row(HEADERS))
    lines.append(border)
    lines.extend(_row(cell) for cell in cells)
    lines.append(border)
    return "\n".join(lines)


def format_stats_text(stats: AccessStats) -> str:
    """All three tables, in display order."""
    return "\n".join([
        format_table(stats.endpoint_calls, ENDPOINT_TITLE),
        format_table(stats.calls_per_minute, MINUTE_TITLE),
        format_table(stats.calls_by_status_code, STATUS_CODE_TITLE),
    ])


def format_stats_json(stats: AccessStats) -> str:
    """JSON stats output. Row lists keep first-seen order."""
    return json.dumps({
        "total_records": stats.total_records,
        "endpoint_calls": to_rows(stats.endpoint_calls),
        "calls_per_minute": to_rows(stats.calls_per_minute),
        "calls_by_status_code": to_rows(stats.calls_by_status_code),
    }, indent=2)
