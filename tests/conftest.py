"""Shared pytest fixtures for the access-stats test suite."""

import time

import pytest

from access_stats.parser import parse_line


def make_line(
    ts: str = "2024-01-01 10:05 +00:00",
    method: str = "GET",
    path: str = "/foo",
    status: str = "200",
    request_id: str | None = "123",
) -> str:
    """Build one access log line in the supported format."""
    bracket = f"[{request_id}] " if request_id is not None else ""
    return f'{ts}: host-1 {bracket}"{method} {path} HTTP/1.1" {status} 512'


@pytest.fixture()
def line_factory():
    """Return the line builder so tests can vary individual fields."""
    return make_line


@pytest.fixture()
def utc(monkeypatch):
    """Pin the process local time zone to UTC for the duration of a test."""
    monkeypatch.setenv("TZ", "UTC")
    time.tzset()
    yield
    monkeypatch.undo()
    time.tzset()


@pytest.fixture()
def sample_records():
    """Five parsed records across two endpoints, two minutes and two codes."""
    lines = [
        make_line(ts="2024-01-01 10:05 +00:00", path="/foo", status="200"),
        make_line(ts="2024-01-01 10:05 +00:00", path="/bar", status="404"),
        make_line(ts="2024-01-01 10:06 +00:00", path="/foo", status="200"),
        make_line(ts="2024-01-02 10:06 +00:00", method="POST", path="/foo", status="201"),
        make_line(ts="2024-01-01 10:05 +00:00", path="/foo", status="200"),
    ]
    return [parse_line(line) for line in lines]
