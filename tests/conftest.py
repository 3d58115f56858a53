"""Pytest configuration and shared fixtures."""

from pathlib import Path
from typing import Callable

import pytest

from jiraport.jira.models import HeaderEntry


SAMPLE_CSV = (
    "Issue key,Summary,Status,Priority,Issue Type,Assignee,Description,Watchers,Creator\n"
    "PROJ-1,Fix bug,Open,High,Bug,bob,desc text,bob,carol\n"
    "PROJ-2,Add feature,Done,Low,Story,,,,\n"
)


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper that writes CSV text to a file in tmp_path."""

    def _write(text: str, name: str = "export.csv") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8", newline="")
        return path

    return _write


@pytest.fixture
def sample_csv(write_csv) -> Path:
    """A two-row Jira export."""
    return write_csv(SAMPLE_CSV)


@pytest.fixture
def identity_converter() -> Callable[[str], str]:
    """Markup converter that returns its input unchanged."""
    return lambda text: text


@pytest.fixture
def make_header_map() -> Callable[..., list[HeaderEntry]]:
    """Return a helper that builds a header map for already-unique headers."""

    def _make(*headers: str) -> list[HeaderEntry]:
        return [HeaderEntry(deduped=h, original=h) for h in headers]

    return _make
