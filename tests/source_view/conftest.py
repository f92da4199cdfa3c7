"""Shared fixtures for source view tests."""

from typing import List, Tuple

import pytest

from sqlsource.source_view import SourceViewSurface


class RecordingSurface(SourceViewSurface):
    """Display surface that records every call made to it."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str | None]] = []
        self.title: str | None = None
        self.html: str | None = None
        self.reveal_count = 0

    def set_title(self, title: str) -> None:
        self.calls.append(("set_title", title))
        self.title = title

    def set_html(self, html: str) -> None:
        self.calls.append(("set_html", html))
        self.html = html

    def reveal(self) -> None:
        self.calls.append(("reveal", None))
        self.reveal_count += 1


@pytest.fixture
def surface():
    """Create a fresh recording surface for each test."""
    return RecordingSurface()
