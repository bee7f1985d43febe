"""Line indexing used for location reporting."""

from __future__ import annotations

from typing import List

from ..models import IndexedLine


def index_lines(text: str) -> List[IndexedLine]:
    """
    Split text into 1-based numbered lines.

    Splits on line feeds and drops a trailing carriage return from each line.
    Empty lines are kept; whitespace is otherwise untouched.
    """
    return [
        IndexedLine(number=i, text=raw[:-1] if raw.endswith("\r") else raw)
        for i, raw in enumerate(text.split("\n"), 1)
    ]
