"""Reduce markup to its visible text."""

from __future__ import annotations


def strip_tags(text: str) -> str:
    """Drop everything between ``<`` and ``>`` and trim surrounding spaces.

    Both brackets are removed wherever they occur, and only the space
    character is trimmed from the ends.
    """
    kept: list[str] = []
    inside = False
    for ch in text:
        if ch == "<":
            inside = True
        elif ch == ">":
            inside = False
        elif not inside:
            kept.append(ch)
    return "".join(kept).strip(" ")