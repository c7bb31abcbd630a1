"""Small helpers shared by the command-line front end."""

from __future__ import annotations


def clean_input(text: str) -> list[str]:
    """Split ``text`` on any whitespace and lower-case every word."""
    return [word.lower() for word in text.split()]