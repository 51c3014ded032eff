"""Whitespace trimming and lenient file reading."""

from __future__ import annotations

import os

# The characters the C locale counts as whitespace.
C_WHITESPACE = " \t\n\v\f\r"

MISSING_FILE_TEXT = "compilation error file does not exist"


def ltrim(s: str) -> str:
    """Return ``s`` without leading whitespace."""
    return s.lstrip(C_WHITESPACE)


def rtrim(s: str) -> str:
    """Return ``s`` without trailing whitespace."""
    return s.rstrip(C_WHITESPACE)


def trim(s: str) -> str:
    """Return ``s`` without leading or trailing whitespace."""
    return s.strip(C_WHITESPACE)


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the whole text of ``path``, or a fixed notice if it cannot be opened."""
    try:
        with open(path, encoding="utf-8", errors="replace", newline="") as stream:
            return stream.read()
    except OSError:
        return MISSING_FILE_TEXT