"""
Checks shared by request schemas.

Values are validated, never rewritten: what the client sends is what gets
stored and returned.
"""

from __future__ import annotations


def require_text(value: str) -> str:
    """
    Accept any string with visible content; return it unchanged.

    PostgreSQL `text` cannot hold NUL, so it is rejected here as a client
    error instead of failing later in the INSERT.
    """
    if not value.strip():
        raise ValueError("must not be empty or whitespace")
    if "\x00" in value:
        raise ValueError("must not contain NUL characters")
    return value
