"""Error types raised while turning statement rows into transactions.

All of them derive from :class:`StatementError` (itself a ``ValueError``) so
callers can catch the whole family at once. ``line`` is the 1-based physical
line of the offending record in the input, when known.
"""

from __future__ import annotations


class StatementError(ValueError):
    def __init__(self, message: str, *, line: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line = line

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"line {self.line}: {self.message}"


class InvalidDate(StatementError):
    """The date cell does not match ``DD/MM/YYYY``."""

    def __init__(self, text: str, *, line: int | None = None) -> None:
        super().__init__(f"invalid DD/MM/YYYY date: {text!r}", line=line)
        self.text = text


class MissingDescription(StatementError):
    def __init__(self, *, line: int | None = None) -> None:
        super().__init__("row has no description", line=line)


class MissingAccount(StatementError):
    """A decoded row has no account identifier; the whole batch fails."""

    def __init__(self, *, line: int | None = None) -> None:
        super().__init__("row has no account number", line=line)


__all__ = ["InvalidDate", "MissingAccount", "MissingDescription", "StatementError"]
