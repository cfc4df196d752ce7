#!/usr/bin/env python3
"""Failure conditions shared by the solvers. All of them are fatal for a run."""


class PuzzleError(Exception):
    pass


class ParseError(PuzzleError, ValueError):
    """Input text does not follow the puzzle grammar."""

    def __init__(self, message: str, line: int = 0):
        if line:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.line = line


class LandmarkNotFound(PuzzleError, LookupError):
    """A required cell (start, end, guard, ...) is missing from the grid."""


class NoPathFound(PuzzleError, RuntimeError):
    """The search queue ran dry before the goal was reached."""
