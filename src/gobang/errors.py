"""Exceptions raised by the Gobang core."""

from __future__ import annotations


class GobangError(Exception):
    """Base class for all errors raised by the game core."""


class InvalidMoveError(GobangError, ValueError):
    """A move targets a cell outside the board or one that is already taken."""


class NoCandidateMovesError(GobangError, RuntimeError):
    """The search was asked for a move on a board with no empty cell left."""
