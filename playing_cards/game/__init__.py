"""Game logic."""

from .session import MAX_FACE_UP, MatchSession

__all__ = [
    "MAX_FACE_UP",
    "MatchSession",
]
