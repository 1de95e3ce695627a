"""Animation drivers for presenting tap outcomes."""

from .base import AnimationDriver, NullAnimationDriver
from .console import ConsoleAnimationDriver

__all__ = [
    "AnimationDriver",
    "ConsoleAnimationDriver",
    "NullAnimationDriver",
]
