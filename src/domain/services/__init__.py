"""Domain services package."""

from .identity import ActorResolver
from .progress import ProgressService

__all__ = ["ActorResolver", "ProgressService"]
