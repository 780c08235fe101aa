"""Question interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from webplay.actor import Actor


class Question(ABC):
    """Base class for questions an actor answers."""

    @abstractmethod
    async def answered_by(self, actor: Actor) -> Any:
        """Answer the question; failed checks raise instead of returning False."""
