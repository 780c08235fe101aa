"""Action interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from webplay.actor import Actor


class Action(ABC):
    """Base class for actions an actor performs."""

    @abstractmethod
    async def perform_as(self, actor: Actor) -> Any:
        """Perform the action using the actor's abilities."""
