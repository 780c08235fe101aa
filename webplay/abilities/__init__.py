"""Ability base class."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from webplay.actor import Actor

A = TypeVar("A", bound="Ability")


class Ability:
    """Something an actor can do, registered on the actor by its type."""

    @classmethod
    def of(cls: type[A], actor: Actor) -> A:
        """Look this ability up on ``actor``.

        Raises:
            MissingAbilityError: If the actor was not given this ability.
        """
        return actor.ability(cls)
