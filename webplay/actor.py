"""Actors: named holders of abilities that perform actions and ask questions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from webplay.exceptions import MissingAbilityError, UnknownStateError
from webscope.logger import get_logger

if TYPE_CHECKING:
    from webplay.abilities import Ability
    from webplay.actions import Action
    from webplay.questions import Question

log = get_logger(__name__)

A = TypeVar("A", bound="Ability")


class Actor:
    """Runs its actions one after another, in the order they were given.

    Abilities live in an explicit registry keyed by ability type. Actors
    share nothing with each other, so several actors can run as separate
    asyncio tasks.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._abilities: dict[type[Ability], Ability] = {}
        self._states: dict[str, Any] = {}

    @classmethod
    def named(cls, name: str) -> Actor:
        return cls(name)

    def can(self, *abilities: Ability) -> Actor:
        """Give the actor abilities; a later ability of the same type wins."""
        for ability in abilities:
            self._abilities[type(ability)] = ability
        return self

    def ability(self, ability_type: type[A]) -> A:
        """Return the registered ability of ``ability_type`` (or a subclass)."""
        found = self._abilities.get(ability_type)
        if found is None:
            for registered in self._abilities.values():
                if isinstance(registered, ability_type):
                    found = registered
                    break
        if found is None:
            raise MissingAbilityError(self.name, ability_type.__name__)
        return found  # type: ignore[return-value]

    def with_state(self, key: str, value: Any) -> Actor:
        self._states[key] = value
        return self

    def states(self, key: str) -> Any:
        if key not in self._states:
            raise UnknownStateError(self.name, key)
        return self._states[key]

    async def attempts_to(self, *actions: Action) -> Any:
        """Perform actions in order; the first failure stops the rest.

        Returns the result of the last action.
        """
        result: Any = None
        for action in actions:
            log.debug("action_started", actor=self.name, action=type(action).__name__)
            try:
                result = await action.perform_as(self)
            except Exception as exc:
                log.warning(
                    "action_failed",
                    actor=self.name,
                    action=type(action).__name__,
                    error=str(exc),
                )
                raise
        return result

    async def asks(self, *questions: Question) -> Any:
        """Answer questions in order; returns a list when asked several."""
        answers = []
        for question in questions:
            answer = await question.answered_by(self)
            log.debug(
                "question_answered",
                actor=self.name,
                question=type(question).__name__,
                answer=answer,
            )
            answers.append(answer)
        return answers[0] if len(answers) == 1 else answers

    def __repr__(self) -> str:
        return f"Actor({self.name!r})"
