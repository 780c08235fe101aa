"""WebPlay exceptions."""


class ScreenplayError(Exception):
    """Base exception for all WebPlay errors."""


class MissingAbilityError(ScreenplayError):
    """Raised when an actor is asked for an ability it was not given."""

    def __init__(self, actor: str, ability: str) -> None:
        self.actor = actor
        self.ability = ability
        super().__init__(f"{actor} does not have the ability {ability}")


class UnknownStateError(ScreenplayError):
    """Raised when an actor is asked for a state that was never set."""

    def __init__(self, actor: str, key: str) -> None:
        self.actor = actor
        self.key = key
        super().__init__(f"{actor} has no state '{key}'")


class RequestError(ScreenplayError):
    """Raised when an HTTP request cannot be sent or read."""

    def __init__(self, method: str, url: str, detail: str = "") -> None:
        self.method = method
        self.url = url
        msg = f"{method} {url} failed"
        if detail:
            msg += f": {detail}"
        super().__init__(msg)
