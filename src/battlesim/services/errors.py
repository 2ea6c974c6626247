"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a combatant cannot be created."""


class InvalidSelection(Exception):
    """Raised when a chosen move index or inventory slot cannot be used.

    The condition is recoverable: the battle loop asks the decision provider
    again instead of aborting.
    """

    def __init__(self, message: str, *, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index
