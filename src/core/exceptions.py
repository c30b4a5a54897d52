"""Exceptions raised by the automation facade."""


class AutomationError(Exception):
    """Base class for facade errors."""


class InteractionError(AutomationError):
    """The browser could not resolve a locator or complete an action."""

    def __init__(self, action: str, locator: str | None = None, reason: str = "") -> None:
        """Initialize interaction error.

        Args:
            action: Name of the facade action that failed
            locator: Locator string involved, if any
            reason: Short description of the underlying failure
        """
        self.action = action
        self.locator = locator
        self.reason = reason

        message = f"{action} failed"
        if locator is not None:
            message += f" | locator={locator}"
        if reason:
            message += f" | {reason}"
        super().__init__(message)


class InvalidAmountError(AutomationError, ValueError):
    """Amount string could not be parsed as a number."""

    def __init__(self, amount: str) -> None:
        self.amount = amount
        super().__init__(f"Invalid amount: {amount!r}")
