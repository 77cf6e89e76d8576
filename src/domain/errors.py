"""Domain errors raised by account and monthly data operations."""


class WealthError(Exception):
    """Base class for user-facing wealth tracking errors."""


class EmptyNameError(WealthError):
    """Raised when an account name is blank after trimming."""

    def __init__(self) -> None:
        super().__init__("Account name cannot be empty.")


class DuplicateNameError(WealthError):
    """Raised when an account name collides with an existing account."""

    def __init__(self, name: str) -> None:
        super().__init__("An account with this name already exists.")
        self.name = name


class ValidationError(WealthError):
    """Raised when monthly entry input is missing or malformed."""


class UnsupportedCurrencyError(WealthError):
    """Raised when a currency code is outside the supported set."""

    def __init__(self, currency: str | None) -> None:
        super().__init__(f"Unsupported currency: {currency}")
        self.currency = currency


__all__ = [
    "WealthError",
    "EmptyNameError",
    "DuplicateNameError",
    "ValidationError",
    "UnsupportedCurrencyError",
]
