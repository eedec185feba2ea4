"""Domain errors. Recoverable: the console shell renders them as one-line messages."""


class SphoneError(Exception):
    """Base class for errors the user can recover from."""


class InvalidPhoneNumber(SphoneError, ValueError):
    """User-entered phone number is empty, has the wrong length, or contains non-digits."""


class DuplicateContact(SphoneError):
    """A contact with the same name and number already exists."""

    def __init__(self, name: str, number: str) -> None:
        self.name = name
        self.number = number
        super().__init__(
            f"A contact with name '{name}' and number '{number}' already exists!"
        )


class FeatureNotAvailable(SphoneError):
    """Menu path exists but has no implementation yet."""

    def __init__(self, feature: str) -> None:
        self.feature = feature
        super().__init__(f"Feature '{feature}' is not available yet.")
