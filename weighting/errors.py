class WeightingError(ValueError):
    """Base class for errors raised while deriving weights."""


class EmptyItemsError(WeightingError):
    def __init__(self, message: str = "Items cannot be empty") -> None:
        super().__init__(message)


class ValidationError(WeightingError):
    pass
