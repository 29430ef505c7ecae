__all__ = ["NoneError"]


class NoneError(LookupError):
    """Raised when a value is requested from an empty option."""

    def __init__(self, msg: str = "option has no value") -> None:
        super().__init__(msg)
