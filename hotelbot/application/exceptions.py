class DateRangeParseError(ValueError):
    """Raised when guest text does not hold a usable DD/MM/YYYY - DD/MM/YYYY range."""

    def __init__(self, message: str, reason: str) -> None:
        super().__init__(message)
        self.reason = reason  # "no_match" | "invalid_date"


class CollaboratorError(RuntimeError):
    """Raised when an external collaborator (storage, QR, PDF, artifact store, sender) fails."""

    def __init__(self, message: str, step: str) -> None:
        super().__init__(message)
        self.step = step
