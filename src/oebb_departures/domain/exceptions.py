"""Domain exceptions."""


class DepartureFetchError(Exception):
    """Raised when the departure board could not be fetched."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
