"""Domain errors."""


class MissingRequiredHeaderError(ValueError):
    """Raised when a request lacks a header the inspection cannot do without."""

    def __init__(self, header_name: str) -> None:
        super().__init__(f"Missing required header: {header_name}")
        self.header_name = header_name
