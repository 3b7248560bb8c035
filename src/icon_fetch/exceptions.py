"""Exceptions raised by icon-fetch."""


class IconFetchError(Exception):
    """Base exception for all icon-fetch errors."""


class InvalidDomainError(IconFetchError, ValueError):
    """User input could not be turned into a canonical domain."""

    def __init__(self, raw_input: str) -> None:
        self.raw_input = raw_input
        super().__init__(f"Invalid domain: {raw_input!r}")
