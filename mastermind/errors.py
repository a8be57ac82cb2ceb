"""
Exceptions shared by the engine, the secret sources and the API client.
"""

from typing import Optional


class MastermindError(Exception):
    """Base class for everything this package raises on purpose."""


class ContractViolation(MastermindError, ValueError):
    """A caller broke an invariant (mismatched code lengths, no active game...)."""


class APIError(MastermindError):
    """The remote game service could not give us a usable answer."""

    status_code: Optional[int] = None

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404


class BadStatusError(APIError):
    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        text = f"HTTP {status_code}"
        if message:
            text += f": {message}"
        super().__init__(text)


class DecodingError(APIError):
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Decoding error: {cause}")


class NetworkError(APIError):
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Network error: {cause}")
