# ticketbridge/core/exceptions.py
"""Custom exceptions for ticketbridge."""

from typing import Any


class TicketBridgeError(Exception):
    """Base exception for all ticketbridge errors."""

    pass


class ConfigurationError(TicketBridgeError):
    """Raised when required configuration is missing or invalid."""

    pass


class BackendError(TicketBridgeError):
    """Raised when a call to the issue-tracking backend fails.

    Covers both transport failures (no response) and non-2xx responses.

    Attributes:
        method: HTTP method of the failed call.
        path: Backend path of the failed call.
        status_code: Response status, or None when no response was received.
        body: Response body (parsed JSON when possible) for diagnostics.
    """

    def __init__(
        self,
        message: str,
        *,
        method: str,
        path: str,
        status_code: int | None = None,
        body: Any = None,
    ):
        """Initialize BackendError.

        Args:
            message: Human-readable error message.
            method: HTTP method of the failed call.
            path: Backend path of the failed call.
            status_code: Response status, if a response was received.
            body: Response body, if a response was received.
        """
        self.method = method
        self.path = path
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class ResolutionError(TicketBridgeError):
    """Raised when a name or email cannot be resolved to a backend identifier."""

    pass


class UserResolutionError(ResolutionError):
    """Raised when a reporter account cannot be found or created."""

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"Error getting/creating user for {email}")


class PriorityResolutionError(ResolutionError):
    """Raised when a priority name cannot be resolved to an identifier."""

    def __init__(self, message: str, priority: str):
        self.priority = priority
        super().__init__(message)


class PriorityNotFoundError(PriorityResolutionError):
    """Raised when the backend has no priority with the requested name."""

    def __init__(self, priority: str):
        super().__init__(f"Priority '{priority}' is not valid", priority)


class PriorityLookupError(PriorityResolutionError):
    """Raised when the backend priority list cannot be fetched."""

    def __init__(self, priority: str):
        super().__init__(f"Error getting priority ID for '{priority}'", priority)
