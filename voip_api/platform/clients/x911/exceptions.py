"""Custom exception hierarchy for the 911 client.

This module defines the errors raised locally by the 911 client, before or
after the account executor is involved. Transport and remote faults raised by
the executor itself are propagated untouched.
"""

from typing import Any


class X911ClientError(Exception):
    """Base exception for all 911 client errors."""


class X911ArgumentError(X911ClientError, TypeError):
    """Raised when an operation argument is not text."""

    def __init__(self, parameter: str, value: Any, action: str | None = None):
        self.parameter = parameter
        self.value = value
        self.action = action
        action_info = f" for {action}" if action else ""
        super().__init__(
            f"Invalid argument{action_info}: {parameter} must be str, got {type(value).__name__}"
        )


class X911NotImplementedError(X911ClientError, NotImplementedError):
    """Raised for operations that are declared upstream but not supported."""

    def __init__(self, action: str):
        self.action = action
        super().__init__(f"Operation not implemented: {action}")


class X911SequenceError(X911ClientError, ValueError):
    """Raised when an accessor is used after the wrong operation."""

    def __init__(self, message: str, action: str | None = None):
        self.action = action
        super().__init__(message)


class X911UnsupportedActionError(X911ClientError):
    """Raised when an action is not available in the configured environment."""

    def __init__(self, action: str, environment: str):
        self.action = action
        self.environment = environment
        super().__init__(f"Action {action} is not available in the {environment} environment")


class X911ResponseError(X911ClientError):
    """Raised when the executor returns something that cannot be decoded."""

    def __init__(self, message: str, action: str | None = None):
        self.action = action
        action_info = f" [action: {action}]" if action else ""
        super().__init__(f"Invalid response{action_info}: {message}")
