"""Configuration for the 911 client.

This module provides the environment enum and the frozen configuration
dataclass used by X911Client.
"""

from dataclasses import dataclass
from enum import StrEnum


class Environment(StrEnum):
    """Upstream API environment the account executor talks to."""

    SANDBOX = "sandbox"
    PRODUCTION = "production"


@dataclass(frozen=True)
class X911ClientConfig:
    """Configuration for an X911Client instance.

    Attributes:
        environment: Upstream environment (default: PRODUCTION).
        enforce_environment: Reject actions the environment does not declare
            before calling the executor (default: True).
    """

    environment: Environment = Environment.PRODUCTION
    enforce_environment: bool = True
