"""Clients for the upstream provisioning API.

This module provides typed request clients that sit on top of an account
executor, starting with the 911 (emergency services) actions.
"""

from voip_api.platform.clients.x911 import (
    X911ArgumentError,
    X911Client,
    X911ClientConfig,
    X911ClientError,
    X911NotImplementedError,
    X911ResponseError,
    X911Result,
    X911SequenceError,
    X911UnsupportedActionError,
)

__all__ = [
    # 911 Client
    "X911Client",
    "X911ClientConfig",
    "X911Result",
    # 911 Exceptions
    "X911ClientError",
    "X911ArgumentError",
    "X911NotImplementedError",
    "X911SequenceError",
    "X911UnsupportedActionError",
    "X911ResponseError",
]
