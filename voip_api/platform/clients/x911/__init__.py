"""911 client module for emergency-services address provisioning.

This module provides a typed client for the 911 family of provisioning
actions: address validation, location management, provisioning and lookup
for DIDs.

The module includes:
- Action identifiers and per-environment action sets
- Argument validation and dispatch through an account executor
- Typed response decoding and chaining accessors
"""

from voip_api.platform.clients.x911.account import AccountExecutor
from voip_api.platform.clients.x911.actions import (
    ActionSpec,
    X911Action,
    get_action_spec,
    production_soap_action_keys,
    sandbox_soap_action_keys,
    soap_action_keys,
)
from voip_api.platform.clients.x911.client import X911Client
from voip_api.platform.clients.x911.config import Environment, X911ClientConfig
from voip_api.platform.clients.x911.exceptions import (
    X911ArgumentError,
    X911ClientError,
    X911NotImplementedError,
    X911ResponseError,
    X911SequenceError,
    X911UnsupportedActionError,
)
from voip_api.platform.clients.x911.responses import (
    DID911,
    LocationStatus,
    RecordList,
    Status911,
    VILocation,
    X911Response,
)
from voip_api.platform.clients.x911.results import X911Request, X911Result

__all__ = [
    # Client
    "X911Client",
    "X911ClientConfig",
    "Environment",
    "AccountExecutor",
    # Actions
    "ActionSpec",
    "X911Action",
    "get_action_spec",
    "production_soap_action_keys",
    "sandbox_soap_action_keys",
    "soap_action_keys",
    # Requests and results
    "X911Request",
    "X911Result",
    # Responses
    "X911Response",
    "RecordList",
    "DID911",
    "VILocation",
    "Status911",
    "LocationStatus",
    # Exceptions
    "X911ClientError",
    "X911ArgumentError",
    "X911NotImplementedError",
    "X911SequenceError",
    "X911UnsupportedActionError",
    "X911ResponseError",
]
