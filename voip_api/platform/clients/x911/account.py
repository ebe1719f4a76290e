"""Account executor boundary.

The account executor owns SOAP envelopes, transport, authentication and
retries. The 911 client only needs it to satisfy this protocol.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from voip_api.platform.clients.x911.actions import X911Action
from voip_api.platform.clients.x911.responses import X911Response


class AccountExecutor(Protocol):
    """Protocol for the account-level request executor."""

    def execute(
        self,
        action: X911Action,
        response_type: type[X911Response],
        arguments: Mapping[str, str],
    ) -> Any:
        """Execute an action and return its response.

        Args:
            action: The SOAP action key.
            response_type: Model the payload is decoded into.
            arguments: Parameter name to text value.

        Returns:
            An X911Response, an object exposing a ``payload`` mapping, or a
            bare payload mapping.
        """
        ...
