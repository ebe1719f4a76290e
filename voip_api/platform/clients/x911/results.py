"""Request and result value types for the 911 client.

Every client operation produces a fresh X911Request and X911Result, so a
result never changes after it is returned and one client instance can serve
any number of calls.
"""

from dataclasses import dataclass, field

from voip_api.platform.clients.x911.actions import X911Action
from voip_api.platform.clients.x911.exceptions import X911SequenceError
from voip_api.platform.clients.x911.responses import (
    DID911,
    RecordList,
    Status911,
    VILocation,
    X911Response,
)

VALIDATION_SUCCESS_CODE = 100
VALIDATION_FAILURE_CODE = 101

VALIDATION_MESSAGES: dict[int, str] = {
    VALIDATION_SUCCESS_CODE: "Success - This address is valid and registered with 911.",
    VALIDATION_FAILURE_CODE: "Failure - This address is not registered with 911",
}


@dataclass(frozen=True)
class X911Request:
    """An action and the arguments sent with it.

    Attributes:
        action: The SOAP action key.
        arguments: Parameter name to text value, exactly the action's parameters.
    """

    action: X911Action
    arguments: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class X911Result:
    """Outcome of a single 911 operation.

    Attributes:
        request: The request that was sent.
        response: The decoded response.
    """

    request: X911Request
    response: X911Response

    @property
    def action(self) -> X911Action:
        return self.request.action

    @property
    def arguments(self) -> dict[str, str]:
        return self.request.arguments

    @property
    def response_code(self) -> int | None:
        return self.response.response_code

    @property
    def response_message(self) -> str | None:
        return self.response.response_message

    # Chaining accessors

    @property
    def dids_911_list(self) -> RecordList[DID911] | None:
        """Wrapper holding the DID911 records, or None."""
        return self.response.dids_911

    @property
    def dids_911(self) -> list[DID911]:
        """The DID911 records, or an empty list."""
        wrapper = self.dids_911_list
        return wrapper.collection if wrapper is not None else []

    @property
    def vi_locations_list(self) -> RecordList[VILocation] | None:
        """Wrapper holding the VILocation records, or None."""
        return self.response.vi_locations

    @property
    def vi_locations(self) -> list[VILocation]:
        """The VILocation records, or an empty list."""
        wrapper = self.vi_locations_list
        return wrapper.collection if wrapper is not None else []

    @property
    def statuses_911_list(self) -> RecordList[Status911] | None:
        """Wrapper holding the Status911 records, or None."""
        return self.response.statuses

    @property
    def statuses_911(self) -> list[Status911]:
        """The Status911 records, or an empty list."""
        wrapper = self.statuses_911_list
        return wrapper.collection if wrapper is not None else []

    @property
    def x911_validation_status(self) -> str | None:
        """Human-readable outcome of a validate_911 call.

        Returns:
            The success message for code 100, the failure message for
            code 101, and None for any other code.

        Raises:
            X911SequenceError: If this result is not from validate_911.
        """
        if self.request.action != X911Action.VALIDATE911:
            raise X911SequenceError(
                "911 Validation can only be inferred by calling the validate_911 method!",
                action=str(self.request.action),
            )
        if self.response.response_code is None:
            return None
        return VALIDATION_MESSAGES.get(self.response.response_code)
