"""Typed response models for the 911 client.

The account executor hands back a generic payload. It is decoded once, here,
into an X911Response so that accessors never look up raw keys.
"""

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from voip_api.platform.clients.x911.exceptions import X911ResponseError


def _lenient_int(value: Any) -> int | None:
    """Integral numbers and numeric strings as int, anything else as None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.isdecimal():
            return int(text)
        try:
            value = float(text)
        except ValueError:
            return None
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


class LocationStatus(StrEnum):
    """State of a 911 location at the upstream service provider."""

    GEOCODED = "GEOCODED"
    PROVISIONED = "PROVISIONED"
    INVALID = "INVALID"


class _Record(BaseModel):
    model_config = ConfigDict(extra="allow", from_attributes=True, coerce_numbers_to_str=True)


class DID911(_Record):
    """911 registration for a single DID."""

    did: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    plus_four: str | None = None
    caller_name: str | None = None
    location_id: str | None = None


class VILocation(_Record):
    """A 911 location record held by the upstream service provider.

    Attributes:
        location_id: Identifier assigned by the service provider.
        status: One of the LocationStatus values, as sent upstream.
    """

    location_id: str | None = None
    did: str | None = None
    address1: str | None = None
    address2: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    plus_four: str | None = None
    caller_name: str | None = None
    status: str | None = None

    @property
    def is_provisionable(self) -> bool:
        """Only GEOCODED locations can be provisioned."""
        return self.status == LocationStatus.GEOCODED

    @property
    def is_removable(self) -> bool:
        """INVALID locations cannot be removed."""
        return self.status is not None and self.status != LocationStatus.INVALID


class Status911(_Record):
    """Per-DID outcome of a 911 operation."""

    did: str | None = None
    code: int | None = None
    message: str | None = None

    @field_validator("code", mode="before")
    @classmethod
    def _coerce_code(cls, v):
        return _lenient_int(v)


RecordT = TypeVar("RecordT", bound=_Record)


class RecordList(BaseModel, Generic[RecordT]):
    """Collection wrapper ("DID list") around an ordered list of records."""

    model_config = ConfigDict(from_attributes=True)

    collection: list[RecordT] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_list(cls, data):
        if isinstance(data, list):
            return {"collection": data}
        return data


class X911Response(BaseModel):
    """Decoded payload of a 911 action.

    Attributes:
        response_code: Numeric upstream response code, if present and numeric.
        response_message: Upstream response message.
        dids_911: Wrapper around DID911 records.
        vi_locations: Wrapper around VILocation records.
        statuses: Wrapper around Status911 records.
    """

    model_config = ConfigDict(extra="allow", from_attributes=True)

    response_code: int | None = None
    response_message: str | None = None
    dids_911: RecordList[DID911] | None = None
    vi_locations: RecordList[VILocation] | None = None
    statuses: RecordList[Status911] | None = None

    @field_validator("response_code", mode="before")
    @classmethod
    def _coerce_response_code(cls, v):
        return _lenient_int(v)

    @classmethod
    def from_raw(cls, raw: Any, action: str | None = None) -> "X911Response":
        """Decode whatever the account executor returned.

        Args:
            raw: An X911Response, an object exposing a ``payload`` mapping,
                or a bare mapping.
            action: Action name, used in error messages.

        Returns:
            The decoded response.

        Raises:
            X911ResponseError: If there is no payload mapping or it fails validation.
        """
        if isinstance(raw, cls):
            return raw

        payload = getattr(raw, "payload", raw)
        if not isinstance(payload, Mapping):
            raise X911ResponseError(
                f"expected a payload mapping, got {type(payload).__name__}",
                action=action,
            )

        try:
            return cls.model_validate(dict(payload))
        except ValidationError as e:
            raise X911ResponseError(str(e), action=action) from e
