"""Unit tests for 911 request and result value types."""

from dataclasses import FrozenInstanceError

import pytest

from voip_api.platform.clients.x911.actions import X911Action
from voip_api.platform.clients.x911.exceptions import X911SequenceError
from voip_api.platform.clients.x911.responses import DID911, Status911, VILocation, X911Response
from voip_api.platform.clients.x911.results import (
    VALIDATION_MESSAGES,
    X911Request,
    X911Result,
)


def make_result(action: X911Action, payload: dict) -> X911Result:
    return X911Result(
        request=X911Request(action=action, arguments={}),
        response=X911Response.from_raw(payload),
    )


class TestX911Request:
    """Tests for X911Request dataclass."""

    def test_defaults_to_no_arguments(self):
        """A request without arguments has an empty mapping."""
        assert X911Request(action=X911Action.AUDIT911).arguments == {}

    def test_immutable(self):
        """Requests cannot be reassigned."""
        request = X911Request(action=X911Action.AUDIT911)
        with pytest.raises(FrozenInstanceError):
            request.action = X911Action.QUERY911  # type: ignore[misc]


class TestX911Result:
    """Tests for X911Result properties."""

    def test_exposes_request_fields(self):
        """action and arguments come from the request."""
        result = X911Result(
            request=X911Request(action=X911Action.QUERY911, arguments={"did": "2065551234"}),
            response=X911Response(),
        )
        assert result.action == X911Action.QUERY911
        assert result.arguments == {"did": "2065551234"}

    def test_exposes_response_fields(self):
        """response_code and response_message come from the response."""
        result = make_result(X911Action.QUERY911, {"response_code": "100", "response_message": "Success"})
        assert result.response_code == 100
        assert result.response_message == "Success"

    def test_immutable(self):
        """Results cannot be reassigned."""
        result = make_result(X911Action.AUDIT911, {})
        with pytest.raises(FrozenInstanceError):
            result.response = X911Response()  # type: ignore[misc]


class TestChainingAccessors:
    """Tests for the collection accessors."""

    @pytest.mark.parametrize(
        ("list_accessor", "accessor"),
        [
            ("dids_911_list", "dids_911"),
            ("vi_locations_list", "vi_locations"),
            ("statuses_911_list", "statuses_911"),
        ],
    )
    def test_absent_key(self, list_accessor, accessor):
        """Missing payload keys give None wrappers and empty lists."""
        result = make_result(X911Action.AUDIT911, {})
        assert getattr(result, list_accessor) is None
        assert getattr(result, accessor) == []

    def test_dids_911(self):
        """dids_911 returns the wrapped DID911 records."""
        result = make_result(
            X911Action.AUDIT911,
            {"dids_911": {"collection": [{"did": "2065551234"}, {"did": "2065550000"}]}},
        )
        assert result.dids_911_list is not None
        assert result.dids_911 == [DID911(did="2065551234"), DID911(did="2065550000")]

    def test_vi_locations(self):
        """vi_locations returns the wrapped VILocation records."""
        result = make_result(
            X911Action.GET_LOCATIONS,
            {"vi_locations": {"collection": [{"location_id": "LOC-1", "status": "GEOCODED"}]}},
        )
        assert result.vi_locations == [VILocation(location_id="LOC-1", status="GEOCODED")]
        assert result.vi_locations[0].is_provisionable

    def test_statuses_911_reads_statuses_key(self):
        """statuses_911 reads the statuses payload key."""
        result = make_result(
            X911Action.REMOVE911,
            {"statuses": {"collection": [{"did": "2065551234", "code": 100, "message": "Success"}]}},
        )
        assert result.statuses_911 == [Status911(did="2065551234", code=100, message="Success")]

    def test_list_is_the_wrapper_collection(self):
        """The plain accessor returns the wrapper's collection unchanged."""
        result = make_result(X911Action.AUDIT911, {"dids_911": {"collection": [{"did": "1"}]}})
        assert result.dids_911 is result.dids_911_list.collection

    def test_empty_wrapper(self):
        """A present but empty wrapper gives an empty list."""
        result = make_result(X911Action.AUDIT911, {"dids_911": {"collection": []}})
        assert result.dids_911_list is not None
        assert result.dids_911 == []


class TestX911ValidationStatus:
    """Tests for x911_validation_status."""

    def test_success_code(self):
        """Code 100 means the address is valid and registered."""
        result = make_result(X911Action.VALIDATE911, {"response_code": 100})
        assert result.x911_validation_status == "Success - This address is valid and registered with 911."

    def test_failure_code(self):
        """Code 101 means the address is not registered."""
        result = make_result(X911Action.VALIDATE911, {"response_code": "101"})
        assert result.x911_validation_status == "Failure - This address is not registered with 911"

    @pytest.mark.parametrize(("code", "expected_prefix"), [(100.0, "Success"), ("100.0", "Success"), ("101.0", "Failure")])
    def test_integral_float_codes(self, code, expected_prefix):
        """Codes sent as integral floats map like their int value."""
        result = make_result(X911Action.VALIDATE911, {"response_code": code})
        assert result.x911_validation_status.startswith(expected_prefix)

    @pytest.mark.parametrize("code", [0, 102, 200, "abc", "²", "100.5", None])
    def test_unknown_code_is_none(self, code):
        """Any other code has no defined message."""
        result = make_result(X911Action.VALIDATE911, {"response_code": code})
        assert result.x911_validation_status is None

    def test_missing_code_is_none(self):
        """A payload without a code has no defined message."""
        assert make_result(X911Action.VALIDATE911, {}).x911_validation_status is None

    @pytest.mark.parametrize("action", [a for a in X911Action if a != X911Action.VALIDATE911])
    def test_other_actions_raise(self, action):
        """The status is only meaningful after validate_911."""
        result = make_result(action, {"response_code": 100})
        with pytest.raises(X911SequenceError, match="validate_911"):
            _ = result.x911_validation_status

    def test_messages_cover_known_codes(self):
        """Only codes 100 and 101 are mapped."""
        assert set(VALIDATION_MESSAGES) == {100, 101}
