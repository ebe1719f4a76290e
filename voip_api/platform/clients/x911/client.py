"""911 request client.

Provides a typed interface over the 911 family of provisioning actions:
argument validation, action dispatch through the account executor, and
decoding of the response into an X911Result.
"""

from typing import TYPE_CHECKING, NoReturn

from voip_api.platform.clients.x911.account import AccountExecutor
from voip_api.platform.clients.x911.actions import X911Action, get_action_spec, soap_action_keys
from voip_api.platform.clients.x911.config import Environment, X911ClientConfig
from voip_api.platform.clients.x911.exceptions import (
    X911ArgumentError,
    X911NotImplementedError,
    X911UnsupportedActionError,
)
from voip_api.platform.clients.x911.responses import X911Response
from voip_api.platform.clients.x911.results import X911Request, X911Result
from voip_api.platform.observability import get_logger

if TYPE_CHECKING:
    from voip_api.platform.settings import Settings

logger = get_logger(__name__)


class X911Client:
    """Client for 911 address registration, validation and lookup.

    Each operation validates its arguments, sends one action through the
    account executor and returns a new X911Result. The client keeps no
    per-call state.
    """

    def __init__(
        self,
        account: AccountExecutor,
        config: X911ClientConfig | None = None,
    ):
        """Initialize the client.

        Args:
            account: Executor that performs the SOAP request.
            config: Optional client configuration.
        """
        self._account = account
        self._config = config or X911ClientConfig()

    @classmethod
    def from_settings(cls, account: AccountExecutor, settings: "Settings") -> "X911Client":
        """Create a client configured from application settings."""
        return cls(account, config=settings.x911_client_config)

    @property
    def config(self) -> X911ClientConfig:
        return self._config

    @property
    def environment(self) -> Environment:
        return self._config.environment

    def supports(self, action: X911Action) -> bool:
        """Check if the configured environment declares an action."""
        return action in soap_action_keys(self._config.environment)

    def audit_911(self) -> X911Result:
        """Return 911 information added or updated for all DIDs, including off-net DIDs."""
        return self._dispatch(X911Action.AUDIT911)

    def get_locations(self, did: str) -> X911Result:
        """Get all 911 locations associated with a DID.

        Records from both the 911 service provider and the carrier database
        are returned.
        """
        return self._dispatch(X911Action.GET_LOCATIONS, did=did)

    def query_911(self, did: str) -> X911Result:
        """Return the 911 information for the provisioned location of a DID."""
        return self._dispatch(X911Action.QUERY911, did=did)

    def validate_911(
        self,
        address1: str,
        address2: str,
        city: str,
        state: str,
        zip: str,
        plus_four: str,
        caller_name: str,
    ) -> X911Result:
        """Check the validity of an address to be used for 911.

        Nothing is provisioned. Read the outcome with
        ``X911Result.x911_validation_status``.

        Args:
            address1: Primary street address.
            address2: Secondary street address.
            city: City.
            state: State.
            zip: 5 digit ZIP Code.
            plus_four: 4 digit ZIP Code extension.
            caller_name: Caller name.
        """
        return self._dispatch(
            X911Action.VALIDATE911,
            address1=address1,
            address2=address2,
            city=city,
            state=state,
            zip=zip,
            plus_four=plus_four,
            caller_name=caller_name,
        )

    def get_provisioning_history(self, did: str) -> X911Result:
        """Get the provisioning history for a DID from the 911 service provider."""
        return self._dispatch(X911Action.GET_PROVISIONING_HISTORY, did=did)

    def query_911_alert(self, tn: str) -> X911Result:
        """Return the DID and emails registered for a 911 alert."""
        return self._dispatch(X911Action.QUERY911_ALERT, tn=tn)

    def provision_location(self, did: str, location_id: str) -> X911Result:
        """Provision an existing GEOCODED location. INVALID locations cannot be provisioned.

        Args:
            did: The telephone number to provision.
            location_id: Location ID generated by the 911 service provider.
        """
        return self._dispatch(X911Action.PROVISION_LOCATION, did=did, location_id=location_id)

    def add_location(
        self,
        did: str,
        address1: str,
        address2: str,
        city: str,
        state: str,
        zip: str,
        plus_four: str,
        caller_name: str,
    ) -> X911Result:
        """Add a location at the 911 service provider and in the carrier database.

        An invalid or ungeocodable location is added at the service provider
        only. The caller name overwrites the caller name of every other
        location for the DID.
        """
        return self._dispatch(
            X911Action.ADD_LOCATION,
            did=did,
            address1=address1,
            address2=address2,
            city=city,
            state=state,
            zip=zip,
            plus_four=plus_four,
            caller_name=caller_name,
        )

    def remove_location(self, location_id: str, did: str) -> X911Result:
        """Remove a GEOCODED or PROVISIONED location. INVALID locations cannot be removed."""
        return self._dispatch(X911Action.REMOVE_LOCATION, location_id=location_id, did=did)

    def update_911(
        self,
        did: str,
        address1: str,
        address2: str,
        city: str,
        state: str,
        zip: str,
        plus_four: str,
        caller_name: str,
    ) -> X911Result:
        """Update the provisioned 911 location of a DID registered with the account.

        INVALID location information leaves the DID with no provisioned location.
        """
        return self._dispatch(
            X911Action.UPDATE911,
            did=did,
            address1=address1,
            address2=address2,
            city=city,
            state=state,
            zip=zip,
            plus_four=plus_four,
            caller_name=caller_name,
        )

    def insert_911(
        self,
        did: str,
        address1: str,
        address2: str,
        city: str,
        state: str,
        zip: str,
        plus_four: str,
        caller_name: str,
    ) -> X911Result:
        """Add and provision a 911 location for a DID registered with the account."""
        return self._dispatch(
            X911Action.INSERT911,
            did=did,
            address1=address1,
            address2=address2,
            city=city,
            state=state,
            zip=zip,
            plus_four=plus_four,
            caller_name=caller_name,
        )

    def remove_911(self, did: str) -> X911Result:
        """Remove the 911 information associated with a DID."""
        return self._dispatch(X911Action.REMOVE911, did=did)

    def remove_911_alert(self, tn: str, email: str) -> NoReturn:
        """Remove alert contact information from a DID.

        Raises:
            X911NotImplementedError: Always. Nothing is sent upstream.
        """
        raise X911NotImplementedError(str(X911Action.REMOVE911_ALERT))

    def _dispatch(self, action: X911Action, **values: str) -> X911Result:
        """Validate, execute and wrap a single action.

        Raises:
            X911ArgumentError: If an argument is not text.
            X911UnsupportedActionError: If the environment does not declare the action.
            X911ResponseError: If the executor result cannot be decoded.
        """
        log = logger.bind(action=str(action), environment=str(self._config.environment))

        try:
            arguments = get_action_spec(action).build_arguments(**values)
        except X911ArgumentError as e:
            log.warning("x911_request_rejected", reason="invalid_argument", parameter=e.parameter)
            raise

        if self._config.enforce_environment and not self.supports(action):
            log.warning("x911_request_rejected", reason="unsupported_action")
            raise X911UnsupportedActionError(str(action), str(self._config.environment))

        request = X911Request(action=action, arguments=arguments)
        log.debug("x911_request_dispatched", argument_keys=list(arguments))

        raw = self._account.execute(action, X911Response, arguments)
        response = X911Response.from_raw(raw, action=str(action))

        log.debug("x911_response_received", response_code=response.response_code)
        return X911Result(request=request, response=response)
