"""911 action identifiers and their parameter table.

Each implemented action is registered with the ordered list of parameters it
sends upstream. The table is the single place that knows which argument keys
an action carries; X911Client only supplies values.

Usage:
    spec = get_action_spec(X911Action.GET_LOCATIONS)
    arguments = spec.build_arguments(did="2065551234")
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from voip_api.platform.clients.x911.config import Environment
from voip_api.platform.clients.x911.exceptions import X911ArgumentError


class X911Action(StrEnum):
    """SOAP action keys for the 911 family of operations."""

    ADD911_ALERT = "add911_alert"
    ADD_LOCATION = "add_location"
    AUDIT911 = "audit911"
    GET_LOCATIONS = "get_locations"
    GET_PROVISIONING_HISTORY = "get_provisioning_history"
    INSERT911 = "insert911"
    PROVISION_LOCATION = "provision_location"
    QUERY911 = "query911"
    QUERY911_ALERT = "query911_alert"
    REMOVE911 = "remove911"
    REMOVE911_ALERT = "remove911_alert"
    REMOVE_LOCATION = "remove_location"
    UPDATE911 = "update911"
    VALIDATE911 = "validate911"


ADDRESS_PARAMS: tuple[str, ...] = (
    "address1",
    "address2",
    "city",
    "state",
    "zip",
    "plus_four",
    "caller_name",
)


@dataclass(frozen=True)
class ActionSpec:
    """Parameter layout of a single 911 action.

    Attributes:
        action: The SOAP action key.
        params: Parameter names, in the order they are sent.
    """

    action: X911Action
    params: tuple[str, ...] = ()

    def build_arguments(self, **values: Any) -> dict[str, str]:
        """Validate values and build the argument mapping.

        Args:
            **values: One value per declared parameter.

        Returns:
            Ordered dict of parameter name to text value.

        Raises:
            X911ArgumentError: If any value is not a str.
            TypeError: If keywords do not match the declared parameters.
        """
        missing = [name for name in self.params if name not in values]
        unexpected = sorted(set(values) - set(self.params))
        if missing or unexpected:
            raise TypeError(
                f"{self.action}: missing={missing} unexpected={unexpected}"
            )

        for name in self.params:
            if not isinstance(values[name], str):
                raise X911ArgumentError(name, values[name], action=str(self.action))

        return {name: values[name] for name in self.params}


ACTION_SPECS: dict[X911Action, ActionSpec] = {
    spec.action: spec
    for spec in (
        ActionSpec(X911Action.AUDIT911),
        ActionSpec(X911Action.GET_LOCATIONS, ("did",)),
        ActionSpec(X911Action.QUERY911, ("did",)),
        ActionSpec(X911Action.VALIDATE911, ADDRESS_PARAMS),
        ActionSpec(X911Action.GET_PROVISIONING_HISTORY, ("did",)),
        ActionSpec(X911Action.QUERY911_ALERT, ("tn",)),
        ActionSpec(X911Action.PROVISION_LOCATION, ("did", "location_id")),
        ActionSpec(X911Action.ADD_LOCATION, ("did", *ADDRESS_PARAMS)),
        ActionSpec(X911Action.REMOVE_LOCATION, ("location_id", "did")),
        ActionSpec(X911Action.UPDATE911, ("did", *ADDRESS_PARAMS)),
        ActionSpec(X911Action.INSERT911, ("did", *ADDRESS_PARAMS)),
        ActionSpec(X911Action.REMOVE911, ("did",)),
    )
}


def get_action_spec(action: X911Action) -> ActionSpec:
    """Get the parameter layout for an implemented action.

    Raises:
        KeyError: If the action has no client implementation.
    """
    if action not in ACTION_SPECS:
        raise KeyError(f"Action '{action}' has no registered parameter layout")
    return ACTION_SPECS[action]


def sandbox_soap_action_keys() -> frozenset[X911Action]:
    """Action keys served by the sandbox API. The sandbox has no 911 support."""
    return frozenset()


def production_soap_action_keys() -> frozenset[X911Action]:
    """Action keys served by the production API."""
    return frozenset(X911Action)


def soap_action_keys(environment: Environment) -> frozenset[X911Action]:
    """Action keys declared for the given environment."""
    if environment == Environment.SANDBOX:
        return sandbox_soap_action_keys()
    return production_soap_action_keys()
