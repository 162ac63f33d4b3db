# test_alexa_handler.py

import http.client

import pytest

from alexa_handler import AlexaHandler
from alexamodel import AlexaRequest
from devices import DevicePowerState
from lambda_function import handle_request_json
from rest_api import HttpRestApi


def _directive(fixture_json, file_name):
    return AlexaRequest.from_json(fixture_json(file_name)).directive


def test_handle_invalid_request(handler, rest_api, fixture_json):
    """A namespace the skill does not handle results in the error response."""
    actual = handle_request_json(fixture_json("invalid_directive.json"), rest_api, handler)

    assert actual == fixture_json("invalid_response.json")
    assert rest_api.calls == []


def test_handle_authorization_request(handler, rest_api, fixture_json):
    """Authorization is always granted, without asking the backend."""
    actual = handle_request_json(fixture_json("authorization_directive.json"), rest_api, handler)

    assert actual == fixture_json("authorization_response.json")
    assert rest_api.calls == []


def test_authorization_ignores_payload(handler, rest_api, fixture_json):
    directive = _directive(fixture_json, "authorization_directive.json")
    directive.payload.grant = None
    directive.payload.grantee = None

    response = handler.handle(directive, rest_api)

    assert response.event.header.name == "AcceptGrant.Response"
    assert rest_api.calls == []


def test_handle_discovery_request(handler, rest_api, discovery_devices, fixture_json):
    rest_api.devices = discovery_devices

    actual = handle_request_json(fixture_json("discovery_directive.json"), rest_api, handler)

    assert actual == fixture_json("discovery_response.json")
    assert rest_api.calls == [("list_devices",)]


def test_discovery_endpoints_follow_device_types(handler, rest_api, discovery_devices, fixture_json):
    rest_api.devices = discovery_devices

    response = handler.handle(_directive(fixture_json, "discovery_directive.json"), rest_api)
    endpoints = response.event.payload.endpoints

    assert len(endpoints) == len(discovery_devices)

    for endpoint, device in zip(endpoints, discovery_devices):
        assert endpoint.endpoint_id == device.id
        assert endpoint.friendly_name == device.name
        assert endpoint.display_categories == [device.category.value]

        interfaces = [c.interface_name for c in endpoint.capabilities]
        # base interface once per device capability
        assert interfaces.count("Alexa") == len(device.capabilities)
        assert len(interfaces) == 2 * len(device.capabilities)


def test_discovery_without_devices(handler, rest_api, fixture_json):
    response = handler.handle(_directive(fixture_json, "discovery_directive.json"), rest_api)

    assert response.event.header.name == "Discover.Response"
    assert response.to_dict()["event"]["payload"] == {"endpoints": []}


def test_discovery_backend_failure(handler, rest_api, discovery_devices, fixture_json):
    rest_api.devices = discovery_devices
    rest_api.fail = True

    actual = handle_request_json(fixture_json("discovery_directive.json"), rest_api, handler)

    assert actual == fixture_json("invalid_response.json")
    assert rest_api.calls == [("list_devices",)]


def test_handle_power_controller_request(handler, rest_api, fixture_json):
    """Turns a light on."""
    actual = handle_request_json(fixture_json("power_controller_directive.json"), rest_api, handler)

    assert actual == fixture_json("power_controller_response.json")
    assert rest_api.calls == [("set_power_state", "my_light_switch", DevicePowerState.ON)]


def test_power_controller_turns_off_for_any_other_name(handler, rest_api, fixture_json):
    for name in ("TurnOff", "Toggle"):
        rest_api.calls.clear()
        directive = _directive(fixture_json, "power_controller_directive.json")
        directive.header.name = name

        response = handler.handle(directive, rest_api)

        assert rest_api.calls == [("set_power_state", "my_light_switch", DevicePowerState.OFF)]
        prop = response.context.properties[0]
        assert prop.name == "powerState"
        assert prop.value == "OFF"


def test_power_controller_backend_failure(handler, rest_api, fixture_json):
    rest_api.fail = True

    actual = handle_request_json(fixture_json("power_controller_directive.json"), rest_api, handler)

    assert actual == fixture_json("invalid_response.json")
    assert len(rest_api.calls) == 1


def test_handle_percentage_controller_request(handler, rest_api, fixture_json):
    """Dims a light."""
    actual = handle_request_json(fixture_json("percentage_controller_directive.json"), rest_api, handler)

    assert actual == fixture_json("percentage_controller_response.json")
    assert rest_api.calls == [("set_percentage", "my_dimmer", 66)]


def test_percentage_controller_backend_failure(handler, rest_api, fixture_json):
    rest_api.fail = True

    actual = handle_request_json(fixture_json("percentage_controller_directive.json"), rest_api, handler)

    assert actual == fixture_json("invalid_response.json")
    assert rest_api.calls == [("set_percentage", "my_dimmer", 66)]


def test_percentage_controller_without_percentage(handler, rest_api, fixture_json):
    directive = _directive(fixture_json, "percentage_controller_directive.json")
    directive.header.name = "AdjustPercentage"
    directive.payload.percentage = None

    response = handler.handle(directive, rest_api)

    assert response.to_json() == fixture_json("invalid_response.json")
    assert rest_api.calls == []


def test_control_directive_without_endpoint(handler, rest_api, fixture_json):
    directive = _directive(fixture_json, "power_controller_directive.json")
    directive.endpoint = None

    response = handler.handle(directive, rest_api)

    assert response.event.header.name == "ErrorResponse"
    assert rest_api.calls == []


def test_message_ids_and_timestamps_vary_in_production(rest_api, fixture_json):
    handler = AlexaHandler()
    directive = _directive(fixture_json, "power_controller_directive.json")

    first = handler.handle(directive, rest_api)
    second = handler.handle(directive, rest_api)

    assert first.event.header.message_id != second.event.header.message_id
    assert first.event.header.message_id != "MESSAGE_ID"
    assert first.context.properties[0].time_of_sample != "2020-01-01T13:37:00.000Z"


def test_unit_testing_handler_is_reproducible(rest_api, fixture_json):
    request_json = fixture_json("power_controller_directive.json")

    first = handle_request_json(request_json, rest_api, AlexaHandler.for_unit_testing())
    second = handle_request_json(request_json, rest_api, AlexaHandler.for_unit_testing())

    assert first == second


def test_injected_clock_and_message_ids(rest_api, fixture_json):
    from datetime import datetime, timedelta, timezone

    ids = iter(["first", "second"])
    moment = datetime(2021, 6, 1, 10, 0, 5, 123000, tzinfo=timezone(timedelta(hours=2)))
    handler = AlexaHandler(message_id_factory=lambda: next(ids), clock=lambda: moment)
    directive = _directive(fixture_json, "percentage_controller_directive.json")

    response = handler.handle(directive, rest_api)

    assert response.event.header.message_id == "first"
    assert response.context.properties[0].time_of_sample == "2021-06-01T08:00:05.123Z"


@pytest.mark.parametrize("file_name", [
    "discovery_directive.json",
    "power_controller_directive.json",
    "percentage_controller_directive.json",
])
@pytest.mark.parametrize("error", [
    http.client.RemoteDisconnected("Remote end closed connection without response"),
    http.client.IncompleteRead(b"[{"),
    TimeoutError("timed out"),
])
def test_transport_failure_gives_error_response(monkeypatch, handler, fixture_json, file_name, error):
    def broken_urlopen(req):
        raise error

    monkeypatch.setattr("urllib.request.urlopen", broken_urlopen)

    actual = handle_request_json(fixture_json(file_name), HttpRestApi("http://backend"), handler)

    assert actual == fixture_json("invalid_response.json")
