# alexa_handler.py

import logging
import uuid
from datetime import datetime, timezone

from alexamodel import (
    NAME_ERROR_RESPONSE,
    NAMESPACE_AUTHORIZATION,
    NAMESPACE_DISCOVERY,
    AlexaResponse,
    Context,
    DiscoveryEndpoint,
    Endpoint,
    Event,
    Header,
    ResponsePayload,
    Scope,
    format_time_of_sample,
)
from controllers import (
    ALEXA_INTERFACE,
    CAPABILITY_CONTROLLERS,
    NAMESPACE_CONTROLLERS,
    InvalidDirectiveError,
)
from rest_api import BackendError

logger = logging.getLogger(__name__)

# Likely your name if these are your devices. Must not be empty.
MANUFACTURER_NAME = "Smart Home"

# Placeholder description for all devices. Must not be empty.
DEVICE_DESCRIPTION = "-"

ERROR_TYPE = "INVALID_DIRECTIVE"
ERROR_MESSAGE = "Request is invalid."

UNIT_TEST_MESSAGE_ID = "MESSAGE_ID"
UNIT_TEST_TIMESTAMP = 1577885820000


def _random_message_id():
    return str(uuid.uuid4())


def _utc_now():
    return datetime.now(timezone.utc)


class AlexaHandler:
    """
    Turns a directive into calls against the backend and builds the response.

    Message ids and sample timestamps come from the injected factories, so
    tests can pin them and compare complete JSON documents.
    """

    def __init__(self, message_id_factory=_random_message_id, clock=_utc_now):
        self.message_id_factory = message_id_factory
        self.clock = clock

    @classmethod
    def for_unit_testing(cls):
        """Handler returning static messageIds and timestamps."""
        timestamp = datetime.fromtimestamp(UNIT_TEST_TIMESTAMP / 1000, tz=timezone.utc)
        return cls(message_id_factory=lambda: UNIT_TEST_MESSAGE_ID, clock=lambda: timestamp)

    def handle(self, directive, rest_api):
        """
        Never raises for backend failures or unknown directives, these all
        end up as the one generic error response.
        """
        namespace = directive.header.namespace
        name = directive.header.name

        logger.info(f"Namespace: {namespace} | Name: {name}")

        # First call when the user activates the skill. Always accepted.
        if namespace == NAMESPACE_AUTHORIZATION:
            return self.create_authorization_granted_response()

        # Alexa asks for all devices. Only done on user interaction.
        if namespace == NAMESPACE_DISCOVERY:
            return self.create_device_discovery_response(rest_api)

        controller = NAMESPACE_CONTROLLERS.get(namespace)
        if controller is None:
            logger.warning(f"Directive {namespace}.{name} is not supported.")
            return self.create_error_response()

        return self.execute_controller_directive(controller, directive, rest_api)

    def create_authorization_granted_response(self):
        return AlexaResponse(
            event=Event(
                header=Header(
                    namespace=NAMESPACE_AUTHORIZATION,
                    name="AcceptGrant.Response",
                    message_id=self.create_message_id(),
                ),
                payload=ResponsePayload(),
            )
        )

    def create_device_discovery_response(self, rest_api):
        try:
            devices = rest_api.list_devices()
        except BackendError as e:
            logger.error(f"Device discovery failed: {e}")
            return self.create_error_response()

        logger.info("Devices from API: %s", devices)

        endpoints = [self.create_discovery_endpoint(device) for device in devices]

        return AlexaResponse(
            event=Event(
                header=Header(
                    namespace=NAMESPACE_DISCOVERY,
                    name="Discover.Response",
                    message_id=self.create_message_id(),
                ),
                payload=ResponsePayload(endpoints=endpoints),
            )
        )

    @staticmethod
    def create_discovery_endpoint(device):
        capabilities = []
        for capability in device.capabilities:
            # The base interface goes in once per device capability
            capabilities.append(ALEXA_INTERFACE)
            capabilities.append(CAPABILITY_CONTROLLERS[capability].get_capability())

        return DiscoveryEndpoint(
            endpoint_id=device.id,
            manufacturer_name=MANUFACTURER_NAME,
            description=DEVICE_DESCRIPTION,
            friendly_name=device.name,
            display_categories=[device.category.value],
            capabilities=capabilities,
        )

    def execute_controller_directive(self, controller, directive, rest_api):
        try:
            value = controller.execute(directive, rest_api)
        except InvalidDirectiveError as e:
            logger.error(str(e))
            return self.create_error_response()
        except BackendError as e:
            logger.error(f"{controller.namespace}: backend call failed: {e}")
            return self.create_error_response()

        # Token is echoed back as received
        scope = directive.endpoint.scope
        token = scope.token if scope else None

        return AlexaResponse(
            event=Event(
                header=Header(
                    correlation_token=directive.header.correlation_token,
                    message_id=self.create_message_id(),
                ),
                endpoint=Endpoint(
                    endpoint_id=directive.endpoint.endpoint_id,
                    scope=Scope(token=token),
                ),
            ),
            context=Context(
                properties=controller.get_properties(value, self.create_current_time_string())
            ),
        )

    def create_error_response(self):
        return AlexaResponse(
            event=Event(
                header=Header(
                    name=NAME_ERROR_RESPONSE,
                    message_id=self.create_message_id(),
                ),
                payload=ResponsePayload(type=ERROR_TYPE, message=ERROR_MESSAGE),
            )
        )

    def create_message_id(self):
        return self.message_id_factory()

    def create_current_time_string(self):
        return format_time_of_sample(self.clock())
