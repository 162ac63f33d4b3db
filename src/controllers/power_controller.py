# controllers/power_controller.py

import logging

from alexamodel import NAMESPACE_POWER_CONTROLLER
from devices import DevicePowerState
from .alexa_controller import AlexaController

logger = logging.getLogger(__name__)


class PowerController(AlexaController):
    """Handles "Alexa, kitchen light on!" and friends."""

    namespace = NAMESPACE_POWER_CONTROLLER
    property_name = "powerState"

    @staticmethod
    def execute(directive, rest_api):
        name = directive.header.name
        endpoint_id = PowerController.endpoint_id(directive)

        # Everything besides TurnOn switches off
        power_state = DevicePowerState.ON if name == "TurnOn" else DevicePowerState.OFF

        logger.info(f"PowerController: Handling '{name}' for {endpoint_id} -> {power_state.value}")

        rest_api.set_power_state(endpoint_id, power_state)

        return power_state.value
