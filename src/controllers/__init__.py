# controllers/__init__.py

from devices import DeviceCapability

from .alexa_controller import ALEXA_INTERFACE, AlexaController, InvalidDirectiveError
from .power_controller import PowerController
from .percentage_controller import PercentageController

# Discovery: which controller exposes a device capability
CAPABILITY_CONTROLLERS = {
    DeviceCapability.POWER_STATE: PowerController,
    DeviceCapability.PERCENTAGE: PercentageController,
}

# Control: which controller handles a directive namespace
NAMESPACE_CONTROLLERS = {
    controller.namespace: controller
    for controller in (PowerController, PercentageController)
}

__all__ = [
    "ALEXA_INTERFACE",
    "AlexaController",
    "InvalidDirectiveError",
    "PowerController",
    "PercentageController",
    "CAPABILITY_CONTROLLERS",
    "NAMESPACE_CONTROLLERS",
]
