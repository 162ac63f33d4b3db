# devices/device.py

from enum import Enum

from pydantic import BaseModel, ConfigDict


class DeviceCategory(str, Enum):
    """Alexa display category of a device."""

    LIGHT = "LIGHT"
    EXTERIOR_BLIND = "EXTERIOR_BLIND"


class DeviceCapability(str, Enum):
    """What can be done with a device. Determined by its DeviceType."""

    # Can be turned on and off
    POWER_STATE = "POWER_STATE"

    # Can take a percent value (dimmers, roller shutters)
    PERCENTAGE = "PERCENTAGE"


class DevicePowerState(str, Enum):
    ON = "ON"
    OFF = "OFF"


class DeviceType(str, Enum):
    """
    Device types known to the backend.

    LIGHT_SWITCH: a simple light that can be turned off and on.
    DIMMER: a light that can be set to a percentage value and switched.
    ROLLER_SHUTTER: an exterior blind that can be set to a percentage value.
        "On" and "off" move it all the way up or down.
    """

    LIGHT_SWITCH = "LIGHT_SWITCH"
    DIMMER = "DIMMER"
    ROLLER_SHUTTER = "ROLLER_SHUTTER"

    @property
    def category(self):
        return category_of(self)

    @property
    def capabilities(self):
        return capabilities_of(self)


DEVICE_TYPE_TABLE = {
    DeviceType.LIGHT_SWITCH: (
        DeviceCategory.LIGHT,
        (DeviceCapability.POWER_STATE,),
    ),
    DeviceType.DIMMER: (
        DeviceCategory.LIGHT,
        (DeviceCapability.POWER_STATE, DeviceCapability.PERCENTAGE),
    ),
    DeviceType.ROLLER_SHUTTER: (
        DeviceCategory.EXTERIOR_BLIND,
        (DeviceCapability.POWER_STATE, DeviceCapability.PERCENTAGE),
    ),
}


def category_of(device_type):
    return DEVICE_TYPE_TABLE[DeviceType(device_type)][0]


def capabilities_of(device_type):
    return list(DEVICE_TYPE_TABLE[DeviceType(device_type)][1])


class Device(BaseModel):
    """
    A device like a light switch, a dimmer or a roller shutter, as listed by
    the backend. Alexa calls these "endpoints".

    Category and capabilities are always derived from the type.
    """

    # Backends may send numeric ids
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str
    name: str
    description: str = ""
    type: DeviceType

    @property
    def category(self):
        return self.type.category

    @property
    def capabilities(self):
        return self.type.capabilities
