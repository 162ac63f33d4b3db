# devices/__init__.py

from .device import (
    Device,
    DeviceType,
    DeviceCategory,
    DeviceCapability,
    DevicePowerState,
    category_of,
    capabilities_of,
)

__all__ = [
    "Device",
    "DeviceType",
    "DeviceCategory",
    "DeviceCapability",
    "DevicePowerState",
    "category_of",
    "capabilities_of",
]
