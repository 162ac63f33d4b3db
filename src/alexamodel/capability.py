# alexamodel/capability.py

from typing import List, Optional

from pydantic import Field

from .base import AlexaModel
from .header import PAYLOAD_VERSION


class Supported(AlexaModel):
    name: str


class CapabilityProperties(AlexaModel):
    """
    Properties a capability has. The power controller knows "powerState",
    the percentage controller knows "percentage".
    """

    supported: List[Supported]


class Capability(AlexaModel):
    """
    Something a device can do, like being turned off and on (power control)
    or being set to a value (percentage control, dimmers and roller shutters).
    """

    type: str = "AlexaInterface"
    interface_name: str = Field(alias="interface")
    version: str = PAYLOAD_VERSION
    properties: Optional[CapabilityProperties] = None

    @classmethod
    def create(cls, interface_name, supported_name):
        return cls(
            interface_name=interface_name,
            properties=CapabilityProperties(supported=[Supported(name=supported_name)]),
        )


class DiscoveryEndpoint(AlexaModel):
    endpoint_id: str
    manufacturer_name: str
    description: str
    friendly_name: str
    display_categories: List[str]
    capabilities: List[Capability]
