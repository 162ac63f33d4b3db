# alexamodel/__init__.py

from .base import AlexaModel
from .header import (
    Header,
    PAYLOAD_VERSION,
    NAME_RESPONSE,
    NAME_ERROR_RESPONSE,
    NAMESPACE_ALEXA,
    NAMESPACE_AUTHORIZATION,
    NAMESPACE_DISCOVERY,
    NAMESPACE_POWER_CONTROLLER,
    NAMESPACE_PERCENTAGE_CONTROLLER,
)
from .request import AlexaRequest, Directive, DirectivePayload, Endpoint, Grant, Scope
from .capability import Capability, CapabilityProperties, DiscoveryEndpoint, Supported
from .response import (
    AlexaResponse,
    Context,
    ContextProperty,
    Event,
    ResponsePayload,
    UNCERTAINTY_IN_MS,
    format_time_of_sample,
)

__all__ = [
    "AlexaModel",
    "Header",
    "PAYLOAD_VERSION",
    "NAME_RESPONSE",
    "NAME_ERROR_RESPONSE",
    "NAMESPACE_ALEXA",
    "NAMESPACE_AUTHORIZATION",
    "NAMESPACE_DISCOVERY",
    "NAMESPACE_POWER_CONTROLLER",
    "NAMESPACE_PERCENTAGE_CONTROLLER",
    "AlexaRequest",
    "Directive",
    "DirectivePayload",
    "Endpoint",
    "Grant",
    "Scope",
    "Capability",
    "CapabilityProperties",
    "DiscoveryEndpoint",
    "Supported",
    "AlexaResponse",
    "Context",
    "ContextProperty",
    "Event",
    "ResponsePayload",
    "UNCERTAINTY_IN_MS",
    "format_time_of_sample",
]
