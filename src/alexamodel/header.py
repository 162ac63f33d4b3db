# alexamodel/header.py

from typing import Optional

from .base import AlexaModel

PAYLOAD_VERSION = "3"

NAME_RESPONSE = "Response"
NAME_ERROR_RESPONSE = "ErrorResponse"

NAMESPACE_ALEXA = "Alexa"
NAMESPACE_AUTHORIZATION = "Alexa.Authorization"
NAMESPACE_DISCOVERY = "Alexa.Discovery"
NAMESPACE_POWER_CONTROLLER = "Alexa.PowerController"
NAMESPACE_PERCENTAGE_CONTROLLER = "Alexa.PercentageController"


class Header(AlexaModel):
    namespace: str = NAMESPACE_ALEXA
    name: str = NAME_RESPONSE
    payload_version: str = PAYLOAD_VERSION
    message_id: str
    correlation_token: Optional[str] = None
