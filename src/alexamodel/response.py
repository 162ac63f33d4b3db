# alexamodel/response.py

import json
from datetime import timezone
from typing import List, Optional

from pydantic import Field

from .base import AlexaModel
from .capability import DiscoveryEndpoint
from .header import Header
from .request import Endpoint

UNCERTAINTY_IN_MS = 200


def format_time_of_sample(moment):
    """Formats an aware datetime as Alexa expects it, e.g. 2020-01-01T13:37:00.000Z"""
    # Fraction is milliseconds. The older "ss.sss" pattern repeated the seconds there.
    utc = moment.astimezone(timezone.utc)
    return utc.strftime('%Y-%m-%dT%H:%M:%S.%f')[:-3] + 'Z'


class ResponsePayload(AlexaModel):
    # Discover.Response
    endpoints: Optional[List[DiscoveryEndpoint]] = None

    # ErrorResponse
    type: Optional[str] = None
    message: Optional[str] = None


class Event(AlexaModel):
    header: Header
    endpoint: Optional[Endpoint] = None
    payload: ResponsePayload = Field(default_factory=ResponsePayload)


class ContextProperty(AlexaModel):
    """A timestamped reading of a device property, reported after a change."""

    namespace: str
    name: str
    value: str
    time_of_sample: str
    uncertainty_in_milliseconds: int = UNCERTAINTY_IN_MS


class Context(AlexaModel):
    properties: List[ContextProperty]


class AlexaResponse(AlexaModel):
    event: Event
    context: Optional[Context] = None

    def to_json(self):
        return json.dumps(self.to_dict(), indent=2)
