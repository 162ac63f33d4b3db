# alexamodel/request.py

from typing import Optional

from pydantic import Field

from .base import AlexaModel
from .header import Header


class Scope(AlexaModel):
    type: str = "BearerToken"
    token: Optional[str] = None


class Endpoint(AlexaModel):
    """The device a directive targets. Also echoed back in control responses."""

    endpoint_id: str
    scope: Optional[Scope] = None


class Grant(AlexaModel):
    type: Optional[str] = None
    code: Optional[str] = None


class DirectivePayload(AlexaModel):
    """
    Union of the payload fields of the directives this skill understands.

    Which of them are set depends on the namespace: "scope" for discovery,
    "grant"/"grantee" for authorization and "percentage" for the
    percentage controller.
    """

    percentage: Optional[int] = None
    scope: Optional[Scope] = None
    grant: Optional[Grant] = None
    grantee: Optional[Scope] = None


class Directive(AlexaModel):
    header: Header
    endpoint: Optional[Endpoint] = None
    payload: DirectivePayload = Field(default_factory=DirectivePayload)


class AlexaRequest(AlexaModel):
    """Every call to the skill wraps exactly one directive."""

    directive: Directive

    @classmethod
    def from_json(cls, request_json):
        return cls.model_validate_json(request_json)

    @classmethod
    def from_dict(cls, request_dict):
        return cls.model_validate(request_dict)
