# controllers/alexa_controller.py

from abc import ABC, abstractmethod

from alexamodel import NAMESPACE_ALEXA, Capability, ContextProperty

# Every endpoint needs the base interface next to its controllers
ALEXA_INTERFACE = Capability(interface_name=NAMESPACE_ALEXA)


class InvalidDirectiveError(Exception):
    """A directive lacks a field its namespace requires."""


class AlexaController(ABC):
    namespace = None
    property_name = None

    @classmethod
    def get_capability(cls):
        """Capability descriptor for the discovery response."""
        return Capability.create(interface_name=cls.namespace, supported_name=cls.property_name)

    @classmethod
    def get_properties(cls, value, time_of_sample):
        """Context properties reporting the value after a directive was executed."""
        return [
            ContextProperty(
                namespace=cls.namespace,
                name=cls.property_name,
                value=value,
                time_of_sample=time_of_sample,
            )
        ]

    @staticmethod
    @abstractmethod
    def execute(directive, rest_api):
        """
        Performs the directive against the backend.

        Returns the new property value as string. Raises BackendError if the
        backend call fails and InvalidDirectiveError if the directive is
        incomplete.
        """

    @staticmethod
    def endpoint_id(directive):
        if directive.endpoint is None:
            raise InvalidDirectiveError(f"{directive.header.namespace} directive without endpoint")
        return directive.endpoint.endpoint_id
