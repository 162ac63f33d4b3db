# controllers/percentage_controller.py

import logging

from alexamodel import NAMESPACE_PERCENTAGE_CONTROLLER
from .alexa_controller import AlexaController, InvalidDirectiveError

logger = logging.getLogger(__name__)


class PercentageController(AlexaController):
    """Handles "Alexa, kitchen light to 60 percent!"."""

    namespace = NAMESPACE_PERCENTAGE_CONTROLLER
    property_name = "percentage"

    @staticmethod
    def execute(directive, rest_api):
        name = directive.header.name
        endpoint_id = PercentageController.endpoint_id(directive)
        percentage = directive.payload.percentage

        if percentage is None:
            # e.g. AdjustPercentage, which only carries a delta
            raise InvalidDirectiveError(f"PercentageController: '{name}' without percentage")

        logger.info(f"PercentageController: Handling '{name}' for {endpoint_id} -> {percentage}%")

        rest_api.set_percentage(endpoint_id, percentage)

        return str(percentage)
