# lambda_function.py

import json
import logging

from alexa_handler import AlexaHandler
from alexamodel import AlexaRequest
from rest_api import HttpRestApi
from settings import get_api_url, get_log_level

logger = logging.getLogger()
logger.setLevel(get_log_level())


def create_rest_api():
    return HttpRestApi(get_api_url())


def handle_request_json(request_json, rest_api, handler=None):
    """Takes the request as JSON string and returns the response as JSON string."""
    handler = handler or AlexaHandler()

    alexa_request = AlexaRequest.from_json(request_json)

    alexa_response = handler.handle(alexa_request.directive, rest_api)

    return alexa_response.to_json()


def handle_request(input_stream, output_stream, context=None):
    """
    Stream variant: reads the request bytes and writes the response bytes.

    If anything goes wrong here nothing is written at all and the invoking
    side deals with the missing response.
    """
    try:
        rest_api = create_rest_api()

        request_json = input_stream.read().decode("utf-8")

        logger.info("Request: %s", request_json)

        response_json = handle_request_json(request_json, rest_api)

        logger.info("Response: %s", response_json)

        output_stream.write(response_json.encode("utf-8"))

    except Exception:
        logger.exception("Handling the request failed")


def lambda_handler(request, context):
    """Entry point of the Python Lambda runtime, which already decoded the JSON."""
    logger.info("Request: %s", json.dumps(request))

    try:
        rest_api = create_rest_api()

        alexa_request = AlexaRequest.from_dict(request)

        response = AlexaHandler().handle(alexa_request.directive, rest_api).to_dict()

    except Exception:
        logger.exception("Handling the request failed")
        return None

    logger.info("Response: %s", json.dumps(response))

    return response
