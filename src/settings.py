# settings.py

import logging
import os

import boto3

logger = logging.getLogger(__name__)

API_URL_ENV = "API_URL"
API_URL_PARAMETER_ENV = "API_URL_PARAMETER"
LOG_LEVEL_ENV = "LOG_LEVEL"


class ConfigurationError(Exception):
    pass


def get_log_level():
    level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Unknown %s '%s', using INFO", LOG_LEVEL_ENV, level)
        return "INFO"
    return level


def get_api_url():
    """
    Base URL of the backend API, e.g. "https://myserver.com:50000/".

    Taken from API_URL. If that is not set, API_URL_PARAMETER may name an
    SSM parameter holding the URL (SecureString is fine).
    """
    api_url = os.environ.get(API_URL_ENV)
    if api_url:
        return api_url

    parameter_name = os.environ.get(API_URL_PARAMETER_ENV)
    if parameter_name:
        return _read_ssm_parameter(parameter_name)

    raise ConfigurationError(f"Neither {API_URL_ENV} nor {API_URL_PARAMETER_ENV} is set.")


def _read_ssm_parameter(name):
    logger.info("Reading backend URL from SSM parameter %s", name)
    ssm = boto3.client("ssm")
    try:
        res = ssm.get_parameter(Name=name, WithDecryption=True)
        return res["Parameter"]["Value"]
    except Exception as e:
        raise ConfigurationError(f"SSM parameter {name} not readable: {e}") from e
