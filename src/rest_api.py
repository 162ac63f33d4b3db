# rest_api.py

import http.client
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from abc import ABC, abstractmethod

from pydantic import TypeAdapter, ValidationError

from devices import Device, DevicePowerState

logger = logging.getLogger(__name__)

DEVICE_LIST = TypeAdapter(list[Device])


class BackendError(Exception):
    """The backend call did not complete with a success status."""


class RestApi(ABC):
    """The smart home backend that actually switches the devices."""

    @abstractmethod
    def list_devices(self):
        """Returns all devices for device discovery."""

    @abstractmethod
    def set_power_state(self, endpoint_id, power_state):
        """Turns a device (for e.g. a light) on and off."""

    @abstractmethod
    def set_percentage(self, endpoint_id, percentage):
        """Sets a percentage value to a device, for example a dimmer or a roller shutter."""


class HttpRestApi(RestApi):
    """
    RestApi talking HTTP to the backend, e.g. "https://myserver.com:50000/".

    Every operation is a single blocking GET without retries. Only the status
    class decides about success, bodies of the switching calls are ignored.
    """

    def __init__(self, base_url):
        self.base_url = base_url.rstrip("/")

    def list_devices(self):
        body = self._get("/alexa/devices")
        try:
            return DEVICE_LIST.validate_python(json.loads(body.decode("utf-8")))
        except (UnicodeDecodeError, ValueError, ValidationError) as e:
            raise BackendError(f"Invalid device list from backend: {e}") from e

    def set_power_state(self, endpoint_id, power_state):
        power_state = DevicePowerState(power_state)
        self._get(f"/alexa/switch/{_segment(endpoint_id)}/to/{power_state.value}")

    def set_percentage(self, endpoint_id, percentage):
        self._get(f"/alexa/set/{_segment(endpoint_id)}/to/{int(percentage)}")

    def _get(self, path):
        url = self.base_url + path
        logger.info("Execute call: %s", url)

        req = urllib.request.Request(url, method="GET")
        req.add_header("Accept", "application/json")

        try:
            with urllib.request.urlopen(req) as response:
                status = response.status
                logger.info("Call result: %s - %s", status, response.reason)
                if not 200 <= status < 300:
                    raise BackendError(f"{url} returned {status}")
                return response.read()
        except urllib.error.HTTPError as e:
            logger.error("Call result: %s - %s", e.code, e.reason)
            raise BackendError(f"{url} returned {e.code}") from e
        except urllib.error.URLError as e:
            logger.error("Call failed: %s (%s)", url, e.reason)
            raise BackendError(f"{url} not reachable: {e.reason}") from e
        except (http.client.HTTPException, OSError) as e:
            # Connection dropped or broken while reading the response
            logger.error("Call failed: %s (%r)", url, e)
            raise BackendError(f"{url} failed: {e!r}") from e


def _segment(value):
    return urllib.parse.quote(str(value), safe="")
