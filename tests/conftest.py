# tests/conftest.py

import json
import os

import pytest

from alexa_handler import AlexaHandler
from devices import Device
from rest_api import BackendError, RestApi

FIXTURES_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


def read_fixture(file_name):
    with open(os.path.join(FIXTURES_DIR, file_name), "r", encoding="utf-8") as f:
        return f.read().rstrip("\n")


class RecordingRestApi(RestApi):
    """In-memory backend. Remembers every call, fails on request."""

    def __init__(self, devices=None, fail=False):
        self.devices = list(devices or [])
        self.fail = fail
        self.calls = []

    def list_devices(self):
        self.calls.append(("list_devices",))
        self._maybe_fail()
        return list(self.devices)

    def set_power_state(self, endpoint_id, power_state):
        self.calls.append(("set_power_state", endpoint_id, power_state))
        self._maybe_fail()

    def set_percentage(self, endpoint_id, percentage):
        self.calls.append(("set_percentage", endpoint_id, percentage))
        self._maybe_fail()

    def _maybe_fail(self):
        if self.fail:
            raise BackendError("backend returned 500")


@pytest.fixture
def handler():
    return AlexaHandler.for_unit_testing()


@pytest.fixture
def rest_api():
    return RecordingRestApi()


@pytest.fixture
def discovery_devices():
    records = json.loads(read_fixture("discovery_devices.json"))
    return [Device.model_validate(record) for record in records]


@pytest.fixture
def fixture_json():
    return read_fixture
