"""Pytest configuration and fixtures for the Bosch SHC API client tests."""

import json
from unittest.mock import MagicMock

import pytest
import requests

from bosch_shc_api import BoschShcController

SHC_IP = "192.168.0.10"


def make_response(status_code, body=b""):
    """Build a fully read ``requests.Response`` without touching the network."""
    if not isinstance(body, (bytes, str)):
        body = json.dumps(body)
    if isinstance(body, str):
        body = body.encode("utf-8")
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response._content_consumed = True
    response.headers["Content-Type"] = "application/json"
    return response


@pytest.fixture
def session():
    """A stand-in for ``requests.Session`` whose ``request`` is scripted per test."""
    return MagicMock(spec=requests.Session)


@pytest.fixture
def controller(session):
    return BoschShcController(SHC_IP, session=session)


@pytest.fixture
def respond(session):
    """Make the session answer every request with the given status and body."""
    def _respond(status_code, body=b""):
        session.request.return_value = make_response(status_code, body)
        return session
    return _respond


@pytest.fixture
def device_data():
    return {
        "@type": "device",
        "rootDeviceId": "64-da-a0-00-00-01",
        "id": "hdm:HomeMaticIP:3014F711A0000496D858A7C1",
        "deviceServiceIds": ["Thermostat", "BatteryLevel", "ValveTappet"],
        "manufacturer": "BOSCH",
        "roomId": "hz_1",
        "deviceModel": "TRV",
        "serial": "3014F711A0000496D858A7C1",
        "profile": "GENERIC",
        "name": "Radiator Thermostat",
        "status": "AVAILABLE",
        "childDeviceIds": [],
    }


@pytest.fixture
def room_data():
    return {
        "@type": "room",
        "id": "hz_1",
        "iconId": "icon_room_living_room",
        "name": "Living Room",
    }


@pytest.fixture
def scenario_data():
    return {
        "@type": "scenario",
        "id": "d4c2f0a6-1b2e-4f3a-9c8d-7e6f5a4b3c2d",
        "iconId": "icon_scenario_leaving",
        "name": "Leaving Home",
        "actions": [
            {"deviceId": "hdm:ZigBee:000d6f0012345678", "deviceServiceId": "PowerSwitch",
             "targetState": {"@type": "powerSwitchState", "switchState": "OFF"}},
            {"deviceId": "hdm:HomeMaticIP:3014F711A0000496D858A7C1",
             "deviceServiceId": "RoomClimateControl", "targetState": {"setpointTemperature": 17.0}},
        ],
    }


@pytest.fixture
def message_data():
    return {
        "@type": "message",
        "id": "6ca2bd8d-6fe2-4e4d-8d3f-1f2c3b4a5d6e",
        "messageCode": {"name": "BATTERY_LOW", "category": "WARNING"},
        "sourceType": "DEVICE",
        "sourceId": "hdm:HomeMaticIP:3014F711A0000496D858A7C1",
        "timestamp": 1700000000000,
        "flags": ["STICKY"],
        "arguments": {"deviceModel": "TRV"},
    }
