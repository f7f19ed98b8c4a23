"""
Abstract interface shared by every Bosch Smart Home Controller API implementation.
"""

from abc import ABC, abstractmethod
from typing import List

from .models.device import ShcDevice
from .models.room import ShcRoom
from .models.scenario import ShcScenario
from .models.message import ShcMessage


class BoschShcApi(ABC):
    """
    One method per resource operation exposed by the controller.

    :class:`~bosch_shc_api.api_client.BoschShcController` talks to a real
    controller; other implementations (for example an in-memory fake used in
    tests) can be substituted without changing call sites.
    """

    @abstractmethod
    def get_devices(self) -> List[ShcDevice]:
        """Return all devices."""

    @abstractmethod
    def get_device(self, device_id: str) -> ShcDevice:
        """Return a device by id."""

    @abstractmethod
    def get_rooms(self) -> List[ShcRoom]:
        """Return all rooms."""

    @abstractmethod
    def get_room(self, room_id: str) -> ShcRoom:
        """Return a room by id."""

    @abstractmethod
    def get_scenarios(self) -> List[ShcScenario]:
        """Return all scenarios."""

    @abstractmethod
    def get_scenario(self, scenario_id: str) -> ShcScenario:
        """Return a scenario by id."""

    @abstractmethod
    def trigger_scenario(self, scenario_id: str) -> None:
        """Trigger a scenario by id."""

    @abstractmethod
    def get_messages(self) -> List[ShcMessage]:
        """Return all messages."""
