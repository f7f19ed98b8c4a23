import json

import requests
import urllib3
from requests.adapters import HTTPAdapter

from typing import Any, Callable, List, Optional, TypeVar

from .base import BoschShcApi
from .models.device import ShcDevice
from .models.room import ShcRoom
from .models.scenario import ShcScenario
from .models.message import ShcMessage
from .models.error import ShcErrorResponse
from .logging import get_logger, log_api_response
from .utils import decode_record, decode_record_list
from .exceptions import (
    ShcTransportError,
    ShcAPIError,
    ShcDataError,
    ShcMalformedErrorResponse,
)

logger = get_logger(__name__)

DEFAULT_PORT = 8444
DEFAULT_API_VERSION = "1.0"
DEFAULT_TIMEOUT = 60
DEFAULT_POOL_SIZE = 100

API_BASE_PATH = "/smarthome"

T = TypeVar("T")


class BoschShcController(BoschShcApi):
    """
    Client for interacting with the local REST API of a Bosch Smart Home Controller.

    Every method performs exactly one synchronous HTTPS request. Nothing is cached
    and failed requests are never retried; each call either returns the decoded
    value or raises one of:

    * :class:`~bosch_shc_api.exceptions.ShcTransportError` when the request could
      not be sent or no response was received,
    * :class:`~bosch_shc_api.exceptions.ShcAPIError` when the controller answered
      with a status other than the one the operation expects,
    * :class:`~bosch_shc_api.exceptions.ShcDataError` when the response body does
      not match the expected shape.

    The client keeps no per-call state, so a single instance may be shared between
    threads. The underlying :class:`requests.Session` pools connections.
    """

    def __init__(
        self,
        shc_ip: str,
        shc_port: Optional[int] = DEFAULT_PORT,
        validate_certificate: bool = False,
        api_version: Optional[str] = DEFAULT_API_VERSION,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the controller client. No network activity happens here.

        Args:
            shc_ip: Host name or IP address of the controller.
            shc_port: Port of the controller's REST API. ``0`` or None selects
                      the default port 8444.
            validate_certificate: Whether to verify the controller's TLS certificate.
                                  The controller ships a self-signed certificate, so
                                  this defaults to False.
            api_version: Value sent in the ``api-version`` header. An empty value
                         selects the default "1.0".
            session: Optional pre-built :class:`requests.Session`. When omitted, a
                     session with a bounded connection pool is created and owned
                     by this client.
        """
        self._shc_ip = shc_ip
        self._shc_port = shc_port or DEFAULT_PORT
        self._validate_certificate = validate_certificate
        self._api_version = api_version or DEFAULT_API_VERSION

        if session is None:
            self.session = self._build_session(validate_certificate)
            self._owns_session = True
        else:
            self.session = session
            self._owns_session = False

        logger.debug(
            f"Initializing BoschShcController for {self._shc_ip}:{self._shc_port}, "
            f"api_version: {self._api_version}"
        )

        if not validate_certificate:
            logger.warning(
                "TLS certificate validation is disabled for the Smart Home Controller connection."
            )
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    @staticmethod
    def _build_session(validate_certificate: bool) -> requests.Session:
        """Create a session whose HTTPS pool keeps up to DEFAULT_POOL_SIZE connections per host."""
        session = requests.Session()
        session.verify = validate_certificate
        adapter = HTTPAdapter(
            pool_connections=DEFAULT_POOL_SIZE,
            pool_maxsize=DEFAULT_POOL_SIZE,
            max_retries=0,
        )
        session.mount("https://", adapter)
        return session

    @property
    def shc_ip(self) -> str:
        return self._shc_ip

    @property
    def shc_port(self) -> int:
        return self._shc_port

    @property
    def validate_certificate(self) -> bool:
        return self._validate_certificate

    @property
    def api_version(self) -> str:
        return self._api_version

    def close(self) -> None:
        """Release pooled connections if the session was created by this client."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "BoschShcController":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def get_url(self, path: str) -> str:
        """
        Build the absolute URL for an API path.

        Args:
            path: Path below ``/smarthome``, e.g. ``/devices``.

        Returns:
            str: ``https://{shc_ip}:{shc_port}/smarthome{path}``
        """
        return f"https://{self._shc_ip}:{self._shc_port}{API_BASE_PATH}{path}"

    def _get_headers(self):
        return {
            "Accept": "application/json",
            "api-version": self._api_version,
        }

    def _invoke_api_call(
        self,
        method: str,
        path: str,
        expected_status: int,
        decoder: Optional[Callable[[Any], T]] = None,
    ) -> Optional[T]:
        """
        Send one request to the controller and decode its response.

        The response body is read completely before the status code is looked at,
        and the connection is handed back to the pool on every exit path.

        Args:
            method: HTTP method ('GET' or 'POST').
            path: Path below ``/smarthome``.
            expected_status: The only status code treated as success.
            decoder: Callable turning the parsed JSON body into the result. When
                     None, the body of a successful response is ignored.

        Returns:
            The decoded value, or None when no decoder is given.

        Raises:
            ShcTransportError: If the request could not be sent or the body not read.
            ShcAPIError: If the status code differs from ``expected_status``.
            ShcDataError: If a successful response body cannot be decoded.
        """
        url = self.get_url(path)
        logger.debug(f"API {method} request to {url}")

        request_kwargs = {
            "headers": self._get_headers(),
            "timeout": DEFAULT_TIMEOUT,
        }
        # A caller-supplied session keeps its own CA bundle unless validation is off.
        if not self._validate_certificate:
            request_kwargs["verify"] = False

        try:
            response = self.session.request(method, url, **request_kwargs)
        except requests.exceptions.RequestException as e:
            error_msg = f"API {method} request to {url} failed: {e}"
            logger.error(error_msg)
            raise ShcTransportError(error_msg) from e

        try:
            try:
                body = response.content
            except requests.exceptions.RequestException as e:
                error_msg = f"Reading response of API {method} request to {url} failed: {e}"
                logger.error(error_msg)
                raise ShcTransportError(error_msg) from e

            status_code = response.status_code
            log_api_response(logger, url, body, status_code)

            if status_code != expected_status:
                raise self._build_api_error(method, url, status_code, body)

            logger.debug(f"API {method} request to {url} successful (Status: {status_code})")
            if decoder is None:
                return None

            try:
                data = json.loads(body)
            except ValueError as e:
                error_msg = f"Failed to parse API response from {url}: {e}"
                logger.error(error_msg)
                raise ShcDataError(error_msg) from e

            try:
                return decoder(data)
            except ShcDataError as e:
                logger.error(f"Unexpected API response format for {url}: {e}")
                raise
        finally:
            self._release_response(response, url)

    @staticmethod
    def _release_response(response: requests.Response, url: str) -> None:
        try:
            response.close()
        except OSError as e:
            logger.warning(f"Error closing response body from {url}: {e}")

    @staticmethod
    def _build_api_error(method: str, url: str, status_code: int, body: bytes) -> ShcAPIError:
        """
        Turn a non-success response into the exception describing it.

        Returns:
            ShcAPIError carrying the controller's error code, or
            ShcMalformedErrorResponse if the error body could not be decoded.
        """
        try:
            error = decode_record(json.loads(body), ShcErrorResponse)
        except (ValueError, ShcDataError) as e:
            logger.warning(f"Error decoding error response from {url} (Status: {status_code}): {e}")
            return ShcMalformedErrorResponse(
                None,
                status_code=status_code,
                message=f"API {method} request to {url} failed with status {status_code} "
                        f"and an undecodable error body",
            )

        logger.error(
            f"API {method} request to {url} failed (Status: {status_code}, errorCode: {error.error_code})"
        )
        return ShcAPIError(
            error.error_code,
            status_code=status_code,
            error_type=error.type,
        )

    def get_devices(self) -> List[ShcDevice]:
        """
        Get all devices paired with the controller.

        Fetches ``GET /smarthome/devices``.

        Returns:
            List[ShcDevice]: The devices, in the order the controller returned them.

        Raises:
            ShcTransportError: If the request could not be completed.
            ShcAPIError: If the controller does not answer with 200.
            ShcDataError: If the body is not a JSON array of device objects.
        """
        return self._invoke_api_call(
            "GET", "/devices", 200, lambda data: decode_record_list(data, ShcDevice)
        )

    def get_device(self, device_id: str) -> ShcDevice:
        """
        Get a single device.

        Fetches ``GET /smarthome/devices/{device_id}``. The id is inserted into the
        path as given.

        Args:
            device_id (str): Identifier of the device, as assigned by the controller.

        Returns:
            ShcDevice: The decoded device.

        Raises:
            ShcTransportError: If the request could not be completed.
            ShcAPIError: If the controller does not answer with 200, e.g.
                         ``ENTITY_NOT_FOUND`` for an unknown id.
            ShcDataError: If the body is not a device object.
        """
        return self._invoke_api_call(
            "GET", f"/devices/{device_id}", 200, lambda data: decode_record(data, ShcDevice)
        )

    def get_rooms(self) -> List[ShcRoom]:
        """
        Get all rooms (``GET /smarthome/rooms``).

        Returns:
            List[ShcRoom]: The rooms, in the order the controller returned them.

        Raises:
            ShcTransportError: If the request could not be completed.
            ShcAPIError: If the controller does not answer with 200.
            ShcDataError: If the body is not a JSON array of room objects.
        """
        return self._invoke_api_call(
            "GET", "/rooms", 200, lambda data: decode_record_list(data, ShcRoom)
        )

    def get_room(self, room_id: str) -> ShcRoom:
        """
        Get a single room (``GET /smarthome/rooms/{room_id}``).

        Raises:
            ShcTransportError: If the request could not be completed.
            ShcAPIError: If the controller does not answer with 200.
            ShcDataError: If the body is not a room object.
        """
        return self._invoke_api_call(
            "GET", f"/rooms/{room_id}", 200, lambda data: decode_record(data, ShcRoom)
        )

    def get_scenarios(self) -> List[ShcScenario]:
        """
        Get all scenarios (``GET /smarthome/scenarios``).

        Returns:
            List[ShcScenario]: The scenarios, in the order the controller returned them.
                               Their ``actions`` are passed through undecoded.
        """
        return self._invoke_api_call(
            "GET", "/scenarios", 200, lambda data: decode_record_list(data, ShcScenario)
        )

    def get_scenario(self, scenario_id: str) -> ShcScenario:
        """Get a single scenario (``GET /smarthome/scenarios/{scenario_id}``)."""
        return self._invoke_api_call(
            "GET", f"/scenarios/{scenario_id}", 200, lambda data: decode_record(data, ShcScenario)
        )

    def trigger_scenario(self, scenario_id: str) -> None:
        """
        Trigger a scenario.

        Sends ``POST /smarthome/scenarios/{scenario_id}/triggers``. The controller
        accepts the trigger with 202; any other status, 200 included, is a failure.

        Args:
            scenario_id (str): Identifier of the scenario to run.

        Raises:
            ShcTransportError: If the request could not be completed.
            ShcAPIError: If the controller does not answer with 202.
        """
        logger.info(f"Triggering scenario '{scenario_id}'")
        self._invoke_api_call("POST", f"/scenarios/{scenario_id}/triggers", 202)

    def get_messages(self) -> List[ShcMessage]:
        """
        Get all messages currently held by the controller (``GET /smarthome/messages``).

        Returns:
            List[ShcMessage]: The messages, in the order the controller returned them.
        """
        return self._invoke_api_call(
            "GET", "/messages", 200, lambda data: decode_record_list(data, ShcMessage)
        )
