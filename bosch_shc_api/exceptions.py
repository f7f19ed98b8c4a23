from typing import Optional


class ShcControllerError(Exception):
    """Base exception for BoschShcController errors."""

    pass


class ShcTransportError(ShcControllerError):
    """Raised when a request could not be built or the network exchange failed."""

    pass


class ShcAPIError(ShcControllerError):
    """
    Raised when the controller answers with an unexpected status code.

    Attributes:
        error_code: The ``errorCode`` reported by the controller, if any.
        status_code: The HTTP status code of the response.
        error_type: The ``@type`` discriminator of the error body, if any.
    """

    def __init__(
        self,
        error_code: Optional[str],
        status_code: Optional[int] = None,
        error_type: Optional[str] = None,
        message: Optional[str] = None,
    ):
        self.error_code = error_code
        self.status_code = status_code
        self.error_type = error_type
        if message is None:
            message = error_code or f"Unexpected response status {status_code}"
        super().__init__(message)


class ShcDataError(ShcControllerError):
    """Raised when a response body does not match the expected shape."""

    pass


class ShcMalformedErrorResponse(ShcAPIError, ShcDataError):
    """Raised when a non-success response carries an error body that cannot be decoded."""

    pass
