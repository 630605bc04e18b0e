"""
Domain exceptions for the translator gateway.

Each exception carries a human-readable message and a stable error code.
Provider failures additionally carry the HTTP status code and raw body
returned by the translation API, so callers never have to parse messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class InvalidArgumentException(DomainException):
    """Raised when a required input is empty or whitespace-only."""

    def __init__(self, message: str, argument_name: str | None = None):
        super().__init__(message, error_code="INVALID_ARGUMENT")
        self.argument_name = argument_name


class TranslatorGatewayException(DomainException):
    """Base class for non-success responses from the translation provider."""

    def __init__(self, message: str, status_code: int, body: str, error_code: str = "GATEWAY_ERROR"):
        super().__init__(message, error_code=error_code)
        self.status_code = status_code
        self.body = body


class RateLimitedException(TranslatorGatewayException):
    """Raised when the provider keeps answering 429 after all retries."""

    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"Translation API rate limit exceeded (status {status_code}): {body}",
            status_code=status_code,
            body=body,
            error_code="RATE_LIMITED",
        )


class GatewayException(TranslatorGatewayException):
    """Raised for any non-2xx provider response other than 429."""

    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"Translation API request failed with status {status_code}: {body}",
            status_code=status_code,
            body=body,
        )


class MalformedResponseException(DomainException):
    """Raised when a 2xx provider body does not match the expected shape."""

    def __init__(self, message: str, body: str | None = None, original_error: Exception | None = None):
        super().__init__(message, error_code="MALFORMED_RESPONSE")
        self.body = body
        self.original_error = original_error


class TransportFailureException(DomainException):
    """Raised when the provider cannot be reached (DNS, connection, timeout)."""

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message, error_code="TRANSPORT_FAILURE")
        self.original_error = original_error
