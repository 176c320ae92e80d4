"""Exceptions raised by the minFraud client.

Everything derives from :class:`MinFraudError`. Input problems are caught
before any network call and raise :class:`InvalidFieldError`; failures
talking to the service raise :class:`TransportError`; anything derived from
the HTTP status raises :class:`HttpError` or one of its subclasses.
"""

from pydantic import ValidationError


class MinFraudError(Exception):
    """Base class for all client errors."""


class InvalidFieldError(MinFraudError, ValueError):
    """A request value failed validation."""

    def __init__(self, message: str, field: str | None = None, errors: list[dict] | None = None):
        super().__init__(message)
        self.field = field
        self.errors = errors or []

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "InvalidFieldError":
        errors = exc.errors(include_url=False)
        first = errors[0] if errors else {}
        loc = ".".join(str(part) for part in first.get("loc", ()))
        field = loc or None
        msg = first.get("msg", str(exc))
        if field:
            message = f"Invalid value for {exc.title}.{field}: {msg}"
        else:
            message = f"Invalid {exc.title}: {msg}"
        return cls(message, field=field, errors=errors)


class TransportError(MinFraudError):
    """The request never produced an HTTP response (connection, timeout, TLS)."""

    def __init__(self, message: str, uri: str):
        super().__init__(message)
        self.uri = uri


class HttpError(MinFraudError):
    """The service answered with an unexpected status or an unusable body."""

    def __init__(self, message: str, http_status: int, uri: str):
        super().__init__(message)
        self.http_status = http_status
        self.uri = uri


class WebServiceError(HttpError):
    """An error the service reported. ``code`` is None when the body carried no code."""

    def __init__(self, message: str, code: str | None, http_status: int, uri: str):
        super().__init__(message, http_status, uri)
        self.code = code


class AuthenticationError(WebServiceError):
    """The account ID or license key was missing or rejected."""


class InsufficientFundsError(WebServiceError):
    """The account is out of queries."""


class PermissionRequiredError(WebServiceError):
    """The account is not permitted to use the requested service."""


class InvalidRequestError(WebServiceError):
    """The service rejected the request body."""
