"""HTTP client for the minFraud score and insights services."""

from __future__ import annotations

import json
import platform
from collections.abc import Sequence
from typing import TypeVar

import httpx
import structlog
from pydantic import ValidationError

from .config import DEFAULT_HOST, Settings
from .errors import (
    AuthenticationError,
    HttpError,
    InsufficientFundsError,
    InvalidFieldError,
    InvalidRequestError,
    PermissionRequiredError,
    TransportError,
    WebServiceError,
)
from .request import MinFraudRequest
from .response import Insights, Score
from .response.base import ResponseModel
from .version import __version__

logger = structlog.get_logger()

API_PATH = "/minfraud/v2.0"

ResponseT = TypeVar("ResponseT", bound=ResponseModel)

AUTHENTICATION_CODES = frozenset(
    {"AUTHORIZATION_INVALID", "LICENSE_KEY_REQUIRED", "ACCOUNT_ID_REQUIRED", "USER_ID_REQUIRED"}
)

ERRORS_BY_CODE: dict[str, type[WebServiceError]] = {
    **{code: AuthenticationError for code in AUTHENTICATION_CODES},
    "INSUFFICIENT_FUNDS": InsufficientFundsError,
    "PERMISSION_REQUIRED": PermissionRequiredError,
}

ERRORS_BY_STATUS: dict[int, type[WebServiceError]] = {
    401: AuthenticationError,
    402: InsufficientFundsError,
    403: PermissionRequiredError,
}


class MinFraudClient:
    """Synchronous client for minFraud web services.

    The client holds no per-call state; one instance may be shared across
    threads as long as the underlying ``httpx`` transport allows it.

    Usage::

        with MinFraudClient(42, "license_key") as client:
            score = client.score(request)
            print(score.risk_score)
    """

    def __init__(
        self,
        account_id: int,
        license_key: str,
        *,
        host: str = DEFAULT_HOST,
        port: int | None = None,
        use_https: bool = True,
        connect_timeout: float = 3.0,
        read_timeout: float = 20.0,
        locales: Sequence[str] = ("en",),
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not license_key:
            raise InvalidFieldError("A license key is required", field="license_key")
        self.account_id = account_id
        self.locales = tuple(locales)

        scheme = "https" if use_https else "http"
        authority = host if port is None else f"{host}:{port}"
        self.base_url = f"{scheme}://{authority}{API_PATH}"

        self._client = httpx.Client(
            base_url=self.base_url,
            auth=httpx.BasicAuth(str(account_id), license_key),
            headers={
                "Accept": "application/json",
                "User-Agent": _user_agent(),
            },
            timeout=httpx.Timeout(read_timeout, connect=connect_timeout),
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, transport: httpx.BaseTransport | None = None
    ) -> MinFraudClient:
        """Build a client from ``MINFRAUD_*`` environment settings."""
        settings = settings or Settings()
        if settings.account_id is None:
            raise InvalidFieldError("MINFRAUD_ACCOUNT_ID is not set", field="account_id")
        if not settings.license_key:
            raise InvalidFieldError("MINFRAUD_LICENSE_KEY is not set", field="license_key")
        return cls(
            settings.account_id,
            settings.license_key,
            host=settings.host,
            port=settings.port,
            use_https=settings.use_https,
            connect_timeout=settings.connect_timeout,
            read_timeout=settings.read_timeout,
            locales=settings.locales,
            transport=transport,
        )

    def score(self, request: MinFraudRequest) -> Score:
        """Query the score service: risk score, IP risk and warnings."""
        return self._send("score", request, Score)

    def insights(self, request: MinFraudRequest) -> Insights:
        """Query the insights service: score data plus GeoIP2, address and card details."""
        return self._send("insights", request, Insights)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> MinFraudClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ---- internals ---------------------------------------------------------

    def _send(self, service: str, request: MinFraudRequest, model: type[ResponseT]) -> ResponseT:
        uri = f"{self.base_url}/{service}"
        logger.debug("minfraud_request", service=service, uri=uri)

        try:
            response = self._client.post(
                f"/{service}",
                content=request.to_json(),
                headers={"Content-Type": "application/json"},
            )
        except httpx.TransportError as exc:
            logger.warning("minfraud_transport_error", service=service, uri=uri, error=str(exc))
            raise TransportError(f"Error communicating with {uri}: {exc}", uri) from exc

        if response.status_code == 200:
            result = self._parse_success(response, uri, model)
            logger.debug("minfraud_response", service=service, uri=uri, status_code=200)
            return result

        error = self._error_for(response, uri)
        logger.warning(
            "minfraud_error_response",
            service=service,
            uri=uri,
            status_code=response.status_code,
            error_type=type(error).__name__,
            code=getattr(error, "code", None),
        )
        raise error

    def _parse_success(self, response: httpx.Response, uri: str, model: type[ResponseT]) -> ResponseT:
        content_type = response.headers.get("Content-Type", "")
        if "json" not in content_type:
            raise HttpError(
                f"Received a 200 response for {uri} but it does not appear to be JSON: {content_type}",
                200,
                uri,
            )
        if not response.content:
            raise HttpError(f"Received a 200 response for {uri} but there was no message body", 200, uri)
        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise HttpError(
                f"Received a 200 response but could not decode it as JSON: {response.text[:200]}",
                200,
                uri,
            ) from exc
        try:
            return model.model_validate(body, context={"locales": self.locales})
        except ValidationError as exc:
            raise HttpError(
                f"Received a 200 response for {uri} that does not match the {model.__name__} schema: {exc}",
                200,
                uri,
            ) from exc

    def _error_for(self, response: httpx.Response, uri: str) -> HttpError:
        status = response.status_code
        if 400 <= status < 500:
            return self._client_error(response, uri)
        if 500 <= status < 600:
            return HttpError(f"Received a server error ({status}) for {uri}", status, uri)
        return HttpError(f"Received an unexpected HTTP status ({status}) for {uri}", status, uri)

    def _client_error(self, response: httpx.Response, uri: str) -> HttpError:
        status = response.status_code
        if not response.content:
            return self._bodiless_error(f"Received a {status} error for {uri} with no body", status, uri)
        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return self._bodiless_error(
                f"Received a {status} error but it did not include the expected JSON body: "
                f"{response.text[:200]}",
                status,
                uri,
            )
        if not isinstance(body, dict) or "code" not in body or "error" not in body:
            return self._bodiless_error(
                f"Error response contains JSON but it does not specify code or error keys: "
                f"{response.text[:200]}",
                status,
                uri,
            )

        code = str(body["code"])
        message = str(body["error"])
        error_cls = ERRORS_BY_CODE.get(code) or ERRORS_BY_STATUS.get(status, InvalidRequestError)
        return error_cls(message, code, status, uri)

    @staticmethod
    def _bodiless_error(message: str, status: int, uri: str) -> HttpError:
        # 401/402/403 keep their own kind even without a usable error body
        error_cls = ERRORS_BY_STATUS.get(status)
        if error_cls is None:
            return HttpError(message, status, uri)
        return error_cls(message, None, status, uri)


def _user_agent() -> str:
    return (
        f"minfraud-client/{__version__} httpx/{httpx.__version__} "
        f"{platform.python_implementation()}/{platform.python_version()}"
    )
