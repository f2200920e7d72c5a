import json
import os
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from logging import Logger, getLogger
from types import TracebackType
from typing import Any, Self
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from github_manager.clients.errors.github import RequestError, ResourceNotFoundError, ResponseParsingError

BASE_URL = "https://api.github.com"
GITHUB_ACCEPT = "application/vnd.github+json"
GITHUB_API_VERSION = "2022-11-28"
USER_AGENT = "github-manager"

DEFAULT_REQUEST_TIMEOUT = 30.0

CREATED = 201
NO_CONTENT = 204
NOT_FOUND_ERROR = 404

JSON = dict[str, Any] | list[Any]


class ReturnFormat(str, Enum):
    """The shape an operation returns its response in."""

    STRING = "string"
    JSON = "json"
    LIBRARY_OBJECT = "library_object"


class Visibility(str, Enum):
    ALL = "all"
    PRIVATE = "private"
    SELECTED = "selected"


class Direction(str, Enum):
    ASC = "asc"
    DESC = "desc"


def get_github_token() -> str:
    env_vars: tuple[str, ...] = ("GITHUB_TOKEN", "GITHUB_PERSONAL_ACCESS_TOKEN")
    for env_var in env_vars:
        if env_var in os.environ:
            return os.environ[env_var]
    msg = "GITHUB_TOKEN or GITHUB_PERSONAL_ACCESS_TOKEN must be set"
    raise ValueError(msg)


def get_base_url() -> str:
    return os.getenv("GITHUB_API_URL", BASE_URL)


def get_request_timeout() -> float:
    return float(os.getenv("GITHUB_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT)))


def get_default_headers(token: str) -> dict[str, str]:
    return {
        "Authorization": f"token {token}",
        "Accept": GITHUB_ACCEPT,
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
        "User-Agent": USER_AGENT,
    }


def get_http_client(token: str | None = None, base_url: str | None = None, timeout: float | None = None) -> httpx.Client:
    """Build the client every manager sends its requests through."""

    return httpx.Client(
        base_url=base_url or get_base_url(),
        headers=get_default_headers(token=token or get_github_token()),
        timeout=timeout if timeout is not None else get_request_timeout(),
    )


def path_segment(value: str | int) -> str:
    """Percent-encode a value so it stays a single segment of the request path (`prod/eu` -> `prod%2Feu`)."""

    return quote(str(value), safe="")


def clean_params(params: Mapping[str, Any] | None) -> dict[str, str | int | float]:
    """Drop unset query parameters and render the rest the way GitHub expects them."""

    cleaned: dict[str, str | int | float] = {}

    if not params:
        return cleaned

    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, Enum):
            cleaned[key] = value.value
        elif isinstance(value, bool):
            cleaned[key] = "true" if value else "false"
        elif isinstance(value, (list, tuple, set)):
            cleaned[key] = ",".join(str(item) for item in value)
        else:
            cleaned[key] = value

    return cleaned


def clean_body(body: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """Drop unset body parameters; enums are sent as their values."""

    if body is None:
        return None

    return {key: value.value if isinstance(value, Enum) else value for key, value in body.items() if value is not None}


class GitHubManager:
    """The base every endpoint manager is built on.

    A manager owns (or shares) an `httpx.Client` configured with the access token and the GitHub
    media type, and keeps the last response it received so callers can inspect the status code or
    the error body after an operation returned `False` or `None`.
    """

    http_client: httpx.Client
    logger: Logger

    log_requests: bool
    log_responses: bool
    log_on_error: bool

    default_error_message: str | None

    last_response: httpx.Response | None

    def __init__(
        self,
        token: str | None = None,
        http_client: httpx.Client | None = None,
        logger: Logger | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        default_error_message: str | None = None,
        log_requests: bool = False,
        log_responses: bool = False,
        log_on_error: bool = True,
    ):
        self._owns_client = http_client is None
        self.http_client = http_client or get_http_client(token=token, base_url=base_url, timeout=timeout)
        self.logger = logger or getLogger(type(self).__module__)
        self.default_error_message = default_error_message
        self.log_requests = log_requests
        self.log_responses = log_responses
        self.log_on_error = log_on_error
        self.last_response = None

    @classmethod
    def from_manager(cls, manager: "GitHubManager") -> Self:
        """Create a manager that shares the client and settings of an existing one."""

        return cls(
            http_client=manager.http_client,
            logger=manager.logger,
            default_error_message=manager.default_error_message,
            log_requests=manager.log_requests,
            log_responses=manager.log_responses,
            log_on_error=manager.log_on_error,
        )

    def close(self) -> None:
        if self._owns_client:
            self.http_client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self, exc_type: type[BaseException] | None, exc_value: BaseException | None, traceback: TracebackType | None
    ) -> None:
        self.close()

    @property
    def status_code(self) -> int | None:
        """The status code of the last response, or None if no response was received."""

        return self.last_response.status_code if self.last_response is not None else None

    @property
    def error_response(self) -> str | None:
        """The body of the last response if it was an error."""

        if self.last_response is None or not self.last_response.is_error:
            return None

        return self.default_error_message or self.last_response.text

    @property
    def error_response_json(self) -> Any:
        """The decoded body of the last response if it was an error with a JSON body."""

        if self.last_response is None or not self.last_response.is_error:
            return None

        try:
            return self.last_response.json()
        except json.JSONDecodeError:
            return None

    def _get_loggers(
        self, log_request: bool | None = None, log_response: bool | None = None, log_on_error: bool | None = None
    ) -> tuple[Callable[[str], Any], Callable[[str], Any], Callable[[str], Any]]:
        request_logger = self.logger.info if log_request or self.log_requests else self.logger.debug
        response_logger = self.logger.info if log_response or self.log_responses else self.logger.debug
        error_logger = self.logger.error if log_on_error or self.log_on_error else self.logger.debug
        return request_logger, response_logger, error_logger

    def _send(
        self,
        action: str,
        method: str,
        path: str,
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
        log_request: bool | None = None,
    ) -> httpx.Response:
        """Send a request and remember the response.

        Raises:
            RequestError: If the request could not be sent or no response was received.
        """

        request_logger, _, error_logger = self._get_loggers(log_request=log_request)

        query = clean_params(params)
        payload = clean_body(body)

        request_logger(f"Performing {action}: {method} {path} with params {query}")

        try:
            response = self.http_client.request(method, path, params=query or None, json=payload)
        except httpx.HTTPError as e:
            self.last_response = None
            error_logger(f"Error performing {action}: {method} {path}: {e}")
            raise RequestError(action=action, message=str(e)) from e

        self.last_response = response

        return response

    def _log_error_response(self, action: str, response: httpx.Response, error_logger: Callable[[str], Any]) -> None:
        body = self.default_error_message or response.text
        error_logger(f"{action} failed with status {response.status_code}: {body}")

    def _perform_rest_request(
        self,
        action: str,
        response_model: Any,
        method: str = "GET",
        *,
        path: str,
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
        return_format: ReturnFormat = ReturnFormat.LIBRARY_OBJECT,
        error_on_not_found: bool = False,
        log_request: bool | None = None,
        log_response: bool | None = None,
        log_on_error: bool | None = None,
    ) -> Any:
        """Perform a request and return its body in the requested format.

        Args:
            action: The action being performed.
            response_model: The type the body is validated into for `ReturnFormat.LIBRARY_OBJECT`.
            method: The HTTP method.
            path: The path relative to the API base URL.
            params: The query parameters; `None` values are omitted.
            body: The JSON body; `None` values are omitted.
            return_format: The format to return the body in.
            error_on_not_found: Whether to raise an error if the resource is not found.

        Raises:
            ResourceNotFoundError: If the resource is not found and error_on_not_found is True.
            RequestError: If the request fails.
        """

        _, response_logger, error_logger = self._get_loggers(log_response=log_response, log_on_error=log_on_error)

        response = self._send(action=action, method=method, path=path, params=params, body=body, log_request=log_request)

        if response.status_code == NOT_FOUND_ERROR:
            self._log_error_response(action=action, response=response, error_logger=error_logger)

            if error_on_not_found:
                raise ResourceNotFoundError(action=action, resource=path)

            return None

        if response.is_error:
            self._log_error_response(action=action, response=response, error_logger=error_logger)

            raise RequestError(action=action, message=self.default_error_message or response.text, status_code=response.status_code)

        if response.status_code == NO_CONTENT:
            response_logger(f"Completed {action} with no content")
            return None

        formatted_response = self._format_response(action=action, response=response, response_model=response_model, return_format=return_format)

        response_logger(f"Completed {action} with status {response.status_code}")

        return formatted_response

    def _perform_status_request(
        self,
        action: str,
        method: str,
        *,
        path: str,
        success_codes: Sequence[int] = (NO_CONTENT,),
        params: Mapping[str, Any] | None = None,
        body: Mapping[str, Any] | None = None,
        log_request: bool | None = None,
        log_on_error: bool | None = None,
    ) -> bool:
        """Perform a request whose outcome is carried by the status code alone.

        Returns True if the response status is one of `success_codes`; any other status, or a failure to
        get a response at all, is logged and returns False.
        """

        _, _, error_logger = self._get_loggers(log_on_error=log_on_error)

        try:
            response = self._send(action=action, method=method, path=path, params=params, body=body, log_request=log_request)
        except RequestError:
            return False

        if response.status_code not in success_codes:
            self._log_error_response(action=action, response=response, error_logger=error_logger)
            return False

        return True

    def _perform_check_request(self, action: str, *, path: str) -> bool:
        """Perform a GET whose answer is 204 for yes and 404 for no."""

        _, _, error_logger = self._get_loggers()

        try:
            response = self._send(action=action, method="GET", path=path)
        except RequestError:
            return False

        if response.status_code not in (NO_CONTENT, NOT_FOUND_ERROR):
            self._log_error_response(action=action, response=response, error_logger=error_logger)

        return response.status_code == NO_CONTENT

    def _format_response(self, action: str, response: httpx.Response, response_model: Any, return_format: ReturnFormat) -> Any:
        if return_format is ReturnFormat.STRING:
            return response.text

        try:
            raw_response = response.json()
        except json.JSONDecodeError as e:
            raise ResponseParsingError(action=action, message=f"Response is not valid JSON: {e}") from e

        if return_format is ReturnFormat.JSON:
            return raw_response

        try:
            return TypeAdapter(response_model).validate_python(raw_response)
        except ValidationError as e:
            raise ResponseParsingError(action=action, message=str(e)) from e
