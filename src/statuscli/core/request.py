"""Resilient request pipeline.

Every outbound request goes through :class:`ResilientRequester`, which gives
each attempt its own deadline, retries transient failures with linear
backoff and hands back the raw body and status of the final response.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import httpx
import msgspec

from statuscli.config.settings import DEFAULT_TIMEOUT, FetchConfig
from statuscli.core.http import create_http_client
from statuscli.core.retry import (
    StatusReceived,
    TransportFailure,
    calculate_retry_delay,
    should_retry,
)
from statuscli.errors.messages import extract_error_message, get_status_remediation
from statuscli.errors.network import describe_transport_error
from statuscli.errors.types import (
    ClientError,
    InputError,
    RequestError,
    ResponseReadError,
    ServerError,
    TransportError,
)
from statuscli.logging import get_logger, log_debug_response

logger = get_logger(__name__)

CONTENT_TYPE_JSON = "application/json"


@dataclass(frozen=True)
class RequestOptions:
    """Per-request settings."""

    headers: Mapping[str, Sequence[str] | str] = field(default_factory=dict)
    query: Mapping[str, Any] = field(default_factory=dict)
    body: Any = None
    timeout: float = DEFAULT_TIMEOUT  # seconds, per attempt
    max_retries: int = 0
    debug: bool = False

    @classmethod
    def from_config(cls, fetch: FetchConfig, **overrides: Any) -> RequestOptions:
        """Build options from fetch settings, with explicit overrides."""
        values = {
            "timeout": fetch.timeout,
            "max_retries": fetch.max_retries,
            "debug": fetch.debug,
        }
        values.update(overrides)
        return cls(**values)


@dataclass(frozen=True)
class RequestOutcome:
    """Final response of a logical request."""

    body: bytes
    status_code: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    attempts: int = 1
    method: str = "GET"
    url: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_server_error(self) -> bool:
        return 500 <= self.status_code < 600

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    def json(self, type: Any = Any) -> Any:  # noqa: A002
        """Decode the body as JSON, optionally into a msgspec type."""
        return msgspec.json.decode(self.body, type=type)

    def raise_for_status(self) -> RequestOutcome:
        """Raise ServerError/ClientError for 5xx/4xx outcomes.

        Returns:
            self, so calls can be chained
        """
        if not (self.is_server_error or self.is_client_error):
            return self

        detail = extract_error_message(self.body, self.status_code)
        message = f"HTTP {self.status_code}: {detail}"
        error_cls = ServerError if self.is_server_error else ClientError
        raise error_cls(
            message,
            status_code=self.status_code,
            body=self.body,
            url=self.url,
            remediation=get_status_remediation(self.status_code),
            details={"status_code": self.status_code, "attempts": self.attempts},
        )


@dataclass(frozen=True)
class AttemptRecord:
    """What happened during one attempt, as reported to observers."""

    method: str
    url: str
    attempt: int  # 0-indexed
    max_retries: int
    status_code: int | None = None
    headers: httpx.Headers | None = None
    body: bytes | None = None
    error: BaseException | None = None
    will_retry: bool = False
    delay: float | None = None
    debug: bool = False

    @property
    def final(self) -> bool:
        return not self.will_retry


ResponseObserver = Callable[[AttemptRecord], None]
Sleeper = Callable[[float], Awaitable[None]]

_QUERY_SCALARS = (str, int, float, bool, type(None))


def attempt_timeout(options: RequestOptions) -> float:
    """Per-attempt deadline in seconds, falling back to the default."""
    if options.timeout and options.timeout > 0:
        return options.timeout
    return DEFAULT_TIMEOUT


def _query_values(key: str, value: Any) -> list[Any]:
    values = list(value) if isinstance(value, (list, tuple)) else [value]
    for item in values:
        if not isinstance(item, _QUERY_SCALARS):
            raise InputError(
                f"Query parameter {key!r} has unsupported value {item!r}",
                remediation="Use strings, numbers, booleans or lists of them.",
            )
    return values


def build_url(raw_url: str, query: Mapping[str, Any] | None = None) -> httpx.URL:
    """Parse an absolute URL and merge query parameters into it.

    Values from ``query`` replace existing parameters with the same key. A
    list or tuple value repeats the key once per item.

    Raises:
        InputError: If the URL cannot be parsed or is not absolute http(s),
            or a query value is not a scalar or a list of scalars
    """
    try:
        url = httpx.URL(raw_url)
    except (httpx.InvalidURL, TypeError) as exc:
        raise InputError(f"Invalid URL {raw_url!r}: {exc}", url=str(raw_url)) from exc

    if url.scheme not in ("http", "https") or not url.host:
        raise InputError(
            f"URL must be absolute http(s): {raw_url!r}",
            url=raw_url,
            remediation="Use a full URL such as https://www.githubstatus.com/api/v2/status.json",
        )

    for key, value in (query or {}).items():
        values = _query_values(key, value)
        url = url.copy_remove_param(key)
        for item in values:
            url = url.copy_add_param(key, item)
    return url


def build_body(body: Any) -> bytes | None:
    """Serialize a request payload to JSON.

    Raises:
        InputError: If the payload is not JSON-serializable
    """
    if body is None:
        return None
    try:
        return msgspec.json.encode(body)
    except (TypeError, ValueError, msgspec.EncodeError) as exc:
        raise InputError(f"Request body is not JSON-serializable: {exc}") from exc


def build_headers(
    headers: Mapping[str, Sequence[str] | str] | None,
    has_body: bool,
) -> list[tuple[str, str]]:
    """Flatten multi-valued headers, forcing a JSON content type for bodies."""
    flat: list[tuple[str, str]] = []
    for name, values in (headers or {}).items():
        if has_body and name.lower() == "content-type":
            continue
        if isinstance(values, str):
            values = [values]
        flat.extend((name, value) for value in values)

    if has_body:
        flat.append(("Content-Type", CONTENT_TYPE_JSON))
    return flat


class ResilientRequester:
    """Issue HTTP requests with per-attempt timeouts and retries.

    Usage:
        async with ResilientRequester.from_config(config.fetch) as requester:
            outcome = await requester.get(url, RequestOptions(max_retries=2))
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        *,
        observers: Sequence[ResponseObserver] | None = None,
        sleep: Sleeper = asyncio.sleep,
        owns_client: bool = False,
    ) -> None:
        self._client = client
        self._observers = list(observers) if observers is not None else [log_debug_response]
        self._sleep = sleep
        self._owns_client = owns_client

    @classmethod
    def from_config(
        cls,
        fetch: FetchConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        **kwargs: Any,
    ) -> ResilientRequester:
        """Create a requester that owns a freshly built client."""
        client = create_http_client(fetch, transport=transport)
        return cls(client, owns_client=True, **kwargs)

    @property
    def client(self) -> httpx.AsyncClient:
        return self._client

    def add_observer(self, observer: ResponseObserver) -> None:
        self._observers.append(observer)

    async def aclose(self) -> None:
        """Close the client if this requester created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> ResilientRequester:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def build_request(
        self,
        method: str,
        url: str,
        options: RequestOptions,
    ) -> httpx.Request:
        """Build a fresh request for one attempt.

        Raises:
            InputError: If the URL, body or headers are malformed
        """
        target = build_url(url, options.query)
        content = build_body(options.body)
        headers = build_headers(options.headers, has_body=content is not None)
        try:
            return self._client.build_request(
                method,
                target,
                headers=headers,
                content=content,
                timeout=httpx.Timeout(attempt_timeout(options)),
            )
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise InputError(f"Could not build {method} request: {exc}", url=url) from exc

    async def execute(
        self,
        method: str,
        url: str,
        options: RequestOptions | None = None,
    ) -> RequestOutcome:
        """Perform a request, retrying transport failures and 5xx responses.

        Args:
            method: HTTP method (GET, POST, ...)
            url: Absolute URL
            options: Request options (defaults if None)

        Returns:
            RequestOutcome of the final attempt. A 5xx outcome is returned
            when retries ran out; 4xx and other statuses are returned as-is.

        Raises:
            InputError: Malformed URL, body or request
            TransportError: Network failure that was not retried, or retries ran out
            ResponseReadError: The response body could not be read
        """
        options = options or RequestOptions()
        method = method.upper()
        if options.max_retries < 0:
            raise InputError(f"max_retries must be >= 0, got {options.max_retries}", url=url)
        timeout = attempt_timeout(options)

        last_error: BaseException | None = None

        for attempt in range(options.max_retries + 1):
            request = self.build_request(method, url, options)

            try:
                async with asyncio.timeout(timeout):
                    response = await self._client.send(request, stream=True)
                    body = await self._read_body(response, url)
            except (httpx.TransportError, TimeoutError) as exc:
                last_error = exc
                retry = should_retry(TransportFailure(exc), attempt, options.max_retries)
                delay = calculate_retry_delay(attempt) if retry else None
                self._notify(
                    AttemptRecord(
                        method=method,
                        url=str(request.url),
                        attempt=attempt,
                        max_retries=options.max_retries,
                        error=exc,
                        will_retry=retry,
                        delay=delay,
                        debug=options.debug,
                    )
                )
                if not retry:
                    raise self._transport_error(method, url, exc, attempt + 1) from exc

                logger.debug(
                    "retrying %s %s in %.1fs after %s", method, url, delay, type(exc).__name__
                )
                await self._sleep(delay)
                continue

            status_code = response.status_code
            retry = should_retry(StatusReceived(status_code), attempt, options.max_retries)
            delay = calculate_retry_delay(attempt) if retry else None
            self._notify(
                AttemptRecord(
                    method=method,
                    url=str(request.url),
                    attempt=attempt,
                    max_retries=options.max_retries,
                    status_code=status_code,
                    headers=response.headers,
                    body=body,
                    will_retry=retry,
                    delay=delay,
                    debug=options.debug,
                )
            )

            if retry:
                last_error = ServerError(
                    f"server error: HTTP {status_code}", status_code=status_code, body=body, url=url
                )
                logger.debug(
                    "retrying %s %s in %.1fs after HTTP %d", method, url, delay, status_code
                )
                await self._sleep(delay)
                continue

            return RequestOutcome(
                body=body,
                status_code=status_code,
                headers=response.headers,
                attempts=attempt + 1,
                method=method,
                url=str(request.url),
            )

        # Every path through the last attempt returns or raises
        raise RequestError(f"{method} {url} failed after retries: {last_error}", url=url)

    async def get(self, url: str, options: RequestOptions | None = None) -> RequestOutcome:
        return await self.execute("GET", url, options)

    async def post(self, url: str, options: RequestOptions | None = None) -> RequestOutcome:
        return await self.execute("POST", url, options)

    async def put(self, url: str, options: RequestOptions | None = None) -> RequestOutcome:
        return await self.execute("PUT", url, options)

    async def patch(self, url: str, options: RequestOptions | None = None) -> RequestOutcome:
        return await self.execute("PATCH", url, options)

    async def delete(self, url: str, options: RequestOptions | None = None) -> RequestOutcome:
        return await self.execute("DELETE", url, options)

    @staticmethod
    async def _read_body(response: httpx.Response, url: str) -> bytes:
        """Read the full body, always releasing the connection.

        Timeouts propagate so the caller treats them like any other
        attempt timeout.
        """
        try:
            return await response.aread()
        except httpx.TimeoutException:
            raise
        except (httpx.HTTPError, httpx.StreamError) as exc:
            raise ResponseReadError(
                f"Failed to read response body: {str(exc) or type(exc).__name__}",
                url=url,
                details={"status_code": response.status_code},
            ) from exc
        finally:
            await response.aclose()

    @staticmethod
    def _transport_error(
        method: str, url: str, error: BaseException, attempts: int
    ) -> TransportError:
        message, remediation = describe_transport_error(error)
        suffix = f" after {attempts} attempts" if attempts > 1 else ""
        return TransportError(
            f"{method} {url} failed{suffix}: {message}",
            attempts=attempts,
            url=url,
            remediation=remediation,
            details={"error": type(error).__name__},
        )

    def _notify(self, record: AttemptRecord) -> None:
        for observer in self._observers:
            try:
                observer(record)
            except Exception:
                logger.exception("response observer %r failed", observer)
