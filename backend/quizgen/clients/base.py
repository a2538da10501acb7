"""Configurable async HTTP client with request/response/error hooks."""

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Callable

import httpx

from quizgen.errors import ApiError, ProviderError, RequestSetupError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 30000


@dataclass
class RequestConfig:
    """A single outgoing request, as seen by the on_request hook."""

    method: str
    url: str
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    params: dict[str, Any] | None = None
    json: Any = None
    timeout_ms: int = DEFAULT_TIMEOUT_MS


@dataclass
class ApiResponse:
    """A decoded HTTP response."""

    status: int
    data: Any
    headers: dict[str, str]
    request: RequestConfig | None = None


RequestHook = Callable[[RequestConfig], Any]
ResponseHook = Callable[[ApiResponse], Any]
ErrorHook = Callable[[ApiError], Any]


async def _call_hook(hook: Callable, arg: Any) -> Any:
    """Call a hook that may be a plain function or a coroutine function."""
    result = hook(arg)
    if inspect.isawaitable(result):
        result = await result
    return result


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    if "json" in response.headers.get("content-type", ""):
        try:
            return response.json()
        except ValueError:
            pass
    return response.text


class ApiClient:
    """Thin wrapper around httpx.AsyncClient.

    Holds the base URL, default headers and timeout for one backend and
    runs optional hooks around every request:

    - on_request(config) may mutate or replace the RequestConfig; returning
      None keeps it unchanged.
    - on_response(response) sees every 2xx ApiResponse; returning None keeps
      it unchanged.
    - on_error(error) sees every ApiError. Raising fails the call, returning a
      value makes it the call's result, returning None re-raises the error.
    """

    def __init__(
        self,
        base_url: str = "",
        headers: dict[str, str] | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        on_request: RequestHook | None = None,
        on_response: ResponseHook | None = None,
        on_error: ErrorHook | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.timeout_ms = timeout_ms
        self.on_request = on_request
        self.on_response = on_response
        self.on_error = on_error
        self._headers = httpx.Headers(headers or {})
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_ms / 1000,
            transport=transport,
        )

    @property
    def headers(self) -> httpx.Headers:
        """Copy of the current default headers (case-insensitive)."""
        return httpx.Headers(self._headers)

    # --- Verb methods ---

    async def get(self, endpoint: str, **config: Any) -> Any:
        return await self.request("GET", endpoint, **config)

    async def post(self, endpoint: str, data: Any = None, **config: Any) -> Any:
        return await self.request("POST", endpoint, data=data, **config)

    async def put(self, endpoint: str, data: Any = None, **config: Any) -> Any:
        return await self.request("PUT", endpoint, data=data, **config)

    async def patch(self, endpoint: str, data: Any = None, **config: Any) -> Any:
        return await self.request("PATCH", endpoint, data=data, **config)

    async def delete(self, endpoint: str, **config: Any) -> Any:
        return await self.request("DELETE", endpoint, **config)

    async def request(
        self,
        method: str,
        endpoint: str,
        data: Any = None,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout_ms: int | None = None,
    ) -> Any:
        """Send a request through the hooks.

        Returns an ApiResponse, or whatever on_error resolved a failure to.
        """
        try:
            merged = httpx.Headers(self._headers)
            merged.update(headers or {})
            config = RequestConfig(
                method=method.upper(),
                url=endpoint,
                headers=merged,
                params=params,
                json=data,
                timeout_ms=timeout_ms if timeout_ms is not None else self.timeout_ms,
            )
            if self.on_request:
                config = await _call_hook(self.on_request, config) or config
            request = self._client.build_request(
                config.method,
                config.url,
                headers=config.headers,
                params=config.params,
                json=config.json,
                timeout=config.timeout_ms / 1000,
            )
        except ApiError as e:
            return await self._fail(e)
        except Exception as e:
            return await self._fail(RequestSetupError(f"Failed to set up request: {e}"), e)

        logger.debug(f"{config.method} {request.url}")
        try:
            response = await self._client.send(request)
        except httpx.TimeoutException as e:
            return await self._fail(
                TransportError(f"Request timed out after {config.timeout_ms}ms", timed_out=True), e
            )
        except httpx.UnsupportedProtocol as e:
            return await self._fail(RequestSetupError(f"Invalid request URL: {e}"), e)
        except httpx.RequestError as e:
            return await self._fail(TransportError(f"Network error: {e}"), e)

        api_response = ApiResponse(
            status=response.status_code,
            data=_decode_body(response),
            headers=dict(response.headers),
            request=config,
        )
        logger.debug(f"{config.method} {request.url} -> {api_response.status}")

        if not response.is_success:
            return await self._fail(
                ProviderError(
                    f"Request failed with status code {api_response.status}",
                    status=api_response.status,
                    body=api_response.data,
                )
            )

        if self.on_response:
            api_response = await _call_hook(self.on_response, api_response) or api_response
        return api_response

    async def _fail(self, error: ApiError, cause: BaseException | None = None) -> Any:
        if cause is not None:
            error.__cause__ = cause
        if self.on_error is None:
            raise error
        outcome = await _call_hook(self.on_error, error)
        if outcome is None:
            raise error
        return outcome

    # --- Default header mutation ---

    def set_auth_token(self, token: str | None, scheme: str = "Bearer") -> None:
        """Set the Authorization header, or remove it when token is falsy."""
        if token:
            self._headers["Authorization"] = f"{scheme} {token}"
        else:
            self.remove_header("Authorization")

    def set_header(self, name: str, value: str) -> None:
        self._headers[name] = value

    def remove_header(self, name: str) -> None:
        if name in self._headers:
            del self._headers[name]

    # --- Lifecycle ---

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
