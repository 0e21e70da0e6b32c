"""Request → exchange → decode → classify.

This module owns the single classification pipeline. The two calling
conventions exposed by `RequestExecutor` are thin adapters around it:

- `execute` (callback): the exchange runs on a transport-managed worker
  thread and the handler is called exactly once, on that thread.
- `execute_async` (async/await): the calling coroutine is suspended on the
  exchange and the `Outcome` is returned directly.

Every request failure ends up as a `Failure` carrying one error kind from
`core.domain.errors`; no failure escapes as an exception.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from adapters.http_client import HttpxTransport
from adapters.json_decoder import PydanticDecoder
from adapters.url_validator import HttpUrlValidator
from core.config import AppSettings
from core.domain.errors import (
    BadResponse,
    BadURL,
    DataNotFound,
    InvalidStatusCode,
    JSONParsingError,
    MalformedResponse,
    NetworkError,
)
from core.domain.models import Failure, Method, Outcome, RequestSpec, Success
from core.interfaces.decoder import Decoder
from core.interfaces.transport import ConnectionFailed, Exchange, ExchangeResult, Transport
from core.interfaces.url_validator import UrlValidator

logger = logging.getLogger(__name__)

T = TypeVar("T")

OK_STATUS = 200

CompletionHandler = Callable[[Outcome[T]], None]


def classify_error(exc: Exception) -> Failure:
    """Classify an exception raised by the transport during the exchange."""

    if isinstance(exc, ConnectionFailed):
        return Failure(NetworkError(exc.inner))
    return Failure(BadResponse(exc))


def classify_exchange(exchange: Exchange, decode: Callable[[bytes], T]) -> Outcome[T]:
    """Classify a completed exchange and decode its body."""

    if exchange.status is None:
        return Failure(MalformedResponse(exchange.reason or "status line is missing"))
    if exchange.status != OK_STATUS:
        return Failure(InvalidStatusCode(exchange.status))
    if not exchange.body:
        return Failure(DataNotFound())
    try:
        value = decode(exchange.body)
    except ValueError as exc:
        return Failure(JSONParsingError(exc))
    return Success(value)


def classify(result: ExchangeResult, decode: Callable[[bytes], T]) -> Outcome[T]:
    """Classify any transport result; never raises."""

    try:
        if isinstance(result, Exchange):
            return classify_exchange(result, decode)
        return classify_error(result)
    except Exception as exc:
        # Un decoder que no cumple el contrato (lanza algo que no es ValueError).
        return Failure(BadResponse(exc))


def _log_outcome(spec: RequestSpec | None, url: str, outcome: Outcome[Any]) -> Outcome[Any]:
    method = spec.method.value if spec is not None else "-"
    if isinstance(outcome, Failure):
        logger.warning("%s %s failed: %s (%s)", method, url, outcome.error.kind, outcome.error)
    else:
        logger.debug("%s %s succeeded", method, url)
    return outcome


class RequestExecutor:
    """Fetch JSON and get a typed value or a classified error.

    Collaborators default to the httpx transport, the Pydantic decoder and the
    httpx-based URL validator, all configured from `AppSettings`.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        transport: Transport | None = None,
        decoder: Decoder | None = None,
        validator: UrlValidator | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._transport: Transport = transport or HttpxTransport(self._settings)
        self._decoder: Decoder = decoder or PydanticDecoder()
        self._validator: UrlValidator = validator or HttpUrlValidator()

    def _prepare(
        self,
        url: str,
        method: Method,
        params: Mapping[str, Any] | None,
    ) -> RequestSpec | None:
        validated = self._validator.validate(url)
        if validated is None:
            return None
        return RequestSpec(url=validated, method=method, params=params)

    def execute(
        self,
        url: str,
        target: type[T] | Any,
        *,
        method: Method | str = Method.GET,
        params: Mapping[str, Any] | None = None,
        on_complete: CompletionHandler[T],
    ) -> None:
        """Callback form. Returns immediately.

        `on_complete` is called exactly once. A `BadURL` failure, or a worker
        that cannot be started, is delivered on the caller's thread before this
        method returns; every other outcome is delivered on the transport's
        worker thread.

        Raises `ValueError` for a method other than GET/POST and the decoder's
        error for an unsupported `target`. Both are caller errors, raised before
        any request and without calling `on_complete`.
        """

        decode = self._decoder.bind(target)
        spec = self._prepare(url, _parse_method(method), params)
        if spec is None:
            _deliver(on_complete, _log_outcome(None, url, Failure(BadURL(url))))
            return

        def _done(result: ExchangeResult) -> None:
            _deliver(on_complete, _log_outcome(spec, spec.url, classify(result, decode)))

        try:
            self._transport.start(spec, _done)
        except Exception as exc:
            _deliver(on_complete, _log_outcome(spec, spec.url, Failure(BadResponse(exc))))

    async def execute_async(
        self,
        url: str,
        target: type[T] | Any,
        *,
        method: Method | str = Method.GET,
        params: Mapping[str, Any] | None = None,
    ) -> Outcome[T]:
        """Async form: suspends on the exchange and returns the `Outcome`.

        Raises `ValueError` for a method other than GET/POST and the decoder's
        error for an unsupported `target`, before any request.
        """

        decode = self._decoder.bind(target)
        spec = self._prepare(url, _parse_method(method), params)
        if spec is None:
            return _log_outcome(None, url, Failure(BadURL(url)))

        result: ExchangeResult
        try:
            result = await self._transport.send_async(spec)
        except Exception as exc:
            result = exc
        return _log_outcome(spec, spec.url, classify(result, decode))


def _parse_method(method: Method | str) -> Method:
    if isinstance(method, Method):
        return method
    return Method(method.upper())


def _deliver(handler: CompletionHandler[Any], outcome: Outcome[Any]) -> None:
    try:
        handler(outcome)
    except Exception:
        # El handler puede correr en el hilo del worker: nadie más vería el error.
        logger.exception("completion handler raised")
