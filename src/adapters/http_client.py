"""Transporte HTTP sobre httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y redirects para que todas las requests se
  comporten igual.
- Traduce las excepciones de httpx al contrato del Core en el borde:
  `ConnectionFailed` para fallos de red y `Exchange(status=None)` para una
  línea de estado ilegible.
- Facilita testeo: se inyecta un `httpx.MockTransport` en vez de red real.

Nota:
- Un cliente nuevo por llamada. No hay pool compartido entre requests.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

import httpx

from core.config import AppSettings
from core.domain.models import Method, RequestSpec
from core.interfaces.transport import ConnectionFailed, Exchange, ExchangeCallback, ExchangeResult

logger = logging.getLogger(__name__)

# DNS, conexión rechazada, TLS, timeouts y proxy.
_CONNECTION_ERRORS = (httpx.TimeoutException, httpx.NetworkError, httpx.ProxyError)


def _default_headers(settings: AppSettings, extra_headers: dict[str, str] | None) -> dict[str, str]:
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return headers


def build_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Crea un `httpx.Client` con defaults seguros."""

    settings = settings or AppSettings()
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=settings.follow_redirects,
        headers=_default_headers(settings, extra_headers),
        transport=transport,
    )


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que sync y async se comporten igual.
    """

    settings = settings or AppSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=settings.follow_redirects,
        headers=_default_headers(settings, extra_headers),
        transport=transport,
    )


def _request_kwargs(spec: RequestSpec) -> dict[str, Any]:
    kwargs: dict[str, Any] = {"method": spec.method.value, "url": spec.url}
    if spec.params is None:
        return kwargs
    if spec.method is Method.GET:
        kwargs["params"] = dict(spec.params)
    else:
        kwargs["json"] = dict(spec.params)
    return kwargs


def _to_exchange(response: httpx.Response) -> Exchange:
    return Exchange(status=response.status_code, body=response.content)


class HttpxTransport:
    """Implementa `core.interfaces.transport.Transport` con httpx.

    `transport` acepta cualquier transporte httpx que sirva tanto en sync como
    en async (p.ej. `httpx.MockTransport` en tests).
    """

    def __init__(self, settings: AppSettings | None = None, *, transport: Any | None = None) -> None:
        self._settings = settings or AppSettings()
        self._transport = transport

    def send(self, spec: RequestSpec) -> Exchange:
        logger.debug("%s %s", spec.method.value, spec.url)
        try:
            with build_client(self._settings, transport=self._transport) as client:
                response = client.request(**_request_kwargs(spec))
        except httpx.RemoteProtocolError as exc:
            return Exchange(status=None, body=None, reason=str(exc))
        except _CONNECTION_ERRORS as exc:
            raise ConnectionFailed(exc) from exc
        return _to_exchange(response)

    async def send_async(self, spec: RequestSpec) -> Exchange:
        logger.debug("%s %s (async)", spec.method.value, spec.url)
        try:
            async with build_async_client(self._settings, transport=self._transport) as client:
                response = await client.request(**_request_kwargs(spec))
        except httpx.RemoteProtocolError as exc:
            return Exchange(status=None, body=None, reason=str(exc))
        except _CONNECTION_ERRORS as exc:
            raise ConnectionFailed(exc) from exc
        return _to_exchange(response)

    def start(self, spec: RequestSpec, on_done: ExchangeCallback) -> None:
        """Ejecuta `send` en un hilo propio y entrega el resultado a `on_done`.

        El hilo no es daemon: el intérprete espera a que la request termine
        (acotada por el timeout) para no perder el callback al salir.
        """

        def _worker() -> None:
            result: ExchangeResult
            try:
                result = self.send(spec)
            except Exception as exc:
                result = exc
            on_done(result)

        thread = threading.Thread(
            target=_worker,
            name=f"api-manager {spec.method.value} {spec.url}",
        )
        thread.start()
