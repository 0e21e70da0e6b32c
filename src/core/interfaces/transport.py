"""Contrato del transporte HTTP.

Por qué Protocol:
- El executor no sabe nada de httpx; solo de `Exchange` y `ConnectionFailed`.
- Permite sustituir el transporte por un stub en tests.

Reglas de diseño:
- Un fallo a nivel conexión (DNS, refused, TLS, timeout) se señala con
  `ConnectionFailed`. Cualquier otra excepción del intercambio se clasifica
  como respuesta inválida.
- Una línea de estado ilegible se devuelve como `Exchange(status=None)`, nunca
  como crash.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, Union, runtime_checkable

from core.domain.models import RequestSpec


@dataclass(frozen=True)
class Exchange:
    status: int | None
    body: bytes | None
    reason: str | None = None


@dataclass
class ConnectionFailed(Exception):
    inner: Exception

    def __str__(self) -> str:
        return str(self.inner)


ExchangeResult = Union[Exchange, Exception]
ExchangeCallback = Callable[[ExchangeResult], None]


@runtime_checkable
class Transport(Protocol):
    def start(self, spec: RequestSpec, on_done: ExchangeCallback) -> None:
        """Lanza el intercambio en un worker propio y vuelve de inmediato.

        `on_done` recibe el `Exchange` o la excepción, una sola vez, en el
        hilo del worker.
        """

        ...

    async def send_async(self, spec: RequestSpec) -> Exchange:
        ...
