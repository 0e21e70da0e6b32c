"""Taxonomía cerrada de errores de una request.

Por qué excepciones-dataclass:
- Cada fallo es un *valor* que viaja dentro de `Failure`, pero también se puede
  lanzar con `Failure.unwrap()` sin envolverlo en otra excepción.
- Cada variante lleva el payload mínimo para explicar el fallo (error
  subyacente, status code o la URL original). Nunca vacío/opaco.
"""

from __future__ import annotations

from dataclasses import dataclass


class AppError(Exception):
    """Base de todos los fallos clasificados."""

    kind: str = "app_error"


@dataclass(eq=False)
class NetworkError(AppError):
    """Fallo a nivel transporte: DNS, conexión rechazada, TLS, timeout, proxy."""

    inner: Exception
    kind = "network_error"

    def __str__(self) -> str:
        return f"network error: {self.inner!r}"


@dataclass(eq=False)
class DataNotFound(AppError):
    """El servidor respondió 200 pero sin body."""

    kind = "data_not_found"

    def __str__(self) -> str:
        return "response body is empty"


@dataclass(eq=False)
class JSONParsingError(AppError):
    """El body no es JSON o no encaja con el tipo destino."""

    inner: Exception
    kind = "json_parsing_error"

    def __str__(self) -> str:
        return f"could not decode body: {self.inner}"


@dataclass(eq=False)
class InvalidStatusCode(AppError):
    status_code: int
    kind = "invalid_status_code"

    def __str__(self) -> str:
        return f"unexpected HTTP status {self.status_code}"


@dataclass(eq=False)
class BadURL(AppError):
    url: str
    kind = "bad_url"

    def __str__(self) -> str:
        return f"invalid URL: {self.url!r}"


@dataclass(eq=False)
class BadResponse(AppError):
    """El intercambio lanzó algo que no es un fallo de conexión."""

    inner: Exception
    kind = "bad_response"

    def __str__(self) -> str:
        return f"request failed: {self.inner!r}"


@dataclass(eq=False)
class MalformedResponse(AppError):
    """No se pudo leer la línea de estado de la respuesta."""

    reason: str
    kind = "malformed_response"

    def __str__(self) -> str:
        return f"malformed response: {self.reason}"


__all__ = [
    "AppError",
    "BadResponse",
    "BadURL",
    "DataNotFound",
    "InvalidStatusCode",
    "JSONParsingError",
    "MalformedResponse",
    "NetworkError",
]
