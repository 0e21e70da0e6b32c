"""Modelos del dominio.

Por qué dataclasses y no Pydantic aquí:
- `Outcome` debe poder transportar cualquier `T` (incluyendo modelos Pydantic
  del usuario) y excepciones arbitrarias sin validación extra.
- `match outcome: case Success(value): ...` funciona sin más ceremonia.

Nota:
- Estos modelos describen *qué* se pide y *qué* se obtuvo, no *cómo*.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, NoReturn, TypeVar, Union

from core.domain.errors import AppError

T = TypeVar("T")


class Method(str, Enum):
    """Métodos HTTP soportados."""

    GET = "GET"
    POST = "POST"


@dataclass(frozen=True)
class RequestSpec:
    """Request efímera: se construye por llamada y no se comparte.

    `params` viaja como query string en GET y como body JSON en POST.
    """

    url: str
    method: Method = Method.GET
    params: Mapping[str, Any] | None = None


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def value_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: AppError

    @property
    def is_success(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Lanza el error clasificado."""

        raise self.error

    def value_or(self, default: T) -> T:
        return default


Outcome = Union[Success[T], Failure]
