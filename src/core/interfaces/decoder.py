"""Contrato del decoder JSON parametrizado por tipo."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Decoder(Protocol):
    def bind(self, target: Any) -> Callable[[bytes], Any]:
        """Devuelve una función `bytes -> T` para el tipo `target`.

        Reglas:
        - Si `target` no es soportado, falla aquí (error del programador).
        - La función devuelta lanza `ValueError` ante JSON inválido o forma
          incorrecta; nunca otra cosa.
        """

        ...
