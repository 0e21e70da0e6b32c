"""Decoder JSON tipado sobre Pydantic v2.

Por qué `TypeAdapter`:
- Acepta modelos Pydantic, dataclasses, TypedDict, `list[...]`, `dict[...]`
  y tipos primitivos con el mismo contrato.
- `validate_json` parsea y valida en un solo paso; JSON inválido y forma
  incorrecta terminan en `ValidationError` (que es un `ValueError`).

Nota:
- Pydantic deja pasar tal cual otras excepciones lanzadas por validadores o
  `__post_init__` del tipo destino; aquí se convierten en `ValueError`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import TypeAdapter


class PydanticDecoder:
    """Implementa `core.interfaces.decoder.Decoder`."""

    def __init__(self, *, strict: bool = False) -> None:
        self._strict = strict

    def bind(self, target: Any) -> Callable[[bytes], Any]:
        # Un tipo no soportado lanza PydanticSchemaGenerationError aquí, antes
        # de emitir ninguna request.
        adapter = TypeAdapter(target)
        strict = self._strict

        def decode(body: bytes) -> Any:
            try:
                return adapter.validate_json(body, strict=strict)
            except ValueError:
                raise
            except Exception as exc:
                raise ValueError(f"{type(exc).__name__}: {exc}") from exc

        return decode
