"""Contrato del validador de URLs."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class UrlValidator(Protocol):
    def validate(self, raw: str) -> str | None:
        """Devuelve la URL normalizada o `None` si no es válida."""

        ...
