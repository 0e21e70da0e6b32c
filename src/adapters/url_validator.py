"""Validación de URLs con httpx.

Solo aceptamos URLs absolutas `http`/`https` con host. Cualquier otra cosa
(rutas relativas, `ftp://`, texto libre) es `BadURL` en el executor.
"""

from __future__ import annotations

import httpx

_ALLOWED_SCHEMES = ("http", "https")


class HttpUrlValidator:
    """Implementa `core.interfaces.url_validator.UrlValidator`."""

    def validate(self, raw: str) -> str | None:
        if not isinstance(raw, str):
            return None
        candidate = raw.strip()
        if not candidate or candidate != raw:
            return None
        try:
            url = httpx.URL(candidate)
        except (httpx.InvalidURL, TypeError, ValueError):
            return None
        if url.scheme not in _ALLOWED_SCHEMES or not url.host:
            return None
        return str(url)
