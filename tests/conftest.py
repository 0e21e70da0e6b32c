from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest

from adapters.http_client import HttpxTransport
from core.config import AppSettings
from core.domain.models import Outcome
from core.services.request_executor import RequestExecutor

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(http_timeout_seconds=5, user_agent="api-manager-tests/1.0", _env_file=None)


@pytest.fixture
def make_executor(settings: AppSettings) -> Callable[[Handler], RequestExecutor]:
    def _make(handler: Handler) -> RequestExecutor:
        transport = HttpxTransport(settings, transport=httpx.MockTransport(handler))
        return RequestExecutor(settings, transport=transport)

    return _make


class CallbackRecorder:
    """Collects outcomes delivered to a completion handler."""

    def __init__(self) -> None:
        self.outcomes: list[Outcome[Any]] = []
        self.threads: list[str] = []
        self._done = threading.Event()

    def __call__(self, outcome: Outcome[Any]) -> None:
        self.outcomes.append(outcome)
        self.threads.append(threading.current_thread().name)
        self._done.set()

    def wait(self, timeout: float = 5.0) -> Outcome[Any]:
        assert self._done.wait(timeout), "completion handler was never called"
        return self.outcomes[0]


@pytest.fixture
def recorder() -> CallbackRecorder:
    return CallbackRecorder()


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
