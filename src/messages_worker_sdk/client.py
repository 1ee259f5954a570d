"""Cliente del servicio messages-worker.

Ejemplo:

    async with MessagesWorkerClient(ClientSettings(base_url="http://svc:8083")) as client:
        if await client.is_healthy():
            await client.post_high_priority_message("pr-126", "https://cb", {"urgent": True})

Un mismo cliente puede usarse desde muchas tareas a la vez: solo comparte el
pool de conexiones de `httpx`.
"""

from __future__ import annotations

from types import TracebackType

import httpx

from messages_worker_sdk.adapters.http_client import build_async_client
from messages_worker_sdk.core.config import ClientSettings, default_settings
from messages_worker_sdk.core.services.health import HealthOperations
from messages_worker_sdk.core.services.messages import MessageOperations
from messages_worker_sdk.core.services.workers import WorkerOperations


class MessagesWorkerClient(MessageOperations, WorkerOperations, HealthOperations):
    def __init__(
        self,
        settings: ClientSettings | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or ClientSettings()
        self._http = build_async_client(self._settings, transport=transport)

    @classmethod
    def with_defaults(cls, *, transport: httpx.AsyncBaseTransport | None = None) -> "MessagesWorkerClient":
        """Cliente con la configuración por defecto (sin leer entorno)."""

        return cls(default_settings(), transport=transport)

    @property
    def settings(self) -> ClientSettings:
        return self._settings

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    @property
    def timeout_seconds(self) -> float:
        return self._settings.timeout_seconds

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "MessagesWorkerClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
