"""Health check del servicio.

`/health` responde texto plano ("OK"), no JSON. Por eso este endpoint no pasa
por `decode_response`: un 200 sintetiza `HealthResponse(status="OK")` y
cualquier otro status produce un `APIError` con mensaje propio (sin el body).
"""

from __future__ import annotations

from loguru import logger

from messages_worker_sdk.adapters.http_client import send_request
from messages_worker_sdk.core.domain.models import HealthResponse
from messages_worker_sdk.core.errors import APIError, MessagesWorkerError
from messages_worker_sdk.core.services.base import BaseService

HEALTH_PATH = "/health"


class HealthOperations(BaseService):
    async def check_health(self, *, timeout: float | None = None) -> HealthResponse:
        response = await send_request(self._http, "GET", HEALTH_PATH, timeout=timeout)
        await response.aclose()

        if response.status_code != 200:
            raise APIError(
                response.status_code,
                f"health check failed with status {response.status_code}",
            )
        return HealthResponse(status="OK")

    async def is_healthy(self, *, timeout: float | None = None) -> bool:
        """True si `check_health` no falla; el error concreto se descarta."""

        try:
            await self.check_health(timeout=timeout)
        except MessagesWorkerError as exc:
            logger.debug("service unhealthy: {}", exc)
            return False
        return True

    async def ping(self, *, timeout: float | None = None) -> HealthResponse:
        """Alias de `check_health`."""

        return await self.check_health(timeout=timeout)
