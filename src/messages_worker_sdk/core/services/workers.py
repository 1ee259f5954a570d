"""Operaciones sobre workers: estado, escalado y conteos.

Convención del servidor para `scale_workers`: el signo de `count` indica la
acción (positivo = añadir, negativo = eliminar). No son endpoints distintos.
"""

from __future__ import annotations

from messages_worker_sdk.core.domain.models import (
    Priority,
    RemoveAllWorkersResponse,
    ScaleWorkersResponse,
    WorkerStatusResponse,
)
from messages_worker_sdk.core.errors import ValidationError
from messages_worker_sdk.core.services.base import BaseService

WORKER_STATUS_PATH = "/api/v1/workers/status"
SCALE_WORKERS_PATH = "/api/v1/workers/scale/{priority}?count={count}"
REMOVE_ALL_WORKERS_PATH = "/api/v1/workers/remove-all"


def parse_priority(priority: Priority | str) -> Priority:
    """Valida una prioridad recibida como enum o string exacto."""

    value = priority.value if isinstance(priority, Priority) else priority
    if not value:
        raise ValidationError("priority is required")
    if value not in Priority.values():
        raise ValidationError(f"priority must be 'low', 'medium', or 'high' (got {value!r})")
    return Priority(value)


def _require_positive(count: int) -> None:
    if count <= 0:
        raise ValidationError("count must be greater than 0")


class WorkerOperations(BaseService):
    async def get_worker_status(self, *, timeout: float | None = None) -> WorkerStatusResponse:
        return await self._call("GET", WORKER_STATUS_PATH, model=WorkerStatusResponse, timeout=timeout)

    async def scale_workers(
        self, priority: Priority | str, count: int, *, timeout: float | None = None
    ) -> ScaleWorkersResponse:
        """Escala el carril `priority` en `count` workers (negativo = eliminar)."""

        lane = parse_priority(priority)
        if count == 0:
            raise ValidationError("count cannot be 0")

        path = SCALE_WORKERS_PATH.format(priority=lane.value, count=count)
        return await self._call("POST", path, model=ScaleWorkersResponse, timeout=timeout)

    async def add_workers(
        self, priority: Priority | str, count: int, *, timeout: float | None = None
    ) -> ScaleWorkersResponse:
        _require_positive(count)
        return await self.scale_workers(priority, count, timeout=timeout)

    async def remove_workers(
        self, priority: Priority | str, count: int, *, timeout: float | None = None
    ) -> ScaleWorkersResponse:
        _require_positive(count)
        return await self.scale_workers(priority, -count, timeout=timeout)

    async def remove_all_workers(self, *, timeout: float | None = None) -> RemoveAllWorkersResponse:
        """Detiene todos los workers de todas las prioridades."""

        return await self._call(
            "POST", REMOVE_ALL_WORKERS_PATH, model=RemoveAllWorkersResponse, timeout=timeout
        )

    async def get_worker_count(self, priority: Priority | str, *, timeout: float | None = None) -> int:
        """Número de workers del carril `priority`.

        La prioridad se valida antes de ir a la red. Cada llamada hace un
        `get_worker_status` completo (sin caché).
        """

        lane = parse_priority(priority)
        status = await self.get_worker_status(timeout=timeout)
        return status.bucket(lane).count

    async def get_total_worker_count(self, *, timeout: float | None = None) -> int:
        status = await self.get_worker_status(timeout=timeout)
        return status.total_workers
