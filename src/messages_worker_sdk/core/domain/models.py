"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Un único contrato para serializar peticiones y validar respuestas del
  servicio messages-worker.
- Los alias (`Field(alias=...)`) reflejan exactamente las claves del wire.

Nota:
- Los modelos de respuesta son tolerantes: campos ausentes toman su valor
  cero y `null` en cualquier campo equivale también a su valor cero.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Sequence

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict


class Priority(str, Enum):
    """Carril de prioridad de la cola de mensajes."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(p.value for p in cls)


class Topic(str, Enum):
    """Categoría lógica del mensaje (por ahora solo una)."""

    PULL_REQUESTS = "pullrequests"


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class _ResponseModel(_WireModel):
    """Respuesta del servidor: `null` en cualquier campo equivale a su valor cero."""

    @model_validator(mode="before")
    @classmethod
    def null_as_zero_value(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class MessageRequest(_WireModel):
    """Mensaje a encolar en el servicio.

    `priority` y `topic` aceptan valores fuera de los enums: el servidor es
    la autoridad y responde con un `APIError` si no los reconoce.
    """

    item_id: str = Field(
        ...,
        description="Identificador del elemento al que se refiere el mensaje.",
    )
    priority: Priority | str = Field(
        default=Priority.MEDIUM,
        description="Prioridad de la cola destino (low/medium/high).",
    )
    topic: Topic | str = Field(
        default=Topic.PULL_REQUESTS,
        description="Topic del mensaje.",
    )
    callback_url: str = Field(
        default="",
        description="URL a la que el worker notificará el resultado.",
    )
    object_body: Any = Field(
        default=None,
        description="Carga útil opaca; se reenvía sin interpretar.",
    )


class BulkMessageRequest(_WireModel):
    messages: list[MessageRequest] = Field(default_factory=list)

    @classmethod
    def of(cls, messages: Sequence[MessageRequest]) -> "BulkMessageRequest":
        return cls(messages=list(messages))


class MessageResponse(_ResponseModel):
    id: str = Field(default="", description="Identificador asignado por el servidor.")
    status: str = Field(default="", description="Estado de publicación (p.ej. 'published').")
    item_id: str = Field(default="", alias="itemId")
    priority: Priority | str = Field(default="")
    topic: Topic | str = Field(default="")


class BulkMessageResponse(_ResponseModel):
    status: str = ""
    count: int = 0
    messages: list[MessageResponse] = Field(default_factory=list)


class WorkerInfo(_ResponseModel):
    id: str = ""
    queue_name: str = ""
    status: str = ""
    started_at: str = ""


class PriorityWorkerInfo(_ResponseModel):
    """Estado de un carril de prioridad: workers activos y profundidad de cola."""

    count: int = 0
    queue_depth: int = 0
    workers: list[WorkerInfo] = Field(default_factory=list)


class WorkerStatusResponse(_ResponseModel):
    """Snapshot de workers por prioridad devuelto por `/api/v1/workers/status`."""

    total_workers: int = 0
    low_priority: PriorityWorkerInfo = Field(default_factory=PriorityWorkerInfo)
    medium_priority: PriorityWorkerInfo = Field(default_factory=PriorityWorkerInfo)
    high_priority: PriorityWorkerInfo = Field(default_factory=PriorityWorkerInfo)
    all_workers: list[WorkerInfo] = Field(default_factory=list)

    def bucket(self, priority: Priority) -> PriorityWorkerInfo:
        return {
            Priority.LOW: self.low_priority,
            Priority.MEDIUM: self.medium_priority,
            Priority.HIGH: self.high_priority,
        }[priority]


class ScaleWorkersResponse(_ResponseModel):
    status: str = ""
    message: str = ""
    priority: str = ""
    count: int = 0
    action: str = Field(default="", description="'added' o 'removed' según el signo de count.")


class RemoveAllWorkersResponse(_ResponseModel):
    status: str = ""
    message: str = ""
    total_removed: int = 0
    errors: list[str] = Field(
        default_factory=list,
        description="Errores por worker que no pudo detenerse (opcional en el wire).",
    )


class HealthResponse(_ResponseModel):
    status: str = Field(..., description="'OK' cuando el servicio responde 200.")
