"""Python SDK for the messages-worker service.

Cliente asíncrono para la API HTTP del servicio: envío de mensajes por
prioridad, escalado/estado de workers y health checks.

Example usage:

    from messages_worker_sdk import ClientSettings, MessagesWorkerClient

    async with MessagesWorkerClient(ClientSettings(base_url="http://localhost:8083")) as client:
        resp = await client.post_message_with_defaults("pr-123", "https://httpbin.org/post", {"id": 123})
        await client.add_workers("high", 2)

Logging: la librería emite trazas DEBUG con loguru, desactivadas por defecto.
Actívalas con `logger.enable("messages_worker_sdk")`.
"""

from loguru import logger

from messages_worker_sdk.client import MessagesWorkerClient
from messages_worker_sdk.core.config import ClientSettings, default_settings
from messages_worker_sdk.core.domain.models import (
    BulkMessageRequest,
    BulkMessageResponse,
    HealthResponse,
    MessageRequest,
    MessageResponse,
    Priority,
    PriorityWorkerInfo,
    RemoveAllWorkersResponse,
    ScaleWorkersResponse,
    Topic,
    WorkerInfo,
    WorkerStatusResponse,
)
from messages_worker_sdk.core.errors import (
    APIError,
    DecodeError,
    ErrorKind,
    MessagesWorkerError,
    SerializationError,
    TransportError,
    ValidationError,
    is_api_error,
)

__version__ = "0.1.0"

logger.disable("messages_worker_sdk")

__all__ = [
    "APIError",
    "BulkMessageRequest",
    "BulkMessageResponse",
    "ClientSettings",
    "DecodeError",
    "ErrorKind",
    "HealthResponse",
    "MessageRequest",
    "MessageResponse",
    "MessagesWorkerClient",
    "MessagesWorkerError",
    "Priority",
    "PriorityWorkerInfo",
    "RemoveAllWorkersResponse",
    "ScaleWorkersResponse",
    "SerializationError",
    "Topic",
    "TransportError",
    "ValidationError",
    "WorkerInfo",
    "WorkerStatusResponse",
    "__version__",
    "default_settings",
    "is_api_error",
]
