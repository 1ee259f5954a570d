"""Operaciones de envío de mensajes.

No se validan localmente prioridad, topic ni forma del body: el servidor es
la autoridad y devuelve un `APIError` si algo no le encaja.
"""

from __future__ import annotations

from typing import Any, Sequence

from messages_worker_sdk.core.domain.models import (
    BulkMessageRequest,
    BulkMessageResponse,
    MessageRequest,
    MessageResponse,
    Priority,
    Topic,
)
from messages_worker_sdk.core.errors import ValidationError
from messages_worker_sdk.core.services.base import BaseService

MESSAGES_PATH = "/api/v1/messages"
BULK_MESSAGES_PATH = "/api/v1/messages/bulk"


class MessageOperations(BaseService):
    async def post_message(
        self, req: MessageRequest | None, *, timeout: float | None = None
    ) -> MessageResponse:
        """Envía un único mensaje (`POST /api/v1/messages`)."""

        if req is None:
            raise ValidationError("message request cannot be None")
        return await self._call("POST", MESSAGES_PATH, body=req, model=MessageResponse, timeout=timeout)

    async def post_bulk_messages(
        self,
        req: BulkMessageRequest | Sequence[MessageRequest] | None,
        *,
        timeout: float | None = None,
    ) -> BulkMessageResponse:
        """Envía varios mensajes en una sola petición (`POST /api/v1/messages/bulk`)."""

        if req is None:
            raise ValidationError("bulk message request cannot be None")
        if not isinstance(req, BulkMessageRequest):
            req = BulkMessageRequest.of(req)
        if not req.messages:
            raise ValidationError("no messages provided")
        return await self._call(
            "POST", BULK_MESSAGES_PATH, body=req, model=BulkMessageResponse, timeout=timeout
        )

    async def _post_with_priority(
        self,
        priority: Priority,
        item_id: str,
        callback_url: str,
        object_body: Any,
        timeout: float | None,
    ) -> MessageResponse:
        req = MessageRequest(
            item_id=item_id,
            priority=priority,
            topic=Topic.PULL_REQUESTS,
            callback_url=callback_url,
            object_body=object_body,
        )
        return await self.post_message(req, timeout=timeout)

    async def post_message_with_defaults(
        self, item_id: str, callback_url: str, object_body: Any = None, *, timeout: float | None = None
    ) -> MessageResponse:
        """Mensaje con prioridad media y el topic por defecto."""

        return await self._post_with_priority(Priority.MEDIUM, item_id, callback_url, object_body, timeout)

    async def post_high_priority_message(
        self, item_id: str, callback_url: str, object_body: Any = None, *, timeout: float | None = None
    ) -> MessageResponse:
        return await self._post_with_priority(Priority.HIGH, item_id, callback_url, object_body, timeout)

    async def post_low_priority_message(
        self, item_id: str, callback_url: str, object_body: Any = None, *, timeout: float | None = None
    ) -> MessageResponse:
        return await self._post_with_priority(Priority.LOW, item_id, callback_url, object_body, timeout)
