"""Base común de las operaciones del SDK.

Las operaciones (mensajes, workers, health) se definen como mixins sobre
`BaseService`; `MessagesWorkerClient` las compone y aporta el `httpx.AsyncClient`.

Toda operación pública acepta `timeout=` (segundos): un deadline por llamada
que, al vencer, produce `TransportError`.
"""

from __future__ import annotations

from typing import Any, TypeVar

import httpx
from pydantic import BaseModel

from messages_worker_sdk.adapters.http_client import send_request
from messages_worker_sdk.adapters.response_decoder import decode_response

ModelT = TypeVar("ModelT", bound=BaseModel)


class BaseService:
    _http: httpx.AsyncClient

    async def _call(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        model: type[ModelT] | None = None,
        timeout: float | None = None,
    ) -> ModelT | None:
        response = await send_request(self._http, method, path, body, timeout=timeout)
        return await decode_response(response, model)
