"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y serialización JSON para todos los endpoints.
- Traduce fallos de red y deadlines vencidos a `TransportError` en un único sitio.
- Facilita testeo: se puede inyectar un `httpx.MockTransport`.

Una llamada = un intento. No hay reintentos en esta capa.
"""

from __future__ import annotations

import asyncio
import json
from typing import Any

import httpx
from loguru import logger
from pydantic_core import PydanticSerializationError, to_jsonable_python

from messages_worker_sdk.core.config import ClientSettings
from messages_worker_sdk.core.errors import SerializationError, TransportError


def build_async_client(
    settings: ClientSettings,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea el `httpx.AsyncClient` (pool de conexiones) compartido por el cliente."""

    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=httpx.Timeout(settings.timeout_seconds),
        follow_redirects=True,
        headers={
            "User-Agent": settings.user_agent,
            "Accept": "application/json, text/plain;q=0.9, */*;q=0.8",
        },
        transport=transport,
    )


def encode_body(body: Any) -> bytes:
    """Serializa el body a JSON (modelos Pydantic por alias de wire).

    NaN e ±Infinity no son JSON válido: se rechazan en vez de enviarse como `null`.
    """

    try:
        payload = to_jsonable_python(body, by_alias=True)
        return json.dumps(payload, allow_nan=False, separators=(",", ":")).encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError) as exc:
        raise SerializationError(f"failed to marshal request body: {exc}") from exc


async def send_request(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    body: Any = None,
    *,
    timeout: float | None = None,
) -> httpx.Response:
    """Envía `method path` con body JSON opcional y devuelve la respuesta cruda.

    - `path` es relativo a la base URL y puede incluir query string.
    - `timeout` es un deadline total para esta llamada (segundos); sin él rige
      el timeout del cliente.
    - Fallos de red/DNS/timeout y deadline vencido -> `TransportError`.
    - `asyncio.CancelledError` se propaga tal cual: así cancela el llamador.
    """

    content: bytes | None = None
    headers: dict[str, str] = {}
    if body is not None:
        content = encode_body(body)
        headers["Content-Type"] = "application/json"

    logger.debug("{} {}{}", method, client.base_url, path.lstrip("/"))
    request = client.request(
        method,
        path,
        content=content,
        headers=headers,
        timeout=httpx.USE_CLIENT_DEFAULT if timeout is None else httpx.Timeout(timeout),
    )
    try:
        if timeout is None:
            return await request
        return await asyncio.wait_for(request, timeout)
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.debug("request {} {} failed: {!r}", method, path, exc)
        raise TransportError(f"request failed: {exc}") from exc
    except asyncio.TimeoutError as exc:
        logger.debug("request {} {} exceeded its {}s deadline", method, path, timeout)
        raise TransportError(f"request deadline of {timeout}s exceeded") from exc
