"""Decodificación de respuestas del servicio.

Reglas:
- status >= 400 -> `APIError` con el cuerpo crudo; nunca se parsea como JSON.
- status < 400 con modelo -> `model.model_validate_json`, o `DecodeError`.
- status < 400 sin modelo -> éxito sin parsear (`None`).
"""

from __future__ import annotations

from typing import TypeVar

import httpx
from loguru import logger
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from messages_worker_sdk.core.errors import APIError, DecodeError, TransportError

ModelT = TypeVar("ModelT", bound=BaseModel)


async def decode_response(response: httpx.Response, model: type[ModelT] | None = None) -> ModelT | None:
    try:
        body = await response.aread()
    except httpx.HTTPError as exc:
        raise TransportError(f"failed to read response body: {exc}") from exc
    finally:
        await response.aclose()

    if response.status_code >= 400:
        logger.debug("API error {}: {!r}", response.status_code, response.text[:200])
        raise APIError(response.status_code, response.text)

    if model is None:
        return None

    try:
        return model.model_validate_json(body)
    except PydanticValidationError as exc:
        raise DecodeError(f"failed to unmarshal response: {exc}") from exc
