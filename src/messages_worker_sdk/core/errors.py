"""Jerarquía de errores del SDK.

Cada excepción lleva una etiqueta `ErrorKind`, de modo que el código cliente
puede preguntar `exc.is_kind(ErrorKind.API)` sin depender de `isinstance`.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Categorías de fallo de una llamada al servicio."""

    VALIDATION = "validation"
    SERIALIZATION = "serialization"
    TRANSPORT = "transport"
    API = "api"
    DECODE = "decode"


class MessagesWorkerError(Exception):
    """Base class for every error raised by the SDK."""

    kind: ErrorKind

    def is_kind(self, kind: ErrorKind) -> bool:
        return self.kind is kind


class ValidationError(MessagesWorkerError):
    """Precondición local violada; la petición nunca llega a la red."""

    kind = ErrorKind.VALIDATION


class SerializationError(MessagesWorkerError):
    """El payload no se pudo codificar a JSON antes de enviarlo."""

    kind = ErrorKind.SERIALIZATION


class TransportError(MessagesWorkerError):
    """Fallo de red/conexión/timeout: no se obtuvo respuesta."""

    kind = ErrorKind.TRANSPORT


class DecodeError(MessagesWorkerError):
    """El cuerpo de la respuesta no coincide con el esquema esperado."""

    kind = ErrorKind.DECODE


class APIError(MessagesWorkerError):
    """El servidor respondió con un status >= 400."""

    kind = ErrorKind.API

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(status_code, message)
        self.status_code = status_code
        self.message = message

    def __str__(self) -> str:
        return f"API error {self.status_code}: {self.message}"


def is_api_error(exc: BaseException | None) -> bool:
    """True si `exc` es un error devuelto por el servidor (`APIError`)."""

    return isinstance(exc, MessagesWorkerError) and exc.is_kind(ErrorKind.API)
