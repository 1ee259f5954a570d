"""Modelos y entidades del dominio.

Por qué:
- Aquí viven los contratos de wire (Pydantic v2) del servicio messages-worker.
"""
