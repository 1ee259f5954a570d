"""Adaptadores de I/O: transporte HTTP y decodificación de respuestas."""
