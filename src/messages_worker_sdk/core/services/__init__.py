"""Operaciones del cliente agrupadas por familia de endpoints."""
