"""Core del SDK: configuración, errores, modelos y operaciones.

El core no conoce detalles de httpx más allá de los adaptadores.
"""
