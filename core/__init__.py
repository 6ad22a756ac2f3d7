# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de la derivación de credenciales.
# --------------------------------------------------------------
"""Inicializa el paquete `core` y documenta sus módulos principales."""

__all__ = [
    "config",
    "credentials",
    "crypto_kdf",
    "encoding",
    "errors",
    "models",
    "namespace",
    "protocol",
]
