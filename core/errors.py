# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del paquete.
# --------------------------------------------------------------
"""Excepciones propias de la derivación de credenciales y del relay HTTP."""

from typing import Optional


class RedsyncError(Exception):
    """Base común de todos los errores de la librería."""


class ConfigurationError(RedsyncError):
    """Una constante interna (iteraciones, longitud, namespace) es inválida."""


class EncodingError(RedsyncError):
    """Fallo al formatear un valor derivado como hexadecimal."""


class RelayError(RedsyncError):
    """Fallo de transporte o respuesta inesperada de un endpoint remoto.

    Attributes:
        endpoint (str): Ruta remota que se estaba invocando.
        status_code (Optional[int]): Código HTTP si llegó a recibirse respuesta.

    """

    def __init__(self, message: str, *, endpoint: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code
