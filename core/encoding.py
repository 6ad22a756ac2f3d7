# --------------------------------------------------------------
# File: encoding.py
# Description: Codificación hexadecimal de los valores derivados.
# --------------------------------------------------------------
"""Serialización de bytes a hexadecimal para el transporte."""

import logging
from typing import Optional

from core.errors import EncodingError

logger = logging.getLogger(__name__)


def to_hex(data: bytes, *, expected_length: Optional[int] = None) -> str:
    """Convierte bytes en hexadecimal en minúsculas, dos dígitos por byte.

    Args:
        data (bytes): Valor binario a codificar.
        expected_length (Optional[int]): Número de bytes esperado, si se conoce.

    Returns:
        str: Cadena hexadecimal sin separadores ni prefijo.

    Raises:
        EncodingError: Si ``data`` no es binario o su longitud no coincide.

    """

    if not isinstance(data, (bytes, bytearray, memoryview)):
        logger.error("No se puede codificar en hex un valor de tipo %s", type(data).__name__)
        raise EncodingError(f"Se esperaban bytes, se recibió {type(data).__name__}")

    raw = bytes(data)
    if expected_length is not None and len(raw) != expected_length:
        logger.error(
            "Longitud inesperada al codificar en hex: %d bytes (esperados %d)",
            len(raw),
            expected_length,
        )
        raise EncodingError(
            f"Se esperaban {expected_length} bytes, se recibieron {len(raw)}"
        )
    return raw.hex()
