# --------------------------------------------------------------
# File: crypto_kdf.py
# Description: Estiramiento PBKDF2 y expansión HKDF sobre SHA-256.
# --------------------------------------------------------------
"""Primitivas de derivación de claves para las credenciales de la cuenta."""

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from core.errors import ConfigurationError
from core.protocol import (
    HKDF_LENGTH,
    HKDF_MAX_LENGTH,
    HKDF_SALT,
    PBKDF2_ROUNDS,
    STRETCHED_PASS_LENGTH_BYTES,
)


def stretch_password(
    password: bytes,
    salt: bytes,
    iterations: int = PBKDF2_ROUNDS,
    *,
    length: int = STRETCHED_PASS_LENGTH_BYTES,
) -> bytes:
    """Estira la contraseña con PBKDF2-HMAC-SHA256.

    Args:
        password (bytes): Contraseña en UTF-8, sin truncar ni normalizar. Puede
            estar vacía.
        salt (bytes): Etiqueta ``quickStretch:<email>`` codificada en UTF-8.
        iterations (int): Iteraciones de PBKDF2.
        length (int): Longitud en bytes de la salida.

    Returns:
        bytes: Material de clave estirado de ``length`` bytes.

    Raises:
        ConfigurationError: Si ``iterations`` o ``length`` no son positivos.

    """

    if iterations <= 0:
        raise ConfigurationError(f"Iteraciones PBKDF2 inválidas: {iterations}")
    if length <= 0:
        raise ConfigurationError(f"Longitud PBKDF2 inválida: {length}")

    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=length,
        salt=salt,
        iterations=iterations,
    )
    return kdf.derive(password)


def expand_key(
    ikm: bytes,
    info: bytes,
    salt: bytes = HKDF_SALT,
    *,
    length: int = HKDF_LENGTH,
) -> bytes:
    """Deriva una subclave con HKDF-SHA256 (extract + expand).

    Args:
        ikm (bytes): Material de entrada, normalmente la salida de
            :func:`stretch_password`.
        info (bytes): Etiqueta de contexto que separa los dominios.
        salt (bytes): Sal de la fase de extracción.
        length (int): Longitud en bytes de la subclave.

    Returns:
        bytes: Subclave de ``length`` bytes.

    Raises:
        ConfigurationError: Si ``length`` excede el máximo de HKDF o no es
            positiva. Nunca se trunca la salida.

    """

    if not 0 < length <= HKDF_MAX_LENGTH:
        raise ConfigurationError(
            f"Longitud HKDF {length} fuera de rango (máximo {HKDF_MAX_LENGTH})."
        )

    hkdf = HKDF(algorithm=hashes.SHA256(), length=length, salt=salt, info=info)
    return hkdf.derive(ikm)
