# --------------------------------------------------------------
# File: credentials.py
# Description: Orquestación de la derivación de credenciales de la cuenta.
# --------------------------------------------------------------
"""Compone el estiramiento y las dos expansiones en un único paso puro."""

import logging

from core.crypto_kdf import expand_key, stretch_password
from core.models import DerivedCredentials
from core.namespace import build_label
from core.protocol import (
    AUTH_PW,
    HKDF_LENGTH,
    HKDF_SALT,
    PBKDF2_ROUNDS,
    QUICK_STRETCH,
    STRETCHED_PASS_LENGTH_BYTES,
    UNWRAP_BKEY,
    validate_protocol_constants,
)

logger = logging.getLogger(__name__)


def setup_credentials(email: str, password: str) -> DerivedCredentials:
    """Deriva ``authPW`` y ``unwrapBKey`` a partir de email y contraseña.

    Una contraseña incorrecta no es un error: produce credenciales bien
    formadas que el servidor rechazará.

    Args:
        email (str): Email del usuario; se usa sin normalizar.
        password (str): Contraseña del usuario; puede estar vacía.

    Returns:
        DerivedCredentials: Identidad y los dos valores de 32 bytes.

    Raises:
        ConfigurationError: Si alguna constante del protocolo es incoherente.

    """

    validate_protocol_constants()

    salt = build_label(QUICK_STRETCH, email).encode("utf-8")
    stretched = stretch_password(
        password.encode("utf-8"),
        salt,
        PBKDF2_ROUNDS,
        length=STRETCHED_PASS_LENGTH_BYTES,
    )

    auth_pw = expand_key(
        stretched, build_label(AUTH_PW).encode("utf-8"), HKDF_SALT, length=HKDF_LENGTH
    )
    unwrap_bkey = expand_key(
        stretched, build_label(UNWRAP_BKEY).encode("utf-8"), HKDF_SALT, length=HKDF_LENGTH
    )

    logger.debug("Credenciales derivadas para %s", email)
    return DerivedCredentials(identity=email, auth_pw=auth_pw, unwrap_bkey=unwrap_bkey)
