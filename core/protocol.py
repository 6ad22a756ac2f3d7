# --------------------------------------------------------------
# File: protocol.py
# Description: Constantes fijas del protocolo onepw de Firefox Accounts.
# --------------------------------------------------------------
"""Constantes de protocolo compartidas con el servidor de cuentas.

Estos valores no son configuración: el servidor repite exactamente la misma
derivación y cualquier diferencia produce credenciales con forma válida que
serán rechazadas de forma remota.
"""

from core.errors import ConfigurationError

NAMESPACE = "identity.mozilla.com/picl/v1/"

# Palabras clave de propósito para cada etiqueta derivada.
QUICK_STRETCH = "quickStretch"
AUTH_PW = "authPW"
UNWRAP_BKEY = "unwrapBkey"

PBKDF2_ROUNDS = 1000
STRETCHED_PASS_LENGTH_BYTES = 32

HKDF_SALT = b"\x00"
HKDF_LENGTH = 32

# Límite de HKDF-Expand para SHA-256 (255 bloques de 32 bytes).
SHA256_DIGEST_SIZE = 32
HKDF_MAX_LENGTH = 255 * SHA256_DIGEST_SIZE


def validate_protocol_constants() -> None:
    """Comprueba la coherencia de las constantes antes de derivar nada.

    Raises:
        ConfigurationError: Si alguna constante difiere del valor fijado por el
            protocolo.

    """

    if NAMESPACE != "identity.mozilla.com/picl/v1/":
        raise ConfigurationError(f"Namespace mal formado: {NAMESPACE!r}")
    if (QUICK_STRETCH, AUTH_PW, UNWRAP_BKEY) != ("quickStretch", "authPW", "unwrapBkey"):
        raise ConfigurationError("Las palabras clave de propósito no coinciden con el protocolo.")
    if PBKDF2_ROUNDS != 1000:
        raise ConfigurationError(f"Número de iteraciones inválido: {PBKDF2_ROUNDS}")
    if STRETCHED_PASS_LENGTH_BYTES != 32:
        raise ConfigurationError(
            f"Longitud de clave estirada inválida: {STRETCHED_PASS_LENGTH_BYTES}"
        )
    if HKDF_LENGTH != 32:
        raise ConfigurationError(f"Longitud HKDF fuera de rango: {HKDF_LENGTH}")
    if HKDF_SALT != b"\x00":
        raise ConfigurationError("La sal de extracción HKDF debe ser el byte 0x00.")
