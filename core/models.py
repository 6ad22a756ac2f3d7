# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos de credenciales y mensajes de login.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan credenciales derivadas y cuerpos JSON."""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from core.encoding import to_hex
from core.protocol import HKDF_LENGTH


class DerivedCredentials(BaseModel):
    """Resultado de derivar las credenciales a partir de email y contraseña.

    Attributes:
        identity (str): Email tal y como lo introdujo el usuario.
        auth_pw (bytes): Valor de autenticación de 32 bytes (``authPW``).
        unwrap_bkey (bytes): Clave de desenvoltura de 32 bytes (``unwrapBKey``).

    """

    model_config = ConfigDict(frozen=True)

    identity: str
    auth_pw: bytes = Field(min_length=HKDF_LENGTH, max_length=HKDF_LENGTH)
    unwrap_bkey: bytes = Field(min_length=HKDF_LENGTH, max_length=HKDF_LENGTH)

    def __repr__(self) -> str:
        # Nunca exponer material de clave en trazas.
        return f"DerivedCredentials(identity={self.identity!r})"

    __str__ = __repr__

    @property
    def auth_value(self) -> str:
        return to_hex(self.auth_pw, expected_length=HKDF_LENGTH)

    @property
    def wrap_value(self) -> str:
        return to_hex(self.unwrap_bkey, expected_length=HKDF_LENGTH)

    def as_wire(self) -> Dict[str, str]:
        """Devuelve la estructura de intercambio con la capa de transporte."""

        return {
            "identity": self.identity,
            "authValue": self.auth_value,
            "wrapValue": self.wrap_value,
        }


class TokenRequest(BaseModel):
    """Cuerpo de ``POST /account/login`` del servidor de cuentas."""

    model_config = ConfigDict(populate_by_name=True)

    email: str
    auth_pw: str = Field(alias="authPW")
    keys: bool = True
    reason: str = "login"
    verification_method: str = Field(default="email", alias="verificationMethod")


class TokenResponse(BaseModel):
    """Datos mínimos que se devuelven tras el login para el siguiente paso.

    ``unwrap_bkey`` no viene del servidor: se calcula localmente y se adjunta
    para que el relay pueda desenvolver ``kB``.
    """

    model_config = ConfigDict(populate_by_name=True)

    uid: str
    session_token: str = Field(alias="sessionToken")
    key_fetch_token: str = Field(alias="keyFetchToken")
    verified: bool
    unwrap_bkey: str = Field(alias="unwrapBKey")
