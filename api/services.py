# --------------------------------------------------------------
# File: services.py
# Description: Relay HTTP hacia Firefox Accounts y el servidor de sincronización.
# --------------------------------------------------------------
"""Funciones de la capa de servicios que transportan payloads JSON opacos."""

import json
import logging
from typing import Any

import requests
from pydantic import ValidationError

from core import config
from core.credentials import setup_credentials
from core.errors import RelayError
from core.models import TokenRequest, TokenResponse

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def _post(url: str, *, endpoint: str, **kwargs: Any) -> requests.Response:
    """Envía un POST y traduce los fallos de transporte a :class:`RelayError`.

    Args:
        url (str): URL absoluta del endpoint.
        endpoint (str): Nombre corto del endpoint para trazas y errores.
        **kwargs (Any): Argumentos adicionales para ``requests.post``.

    Returns:
        requests.Response: Respuesta recibida, sea cual sea su código HTTP.

    Raises:
        RelayError: Si la petición no llega a completarse.

    """

    try:
        response = requests.post(url, timeout=config.HTTP_TIMEOUT, **kwargs)
    except requests.RequestException as exc:
        logger.error("Fallo de transporte en %s: %s", endpoint, exc)
        raise RelayError(f"No se pudo contactar con {endpoint}: {exc}", endpoint=endpoint) from exc

    logger.info("POST %s -> %s", endpoint, response.status_code)
    return response


def _relay(path: str, payload: str) -> str:
    """Reenvía ``payload`` tal cual al relay y devuelve el cuerpo de respuesta."""

    response = _post(
        f"{config.RELAY_URL}/{path}",
        endpoint=path,
        headers=JSON_HEADERS,
        data=payload.encode("utf-8"),
    )
    return response.text


def get_key_fetch_token(email: str, password: str) -> str:
    """Obtiene ``keyFetchToken`` y ``sessionToken`` del servidor de cuentas.

    Es el primer paso del flujo. Después hay que informar al usuario de la
    verificación por email y continuar con :func:`get_creds`.

    Args:
        email (str): Email de la cuenta.
        password (str): Contraseña de la cuenta.

    Returns:
        str: JSON con ``uid``, ``sessionToken``, ``keyFetchToken``,
        ``verified`` y ``unwrapBKey``; o bien el mensaje de error del servidor
        codificado como cadena JSON.

    Raises:
        RelayError: Si falla el transporte o la respuesta no es interpretable.

    """

    creds = setup_credentials(email, password)
    body = TokenRequest(email=creds.identity, auth_pw=creds.auth_value)

    endpoint = "account/login"
    response = _post(
        f"{config.ACCOUNTS_URL}/{endpoint}",
        endpoint=endpoint,
        params={"keys": "true"},
        json=body.model_dump(by_alias=True),
    )

    try:
        data: Any = response.json()
    except ValueError as exc:
        logger.error("Respuesta no JSON de %s (HTTP %s)", endpoint, response.status_code)
        raise RelayError(
            "Respuesta no JSON del servidor de cuentas.",
            endpoint=endpoint,
            status_code=response.status_code,
        ) from exc

    if not isinstance(data, dict):
        logger.error("Respuesta de %s no es un objeto JSON (HTTP %s)", endpoint, response.status_code)
        raise RelayError(
            "Respuesta de login no es un objeto JSON.",
            endpoint=endpoint,
            status_code=response.status_code,
        )

    if isinstance(data.get("error"), str):
        # Sin `message` legible se devuelve el propio `error`.
        message = data.get("message")
        if not isinstance(message, str):
            message = data["error"]
        logger.warning("Login rechazado para %s: %s", email, message)
        return json.dumps(message)

    try:
        token = TokenResponse.model_validate({**data, "unwrapBKey": creds.wrap_value})
    except ValidationError as exc:
        logger.error("Respuesta de login incompleta: %s", exc.error_count())
        raise RelayError(
            "Respuesta de login incompleta.",
            endpoint=endpoint,
            status_code=response.status_code,
        ) from exc

    return token.model_dump_json(by_alias=True)


def get_creds(token_response: str) -> str:
    """Canjea la respuesta de :func:`get_key_fetch_token` por credenciales de Sync.

    El relay obtiene las claves de la cuenta, crea el token OAuth, consulta
    el TokenServer y deriva el key bundle de Sync.
    """

    return _relay("login2", token_response)


def get_collection(payload: str) -> str:
    """Descarga todos los elementos de una colección.

    El payload tiene la forma ``{"creds": ..., "collection": "..."}``.
    """

    return _relay("getCollection", payload)


def up_items_collection(payload: str) -> str:
    """Crea o actualiza elementos de una colección.

    El payload tiene la forma
    ``{"creds": ..., "collection": "...", "payload": [BSO, ...]}``.
    """

    return _relay("upItemsCollection", payload)
