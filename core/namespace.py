# --------------------------------------------------------------
# File: namespace.py
# Description: Construcción de etiquetas con el namespace del protocolo.
# --------------------------------------------------------------
"""Etiquetas usadas como sal de PBKDF2 y como `info` de HKDF."""

from typing import Optional

from core.protocol import NAMESPACE


def kw(name: str) -> str:
    """Devuelve ``NAMESPACE + name``."""

    return NAMESPACE + name


def kwe(name: str, email: str) -> str:
    """Devuelve ``NAMESPACE + name + ":" + email`` sin normalizar el email."""

    return NAMESPACE + name + ":" + email


def build_label(purpose: str, identity: Optional[str] = None) -> str:
    """Construye la etiqueta de un propósito, con identidad opcional.

    Args:
        purpose (str): Palabra clave del propósito (p. ej. ``quickStretch``).
        identity (Optional[str]): Email que se anexa tras ``:`` si se indica.

    Returns:
        str: Etiqueta completa lista para codificar en UTF-8.

    """

    if identity is None:
        return kw(purpose)
    return kwe(purpose, identity)
