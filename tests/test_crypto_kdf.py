# --------------------------------------------------------------
# File: test_crypto_kdf.py
# Description: Pruebas de las primitivas PBKDF2 y HKDF.
# --------------------------------------------------------------

import hashlib
import hmac
import os

import pytest

from core.crypto_kdf import expand_key, stretch_password
from core.errors import ConfigurationError


def test_stretch_matches_hashlib_pbkdf2():
    """Comprueba que el estiramiento coincide con PBKDF2-HMAC-SHA256 estándar.

    Returns:
        None: Las aserciones comparan con la implementación de hashlib.
    """
    salt = b"identity.mozilla.com/picl/v1/quickStretch:a@b.com"
    expected = hashlib.pbkdf2_hmac("sha256", b"secret", salt, 1000, dklen=32)
    assert stretch_password(b"secret", salt) == expected


def test_stretch_accepts_empty_password():
    out = stretch_password(b"", b"salt")
    assert len(out) == 32


@pytest.mark.parametrize("iterations", [0, -1])
def test_stretch_rejects_bad_iterations(iterations):
    with pytest.raises(ConfigurationError):
        stretch_password(b"pw", b"salt", iterations)


def test_stretch_rejects_bad_length():
    with pytest.raises(ConfigurationError):
        stretch_password(b"pw", b"salt", length=0)


def test_expand_matches_rfc5869_construction():
    """Verifica extract+expand frente a una construcción HMAC manual.

    Returns:
        None: Las aserciones comparan ambas salidas de 32 bytes.
    """
    ikm = os.urandom(32)
    info = b"identity.mozilla.com/picl/v1/authPW"
    prk = hmac.new(b"\x00", ikm, hashlib.sha256).digest()
    expected = hmac.new(prk, info + b"\x01", hashlib.sha256).digest()
    assert expand_key(ikm, info) == expected


def test_expand_default_salt_is_zero_byte():
    ikm = os.urandom(32)
    info = b"ctx"
    assert expand_key(ikm, info) == expand_key(ikm, info, b"\x00")
    assert expand_key(ikm, info, b"\x01") != expand_key(ikm, info)


def test_expand_context_separates_keys():
    ikm = os.urandom(32)
    assert expand_key(ikm, b"a") != expand_key(ikm, b"b")


@pytest.mark.parametrize("length", [0, 255 * 32 + 1])
def test_expand_rejects_out_of_range_length(length):
    with pytest.raises(ConfigurationError):
        expand_key(os.urandom(32), b"ctx", length=length)


def test_expand_max_length_is_not_truncated():
    assert len(expand_key(os.urandom(32), b"ctx", length=255 * 32)) == 255 * 32
