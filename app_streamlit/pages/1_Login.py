# --------------------------------------------------------------
# File: 1_Login.py
# Description: Vista de login contra Firefox Accounts y obtención de credenciales.
# --------------------------------------------------------------

import json

import streamlit as st

from api.services import get_creds, get_key_fetch_token
from core.errors import RedsyncError

st.title("👤 Login")

email = st.text_input("Email", key="login_email")
password = st.text_input("Contraseña", type="password", key="login_pass")

if st.button("Iniciar sesión", disabled=not email, key="btn_login"):
    try:
        raw = get_key_fetch_token(email, password)
    except RedsyncError as exc:
        st.error(str(exc))
        st.stop()

    token = json.loads(raw)
    if isinstance(token, str):
        # El servidor devolvió un mensaje de error.
        st.error(token)
        st.stop()

    st.session_state["token_response"] = raw
    if not token["verified"]:
        st.warning("Revisa tu correo y confirma el inicio de sesión antes de continuar.")
    else:
        st.success("Sesión verificada.")

if "token_response" in st.session_state and st.button("Obtener credenciales de Sync"):
    try:
        st.session_state["sync_creds"] = get_creds(st.session_state["token_response"])
    except RedsyncError as exc:
        st.error(str(exc))
    else:
        st.success("Credenciales de Sync obtenidas.")
