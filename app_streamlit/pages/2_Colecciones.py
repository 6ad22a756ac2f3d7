# --------------------------------------------------------------
# File: 2_Colecciones.py
# Description: Descarga y subida de elementos de colecciones de Sync.
# --------------------------------------------------------------

import json

import streamlit as st

from api.services import get_collection, up_items_collection
from core.errors import RedsyncError

if "sync_creds" not in st.session_state:
    st.error("Acceso restringido. Inicia sesión primero.")
    st.stop()

st.title("📚 Colecciones")
creds = json.loads(st.session_state["sync_creds"])
collection = st.selectbox("Colección", ["bookmarks", "history", "passwords", "tabs", "prefs"])

if st.button("Descargar", key="btn_get"):
    try:
        body = get_collection(json.dumps({"creds": creds, "collection": collection}))
    except RedsyncError as exc:
        st.error(str(exc))
    else:
        st.code(body, language="json")

st.divider()

st.subheader("Subir elementos")
bsos = st.text_area("Array de BSOs (JSON)", value="[]")
if st.button("Subir", key="btn_up"):
    try:
        items = json.loads(bsos)
    except json.JSONDecodeError:
        st.error("El array de BSOs no es JSON válido.")
        st.stop()
    try:
        body = up_items_collection(
            json.dumps({"creds": creds, "collection": collection, "payload": items})
        )
    except RedsyncError as exc:
        st.error(str(exc))
    else:
        st.code(body, language="json")
