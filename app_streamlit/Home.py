# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

from core.config import configure_logging

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="Redsync", page_icon="🔄", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔄 Redsync")
st.write(
    "Cliente mínimo de Firefox Sync: deriva `authPW` y `unwrapBKey` en local "
    "(PBKDF2 + HKDF) y relaya las colecciones a través del servidor intermedio."
)
st.info("Primero ve a **Login** para obtener las credenciales de Sync.")
