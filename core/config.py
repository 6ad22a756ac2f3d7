# --------------------------------------------------------------
# File: config.py
# Description: Configuración de endpoints y logging desde el entorno.
# --------------------------------------------------------------
import logging
import os

from dotenv import load_dotenv
load_dotenv()

ACCOUNTS_URL = os.getenv("REDSYNC_ACCOUNTS_URL", "https://api.accounts.firefox.com/v1").rstrip("/")
RELAY_URL = os.getenv("REDSYNC_RELAY_URL", "https://proyecto.ivmoreau.com").rstrip("/")
HTTP_TIMEOUT = float(os.getenv("REDSYNC_HTTP_TIMEOUT", "30"))
LOG_LEVEL = os.getenv("REDSYNC_LOG_LEVEL", "INFO").upper()


def configure_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
