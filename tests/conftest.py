# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para simular las respuestas HTTP remotas.
# --------------------------------------------------------------

import json
from typing import Any, Dict, List

import pytest
import requests


class FakeResponse:
    """Respuesta mínima compatible con el uso que hace api.services."""

    def __init__(self, body: Any, status_code: int = 200) -> None:
        self.status_code = status_code
        self.text = body if isinstance(body, str) else json.dumps(body)

    def json(self) -> Any:
        return json.loads(self.text)


@pytest.fixture
def fake_post(monkeypatch):
    """Sustituye ``requests.post`` y registra cada llamada.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para reemplazar atributos.

    Returns:
        Dict[str, Any]: ``calls`` con las peticiones y ``responses`` con la
        cola de respuestas a devolver (o excepciones a lanzar).
    """
    state: Dict[str, List[Any]] = {"calls": [], "responses": []}

    def _post(url, **kwargs):
        state["calls"].append({"url": url, **kwargs})
        result = state["responses"].pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(requests, "post", _post)
    return state


@pytest.fixture
def fake_response():
    """Devuelve la clase de respuesta simulada para construir respuestas."""
    return FakeResponse
