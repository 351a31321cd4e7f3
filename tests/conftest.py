"""Test setup for lessonrender."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for pytest.

    This allows running integration tests selectively:
        pytest -m integration       # run only integration tests
        pytest -m "not integration" # skip integration tests
    """
    config.addinivalue_line(
        "markers",
        "integration: marks tests as integration tests (make real network calls)",
    )


@pytest.fixture
def sample_blocks() -> list[dict]:
    """A short lesson in the authoring format."""
    return [
        {"type": "p", "text": "Antes del primer título."},
        {"type": "h", "text": "1. ¿Qué es Python?"},
        {"type": "p", "text": "Escribe `import this` en el intérprete."},
        {"type": "code", "text": "# Ejemplo rápido\nprint(\"Hola, Python\")\nprint(2 + 3)"},
        {"type": "h", "text": "4.2. El color del texto"},
        {
            "type": "table",
            "headers": ["Color", "Qué suele significar"],
            "rows": [["Naranja", "Palabras clave como `def`"], ["Rojo oscuro", "Comentarios"]],
        },
        {"type": "h", "text": "5. Práctica guiada"},
        {"type": "h", "text": "Ejercicio 1 · Tu primer script"},
        {"type": "ul", "items": ["Guarda como `.py`", "Ejecuta con `F5`"]},
        {"type": "callout", "title": "Checklist", "text": "Pulsa `F5`."},
        {"type": "img", "src": "https://example.com/idle.png", "alt": "IDLE", "caption": "IDLE"},
    ]
