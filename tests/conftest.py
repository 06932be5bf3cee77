# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

Provides project directory builders, sample READMEs, a Pillow PNG factory
and httpx clients backed by MockTransport, so no test touches the network.
"""

import io
from collections.abc import Callable, Generator
from datetime import datetime, timezone
from pathlib import Path

import httpx
import pytest
from PIL import Image

from curriculum_parser.core.config import clear_settings_cache
from curriculum_parser.domains.project import ParserContext

COVER_URL = "https://www.101computing.net/wp/wp-content/uploads/Luhn-Algorithm.png"

README_ES = f"""# Cifrado César

![portada]({COVER_URL})

## Índice

* [1. Resumen del proyecto](#1-resumen-del-proyecto)
* [2. Objetivos de aprendizaje](#2-objetivos-de-aprendizaje)

## 1. Resumen del proyecto

En este proyecto crearás una aplicación web que permitirá a una usuaria
**cifrar** y descifrar un texto.

Este segundo párrafo no forma parte del resumen.

## 2. Objetivos de aprendizaje

### HTML

- `html/semantics`

### CSS

- css/selectors
- css/box-model

### JavaScript

Repasa `js/data-types` antes de empezar y/o consulta la guía.
"""

README_PT = f"""# Cifra de César

![capa]({COVER_URL})

## 1. Resumo do projeto

Neste projeto você criará uma aplicação web para cifrar e decifrar textos.

## 2. Objetivos de aprendizagem

- `html/semantics`
"""

LEARNING_OBJECTIVES_YAML = """\
html:
  - semantics
  - validation
css:
  - selectors
  - box-model
  - flexbox
js:
  data-types:
    primitive-vs-non-primitive:
    strings:
  functions:
"""


# =============================================================================
# Marker Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "slow: mark test as slow running")


# =============================================================================
# Settings Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """Reload settings for every test so env patches take effect."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def fixed_context() -> ParserContext:
    """Parser context with a fixed version and clock."""
    return ParserContext(
        parser_version="9.9.9",
        clock=lambda: datetime(2025, 1, 15, 10, 30, tzinfo=timezone.utc),
    )


# =============================================================================
# Project Directory Fixtures
# =============================================================================


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Factory creating a project directory with README files.

    Usage:
        project_dir = make_project("01-cipher", README_ES, {"README.pt.md": README_PT})
    """

    def _make(
        name: str,
        readme: str | None = README_ES,
        extra_files: dict[str, str] | None = None,
    ) -> Path:
        project_dir = tmp_path / name
        project_dir.mkdir(parents=True)
        if readme is not None:
            (project_dir / "README.md").write_text(readme, encoding="utf-8")
        for filename, content in (extra_files or {}).items():
            (project_dir / filename).write_text(content, encoding="utf-8")
        return project_dir

    return _make


@pytest.fixture
def catalog_dir(tmp_path: Path) -> Path:
    """Learning objective catalog directory containing data.yml."""
    lo_dir = tmp_path / "learning-objectives"
    lo_dir.mkdir()
    (lo_dir / "data.yml").write_text(LEARNING_OBJECTIVES_YAML, encoding="utf-8")
    return lo_dir


# =============================================================================
# Image and HTTP Fixtures
# =============================================================================


@pytest.fixture
def make_png() -> Callable[..., bytes]:
    """Factory returning PNG bytes of the given size."""

    def _make(width: int = 790, height: int = 400, mode: str = "RGB") -> bytes:
        buffer = io.BytesIO()
        Image.new(mode, (width, height), color="orange").save(buffer, format="PNG")
        return buffer.getvalue()

    return _make


@pytest.fixture
def make_http_client() -> Callable[..., tuple[httpx.AsyncClient, list[httpx.Request]]]:
    """Factory returning an httpx client served by MockTransport.

    The returned list collects every request the client sends.
    """

    def _make(
        status_code: int = 200,
        content: bytes = b"",
    ) -> tuple[httpx.AsyncClient, list[httpx.Request]]:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(status_code, content=content)

        client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return client, requests

    return _make


# =============================================================================
# Sample Content Fixtures
# =============================================================================


@pytest.fixture
def cover_url() -> str:
    """URL of the cover image referenced by the sample READMEs."""
    return COVER_URL


@pytest.fixture
def readme_es() -> str:
    """Spanish README with summary, learning objectives and a cover."""
    return README_ES


@pytest.fixture
def readme_pt() -> str:
    """Portuguese README with summary, one learning objective and a cover."""
    return README_PT
