"""Shared pytest fixtures for raml2html tests.

This module provides common fixtures used across unit and integration
tests. Fixtures are organized by category:
- Path fixtures: Sample RAML documents
- Document fixtures: Pre-built document trees for normalizer/renderer tests
- Configuration fixtures: Settings dictionaries and render configs
"""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest

from raml2html.models import RenderConfig
from raml2html.utils.logging import ROOT_LOGGER
from tests.fixtures import APIS_DIR, EXAMPLE_RAML_PATH

# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def apis_dir() -> Path:
    """Return the path to sample RAML documents."""
    return APIS_DIR


@pytest.fixture
def example_raml() -> Path:
    """Return the path to the sample Songs API."""
    return EXAMPLE_RAML_PATH


# =============================================================================
# Document Fixtures
# =============================================================================


@pytest.fixture
def minimal_raml() -> str:
    """Return a minimal RAML document with one resource, DELETE before GET."""
    return """#%RAML 0.8
title: Minimal API
/items:
  delete:
    description: Remove all items.
  get:
    description: List items.
"""


@pytest.fixture
def document_tree() -> dict[str, Any]:
    """Return a parsed document tree with unsorted method lists."""
    return {
        "title": "Sample",
        "tags": ["b", "a"],
        "resources": [
            {
                "relativeUri": "/users",
                "parentUrl": "",
                "methods": [
                    {"method": "delete"},
                    {"method": "put"},
                    {"method": "get"},
                    {"method": "post"},
                ],
                "resources": [
                    {
                        "relativeUri": "/{id}",
                        "parentUrl": "/users",
                        "methods": [
                            {"method": "patch"},
                            {"method": "head"},
                            {"method": "options"},
                            {"method": "get"},
                        ],
                    }
                ],
            }
        ],
    }


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def echo_methods_config() -> RenderConfig:
    """Return a config whose template lists method names in order."""
    return RenderConfig(
        template=(
            "{% for r in resources %}{% for m in r.methods %}"
            "{{ m.method | upper }} {% endfor %}{% endfor %}"
        ),
    )


@pytest.fixture
def full_settings() -> dict[str, Any]:
    """Return a complete raml2html settings dictionary."""
    return {
        "output": {"path": "docs/api.html"},
        "render": {
            "https": True,
            "minify": True,
            "sentence_helpers": False,
        },
        "templates": {
            "main": "templates/main.html.j2",
            "resource": "templates/resource.html.j2",
            "item": "templates/item.html.j2",
        },
    }


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop handlers installed by the CLI so later tests log normally."""
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
