"""Shared pytest fixtures for the initgen test suite.

Provides reusable fixtures for:
- A template renderer over the packaged templates
- Compose service records
- Project descriptions and description files
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from initgen.compose import DockerComposeService
from initgen.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    """Renderer over the templates shipped with the package."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Compose services
# ---------------------------------------------------------------------------

@pytest.fixture
def simple_service() -> DockerComposeService:
    """A service with nothing but a name and an image."""
    return DockerComposeService(name="service-1", image="image-1", image_tag="image-tag-1")


@pytest.fixture
def postgres_service() -> DockerComposeService:
    """A fully configured PostgreSQL service."""
    return DockerComposeService(
        name="postgres",
        image="postgres",
        image_website="https://hub.docker.com/_/postgres",
        environment={"POSTGRES_DB": "mydatabase", "POSTGRES_PASSWORD": "secret"},
        ports=(5432,),
        labels={"org.springframework.boot.service-connection": "postgres"},
    )


# ---------------------------------------------------------------------------
# Project descriptions
# ---------------------------------------------------------------------------

@pytest.fixture
def description_data() -> dict[str, Any]:
    """Raw JSON payload of a Kotlin project with one service."""
    return {
        "name": "demo",
        "group": "com.example",
        "version": "0.0.1-SNAPSHOT",
        "language": "kotlin",
        "java_version": "17",
        "plugins": [
            {"id": "org.springframework.boot", "version": "3.3.4"},
            {"id": "io.spring.dependency-management", "version": "1.1.6"},
        ],
        "dependencies": [
            {"configuration": "implementation", "coordinates": "org.springframework.boot:spring-boot-starter-data-jpa"},
            {"configuration": "runtimeOnly", "coordinates": "org.postgresql:postgresql"},
        ],
        "services": [
            {
                "name": "postgres",
                "image": "postgres",
                "environment": {"POSTGRES_DB": "mydatabase"},
                "ports": [5432],
            },
        ],
    }


@pytest.fixture
def description_file(tmp_path: Path, description_data: dict[str, Any]) -> Path:
    """The Kotlin project description written to a JSON file."""
    path = tmp_path / "description.json"
    path.write_text(json.dumps(description_data), encoding="utf-8")
    return path
