"""Docker Compose support for generated projects."""

from initgen.compose.file import DockerComposeFile
from initgen.compose.service import (
    DockerComposeService,
    DockerComposeServiceBuilder,
    DockerComposeServiceContainer,
)

__all__ = [
    "DockerComposeFile",
    "DockerComposeService",
    "DockerComposeServiceBuilder",
    "DockerComposeServiceContainer",
]
