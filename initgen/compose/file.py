"""The ``compose.yaml`` document of a generated project."""

from __future__ import annotations

from typing import Optional

from ..templates import TemplateRenderer, TextSink
from .service import DockerComposeService, DockerComposeServiceContainer


class DockerComposeFile:
    """A Compose file listing the services a project needs at development time."""

    TEMPLATE = "compose/compose.yaml.j2"

    def __init__(self, renderer: Optional[TemplateRenderer] = None) -> None:
        self.services = DockerComposeServiceContainer()
        self.renderer = renderer or TemplateRenderer()

    def add_service(self, service: DockerComposeService) -> None:
        self.services.add_service(service)

    def is_empty(self) -> bool:
        """Return ``True`` if no service has been added."""
        return self.services.is_empty()

    def context(self) -> dict[str, object]:
        """Build the Jinja2 template context for this document."""
        return {"services": self.services.values()}

    def render(self) -> str:
        return self.renderer.render(self.TEMPLATE, self.context())

    def write(self, sink: TextSink) -> None:
        """Write the Compose document to *sink* (any object with ``write``)."""
        sink.write(self.render())
