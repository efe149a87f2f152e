"""Docker Compose service descriptions.

Services are accumulated on :class:`DockerComposeServiceBuilder` instances
held by a :class:`DockerComposeServiceContainer`, then frozen into
:class:`DockerComposeService` records for rendering.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DockerComposeService(BaseModel):
    """A single service of a Compose file."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Service key under 'services:'")
    image: str = Field(..., min_length=1, description="Image name, without tag")
    image_tag: str = Field(default="latest", description="Image tag")
    image_website: Optional[str] = Field(default=None, description="Documentation page of the image")
    environment: dict[str, str] = Field(default_factory=dict)
    ports: tuple[int, ...] = Field(default=(), description="Container ports to publish")
    command: Optional[str] = Field(default=None)
    labels: dict[str, str] = Field(default_factory=dict)


class DockerComposeServiceBuilder:
    """Mutable builder for a :class:`DockerComposeService`.

    Every setter returns the builder so calls can be chained.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._image: Optional[str] = None
        self._image_tag = "latest"
        self._image_website: Optional[str] = None
        self._environment: dict[str, str] = {}
        self._ports: list[int] = []
        self._command: Optional[str] = None
        self._labels: dict[str, str] = {}

    @classmethod
    def from_service(cls, service: DockerComposeService) -> DockerComposeServiceBuilder:
        builder = cls(service.name)
        builder.image(service.image).image_tag(service.image_tag)
        builder._image_website = service.image_website
        builder._environment.update(service.environment)
        builder._ports.extend(service.ports)
        builder._command = service.command
        builder._labels.update(service.labels)
        return builder

    def image(self, image: str) -> DockerComposeServiceBuilder:
        self._image = image
        return self

    def image_tag(self, image_tag: str) -> DockerComposeServiceBuilder:
        self._image_tag = image_tag
        return self

    def image_website(self, url: str) -> DockerComposeServiceBuilder:
        self._image_website = url
        return self

    def environment(self, key: str, value: str) -> DockerComposeServiceBuilder:
        self._environment[key] = value
        return self

    def ports(self, *ports: int) -> DockerComposeServiceBuilder:
        for port in ports:
            if port not in self._ports:
                self._ports.append(port)
        return self

    def command(self, command: str) -> DockerComposeServiceBuilder:
        self._command = command
        return self

    def label(self, key: str, value: str) -> DockerComposeServiceBuilder:
        self._labels[key] = value
        return self

    def build(self) -> DockerComposeService:
        """Freeze the current state into a :class:`DockerComposeService`.

        Raises:
            pydantic.ValidationError: If no image has been configured.
        """
        return DockerComposeService(
            name=self.name,
            image=self._image,
            image_tag=self._image_tag,
            image_website=self._image_website,
            environment=dict(self._environment),
            ports=tuple(self._ports),
            command=self._command,
            labels=dict(self._labels),
        )


class DockerComposeServiceContainer:
    """Services of a Compose file, keyed by service name."""

    def __init__(self) -> None:
        self._builders: dict[str, DockerComposeServiceBuilder] = {}

    def add(self, name: str, customizer: Callable[[DockerComposeServiceBuilder], None]) -> None:
        """Customize the service called *name*, creating it on first use."""
        builder = self._builders.get(name)
        if builder is None:
            builder = DockerComposeServiceBuilder(name)
            self._builders[name] = builder
        customizer(builder)

    def add_service(self, service: DockerComposeService) -> None:
        """Register *service*, replacing any service with the same name."""
        self._builders[service.name] = DockerComposeServiceBuilder.from_service(service)

    def has(self, name: str) -> bool:
        return name in self._builders

    def remove(self, name: str) -> bool:
        return self._builders.pop(name, None) is not None

    def is_empty(self) -> bool:
        return not self._builders

    def values(self) -> list[DockerComposeService]:
        """Build every service, sorted by name."""
        return [self._builders[name].build() for name in sorted(self._builders)]
