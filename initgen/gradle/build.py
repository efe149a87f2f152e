"""In-memory model of a Gradle build.

A :class:`GradleBuild` gathers what a generated build file declares: plugins,
project coordinates, repositories, dependencies and extension blocks.
Customizers populate it through the container APIs; writers render it.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .extension import GradleExtension, GradleExtensionBuilder


# ---------------------------------------------------------------------------
# Extensions
# ---------------------------------------------------------------------------


class GradleExtensionContainer:
    """Root extension builders of a build, keyed by extension name."""

    def __init__(self) -> None:
        self._builders: dict[str, GradleExtensionBuilder] = {}

    def customize(self, name: str, customizer: Callable[[GradleExtensionBuilder], None]) -> None:
        """Customize the extension called *name*, creating it on first use."""
        if name is None or customizer is None:
            raise ValueError("Extension name and customizer must not be None")
        builder = self._builders.get(name)
        if builder is None:
            builder = GradleExtensionBuilder(name)
            self._builders[name] = builder
        customizer(builder)

    def is_empty(self) -> bool:
        return not self._builders

    def has(self, name: str) -> bool:
        return name in self._builders

    def remove(self, name: str) -> bool:
        """Remove the extension called *name*. Returns whether it existed."""
        return self._builders.pop(name, None) is not None

    def values(self) -> list[GradleExtension]:
        """Build every extension, in the order they were first customized."""
        return [builder.build() for builder in self._builders.values()]

    def imported_types(self) -> set[str]:
        """Union of the imported types of every extension."""
        result: set[str] = set()
        for builder in self._builders.values():
            result.update(builder.imported_types())
        return result


# ---------------------------------------------------------------------------
# Plugins
# ---------------------------------------------------------------------------


class GradlePlugin(BaseModel):
    """A plugin applied through the ``plugins {}`` block."""

    id: str = Field(..., description="Plugin id, e.g. 'org.jetbrains.kotlin.jvm'")
    version: Optional[str] = Field(default=None, description="Plugin version, if not managed")
    apply: bool = Field(default=True, description="Whether the plugin is applied to this project")


class GradlePluginContainer:
    """Plugins of a build, keyed by plugin id, in declaration order."""

    def __init__(self) -> None:
        self._plugins: dict[str, GradlePlugin] = {}

    def add(
        self,
        plugin_id: str,
        customizer: Optional[Callable[[GradlePlugin], None]] = None,
    ) -> GradlePlugin:
        """Add the plugin *plugin_id* or return the existing declaration.

        Args:
            plugin_id: Id of the plugin.
            customizer: Optional callback to tune the plugin (e.g. set its
                version). Runs against the existing plugin when already added.

        Returns:
            The plugin declaration.
        """
        plugin = self._plugins.get(plugin_id)
        if plugin is None:
            plugin = GradlePlugin(id=plugin_id)
            self._plugins[plugin_id] = plugin
        if customizer is not None:
            customizer(plugin)
        return plugin

    def has(self, plugin_id: str) -> bool:
        return plugin_id in self._plugins

    def remove(self, plugin_id: str) -> bool:
        return self._plugins.pop(plugin_id, None) is not None

    def is_empty(self) -> bool:
        return not self._plugins

    def values(self) -> list[GradlePlugin]:
        return list(self._plugins.values())


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------


class GradleDependency(BaseModel):
    """A dependency declaration, e.g. ``implementation 'group:artifact'``."""

    model_config = ConfigDict(frozen=True)

    configuration: str = Field(default="implementation")
    coordinates: str = Field(..., description="'group:artifact' or 'group:artifact:version'")


class GradleDependencyContainer:
    """Dependency declarations in insertion order, without duplicates."""

    def __init__(self) -> None:
        self._dependencies: list[GradleDependency] = []

    def add(self, configuration: str, coordinates: str) -> GradleDependency:
        dependency = GradleDependency(configuration=configuration, coordinates=coordinates)
        if dependency not in self._dependencies:
            self._dependencies.append(dependency)
        return dependency

    def is_empty(self) -> bool:
        return not self._dependencies

    def __iter__(self) -> Iterator[GradleDependency]:
        return iter(self._dependencies)

    def __len__(self) -> int:
        return len(self._dependencies)


# ---------------------------------------------------------------------------
# Build
# ---------------------------------------------------------------------------


class GradleSettings(BaseModel):
    """Project coordinates and toolchain of a Gradle build."""

    group: Optional[str] = Field(default=None)
    version: Optional[str] = Field(default=None)
    source_compatibility: Optional[str] = Field(
        default=None, description="Java language version for the toolchain block"
    )


class GradleBuild:
    """A Gradle build, ready to be customized and written."""

    def __init__(self, settings: Optional[GradleSettings] = None) -> None:
        self.settings = settings or GradleSettings()
        self.repositories: list[str] = ["mavenCentral()"]
        self._plugins = GradlePluginContainer()
        self._dependencies = GradleDependencyContainer()
        self._extensions = GradleExtensionContainer()

    def plugins(self) -> GradlePluginContainer:
        return self._plugins

    def dependencies(self) -> GradleDependencyContainer:
        return self._dependencies

    def extensions(self) -> GradleExtensionContainer:
        return self._extensions
