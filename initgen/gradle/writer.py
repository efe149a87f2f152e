"""Gradle build file writers for the Groovy and Kotlin DSLs.

Both DSLs share one template (``gradle/build.gradle.j2``); the statement
syntax that differs between them is provided by a small dialect object
passed to the template as ``dsl``.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from ..templates import TemplateRenderer, TextSink
from .build import GradleBuild, GradleDependency, GradlePlugin
from .extension import Attribute, AttributeType, Invocation


class BuildDsl(str, Enum):
    """Supported Gradle build script languages."""

    GROOVY = "groovy"
    KOTLIN = "kotlin"


# ---------------------------------------------------------------------------
# Dialects
# ---------------------------------------------------------------------------


class GroovyDslDialect:
    """Statement syntax of ``build.gradle``."""

    filename = "build.gradle"
    quote_char = "'"

    def quote(self, value: str) -> str:
        escaped = value.replace("\\", "\\\\").replace("'", "\\'")
        return f"'{escaped}'"

    def plugin(self, plugin: GradlePlugin) -> str:
        statement = f"id {self.quote(plugin.id)}"
        if plugin.version:
            statement += f" version {self.quote(plugin.version)}"
        if not plugin.apply:
            statement += " apply false"
        return statement

    def property(self, name: str, value: str) -> str:
        return f"{name} = {self.quote(value)}"

    def dependency(self, dependency: GradleDependency) -> str:
        return f"{dependency.configuration} {self.quote(dependency.coordinates)}"

    def attribute(self, attribute: Attribute) -> str:
        if attribute.type is AttributeType.SET:
            return f"{attribute.name} = {attribute.value}"
        return f"{attribute.name}.addAll {attribute.value}"

    def invocation(self, invocation: Invocation) -> str:
        return f"{invocation.target}({', '.join(invocation.arguments)})"


class KotlinDslDialect(GroovyDslDialect):
    """Statement syntax of ``build.gradle.kts``."""

    filename = "build.gradle.kts"
    quote_char = '"'

    def quote(self, value: str) -> str:
        escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$")
        return f'"{escaped}"'

    def plugin(self, plugin: GradlePlugin) -> str:
        statement = f"id({self.quote(plugin.id)})"
        if plugin.version:
            statement += f" version {self.quote(plugin.version)}"
        if not plugin.apply:
            statement += " apply false"
        return statement

    def dependency(self, dependency: GradleDependency) -> str:
        return f"{dependency.configuration}({self.quote(dependency.coordinates)})"

    def attribute(self, attribute: Attribute) -> str:
        if attribute.type is AttributeType.SET:
            return f"{attribute.name}.set({attribute.value})"
        return f"{attribute.name}.addAll({attribute.value})"


_DIALECTS: dict[BuildDsl, GroovyDslDialect] = {
    BuildDsl.GROOVY: GroovyDslDialect(),
    BuildDsl.KOTLIN: KotlinDslDialect(),
}


def dialect_for(dsl: BuildDsl | str) -> GroovyDslDialect:
    """Return the statement dialect for *dsl* (``"groovy"`` or ``"kotlin"``)."""
    return _DIALECTS[BuildDsl(dsl)]


# ---------------------------------------------------------------------------
# Writer
# ---------------------------------------------------------------------------


class GradleBuildWriter:
    """Renders a :class:`GradleBuild` as Groovy or Kotlin DSL text."""

    TEMPLATE = "gradle/build.gradle.j2"

    def __init__(
        self,
        dsl: BuildDsl | str = BuildDsl.GROOVY,
        renderer: Optional[TemplateRenderer] = None,
        indent: int = 4,
    ) -> None:
        self.dsl = BuildDsl(dsl)
        self.dialect = dialect_for(self.dsl)
        self.renderer = renderer or TemplateRenderer()
        self.indent = indent

    @property
    def filename(self) -> str:
        """Name of the build file for this DSL."""
        return self.dialect.filename

    def context(self, build: GradleBuild) -> dict[str, object]:
        """Build the Jinja2 template context for *build*."""
        return {
            "dsl": self.dialect,
            "pad": " " * self.indent,
            "imports": sorted(build.extensions().imported_types()),
            "plugins": build.plugins().values(),
            "settings": build.settings,
            "repositories": build.repositories,
            "dependencies": list(build.dependencies()),
            "extensions": build.extensions().values(),
        }

    def render(self, build: GradleBuild) -> str:
        return self.renderer.render(self.TEMPLATE, self.context(build))

    def write(self, build: GradleBuild, sink: TextSink) -> None:
        """Write the rendered build file to *sink* (any object with ``write``)."""
        sink.write(self.render(build))
