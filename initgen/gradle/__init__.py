"""Gradle build model, extension blocks and build file writers.

Quick usage::

    from initgen.gradle import GradleBuild, GradleBuildWriter

    build = GradleBuild()
    build.extensions().customize(
        "kotlin",
        lambda kotlin: kotlin.invoke("jvmToolchain", "17"),
    )
    text = GradleBuildWriter("kotlin").render(build)
"""

from initgen.gradle.build import (
    GradleBuild,
    GradleDependency,
    GradleDependencyContainer,
    GradleExtensionContainer,
    GradlePlugin,
    GradlePluginContainer,
    GradleSettings,
)
from initgen.gradle.extension import (
    Attribute,
    AttributeType,
    GradleExtension,
    GradleExtensionBuilder,
    Invocation,
)
from initgen.gradle.writer import BuildDsl, GradleBuildWriter, dialect_for

__all__ = [
    "Attribute",
    "AttributeType",
    "BuildDsl",
    "GradleBuild",
    "GradleBuildWriter",
    "GradleDependency",
    "GradleDependencyContainer",
    "GradleExtension",
    "GradleExtensionBuilder",
    "GradleExtensionContainer",
    "GradlePlugin",
    "GradlePluginContainer",
    "GradleSettings",
    "Invocation",
    "dialect_for",
]
