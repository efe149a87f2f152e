"""Gradle customization for Kotlin projects.

Applies the Kotlin JVM and Spring compiler plugins and configures the
``kotlin { compilerOptions { ... } }`` extension block.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from initgen.gradle.build import GradleBuild, GradlePlugin
from initgen.gradle.extension import GradleExtensionBuilder

JVM_TARGET_TYPE = "org.jetbrains.kotlin.gradle.dsl.JvmTarget"


class KotlinProjectSettings(BaseModel):
    """Kotlin settings of a generated project."""

    version: str = Field(default="1.9.25", description="Kotlin plugin version")
    jvm_target: str = Field(default="17", description="JVM bytecode target, e.g. '1.8' or '17'")
    compiler_args: list[str] = Field(
        default_factory=lambda: ["-Xjsr305=strict"],
        description="Free-form arguments passed to the Kotlin compiler",
    )

    @property
    def jvm_target_literal(self) -> str:
        """The ``JvmTarget`` constant matching :attr:`jvm_target`."""
        if self.jvm_target == "1.8":
            return "JvmTarget.JVM_1_8"
        return f"JvmTarget.JVM_{self.jvm_target}"


class KotlinGradleBuildCustomizer:
    """Customizes a :class:`GradleBuild` for a Kotlin project.

    Args:
        settings: Kotlin version, JVM target and compiler arguments.
        quote: Quote character for string literals, ``'`` for the Groovy
            DSL and ``"`` for the Kotlin DSL.
    """

    order = 0

    def __init__(self, settings: KotlinProjectSettings, quote: str = "'") -> None:
        self.settings = settings
        self.quote = quote

    def customize(self, build: GradleBuild) -> None:
        def set_version(plugin: GradlePlugin) -> None:
            plugin.version = self.settings.version

        build.plugins().add("org.jetbrains.kotlin.jvm", set_version)
        build.plugins().add("org.jetbrains.kotlin.plugin.spring", set_version)
        build.extensions().customize(
            "kotlin",
            lambda kotlin: kotlin.nested("compilerOptions", self._customize_compiler_options),
        )

    def _customize_compiler_options(self, compiler_options: GradleExtensionBuilder) -> None:
        compiler_options.attribute_with_type(
            "jvmTarget", self.settings.jvm_target_literal, JVM_TARGET_TYPE
        )
        for compiler_arg in self.settings.compiler_args:
            compiler_options.append("freeCompilerArgs", f"{self.quote}{compiler_arg}{self.quote}")
