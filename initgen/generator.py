"""Project generation orchestrator.

Turns a :class:`ProjectDescription` into the build-system files of a
scaffolded project: a Gradle build script (Groovy or Kotlin DSL) and, when
the project declares development services, a Docker Compose file.

Usage::

    python -m initgen.generator description.json --output ./out
    python -m initgen.generator description.json --dsl kotlin
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from initgen.compose import DockerComposeFile, DockerComposeService
from initgen.config import GeneratorConfig
from initgen.customizers import BuildCustomizer, KotlinGradleBuildCustomizer, apply_customizers
from initgen.gradle import (
    BuildDsl,
    GradleBuild,
    GradleBuildWriter,
    GradleDependency,
    GradlePlugin,
    GradleSettings,
)
from initgen.templates import TemplateRenderer
from initgen.utils import console, load_json, print_error, print_success, print_summary_table

# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class GenerationError(Exception):
    """Raised when a project cannot be generated."""

    def __init__(self, stage: str, message: str) -> None:
        self.stage = stage
        super().__init__(f"{stage}: {message}")


# ---------------------------------------------------------------------------
# Project description
# ---------------------------------------------------------------------------


class ProjectDescription(BaseModel):
    """Pydantic model describing the project to generate."""

    name: str = Field(..., min_length=1, description="Project name, used as the output directory")
    group: str = Field(default="com.example")
    version: str = Field(default="0.0.1-SNAPSHOT")
    language: Literal["java", "kotlin"] = Field(default="java")
    java_version: str = Field(default="17")
    plugins: list[GradlePlugin] = Field(default_factory=list)
    dependencies: list[GradleDependency] = Field(default_factory=list)
    services: list[DockerComposeService] = Field(
        default_factory=list, description="Services needed at development time"
    )


def load_description(path: str | Path) -> ProjectDescription:
    """Read a :class:`ProjectDescription` from a JSON file.

    Raises:
        GenerationError: If the file is missing or unreadable, is not a JSON
            object, or does not describe a valid project.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise GenerationError("description", f"File not found: {file_path}")
    try:
        data = load_json(file_path)
    except json.JSONDecodeError as exc:
        raise GenerationError("description", f"Invalid JSON in {file_path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise GenerationError("description", f"Cannot read {file_path}: {exc}") from exc
    if not isinstance(data, dict):
        raise GenerationError("description", f"Expected a JSON object in {file_path}")
    try:
        return ProjectDescription.model_validate(data)
    except ValidationError as exc:
        raise GenerationError("description", f"Invalid project description: {exc}") from exc


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Builds the in-memory models of a project and writes them out."""

    def __init__(
        self,
        description: ProjectDescription,
        config: Optional[GeneratorConfig] = None,
    ) -> None:
        self.description = description
        self.config = config or GeneratorConfig()
        self.renderer = TemplateRenderer()
        self.writer = GradleBuildWriter(self.config.build_dsl, self.renderer, self.config.indent)

    # -- Models ------------------------------------------------------------

    def customizers(self) -> list[BuildCustomizer]:
        """Return the customizers that apply to this project."""
        customizers: list[BuildCustomizer] = []
        if self.description.language == "kotlin":
            customizers.append(
                KotlinGradleBuildCustomizer(self.config.kotlin, quote=self.writer.dialect.quote_char)
            )
        return customizers

    def build_gradle(self) -> GradleBuild:
        """Create the customized Gradle build of the project."""
        build = GradleBuild(
            GradleSettings(
                group=self.description.group,
                version=self.description.version,
                source_compatibility=self.description.java_version,
            )
        )
        for plugin in self.description.plugins:
            build.plugins().add(plugin.id, lambda p, src=plugin: _copy_plugin(src, p))
        for dependency in self.description.dependencies:
            build.dependencies().add(dependency.configuration, dependency.coordinates)
        return apply_customizers(build, self.customizers())

    def compose_file(self) -> DockerComposeFile:
        """Create the Compose file listing the project's services."""
        compose = DockerComposeFile(self.renderer)
        for service in self.description.services:
            compose.add_service(service)
        return compose

    # -- Output ------------------------------------------------------------

    async def generate(self, output_dir: str | Path | None = None) -> dict[str, Path]:
        """Write the project's build files.

        Args:
            output_dir: Parent directory of the project.  Defaults to the
                configured ``output_dir``.  A subdirectory named after the
                project is created inside it.

        Returns:
            Mapping of descriptive name to written file path, e.g.
            ``{"build": Path(".../build.gradle"), "compose": ...}``.
        """
        project_root = Path(output_dir or self.config.output_dir) / self.description.name
        written: dict[str, Path] = {}

        build_path = project_root / self.writer.filename
        await self.renderer.render_to_file(
            self.writer.TEMPLATE, build_path, self.writer.context(self.build_gradle())
        )
        written["build"] = build_path

        compose = self.compose_file()
        if not compose.is_empty():
            compose_path = project_root / self.config.compose_file_name
            await self.renderer.render_to_file(compose.TEMPLATE, compose_path, compose.context())
            written["compose"] = compose_path

        return written


def _copy_plugin(source: GradlePlugin, target: GradlePlugin) -> None:
    target.version = source.version
    target.apply = source.apply


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """CLI entry point for ``python -m initgen.generator``."""
    import argparse

    parser = argparse.ArgumentParser(
        description="initgen -- generate Gradle and Docker Compose files for a project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python -m initgen.generator description.json\n"
            "  python -m initgen.generator description.json -o ./out --dsl kotlin\n"
        ),
    )
    parser.add_argument(
        "description",
        help="Path to the project description JSON file",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory (default: INITGEN_OUTPUT_DIR or ./output)",
    )
    parser.add_argument(
        "--dsl",
        choices=["groovy", "kotlin"],
        default=None,
        help="Gradle build script language (default: INITGEN_BUILD_DSL or groovy)",
    )

    args = parser.parse_args()

    config = GeneratorConfig.from_env()
    if args.output:
        config.output_dir = Path(args.output)
    if args.dsl:
        config.build_dsl = BuildDsl(args.dsl)

    try:
        description = load_description(args.description)
    except GenerationError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    generator = ProjectGenerator(description, config)
    written = asyncio.run(generator.generate())

    print_summary_table(
        {label: str(path) for label, path in written.items()},
        title=f"Generated {description.name}",
    )
    print_success("Project files generated.")
    console.print(f"Build DSL: {config.build_dsl.value}")


if __name__ == "__main__":
    main()
