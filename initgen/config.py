"""initgen configuration.

Typed configuration for the project generator.  Settings use Pydantic v2
models so they are validated at construction time and can be serialised
to/from JSON or read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from initgen.customizers.kotlin import KotlinProjectSettings
from initgen.gradle.writer import BuildDsl, dialect_for


class GeneratorConfig(BaseModel):
    """Global generator configuration.

    Created once by the CLI entry point (or by callers embedding the
    generator) and passed to :class:`initgen.generator.ProjectGenerator`.
    """

    output_dir: Path = Field(default=Path("./output"))
    build_dsl: BuildDsl = Field(default=BuildDsl.GROOVY, description="Gradle build script language")
    indent: int = Field(default=4, ge=2, le=8, description="Spaces per indentation level in build files")
    compose_file_name: str = Field(default="compose.yaml", min_length=1)
    kotlin: KotlinProjectSettings = Field(default_factory=KotlinProjectSettings)

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def build_file_name(self) -> str:
        """File name of the Gradle build script for :attr:`build_dsl`."""
        return dialect_for(self.build_dsl).filename

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Args:
            path: Destination file; parent directories are created.

        Returns:
            The path where the file was written.
        """
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return path

    @classmethod
    def load(cls, path: Path) -> "GeneratorConfig":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            INITGEN_OUTPUT_DIR, INITGEN_BUILD_DSL, INITGEN_INDENT,
            INITGEN_COMPOSE_FILE, INITGEN_KOTLIN_VERSION, INITGEN_JVM_TARGET,
            INITGEN_COMPILER_ARGS (comma-separated).
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("INITGEN_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["INITGEN_OUTPUT_DIR"])
        if os.environ.get("INITGEN_BUILD_DSL"):
            kwargs["build_dsl"] = os.environ["INITGEN_BUILD_DSL"].strip().lower()
        if os.environ.get("INITGEN_INDENT"):
            kwargs["indent"] = int(os.environ["INITGEN_INDENT"])
        if os.environ.get("INITGEN_COMPOSE_FILE"):
            kwargs["compose_file_name"] = os.environ["INITGEN_COMPOSE_FILE"]

        kotlin_kwargs: dict[str, Any] = {}
        if os.environ.get("INITGEN_KOTLIN_VERSION"):
            kotlin_kwargs["version"] = os.environ["INITGEN_KOTLIN_VERSION"]
        if os.environ.get("INITGEN_JVM_TARGET"):
            kotlin_kwargs["jvm_target"] = os.environ["INITGEN_JVM_TARGET"]
        if "INITGEN_COMPILER_ARGS" in os.environ:
            args_str = os.environ["INITGEN_COMPILER_ARGS"]
            kotlin_kwargs["compiler_args"] = [a.strip() for a in args_str.split(",") if a.strip()]

        return cls(kotlin=KotlinProjectSettings(**kotlin_kwargs), **kwargs)
