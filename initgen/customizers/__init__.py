"""Build customizers applied by the project generator."""

from initgen.customizers.base import BuildCustomizer, apply_customizers
from initgen.customizers.kotlin import KotlinGradleBuildCustomizer, KotlinProjectSettings

__all__ = [
    "BuildCustomizer",
    "KotlinGradleBuildCustomizer",
    "KotlinProjectSettings",
    "apply_customizers",
]
