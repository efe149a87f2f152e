"""Customizer protocol shared by every build customizer."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from initgen.gradle.build import GradleBuild


class BuildCustomizer(Protocol):
    """Callback that tunes a build before it is written.

    Customizers run in ascending ``order``.
    """

    order: int

    def customize(self, build: GradleBuild) -> None: ...


def apply_customizers(build: GradleBuild, customizers: Iterable[BuildCustomizer]) -> GradleBuild:
    """Apply *customizers* to *build* in ascending ``order`` and return *build*."""
    for customizer in sorted(customizers, key=lambda c: c.order):
        customizer.customize(build)
    return build
