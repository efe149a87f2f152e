"""Customizable Gradle extension blocks.

An extension is a named DSL block such as ``kotlin { compilerOptions { ... } }``.
Callers accumulate configuration on a mutable :class:`GradleExtensionBuilder`
and call :meth:`GradleExtensionBuilder.build` to obtain an immutable
:class:`GradleExtension` snapshot that writers walk to produce build-file text.

Quick usage::

    builder = GradleExtensionBuilder("kotlin")
    builder.nested(
        "compilerOptions",
        lambda options: options.append("freeCompilerArgs", "'-Xjsr305=strict'"),
    )
    extension = builder.build()
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from enum import Enum
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Value types
# ---------------------------------------------------------------------------


class AttributeType(str, Enum):
    """How an attribute statement configures its target."""

    SET = "set"
    APPEND = "append"


class Attribute(BaseModel):
    """A single ``set`` or ``append`` statement of an extension.

    The value is an opaque DSL expression (``JvmTarget.JVM_17``,
    ``'-Xjsr305=strict'``) and is never escaped by the model.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Name of the configured property")
    value: str = Field(..., description="DSL expression to set or append")
    type: AttributeType = Field(..., description="SET or APPEND")

    @classmethod
    def set(cls, name: str, value: str) -> Attribute:
        """Create an attribute that sets *value* on *name*."""
        return cls(name=name, value=value, type=AttributeType.SET)

    @classmethod
    def append(cls, name: str, value: str) -> Attribute:
        """Create an attribute that appends *value* to *name*."""
        return cls(name=name, value=value, type=AttributeType.APPEND)

    def __str__(self) -> str:
        operator = " = " if self.type is AttributeType.SET else " += "
        return f"{self.name}{operator}{self.value}"


class Invocation(BaseModel):
    """A method call on an extension, with positional argument expressions."""

    model_config = ConfigDict(frozen=True)

    target: str = Field(..., description="Name of the invoked method")
    arguments: tuple[str, ...] = Field(default=(), description="Argument expressions, in order")

    @classmethod
    def of(cls, target: str, *arguments: str) -> Invocation:
        return cls(target=target, arguments=tuple(arguments))

    def __str__(self) -> str:
        return f"{self.target}({', '.join(self.arguments)})"


# ---------------------------------------------------------------------------
# Frozen extension
# ---------------------------------------------------------------------------


class GradleExtension:
    """Immutable snapshot of a Gradle extension and its nested extensions.

    Instances are only created through :meth:`GradleExtensionBuilder.build`.
    """

    __slots__ = ("_name", "_attributes", "_invocations", "_nested", "_imported_types")

    def __init__(
        self,
        name: str,
        attributes: Iterable[Attribute],
        invocations: Iterable[Invocation],
        nested: Mapping[str, GradleExtension],
        imported_types: Iterable[str],
    ) -> None:
        self._name = name
        self._attributes = tuple(attributes)
        self._invocations = tuple(invocations)
        self._nested = MappingProxyType(dict(nested))
        self._imported_types = frozenset(imported_types)

    @property
    def name(self) -> str:
        """Name of the extension block."""
        return self._name

    @property
    def attributes(self) -> tuple[Attribute, ...]:
        """Attributes in configuration order, duplicates included."""
        return self._attributes

    @property
    def invocations(self) -> tuple[Invocation, ...]:
        """Method invocations in configuration order."""
        return self._invocations

    @property
    def nested(self) -> Mapping[str, GradleExtension]:
        """Read-only mapping of nested extensions, keyed by name."""
        return self._nested

    @property
    def imported_types(self) -> frozenset[str]:
        """Types to import for this extension and all nested extensions."""
        return self._imported_types

    def __repr__(self) -> str:
        return (
            f"GradleExtension(name={self._name!r}, attributes={len(self._attributes)}, "
            f"invocations={len(self._invocations)}, nested={list(self._nested)!r})"
        )


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


def _require(value: object, label: str) -> None:
    if value is None:
        raise ValueError(f"{label} must not be None")


class GradleExtensionBuilder:
    """Mutable builder for a :class:`GradleExtension`.

    Not thread-safe: a builder is meant to be configured by a single owner
    and snapshotted with :meth:`build` once configuration is complete.
    """

    def __init__(self, name: str) -> None:
        _require(name, "Extension name")
        self.name = name
        self._attributes: list[Attribute] = []
        self._invocations: list[Invocation] = []
        self._nested: dict[str, GradleExtensionBuilder] = {}
        self._imported_types: set[str] = set()

    # -- Attributes --------------------------------------------------------

    def attribute(self, target: str, value: str) -> None:
        """Set an extension attribute.

        Args:
            target: Name of the attribute.
            value: DSL expression to assign.
        """
        _require(target, "Attribute name")
        _require(value, "Attribute value")
        self._attributes.append(Attribute.set(target, value))

    def attribute_with_type(self, target: str, value: str, type: str) -> None:
        """Set an extension attribute whose value requires importing *type*."""
        _require(type, "Imported type")
        self.attribute(target, value)
        self._imported_types.add(type)

    def append(self, target: str, value: str) -> None:
        """Configure an extension attribute by appending *value* to it.

        Args:
            target: Name of the attribute.
            value: DSL expression to append.
        """
        _require(target, "Attribute name")
        _require(value, "Attribute value")
        self._attributes.append(Attribute.append(target, value))

    def append_with_type(self, target: str, value: str, type: str) -> None:
        """Append to an extension attribute whose value requires importing *type*."""
        _require(type, "Imported type")
        self.append(target, value)
        self._imported_types.add(type)

    # -- Invocations -------------------------------------------------------

    def invoke(self, target: str, *arguments: str) -> None:
        """Invoke an extension method with zero or more argument expressions."""
        _require(target, "Invocation target")
        for argument in arguments:
            _require(argument, "Invocation argument")
        self._invocations.append(Invocation.of(target, *arguments))

    # -- Nested extensions -------------------------------------------------

    def nested(self, name: str, customizer: Callable[[GradleExtensionBuilder], None]) -> None:
        """Customize the nested extension called *name*.

        The nested builder is created on first use. Subsequent calls with the
        same name hand the same builder to *customizer*, so configuration
        accumulates rather than creating a sibling.
        """
        _require(name, "Nested extension name")
        _require(customizer, "Customizer")
        builder = self._nested.get(name)
        if builder is None:
            builder = GradleExtensionBuilder(name)
            self._nested[name] = builder
        customizer(builder)

    # -- Snapshot ----------------------------------------------------------

    def imported_types(self) -> set[str]:
        """Return the types imported by this extension and all nested ones."""
        result = set(self._imported_types)
        for builder in self._nested.values():
            result.update(builder.imported_types())
        return result

    def build(self) -> GradleExtension:
        """Build a :class:`GradleExtension` from the current state of this builder."""
        return GradleExtension(
            name=self.name,
            attributes=self._attributes,
            invocations=self._invocations,
            nested={name: builder.build() for name, builder in self._nested.items()},
            imported_types=self.imported_types(),
        )
