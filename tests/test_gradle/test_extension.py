"""Tests for the Gradle extension model (initgen.gradle.extension).

Covers:
- Attribute and Invocation value types (factories, equality, str form)
- Attribute and invocation ordering, duplicates kept
- Nested extensions: get-or-create, accumulated customization
- Imported type aggregation across nesting levels
- Snapshot isolation between successive builds
- Fail-fast on None arguments
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from initgen.gradle.extension import (
    Attribute,
    AttributeType,
    GradleExtension,
    GradleExtensionBuilder,
    Invocation,
)

pytestmark = pytest.mark.unit

JVM_TARGET = "org.jetbrains.kotlin.gradle.dsl.JvmTarget"


# ---------------------------------------------------------------------------
# Attribute
# ---------------------------------------------------------------------------


class TestAttribute:
    def test_set_factory(self):
        attribute = Attribute.set("jvmTarget", "JvmTarget.JVM_17")
        assert attribute.name == "jvmTarget"
        assert attribute.value == "JvmTarget.JVM_17"
        assert attribute.type is AttributeType.SET

    def test_append_factory(self):
        attribute = Attribute.append("freeCompilerArgs", "'-Xjsr305=strict'")
        assert attribute.type is AttributeType.APPEND

    def test_accepts_empty_strings(self):
        attribute = Attribute.set("", "")
        assert attribute.name == ""
        assert attribute.value == ""

    def test_structural_equality(self):
        assert Attribute.set("a", "1") == Attribute.set("a", "1")
        assert Attribute.set("a", "1") != Attribute.append("a", "1")
        assert Attribute.set("a", "1") != Attribute.set("a", "2")

    def test_hashable(self):
        attributes = {Attribute.set("a", "1"), Attribute.set("a", "1"), Attribute.append("a", "1")}
        assert len(attributes) == 2

    def test_str_set(self):
        assert str(Attribute.set("name", "value")) == "name = value"

    def test_str_append(self):
        assert str(Attribute.append("name", "value")) == "name += value"

    def test_immutable(self):
        attribute = Attribute.set("a", "1")
        with pytest.raises(ValidationError):
            attribute.value = "2"

    def test_none_rejected(self):
        with pytest.raises(ValueError):
            Attribute.set(None, "value")


# ---------------------------------------------------------------------------
# Invocation
# ---------------------------------------------------------------------------


class TestInvocation:
    def test_of_keeps_argument_order(self):
        invocation = Invocation.of("exclude", "group", "module")
        assert invocation.target == "exclude"
        assert invocation.arguments == ("group", "module")

    def test_no_arguments(self):
        assert Invocation.of("buildInfo").arguments == ()

    def test_list_arguments_copied_to_tuple(self):
        arguments = ["a", "b"]
        invocation = Invocation(target="call", arguments=arguments)
        arguments.append("c")
        assert invocation.arguments == ("a", "b")

    def test_str(self):
        assert str(Invocation.of("jvmToolchain", "17")) == "jvmToolchain(17)"
        assert str(Invocation.of("mavenLocal")) == "mavenLocal()"


# ---------------------------------------------------------------------------
# Attributes and invocations on the builder
# ---------------------------------------------------------------------------


class TestBuilderAttributes:
    def test_name(self):
        assert GradleExtensionBuilder("kotlin").build().name == "kotlin"

    def test_empty_extension(self):
        extension = GradleExtensionBuilder("kotlin").build()
        assert extension.attributes == ()
        assert extension.invocations == ()
        assert dict(extension.nested) == {}
        assert extension.imported_types == frozenset()

    def test_attributes_in_call_order(self):
        builder = GradleExtensionBuilder("test")
        builder.attribute("a", "1")
        builder.append("b", "2")
        builder.attribute("c", "3")
        assert builder.build().attributes == (
            Attribute.set("a", "1"),
            Attribute.append("b", "2"),
            Attribute.set("c", "3"),
        )

    def test_duplicate_names_not_merged(self):
        builder = GradleExtensionBuilder("test")
        builder.attribute("a", "1")
        builder.attribute("a", "2")
        builder.append("list", "'x'")
        builder.append("list", "'x'")
        attributes = builder.build().attributes
        assert len(attributes) == 4
        assert [a.value for a in attributes] == ["1", "2", "'x'", "'x'"]

    def test_attribute_with_type_registers_type(self):
        builder = GradleExtensionBuilder("test")
        builder.attribute_with_type("jvmTarget", "JvmTarget.JVM_17", JVM_TARGET)
        extension = builder.build()
        assert extension.attributes == (Attribute.set("jvmTarget", "JvmTarget.JVM_17"),)
        assert extension.imported_types == {JVM_TARGET}

    def test_append_with_type_registers_type(self):
        builder = GradleExtensionBuilder("test")
        builder.append_with_type("sources", "File('a')", "java.io.File")
        extension = builder.build()
        assert extension.attributes[0].type is AttributeType.APPEND
        assert extension.imported_types == {"java.io.File"}

    def test_same_type_registered_once(self):
        builder = GradleExtensionBuilder("test")
        builder.attribute_with_type("a", "T.A", "com.example.T")
        builder.append_with_type("b", "T.B", "com.example.T")
        assert builder.build().imported_types == {"com.example.T"}

    def test_invocations_in_call_order(self):
        builder = GradleExtensionBuilder("test")
        builder.invoke("first")
        builder.invoke("second", "a", "b")
        builder.invoke("first")
        assert builder.build().invocations == (
            Invocation.of("first"),
            Invocation.of("second", "a", "b"),
            Invocation.of("first"),
        )

    @pytest.mark.parametrize(
        "call",
        [
            lambda b: b.attribute(None, "v"),
            lambda b: b.attribute("n", None),
            lambda b: b.append(None, "v"),
            lambda b: b.attribute_with_type("n", "v", None),
            lambda b: b.append_with_type("n", "v", None),
            lambda b: b.invoke(None),
            lambda b: b.invoke("target", "a", None),
            lambda b: b.nested(None, lambda nested: None),
            lambda b: b.nested("name", None),
        ],
    )
    def test_none_arguments_rejected(self, call):
        with pytest.raises(ValueError):
            call(GradleExtensionBuilder("test"))

    def test_none_name_rejected(self):
        with pytest.raises(ValueError):
            GradleExtensionBuilder(None)


# ---------------------------------------------------------------------------
# Nested extensions
# ---------------------------------------------------------------------------


class TestNested:
    def test_nested_is_built(self):
        builder = GradleExtensionBuilder("kotlin")
        builder.nested("compilerOptions", lambda options: options.attribute("a", "1"))
        extension = builder.build()
        assert list(extension.nested) == ["compilerOptions"]
        nested = extension.nested["compilerOptions"]
        assert isinstance(nested, GradleExtension)
        assert nested.name == "compilerOptions"
        assert nested.attributes == (Attribute.set("a", "1"),)

    def test_customizer_runs_synchronously(self):
        calls: list[str] = []
        builder = GradleExtensionBuilder("root")
        builder.nested("child", lambda child: calls.append(child.name))
        assert calls == ["child"]

    def test_same_name_accumulates_on_one_child(self):
        builder = GradleExtensionBuilder("root")
        builder.nested("child", lambda child: child.attribute("a", "1"))
        builder.nested("child", lambda child: child.append("b", "2"))
        extension = builder.build()
        assert len(extension.nested) == 1
        assert extension.nested["child"].attributes == (
            Attribute.set("a", "1"),
            Attribute.append("b", "2"),
        )

    def test_same_builder_passed_each_time(self):
        seen: list[GradleExtensionBuilder] = []
        builder = GradleExtensionBuilder("root")
        builder.nested("child", seen.append)
        builder.nested("child", seen.append)
        assert seen[0] is seen[1]

    def test_nested_insertion_order(self):
        builder = GradleExtensionBuilder("root")
        for name in ("zeta", "alpha", "mid"):
            builder.nested(name, lambda child: None)
        builder.nested("alpha", lambda child: child.attribute("x", "1"))
        assert list(builder.build().nested) == ["zeta", "alpha", "mid"]

    def test_deep_nesting(self):
        builder = GradleExtensionBuilder("a")
        builder.nested(
            "b",
            lambda b: b.nested("c", lambda c: c.nested("d", lambda d: d.invoke("leaf"))),
        )
        leaf = builder.build().nested["b"].nested["c"].nested["d"]
        assert leaf.invocations == (Invocation.of("leaf"),)

    def test_nested_mapping_is_read_only(self):
        builder = GradleExtensionBuilder("root")
        builder.nested("child", lambda child: None)
        extension = builder.build()
        with pytest.raises(TypeError):
            extension.nested["other"] = extension


# ---------------------------------------------------------------------------
# Imported types
# ---------------------------------------------------------------------------


class TestImportedTypes:
    def test_union_of_self_and_descendants(self):
        builder = GradleExtensionBuilder("root")
        builder.attribute_with_type("a", "A.X", "com.example.A")
        builder.nested(
            "child",
            lambda child: (
                child.attribute_with_type("b", "B.X", "com.example.B"),
                child.nested("grandchild", lambda g: g.append_with_type("c", "C.X", "com.example.C")),
            ),
        )
        extension = builder.build()
        assert extension.imported_types == {"com.example.A", "com.example.B", "com.example.C"}
        assert extension.nested["child"].imported_types == {"com.example.B", "com.example.C"}
        grandchild = extension.nested["child"].nested["grandchild"]
        assert grandchild.imported_types == {"com.example.C"}

    def test_no_duplicates_across_levels(self):
        builder = GradleExtensionBuilder("root")
        builder.attribute_with_type("a", "T.A", "com.example.T")
        builder.nested("child", lambda child: child.attribute_with_type("b", "T.B", "com.example.T"))
        assert builder.build().imported_types == {"com.example.T"}

    def test_types_added_to_child_after_sibling_calls(self):
        builder = GradleExtensionBuilder("root")
        builder.nested("first", lambda child: child.attribute("a", "1"))
        builder.nested("second", lambda child: child.attribute_with_type("b", "B.X", "com.example.B"))
        builder.nested("first", lambda child: child.attribute_with_type("c", "C.X", "com.example.C"))
        assert builder.build().imported_types == {"com.example.B", "com.example.C"}

    def test_builder_imported_types(self):
        builder = GradleExtensionBuilder("root")
        builder.nested("child", lambda child: child.attribute_with_type("b", "B.X", "com.example.B"))
        assert builder.imported_types() == {"com.example.B"}


# ---------------------------------------------------------------------------
# Snapshot isolation
# ---------------------------------------------------------------------------


class TestBuildSnapshots:
    def test_earlier_snapshot_unaffected_by_later_mutation(self):
        builder = GradleExtensionBuilder("root")
        builder.attribute("a", "1")
        builder.nested("child", lambda child: child.invoke("first"))
        first = builder.build()

        builder.attribute("b", "2")
        builder.invoke("call")
        builder.nested("child", lambda child: child.attribute_with_type("c", "C.X", "com.example.C"))
        builder.nested("other", lambda child: None)
        second = builder.build()

        assert first.attributes == (Attribute.set("a", "1"),)
        assert first.invocations == ()
        assert list(first.nested) == ["child"]
        assert first.nested["child"].attributes == ()
        assert first.imported_types == frozenset()

        assert len(second.attributes) == 2
        assert second.invocations == (Invocation.of("call"),)
        assert list(second.nested) == ["child", "other"]
        assert second.imported_types == {"com.example.C"}

    def test_build_returns_new_instance(self):
        builder = GradleExtensionBuilder("root")
        assert builder.build() is not builder.build()

    def test_build_does_not_mutate_builder(self):
        builder = GradleExtensionBuilder("root")
        builder.attribute("a", "1")
        builder.build()
        builder.build()
        assert builder.build().attributes == (Attribute.set("a", "1"),)


# ---------------------------------------------------------------------------
# End-to-end: kotlin { compilerOptions { ... } }
# ---------------------------------------------------------------------------


class TestKotlinCompilerOptionsScenario:
    def test_compiler_options_tree(self):
        builder = GradleExtensionBuilder("kotlin")

        def compiler_options(options: GradleExtensionBuilder) -> None:
            options.attribute_with_type("jvmTarget", "JvmTarget.JVM_17", JVM_TARGET)
            options.append("freeCompilerArgs", "'-Xjsr305=strict'")
            options.append("freeCompilerArgs", "'-Xcontext-receivers'")

        builder.nested("compilerOptions", compiler_options)
        kotlin = builder.build()

        assert kotlin.attributes == ()
        assert list(kotlin.nested) == ["compilerOptions"]
        assert kotlin.nested["compilerOptions"].attributes == (
            Attribute.set("jvmTarget", "JvmTarget.JVM_17"),
            Attribute.append("freeCompilerArgs", "'-Xjsr305=strict'"),
            Attribute.append("freeCompilerArgs", "'-Xcontext-receivers'"),
        )
        assert kotlin.imported_types == {JVM_TARGET}
