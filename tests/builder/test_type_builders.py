# Copyright 2026 rdlkit Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the type descriptor builders."""

import pytest

from rdlkit.builder import (
    AliasTypeBuilder,
    ArrayTypeBuilder,
    BuilderConsumedError,
    EnumTypeBuilder,
    MapTypeBuilder,
    NumberTypeBuilder,
    StringTypeBuilder,
    StructTypeBuilder,
    UnionTypeBuilder,
)
from rdlkit.model import (
    AliasTypeDef,
    ArrayTypeDef,
    EnumTypeDef,
    MapTypeDef,
    NumberTypeDef,
    StringTypeDef,
    StructTypeDef,
    UnionTypeDef,
)

# ###############
# Alias and String
# ###############


def test_alias_builder() -> None:
    t = AliasTypeBuilder("String", "CompoundName").comment("A dotted name.").build()
    assert isinstance(t, AliasTypeDef)
    assert t.name == "CompoundName"
    assert t.type == "String"
    assert t.comment == "A dotted name."


def test_string_builder_with_pattern() -> None:
    t = StringTypeBuilder("String", "SimpleName").pattern("[a-zA-Z_]+").max_size(64).build()
    assert isinstance(t, StringTypeDef)
    assert t.pattern == "[a-zA-Z_]+"
    assert t.max_size == 64
    assert t.min_size is None
    assert t.values is None


def test_string_builder_with_values() -> None:
    t = StringTypeBuilder("String", "Color").value("red").value("green").build()
    assert isinstance(t, StringTypeDef)
    assert t.values == ("red", "green")


def test_unconstrained_string_collapses_to_alias() -> None:
    """A string type with no constraints is a plain alias of its supertype."""
    t = StringTypeBuilder("String", "Label").comment("Free text.").annotation("x_owner", "ui").build()
    assert isinstance(t, AliasTypeDef)
    assert t.name == "Label"
    assert t.type == "String"
    assert t.comment == "Free text."
    assert t.annotations == {"x_owner": "ui"}


def test_min_size_alone_keeps_string_descriptor() -> None:
    t = StringTypeBuilder("String", "NonEmpty").min_size(1).build()
    assert isinstance(t, StringTypeDef)
    assert t.min_size == 1


# ###############
# Number
# ###############


def test_number_bounds_take_width_from_supertype() -> None:
    t = NumberTypeBuilder("Int8", "Percent").min(0).max(100).build()
    assert isinstance(t, NumberTypeDef)
    assert t.min is not None and t.min.kind == "Int8"
    assert t.max is not None and t.max.value == 100


def test_number_bounds_inferred_for_derived_supertype() -> None:
    t = NumberTypeBuilder("Percent", "SmallPercent").max(10).build()
    assert t.max is not None
    assert t.max.kind == "Int32"


def test_number_bounds_explicit_kind() -> None:
    t = NumberTypeBuilder("Ratio", "Half").min(0.5, "Float32").build()
    assert t.min is not None
    assert t.min.kind == "Float32"


def test_number_bound_out_of_range_for_supertype() -> None:
    with pytest.raises(ValueError):
        NumberTypeBuilder("Int8", "Big").max(1000)


# ###############
# Struct
# ###############


def test_struct_fields_preserve_order() -> None:
    t = (
        StructTypeBuilder("Struct", "Contact")
        .field("name", "String", comment="Full name.")
        .field("age", "Int32", optional=True, default=0)
        .array_field("tags", "String", optional=True)
        .map_field("phones", "String", "PhoneNumber")
        .build()
    )
    assert isinstance(t, StructTypeDef)
    assert [f.name for f in t.fields] == ["name", "age", "tags", "phones"]
    assert t.fields[1].optional
    assert t.fields[1].default == 0
    assert t.fields[2].type == "Array"
    assert t.fields[2].items == "String"
    assert t.fields[3].type == "Map"
    assert t.fields[3].keys == "String"
    assert t.fields[3].items == "PhoneNumber"


def test_struct_closed_flag() -> None:
    assert StructTypeBuilder("Struct", "Strict").closed().build().closed
    assert not StructTypeBuilder("Struct", "Loose").build().closed


def test_struct_builder_does_not_validate_references() -> None:
    """Unknown field types are accepted until the schema is finalized."""
    t = StructTypeBuilder("Struct", "Self").field("other", "Missing").build()
    assert t.fields[0].type == "Missing"


# ###############
# Collections, Enum, Union
# ###############


def test_array_builder() -> None:
    t = ArrayTypeBuilder("Array", "IntList").items("Int32").max_size(10).build()
    assert isinstance(t, ArrayTypeDef)
    assert t.items == "Int32"
    assert t.max_size == 10


def test_map_builder() -> None:
    t = MapTypeBuilder("Map", "Lookup").keys("String").items("Point").size(3).build()
    assert isinstance(t, MapTypeDef)
    assert (t.keys, t.items, t.size) == ("String", "Point", 3)


def test_enum_builder() -> None:
    t = EnumTypeBuilder("Enum", "Suit").element("HEARTS", "Red.").element("SPADES").build()
    assert isinstance(t, EnumTypeDef)
    assert [e.symbol for e in t.elements] == ["HEARTS", "SPADES"]
    assert t.elements[0].comment == "Red."


def test_union_builder() -> None:
    t = UnionTypeBuilder("Union", "Shape").variant("Circle").variant("Square").build()
    assert isinstance(t, UnionTypeDef)
    assert t.variants == ("Circle", "Square")


# ###############
# Builder Lifecycle
# ###############


def test_build_consumes_the_builder() -> None:
    tb = EnumTypeBuilder("Enum", "Suit").element("HEARTS")
    tb.build()
    assert tb.consumed
    with pytest.raises(BuilderConsumedError):
        tb.build()


def test_configuration_after_build_is_rejected() -> None:
    tb = StructTypeBuilder("Struct", "Point")
    tb.build()
    with pytest.raises(BuilderConsumedError):
        tb.field("x", "Int32")
    with pytest.raises(BuilderConsumedError):
        tb.comment("late")


def test_built_descriptor_is_independent_of_builder() -> None:
    """Descriptors hold tuples, so nothing the builder kept can change them."""
    t = UnionTypeBuilder("Union", "Shape").variant("Circle").build()
    assert isinstance(t.variants, tuple)


def test_empty_pattern_collapses_to_alias() -> None:
    """An empty pattern constrains nothing, so the type is a plain alias."""
    t = StringTypeBuilder("String", "Anything").pattern("").build()
    assert isinstance(t, AliasTypeDef)


def test_empty_pattern_dropped_when_other_constraints_set() -> None:
    t = StringTypeBuilder("String", "Short").pattern("").max_size(8).build()
    assert isinstance(t, StringTypeDef)
    assert t.pattern is None
    assert t.max_size == 8
