from typing import Any, Optional, Union
import pytest
from yangstruct.classify import (
    field_kind, is_annotation_list, is_assignable, is_enum_class,
    is_struct_class, mapping_types, runtime_class, struct_fields,
    unwrap_optional, value_kind)
from yangstruct.enumerations import FieldKind
from yangstruct.exceptions import FieldKindError, NotAStruct
from yangstruct.structs import Binary, Int64, KeyedMap, UnionInt16
from sample_model import (
    Color, E_VALUE_FORTY_TWO, Entry, EnumType, Middle, Root, SampleUnion,
    SampleUnion2, TEST_BINARY, Union1Int16)


def test_unwrap_optional():
    assert unwrap_optional(Optional[int]) == (int, True)
    assert unwrap_optional(int | None) == (int, True)
    assert unwrap_optional(int) == (int, False)
    assert unwrap_optional(Optional[Union[int, str]]) == (Union[int, str], True)
    assert unwrap_optional(Union[int, str]) == (Union[int, str], False)


def test_field_kind():
    assert field_kind(int) == FieldKind.scalar
    assert field_kind(Optional[str]) == FieldKind.optional_scalar
    assert field_kind(EnumType) == FieldKind.scalar
    assert field_kind(Binary) == FieldKind.scalar
    assert field_kind(Optional[Middle]) == FieldKind.struct_ref
    assert field_kind(Optional[list[str]]) == FieldKind.sequence
    assert field_kind(dict[str, Entry]) == FieldKind.mapping
    assert field_kind(KeyedMap) == FieldKind.mapping
    assert field_kind(Optional[SampleUnion]) == FieldKind.union
    assert field_kind(SampleUnion2) == FieldKind.union
    assert field_kind(Union1Int16) == FieldKind.union


def test_value_kind():
    with pytest.raises(FieldKindError):
        value_kind(None)
    assert value_kind(E_VALUE_FORTY_TWO) == FieldKind.union
    assert value_kind(Union1Int16(1)) == FieldKind.union
    assert value_kind(UnionInt16(1)) == FieldKind.union
    assert value_kind(TEST_BINARY) == FieldKind.union
    assert value_kind(Middle()) == FieldKind.struct_ref
    assert value_kind([]) == FieldKind.sequence
    assert value_kind({}) == FieldKind.mapping
    assert value_kind(5) == FieldKind.scalar
    assert value_kind("x") == FieldKind.scalar


def test_struct_fields():
    specs = struct_fields(Entry)
    assert [s.name for s in specs] == ["name", "value", "color", "sub"]
    assert [s.kind for s in specs] == [
        FieldKind.optional_scalar, FieldKind.optional_scalar,
        FieldKind.scalar, FieldKind.struct_ref]
    assert specs[0].type is str
    assert specs[2].zero() == Color(0)
    assert specs[0].zero() is None
    assert is_struct_class(Entry)
    assert not is_struct_class(SampleUnion)
    with pytest.raises(NotAStruct):
        struct_fields(int)


def test_container_fields():
    specs = {s.name: s for s in struct_fields(Root)}
    assert specs["entries"].key_type is str
    assert specs["entries"].element_type is Entry
    assert specs["tags"].element_type is str
    assert specs["tags"].key_type is None
    assert specs["name"].element_type is None
    assert is_annotation_list(specs["comments"])
    assert not is_annotation_list(specs["tags"], ["a"])
    assert mapping_types(specs["entries"], None) == (str, Entry)
    assert mapping_types(specs["entries"], KeyedMap(int, Middle)) == \
        (int, Middle)


def test_runtime_class():
    assert runtime_class(Optional[Int64]) is int
    assert runtime_class(list[str]) is list
    assert runtime_class(Entry) is Entry
    assert is_enum_class(Color)
    assert not is_enum_class(int)


def test_is_assignable():
    assert is_assignable("a", str)
    assert not is_assignable(1, str)
    assert is_assignable(1, Optional[Int64])
    assert not is_assignable(True, int)
    assert is_assignable(E_VALUE_FORTY_TWO, EnumType)
    assert not is_assignable(Color(1), EnumType)
    assert is_assignable(object(), Any)
