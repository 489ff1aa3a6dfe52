import dataclasses
from dataclasses import dataclass
from typing import Optional
import pytest
from yangstruct.exceptions import InvalidPathTag
from yangstruct.paths import (
    TagPath, field_by_path, schema_paths, struct_tag_to_lib_modules,
    struct_tag_to_lib_paths)
from yangstruct.structs import YangStruct, yang_field
from sample_model import Entry, Interface


@dataclass
class Tagged(YangStruct):
    top: Optional[str] = yang_field("/top/leaf")
    bad_module: Optional[str] = yang_field("a|b", module="m|")
    untagged: Optional[str] = None


def fields(cls):
    return {f.name: f for f in dataclasses.fields(cls)}


def test_tag_path():
    assert str(TagPath(("a", "b"))) == "a/b"
    assert str(TagPath(("a", "b"), True)) == "/a/b"
    assert TagPath(("a",)).append("b", "c") == TagPath(("a", "b", "c"))


def test_struct_tag_to_lib_paths():
    ifs = fields(Interface)
    assert struct_tag_to_lib_paths(ifs["name"]) == [
        TagPath(("config", "name")), TagPath(("name",))]
    assert struct_tag_to_lib_paths(ifs["name"], TagPath(("interface",))) == [
        TagPath(("interface", "config", "name")),
        TagPath(("interface", "name"))]
    assert struct_tag_to_lib_paths(ifs["mtu"]) == [TagPath(("config", "mtu"))]
    assert struct_tag_to_lib_paths(ifs["mtu"], prefer_shadow=True) == [
        TagPath(("state", "mtu"))]
    assert struct_tag_to_lib_paths(ifs["name"], prefer_shadow=True) == \
        struct_tag_to_lib_paths(ifs["name"])
    top = struct_tag_to_lib_paths(fields(Tagged)["top"])
    assert top == [TagPath(("top", "leaf"), True)]
    assert str(top[0]) == "/top/leaf"
    assert schema_paths(ifs["mtu"]) == [TagPath(("config", "mtu"))]
    with pytest.raises(InvalidPathTag) as exc:
        struct_tag_to_lib_paths(fields(Tagged)["untagged"])
    assert str(exc.value) == "field did not specify a path: 'untagged'"


def test_struct_tag_to_lib_modules():
    ifs = fields(Interface)
    assert struct_tag_to_lib_modules(ifs["name"]) == [
        TagPath(("mod-a", "mod-a")), TagPath(("mod-a",))]
    assert struct_tag_to_lib_modules(ifs["counter"]) == [TagPath(("mod-b",))]
    assert struct_tag_to_lib_modules(ifs["mtu"], True) == [
        TagPath(("mod-a", "mod-a"))]
    assert struct_tag_to_lib_modules(fields(Entry)["name"]) is None
    with pytest.raises(InvalidPathTag) as exc:
        struct_tag_to_lib_modules(fields(Tagged)["bad_module"])
    assert str(exc.value) == "module tag must not have an empty path: 'm|'"


def test_field_by_path():
    assert field_by_path(Entry, "name").name == "name"
    assert field_by_path(Entry, "sub").name == "sub"
    assert field_by_path(Entry, "value") is None
    assert field_by_path(Entry, "config") is None
