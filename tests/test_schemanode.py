import pytest
from yangstruct.datatype import (
    Int16Type, Int8Type, LeafrefType, StringType, Uint32Type, UnionType)
from yangstruct.enumerations import NodeKind
from yangstruct.exceptions import InvalidLeafrefPath
from yangstruct.schemanode import (
    ContainerNode, LeafListNode, LeafNode, ListNode, SchemaTreeNode)


@pytest.fixture
def schema():
    root = SchemaTreeNode()
    top = root.add_child(ContainerNode("top", "mod-a"))
    lst = top.add_child(ListNode("item", "id name"))
    lst.add_child(LeafNode("id", LeafrefType("../config/id")))
    lst.add_child(LeafNode("name", StringType()))
    cfg = lst.add_child(ContainerNode("config"))
    cfg.add_child(LeafNode("id", Uint32Type()))
    cfg.add_child(LeafNode("ref", LeafrefType("/mod-a:top/mod-a:item/mod-a:name")))
    cfg.add_child(LeafNode("choice", UnionType(
        [LeafrefType("../id"), Int16Type("int16")])))
    top.add_child(LeafListNode("tag", StringType(), "mod-b"))
    return root


def test_tree(schema):
    top = schema.get_child("top")
    lst = top.get_child("item")
    assert lst.kind == NodeKind.list
    assert top.kind == NodeKind.container
    assert lst.keys == ["id", "name"]
    assert lst.ns == "mod-a"
    assert top.get_child("item", "mod-b") is None
    leaf = schema.get_schema_descendant(["top", "item", "config", "id"])
    assert leaf.kind == NodeKind.leaf
    assert leaf.schema_root() is schema
    assert leaf.data_path() == "/mod-a:top/item/config/id"
    assert str(top.get_child("tag")) == "/mod-a:top/mod-b:tag"
    assert schema.get_schema_descendant(["top", "nope"]) is None
    assert schema.get_schema_descendant(
        ["top", "item", "name", "deeper"]) is None
    assert schema.data_path() == "/"


def test_leafref_resolution(schema):
    lst = schema.get_schema_descendant(["top", "item"])
    key = lst.get_child("id")
    assert isinstance(key.resolved_type(), Uint32Type)
    assert key.resolved_type() is key.resolved_type()
    ref = lst.get_child("config").get_child("ref")
    assert isinstance(ref.resolved_type(), StringType)
    choice = lst.get_child("config").get_child("choice")
    utype = choice.resolved_type()
    assert isinstance(utype, UnionType)
    assert [type(t) for t in utype.types] == [Uint32Type, Int16Type]
    assert isinstance(choice.type.types[0], LeafrefType)
    assert lst.get_child("name").resolved_type() is lst.get_child("name").type


def test_shared_leafref_type():
    shared = LeafrefType("../target")
    root = SchemaTreeNode()
    first = root.add_child(ContainerNode("first"))
    first.add_child(LeafNode("target", Uint32Type()))
    ref1 = first.add_child(LeafNode("ref", shared))
    second = root.add_child(ContainerNode("second"))
    second.add_child(LeafNode("target", StringType()))
    ref2 = second.add_child(LeafNode("ref", shared))
    assert ref1.resolved_type() is first.get_child("target").type
    assert ref2.resolved_type() is second.get_child("target").type
    assert isinstance(ref2.resolved_type(), StringType)
    assert shared not in (ref1.resolved_type(), ref2.resolved_type())


def test_leafref_errors():
    root = SchemaTreeNode()
    cont = root.add_child(ContainerNode("c"))
    a = cont.add_child(LeafNode("a", LeafrefType("../b")))
    cont.add_child(LeafNode("b", LeafrefType("../a")))
    missing = cont.add_child(LeafNode("m", LeafrefType("../nope")))
    inner = cont.add_child(LeafNode("i", LeafrefType("/c")))
    through = cont.add_child(LeafNode("t", LeafrefType("../m/x")))
    self_ref = cont.add_child(LeafNode("s", LeafrefType("../s")))
    cont.add_child(LeafNode("ok", Int8Type()))
    with pytest.raises(InvalidLeafrefPath):
        a.resolved_type()
    with pytest.raises(InvalidLeafrefPath) as exc:
        missing.resolved_type()
    assert str(exc.value) == "m: cannot resolve leafref path '../nope'"
    with pytest.raises(InvalidLeafrefPath):
        inner.resolved_type()
    with pytest.raises(InvalidLeafrefPath):
        through.resolved_type()
    with pytest.raises(InvalidLeafrefPath):
        self_ref.resolved_type()
    assert isinstance(cont.get_child("ok").resolved_type(), Int8Type)
