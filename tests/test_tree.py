import pytest
from yangstruct.exceptions import FieldKindError, NonexistentField
from yangstruct.structs import KeyedMap
from yangstruct.tree import (
    build_empty_tree, init_container, initialize_struct_field,
    prune_empty_branches)
from sample_model import (
    RED, Color, Entry, Innermost, Item, Middle, Root, Union1Int16, new_map)


def test_build_empty_tree():
    r = Root()
    build_empty_tree(r)
    assert r.middle == Middle(inner=Innermost())
    assert r.entries is None
    assert r.tags is None
    assert r.union_field is None
    r = Root(middle=Middle(count=1))
    build_empty_tree(r)
    assert r.middle == Middle(count=1)
    build_empty_tree(r)
    assert r.middle.inner is None


def test_prune_inverse():
    r = Root()
    build_empty_tree(r)
    prune_empty_branches(r)
    assert r == Root()


def test_prune_keeps_data():
    r = Root()
    build_empty_tree(r)
    r.middle.inner.leaf = "x"
    prune_empty_branches(r)
    assert r == Root(middle=Middle(inner=Innermost(leaf="x")))
    r = Root(middle=Middle(inner=Innermost(), count=0))
    prune_empty_branches(r)
    assert r == Root(middle=Middle(count=0))
    r = Root(color=RED, middle=Middle(inner=Innermost()))
    prune_empty_branches(r)
    assert r == Root(color=RED)
    r = Root(union_field=Union1Int16(0), middle=Middle())
    prune_empty_branches(r)
    assert r == Root(union_field=Union1Int16(0))


def test_prune_lists():
    entry = Entry(name="e1", sub=Middle(inner=Innermost()))
    r = Root(entries=new_map(str, Entry, {"e1": entry}),
             items=[Item(a="a")], middle=Middle())
    prune_empty_branches(r)
    assert r.middle is None
    assert r.entries["e1"] == Entry(name="e1")
    assert r.items == [Item(a="a")]
    r = Root(entries=new_map(str, Entry, {"e1": Entry()}))
    prune_empty_branches(r)
    assert r.entries == {"e1": Entry()}
    r = Root(tags=[], middle=Middle())
    prune_empty_branches(r)
    assert r == Root(tags=[])


def test_init_container():
    r = Root(middle=Middle(count=1))
    init_container(r, "middle")
    assert r.middle == Middle()
    with pytest.raises(NonexistentField):
        init_container(r, "nonexistent")
    with pytest.raises(FieldKindError):
        init_container(r, "name")


def test_initialize_struct_field():
    r = Root()
    m = initialize_struct_field(r, "entries")
    assert isinstance(m, KeyedMap)
    assert (m.key_type, m.value_type) == (str, Entry)
    assert r.entries is m
    assert initialize_struct_field(r, "tags") == []
    assert initialize_struct_field(r, "middle") == Middle()
    r.tags.append("a")
    assert initialize_struct_field(r, "tags") == ["a"]
    assert initialize_struct_field(r, "tags", overwrite=True) == []
    with pytest.raises(FieldKindError):
        initialize_struct_field(r, "color")
    with pytest.raises(NonexistentField):
        initialize_struct_field(r, "nonexistent")
    assert Color(0) == r.color
