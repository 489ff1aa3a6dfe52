import decimal
import pytest
from yangstruct.datatype import (
    BinaryType, BooleanType, Decimal64Type, EmptyType,
    EnumerationType, IdentityrefType, Int8Type, LeafrefType, StringType,
    Uint16Type, Uint32Type, UnionType)
from yangstruct.exceptions import InvalidArgument, ValueConversionError


def test_integral():
    t = Uint32Type()
    assert t.from_string("42") == 42
    with pytest.raises(ValueConversionError) as exc:
        t.from_string("-42")
    assert str(exc.value) == "unable to convert '-42' to uint32"
    with pytest.raises(ValueConversionError):
        t.from_string("4x")
    assert True not in Int8Type()
    assert 127 in Int8Type()
    assert 128 not in Int8Type()


def test_range():
    t = Int8Type(range="1..10 | 20")
    assert str(t.range) == "1..10 | 20"
    assert 5 in t
    assert 20 in t
    assert 15 not in t
    assert t.error_message == "not in range"
    assert Int8Type(range="min..0").range.intervals == [[-128, 0]]
    assert Int8Type(range="5..max").range.intervals == [[5, 127]]
    with pytest.raises(InvalidArgument):
        Int8Type(range="a..b")
    with pytest.raises(InvalidArgument):
        Int8Type(range="1..2..3")


def test_names():
    assert str(Int8Type()) == "int8"
    assert str(Int8Type("small")) == "small(int8)"
    assert Int8Type("small").member_name == "small"
    assert Int8Type().member_name == "int8"
    assert UnionType([]).yang_type() == "union"


def test_string():
    t = StringType(length="2..3")
    assert "ab" in t
    assert "a" not in t
    assert t.error_message == "invalid length"
    assert 42 not in t
    t = StringType(patterns=["[a-z]+"], invert_patterns=["x.*"])
    assert "abc" in t
    assert "ab1" not in t
    assert t.error_message == "pattern '[a-z]+': ab1"
    assert "xyz" not in t
    assert t.from_string("abc") == "abc"


def test_xsd_patterns():
    t = StringType(patterns=[r"\d{2}"])
    assert "12" in t
    assert "123" not in t
    t = StringType(patterns=[r"\i\c*"])
    assert "a1" in t
    assert "1a" not in t
    with pytest.raises(InvalidArgument):
        StringType(patterns=["[a-"])


def test_binary():
    t = BinaryType()
    assert t.from_string("YWJj") == b"abc"
    assert t.canonical_string(b"abc") == "YWJj"
    with pytest.raises(ValueConversionError):
        t.from_string("!!")
    with pytest.raises(ValueConversionError):
        BinaryType(length="1").from_string("YWJj")
    assert "abc" not in t


def test_decimal64():
    t = Decimal64Type(2)
    assert t.from_string("1.5") == decimal.Decimal("1.50")
    assert t.canonical_string(decimal.Decimal("1.50")) == "1.5"
    assert t.canonical_string(decimal.Decimal("2")) == "2.0"
    assert t.canonical_string(decimal.Decimal("0")) == "0.0"
    assert 1.5 not in t
    with pytest.raises(ValueConversionError):
        t.from_string("abc")
    t = Decimal64Type(2, range="0..10")
    assert decimal.Decimal("10.00") in t
    assert decimal.Decimal("10.01") not in t
    with pytest.raises(InvalidArgument):
        Decimal64Type(0)


def test_boolean_empty():
    t = BooleanType()
    assert t.from_string("true") is True
    assert t.from_string("false") is False
    assert t.canonical_string(False) == "false"
    with pytest.raises(ValueConversionError):
        t.from_string("yes")
    assert EmptyType().from_string("") == (None,)
    with pytest.raises(ValueConversionError):
        EmptyType().from_string("x")


def test_enumeration_identityref():
    t = EnumerationType(enums=["a", "b"])
    assert t.from_string("a") == "a"
    with pytest.raises(ValueConversionError):
        t.from_string("c")
    assert EnumerationType().from_string("anything") == "anything"
    assert IdentityrefType().from_string("mod:ident") == "ident"
    assert IdentityrefType().from_string("ident") == "ident"


def test_union():
    t = UnionType([Int8Type("small"), StringType("str")])
    assert t.from_string("5") == 5
    assert t.from_string("x") == "x"
    assert t.from_string("300") == "300"
    assert str(t) == "union"
    t = UnionType([Int8Type(), Uint16Type()])
    assert t.from_string("300") == 300
    with pytest.raises(ValueConversionError):
        t.from_string("-300")


def test_unresolved_leafref():
    t = LeafrefType("../key")
    assert t.parse_value("1") is None
    assert 1 not in t
    with pytest.raises(ValueConversionError):
        t.from_string("1")
