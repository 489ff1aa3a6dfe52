# Copyright © 2024–2026 CZ.NIC, z. s. p. o.
#
# This file is part of Yangstruct.
#
# Yangstruct is free software: you can redistribute it and/or modify it under
# the terms of the GNU Lesser General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option) any
# later version.
#
# Yangstruct is distributed in the hope that it will be useful, but WITHOUT ANY
# WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR
# A PARTICULAR PURPOSE.  See the GNU Lesser General Public License for more
# details.
#
# You should have received a copy of the GNU Lesser General Public License along
# with Yangstruct.  If not, see <http://www.gnu.org/licenses/>.

"""Construction of keys and entries of keyed lists.

Given the schema of a keyed list and string representations of the key
values, e.g. taken from a path or a JSON document, the functions in this
module create a new list entry with the key leaves populated and derive
the typed key under which the entry is stored in a :class:`~.KeyedMap`.

Key values are converted according to the schema type of the key leaf.
Leafref types are resolved to the type of the leaf they refer to, and
union types are tried member by member in the declared order.
"""

from typing import Any, Optional

from .classify import (FieldSpec, is_assignable, is_enum_class,
                       is_struct_class, struct_fields)
from .datatype import DataType, EnumerationType, UnionType
from .enumerations import FieldKind
from .exceptions import (
    FieldKindError, KeyNotAssignable, MissingKey, NoSuitableUnionType,
    NonexistentField, NotAMapping, UnkeyedList, ValueConversionError)
from .paths import field_by_path, schema_paths
from .schemanode import ListNode, TerminalNode
from .structs import KeyedMap, UnionValue, YangStruct
from .typealiases import KeyValues, YangIdentifier

__all__ = ["make_value_for_insert", "make_key_for_insert",
           "insert_and_get_key"]


def _check_list(schema: ListNode, root: Any) -> None:
    if not schema.keys:
        raise UnkeyedList(schema.name)
    if not isinstance(root, KeyedMap):
        raise NotAMapping(schema.name, root)


def make_value_for_insert(schema: ListNode, root: KeyedMap,
                          keys: KeyValues) -> YangStruct:
    """Return a new list entry with key leaves set.

    Values in `keys` that don't correspond to a field of the entry or to
    a leaf of the list are ignored.  Keys are converted in the order of
    the list's key statement, so the first missing or unconvertible key
    is reported.

    Args:
        schema: Schema node of the list.
        root: Keyed list the entry is intended for.
        keys: String values of the keys, indexed by key leaf name.

    Raises:
        UnkeyedList: If the list has no key.
        NotAMapping: If `root` is not a keyed list.
        MissingKey: If a key value is missing in `keys`.
        ValueConversionError: If a key value cannot be converted to the
            type of the key leaf.
        NoSuitableUnionType: If no member of a union type accepts the value.
        KeyNotAssignable: If a converted value doesn't fit the entry field.
    """
    _check_list(schema, root)
    val = root.value_type()
    specs = {s.name: s for s in struct_fields(root.value_type)}
    extra = [k for k in keys if k not in schema.keys]
    for name in schema.keys + extra:
        if name not in keys:
            raise MissingKey(schema.name, name, keys)
        fld = field_by_path(root.value_type, name)
        leaf = schema.get_child(name)
        if fld is None or not isinstance(leaf, TerminalNode):
            continue
        spec = specs[fld.name]
        setattr(val, spec.name, _convert_key(
            schema.name, spec, leaf.resolved_type(), keys[name]))
    return val


def _convert_key(list_name: YangIdentifier, spec: FieldSpec, dtype: DataType,
                 text: str) -> Any:
    """Convert the string value of a key to the type of an entry field."""
    if spec.kind == FieldKind.union:
        return _convert_union(list_name, spec.type, dtype, text)
    if spec.kind not in (FieldKind.scalar, FieldKind.optional_scalar):
        raise FieldKindError(f"{list_name}: key field {spec.name} has "
                             f"kind {spec.kind.name}")
    if is_enum_class(spec.type):
        return spec.type.from_name(text)
    res = dtype.from_string(text)
    if not is_assignable(res, spec.type):
        raise KeyNotAssignable(list_name, type(res), spec.type)
    return res


def _union_enum_class(utype: type, member: YangIdentifier) -> Optional[type]:
    """Return the enumeration class of a union alternative, if any."""
    alt = utype.alternatives.get(member)
    if is_enum_class(alt):
        return alt
    if is_struct_class(alt):
        specs = struct_fields(alt)
        if len(specs) == 1 and is_enum_class(specs[0].type):
            return specs[0].type
    return None


def _convert_union(list_name: YangIdentifier, utype: type, dtype: DataType,
                   text: str) -> UnionValue:
    """Convert a key value to the first union alternative that accepts it."""
    members = dtype.types if isinstance(dtype, UnionType) else [dtype]
    for mt in members:
        name = mt.member_name
        if name not in utype.alternatives:
            continue
        if isinstance(mt, EnumerationType):
            ecls = _union_enum_class(utype, name)
            if ecls is None:
                continue
            try:
                return utype.convert(name, ecls.from_name(text))
            except ValueConversionError:
                continue
        val = mt.parse_value(text)
        if val is not None and val in mt:
            return utype.convert(name, val)
    raise NoSuitableUnionType(list_name, text, [str(t) for t in members])


def make_key_for_insert(schema: ListNode, root: KeyedMap,
                        value: YangStruct) -> Any:
    """Return the key of a list entry.

    For a list with a single key leaf, the key is the value of the entry
    field mapped to it.  A composite key is an instance of the key class
    of `root` whose fields are populated from the entry fields with the
    same paths.

    Args:
        schema: Schema node of the list.
        root: Keyed list the entry is intended for.
        value: List entry with key leaves set.

    Raises:
        UnkeyedList: If the list has no key.
        NotAMapping: If `root` is not a keyed list.
        NonexistentField: If the entry has no field for a key leaf.
        KeyNotAssignable: If a key value doesn't fit the key type of `root`.
    """
    _check_list(schema, root)
    ktype = root.key_type
    if not is_struct_class(ktype):
        return _entry_value(schema, root, value, schema.keys[0], ktype)
    kwargs = {}
    for spec in struct_fields(ktype):
        name = str(schema_paths(spec.field)[0])
        kwargs[spec.name] = _entry_value(schema, root, value, name, spec.type)
    return ktype(**kwargs)


def _entry_value(schema: ListNode, root: KeyedMap, value: YangStruct,
                 name: YangIdentifier, want: Any) -> Any:
    fld = field_by_path(type(value), name)
    if fld is None:
        raise NonexistentField(value, name)
    res = getattr(value, fld.name)
    if not is_assignable(res, want):
        raise KeyNotAssignable(schema.name, type(res), want)
    return res


def insert_and_get_key(schema: ListNode, root: KeyedMap,
                       keys: KeyValues) -> Any:
    """Create a list entry for `keys`, insert it and return its key.

    An existing entry with the same key is left intact.

    Raises:
        See :func:`make_value_for_insert` and :func:`make_key_for_insert`.
    """
    val = make_value_for_insert(schema, root, keys)
    key = make_key_for_insert(schema, root, val)
    if key not in root:
        root[key] = val
    return key
