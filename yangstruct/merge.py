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

"""Merging and copying of schema-annotated structs.

The functions in this module walk two structs of the same class field by
field and copy or merge the contents of the source struct into the
destination struct.  Both of them must be instances of the same class.

Merging follows the rules of YANG data:

* leaves populated in both structs must have equal values, unless the
  :attr:`~.MergeOption.overwrite_existing_fields` option is used,
* zero enumeration values mean "unset",
* entries of keyed lists are merged key by key,
* leaf-lists and unkeyed lists must not end up with duplicate entries.

In the event of an error, the destination struct may be partially
modified and should be discarded.
"""

from typing import Any, NamedTuple, Optional

from .classify import (FieldSpec, is_annotation_list, is_enum_class,
                       is_struct_class, mapping_types, struct_fields)
from .enumerations import FieldKind, MergeOption
from .exceptions import (
    FieldKindError, InvalidInterfaceType, ListUniquenessError, MapShapeError,
    MergeConflict, NotAStruct, StructTypeMismatch)
from .structs import (
    Binary, KeyedMap, UNION_SINGLETON_TYPES, YangEnum, YangStruct)

__all__ = ["merge_structs", "merge_struct_into", "deep_copy", "copy_struct",
           "validate_map", "MapType"]


class MapType(NamedTuple):
    """Specification of a keyed list type."""

    key: type
    """Class of keys."""
    value: type
    """Class of entries."""


def _overwrite(opts: tuple[MergeOption, ...]) -> bool:
    return MergeOption.overwrite_existing_fields in opts


def _equal(a: Any, b: Any) -> bool:
    """Deep equality that also distinguishes classes of the values."""
    if type(a) is not type(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(_equal(x, y) for x, y in zip(a, b))
    return a == b


def _check_conflict(spec: FieldSpec, dst: Any, src: Any,
                    opts: tuple[MergeOption, ...]) -> None:
    if dst is not None and not _overwrite(opts) and not _equal(dst, src):
        raise MergeConflict(spec.name, dst, src)


def merge_structs(a: YangStruct, b: YangStruct, *opts: MergeOption) -> YangStruct:
    """Merge two structs into a new one.

    Neither `a` nor `b` is modified.

    Args:
        a: First struct.
        b: Second struct, of the same class as `a`.
        opts: Merge options.

    Raises:
        StructTypeMismatch: If `a` and `b` are of different classes.
        MergeConflict: If a leaf is set to different values in `a` and `b`.
        ListUniquenessError: If lists in `a` and `b` overlap but are
            not equal.
    """
    if type(a) is not type(b):
        raise StructTypeMismatch(a, b)
    dst = _deep_copy(a, MergeOption.merge_empty_maps in opts)
    merge_struct_into(dst, b, *opts)
    return dst


def merge_struct_into(dst: YangStruct, src: YangStruct, *opts: MergeOption) -> None:
    """Merge the contents of `src` into `dst` in place.

    The merge rules are the same as for :func:`merge_structs`.
    """
    if type(dst) is not type(src):
        raise StructTypeMismatch(dst, src)
    copy_struct(dst, src, *opts)


def deep_copy(s: YangStruct) -> YangStruct:
    """Return a deep copy of a struct.

    Raises:
        NotAStruct: If `s` is not a schema-annotated struct.
    """
    return _deep_copy(s, False)


def _deep_copy(s: YangStruct, keep_empty_maps: bool) -> YangStruct:
    if not is_struct_class(type(s)):
        raise NotAStruct(s)
    res = type(s)()
    opts = (MergeOption.merge_empty_maps,) if keep_empty_maps else ()
    copy_struct(res, s, *opts)
    return res


def copy_struct(dst: YangStruct, src: YangStruct, *opts: MergeOption) -> None:
    """Copy fields of `src` into `dst` in place.

    Raises:
        StructTypeMismatch: If `dst` and `src` are of different classes.
        NotAStruct: If they aren't schema-annotated structs.
    """
    if type(dst) is not type(src):
        raise StructTypeMismatch(dst, src)
    for spec in struct_fields(type(src)):
        sval = getattr(src, spec.name)
        dval = getattr(dst, spec.name)
        if spec.kind == FieldKind.struct_ref:
            nval = copy_struct_ref_field(spec, dval, sval, opts)
        elif spec.kind == FieldKind.union:
            nval = copy_union_field(spec, dval, sval, opts)
        elif spec.kind == FieldKind.mapping:
            nval = copy_map_field(spec, dval, sval, opts)
        elif spec.kind == FieldKind.sequence:
            nval = copy_list_field(spec, dval, sval, opts)
        elif is_enum_class(spec.type) or isinstance(sval, YangEnum):
            nval = _merge_enum(spec, dval, sval, opts)
        elif spec.kind == FieldKind.optional_scalar:
            if sval is None:
                continue
            _check_conflict(spec, dval, sval, opts)
            nval = sval
        else:
            nval = sval
        setattr(dst, spec.name, nval)


def _merge_enum(spec: FieldSpec, dst: Optional[YangEnum],
                src: Optional[YangEnum],
                opts: tuple[MergeOption, ...]) -> Optional[YangEnum]:
    """Merge enumeration values, ``None`` and zero both mean unset."""
    if not src:
        return dst if dst is not None else src
    if dst and dst != src and not _overwrite(opts):
        raise MergeConflict(spec.name, dst, src)
    return src


def copy_struct_ref_field(spec: FieldSpec, dst: Optional[YangStruct],
                          src: Optional[YangStruct],
                          opts: tuple[MergeOption, ...]) -> Optional[YangStruct]:
    """Merge a field referring to a nested struct.

    Returns:
        New value of the destination field.
    """
    if src is None:
        return dst
    if not isinstance(src, YangStruct):
        raise FieldKindError(f"{spec.name}: received non-struct value "
                             f"{type(src).__name__}")
    res = type(src)() if dst is None else dst
    copy_struct(res, src, *opts)
    return res


def _is_union_scalar(value: Any) -> bool:
    return isinstance(value, YangEnum) or type(value) in UNION_SINGLETON_TYPES


def copy_union_field(spec: FieldSpec, dst: Any, src: Any,
                     opts: tuple[MergeOption, ...]) -> Any:
    """Merge a union-typed field.

    The value may be a wrapper struct, a binary value, or a simple
    alternative including an enumeration.

    Returns:
        New value of the destination field.

    Raises:
        InvalidInterfaceType: If `src` is none of the above.
    """
    if src is None:
        return dst
    if isinstance(src, YangStruct):
        _check_conflict(spec, dst, src, opts)
        res = type(src)()
        copy_struct(res, src, *opts)
        return res
    if isinstance(src, Binary):
        _check_conflict(spec, dst, src, opts)
        return Binary(src)
    if _is_union_scalar(src):
        _check_conflict(spec, dst, src, opts)
        return src
    raise InvalidInterfaceType(src)


def validate_map(src: Optional[dict], dst: Optional[dict],
                 spec: FieldSpec = None) -> MapType:
    """Check that two keyed lists are of the same type.

    Args:
        src: Source keyed list.
        dst: Destination keyed list.
        spec: Descriptor of the field the lists belong to, used for lists
            that don't record their types.

    Returns:
        Specification of the common type.

    Raises:
        MapShapeError: If the keyed lists are incompatible or their entries
            aren't structs.
    """
    for m in (src, dst):
        if m is not None and not isinstance(m, dict):
            raise MapShapeError(
                f"invalid field, was not a map, was: {type(m).__name__}")
    if spec is None and not (isinstance(src, KeyedMap) and
                             isinstance(dst, KeyedMap)):
        raise MapShapeError("cannot determine types of untyped maps")
    sk, sv = mapping_types(spec, src) if spec else (src.key_type, src.value_type)
    dk, dv = mapping_types(spec, dst) if spec else (dst.key_type, dst.value_type)
    if sv != dv:
        raise MapShapeError("invalid maps, src and dst value types are "
                            f"different, {sv} != {dv}")
    if not is_struct_class(sv):
        raise MapShapeError(
            f"invalid maps, entries are not structs, got {sv}")
    if sk != dk:
        raise MapShapeError("invalid maps, src and dst key types are "
                            f"different, {sk} != {dk}")
    return MapType(sk, sv)


def copy_map_field(spec: FieldSpec, dst: Optional[dict], src: Optional[dict],
                   opts: tuple[MergeOption, ...]) -> Optional[dict]:
    """Merge a keyed list field.

    Entries present only in the destination are kept, entries present only
    in the source are copied, and entries present in both are merged.

    Returns:
        New value of the destination field.
    """
    if not src and not dst:
        if MergeOption.merge_empty_maps not in opts or src is None:
            return dst
    mt = validate_map(src, dst, spec)
    res = KeyedMap(mt.key, mt.value) if dst is None else dst
    for k, v in (src or {}).items():
        if k in res:
            copy_struct(res[k], v, *opts)
        else:
            n = type(v)()
            copy_struct(n, v, *opts)
            res[k] = n
    return res


def unique_lists(a: list, b: list) -> bool:
    """Return ``True`` if lists `a` and `b` have no equal entries."""
    if not isinstance(a, list) or not isinstance(b, list):
        raise FieldKindError("a and b must both be lists, got a: "
                             f"{type(a).__name__}, b: {type(b).__name__}")
    for x in a:
        for y in b:
            if _equal(x, y):
                return False
    return True


def copy_list_field(spec: FieldSpec, dst: Optional[list], src: Optional[list],
                    opts: tuple[MergeOption, ...]) -> Optional[list]:
    """Merge a leaf-list or unkeyed list field.

    Equal lists are left as they are; otherwise entries of the source are
    appended to the destination, which is an error if an entry would be
    duplicated.  Annotations are always appended.

    Returns:
        New value of the destination field.
    """
    if not src and not dst:
        return dst
    dlist = dst if dst is not None else []
    if not is_annotation_list(spec, src):
        if _equal(dlist, src or []):
            return dst
        if not unique_lists(dlist, src or []):
            raise ListUniquenessError(spec.name, dlist, src)
    for v in src or []:
        if isinstance(v, YangStruct):
            n = type(v)()
            copy_struct(n, v, *opts)
            dlist.append(n)
        else:
            dlist.append(v)
    return dlist
