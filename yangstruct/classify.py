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

"""Classification of struct fields and values.

The merge, copy and tree operations never dispatch on field names or
concrete classes; they ask this module what kind of field or value they
are dealing with.

This module implements the following class:

* FieldSpec: Descriptor of a struct field.
"""

import dataclasses
from functools import lru_cache
import types
from typing import Any, NamedTuple, Optional, Union, get_args, get_origin, get_type_hints

from .enumerations import FieldKind
from .exceptions import FieldKindError, NotAStruct
from .structs import Annotation, KeyedMap, UnionValue, YangEnum, YangStruct

_NoneType = type(None)


class FieldSpec(NamedTuple):
    """Descriptor of a field of a schema-annotated struct."""

    name: str
    """Attribute name."""
    type: Any
    """Declared type, with ``Optional`` removed."""
    kind: FieldKind
    """Kind of the field."""
    field: dataclasses.Field
    """Dataclass field carrying the annotations."""

    @property
    def element_type(self) -> Any:
        """Type of entries of a sequence or mapping field, or ``None``."""
        args = get_args(self.type)
        if self.kind == FieldKind.sequence:
            return args[0] if args else None
        if self.kind == FieldKind.mapping:
            return args[1] if len(args) == 2 else None
        return None

    @property
    def key_type(self) -> Any:
        """Type of keys of a mapping field, or ``None``."""
        args = get_args(self.type)
        return args[0] if self.kind == FieldKind.mapping and args else None

    def zero(self) -> Any:
        """Return the zero value of the field."""
        if self.field.default is not dataclasses.MISSING:
            return self.field.default
        if self.field.default_factory is not dataclasses.MISSING:
            return self.field.default_factory()
        return None


def unwrap_optional(tp: Any) -> tuple[Any, bool]:
    """Strip ``Optional`` from a type hint.

    Returns:
        The remaining type and a flag that is ``True`` if the hint was
        optional.
    """
    if get_origin(tp) in (Union, types.UnionType):
        args = [a for a in get_args(tp) if a is not _NoneType]
        if len(args) < len(get_args(tp)):
            return (args[0] if len(args) == 1 else Union[tuple(args)], True)
    return (tp, False)


def is_struct_class(tp: Any) -> bool:
    """Is `tp` a schema-annotated struct class?"""
    return (isinstance(tp, type) and issubclass(tp, YangStruct) and
            dataclasses.is_dataclass(tp))


def field_kind(tp: Any) -> FieldKind:
    """Classify a field by its declared type.

    Only declared subclasses of :class:`~.UnionValue` are union types,
    virtual subclasses are union alternatives.

    Args:
        tp: Type hint of the field.
    """
    base, optional = unwrap_optional(tp)
    origin = get_origin(base) or base
    if isinstance(origin, type):
        if UnionValue in origin.__mro__:
            return FieldKind.union
        if is_struct_class(origin):
            return FieldKind.struct_ref
        if issubclass(origin, list):
            return FieldKind.sequence
        if issubclass(origin, dict):
            return FieldKind.mapping
    return FieldKind.optional_scalar if optional else FieldKind.scalar


def value_kind(value: Any) -> FieldKind:
    """Classify a value found in a struct by its runtime type.

    Enumeration values and union alternatives are both classified as
    :attr:`~.FieldKind.union`.

    Raises:
        FieldKindError: If `value` is ``None``.
    """
    if value is None:
        raise FieldKindError("cannot classify an unset value")
    if isinstance(value, (UnionValue, YangEnum)):
        return FieldKind.union
    if isinstance(value, YangStruct):
        return FieldKind.struct_ref
    if isinstance(value, list):
        return FieldKind.sequence
    if isinstance(value, dict):
        return FieldKind.mapping
    return FieldKind.scalar


@lru_cache(maxsize=None)
def struct_fields(cls: type) -> tuple[FieldSpec, ...]:
    """Return descriptors of all fields of a struct class in declared order.

    Raises:
        NotAStruct: If `cls` isn't a schema-annotated struct class.
    """
    if not is_struct_class(cls):
        raise NotAStruct(cls)
    hints = get_type_hints(cls)
    res = []
    for f in dataclasses.fields(cls):
        tp = unwrap_optional(hints.get(f.name, Any))[0]
        res.append(FieldSpec(f.name, tp, field_kind(hints.get(f.name, Any)), f))
    return tuple(res)


def is_annotation_list(spec: FieldSpec, value: Optional[list] = None) -> bool:
    """Does a sequence field hold metadata annotations?"""
    et = spec.element_type
    if isinstance(et, type) and issubclass(et, Annotation):
        return True
    return bool(value) and all(isinstance(a, Annotation) for a in value)


def is_enum_class(tp: Any) -> bool:
    """Is `tp` an enumeration class?"""
    return isinstance(tp, type) and issubclass(tp, YangEnum)


def mapping_types(spec: FieldSpec, value: Optional[dict]) -> tuple[Any, Any]:
    """Return the key and entry types of a mapping field.

    Types recorded in a :class:`KeyedMap` take precedence over the
    declared type of the field.
    """
    if isinstance(value, KeyedMap):
        return (value.key_type, value.value_type)
    return (spec.key_type, spec.element_type)


def runtime_class(tp: Any) -> Any:
    """Return the class that values of type hint `tp` are instances of.

    ``NewType`` aliases are replaced with their supertype.
    """
    tp = unwrap_optional(tp)[0]
    while hasattr(tp, "__supertype__"):
        tp = tp.__supertype__
    return get_origin(tp) or tp


def is_assignable(value: Any, tp: Any) -> bool:
    """Can `value` be stored in a field or key of type `tp`?"""
    cls = runtime_class(tp)
    if not isinstance(cls, type):
        return True
    if cls is int and isinstance(value, bool):
        return False
    return isinstance(value, cls)
