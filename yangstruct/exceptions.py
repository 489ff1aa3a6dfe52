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

"""Exceptions used by the Yangstruct library.

This module defines the following exceptions:

* :exc:`FieldKindError`: A field value is of a kind that cannot be handled.
* :exc:`InvalidArgument`: Invalid argument, e.g. a restriction expression.
* :exc:`InvalidEnumValue`: An enumeration value is not defined.
* :exc:`InvalidInterfaceType`: A union field holds an unsupported value.
* :exc:`InvalidLeafrefPath`: A leafref path cannot be resolved.
* :exc:`InvalidPathTag`: A path or module annotation is malformed.
* :exc:`JSONMergeError`: Two JSON objects cannot be merged.
* :exc:`KeyNotAssignable`: A constructed list key has a wrong type.
* :exc:`ListKeyException`: Base class for list key errors.
* :exc:`ListUniquenessError`: Merging lists would create duplicate entries.
* :exc:`MapShapeError`: Two keyed lists are of incompatible types.
* :exc:`MergeConflict`: A value is set in both source and destination.
* :exc:`MissingKey`: A list key value is missing.
* :exc:`NoSuitableUnionType`: No union alternative accepts a value.
* :exc:`NonexistentField`: A struct has no such field.
* :exc:`NotAMapping`: A keyed list is expected.
* :exc:`NotAStruct`: A schema-annotated struct is expected.
* :exc:`ShapeError`: Abstract class for type and kind mismatches.
* :exc:`StructTypeMismatch`: Two structs are of different classes.
* :exc:`UnkeyedList`: A list schema node has no key.
* :exc:`ValueConversionError`: A string cannot be converted to a typed value.
* :exc:`YangStructException`: Base class for all Yangstruct exceptions.
"""

from typing import Any

from .typealiases import KeyValues, SchemaPath, YangIdentifier


class YangStructException(Exception):
    """Base class for all Yangstruct exceptions."""
    pass


class InvalidArgument(YangStructException):
    """The argument is invalid."""

    def __init__(self, arg: str):
        self.argument = arg

    def __str__(self):
        return self.argument


class InvalidPathTag(InvalidArgument):
    """A path or module annotation is malformed."""

    def __init__(self, arg: str, message: str):
        super().__init__(arg)
        self.message = message

    def __str__(self):
        return f"{self.message}: '{self.argument}'"


class ShapeError(YangStructException):
    """Abstract class for type and kind mismatches."""

    def __init__(self, message: str):
        self.message = message

    def __str__(self):
        return self.message


class StructTypeMismatch(ShapeError):
    """Two structs are of different classes."""

    def __init__(self, dst: Any, src: Any):
        self.dst = type(dst)
        self.src = type(src)
        super().__init__("cannot merge structs that are not of matching "
                         f"types, {self.dst.__name__} != {self.src.__name__}")


class NotAStruct(ShapeError):
    """A schema-annotated struct is expected."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"expected a struct, got {type(value).__name__}: {value!r}")


class FieldKindError(ShapeError):
    """A field value is of a kind that cannot be handled."""
    pass


class InvalidInterfaceType(ShapeError):
    """A union field holds an unsupported value."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"invalid interface type received: {type(value).__name__}")


class MapShapeError(ShapeError):
    """Two keyed lists are of incompatible types."""
    pass


class NonexistentField(ShapeError):
    """A struct has no such field."""

    def __init__(self, struct: Any, name: str):
        self.struct = struct
        self.name = name
        super().__init__(
            f"invalid field {name} of {type(struct).__name__}")


class MergeConflict(YangStructException):
    """A value is set in both source and destination and differs."""

    def __init__(self, field: str, dst: Any, src: Any):
        self.field = field
        self.dst = dst
        self.src = src

    def __str__(self):
        return (f"field {self.field} was set in both src and dst and was "
                f"not equal, src: {self.src!r}, dst: {self.dst!r}")


class ListUniquenessError(YangStructException):
    """Merging lists would create duplicate entries."""

    def __init__(self, field: str, dst: list, src: list):
        self.field = field
        self.dst = dst
        self.src = src

    def __str__(self):
        return (f"source and destination lists of {self.field} must be "
                f"unique, got src: {self.src!r}, dst: {self.dst!r}")


class InvalidEnumValue(YangStructException):
    """An enumeration value is not defined by its type."""

    def __init__(self, etype: type, value: Any):
        self.etype = etype
        self.value = value

    def __str__(self):
        return (f"cannot map enumerated value as type {self.etype.__name__} "
                f"has unknown value {self.value!r}")


class ValueConversionError(YangStructException):
    """A string cannot be converted to a value of a given type."""

    def __init__(self, text: str, target: str):
        self.text = text
        self.target = target

    def __str__(self):
        return f"unable to convert {self.text!r} to {self.target}"


class ListKeyException(YangStructException):
    """Base class for list key errors."""

    def __init__(self, list_name: YangIdentifier):
        self.list_name = list_name


class UnkeyedList(ListKeyException):
    """A list schema node has no key."""

    def __str__(self):
        return f"{self.list_name}: unkeyed list can't be traversed"


class NotAMapping(ListKeyException):
    """A keyed list is expected."""

    def __init__(self, list_name: YangIdentifier, root: Any):
        super().__init__(list_name)
        self.root = root

    def __str__(self):
        return (f"{self.list_name}: root has type {type(self.root).__name__}"
                ", want map")


class MissingKey(ListKeyException):
    """A list key value is missing."""

    def __init__(self, list_name: YangIdentifier, key: YangIdentifier,
                 keys: KeyValues):
        super().__init__(list_name)
        self.key = key
        self.keys = keys

    def __str__(self):
        return f'{self.list_name}: missing "{self.key}" key in {self.keys!r}'


class KeyNotAssignable(ListKeyException):
    """A constructed list key has a wrong type."""

    def __init__(self, list_name: YangIdentifier, got: type, want: type):
        super().__init__(list_name)
        self.got = got
        self.want = want

    def __str__(self):
        return (f"{self.list_name}: key type {self.got.__name__} is not "
                f"assignable to {getattr(self.want, '__name__', self.want)}")


class InvalidLeafrefPath(ListKeyException):
    """A leafref path cannot be resolved."""

    def __init__(self, list_name: YangIdentifier, path: SchemaPath):
        super().__init__(list_name)
        self.path = path

    def __str__(self):
        return f"{self.list_name}: cannot resolve leafref path '{self.path}'"


class NoSuitableUnionType(ListKeyException):
    """No union alternative accepts a value."""

    def __init__(self, list_name: YangIdentifier, text: str,
                 candidates: list[str]):
        super().__init__(list_name)
        self.text = text
        self.candidates = candidates

    def __str__(self):
        return (f"{self.list_name}: could not find suitable union type to "
                f"unmarshal value {self.text!r}, tried "
                f"[{', '.join(self.candidates)}]")


class JSONMergeError(YangStructException):
    """Two JSON objects cannot be merged."""

    def __init__(self, member: str, a: Any, b: Any):
        self.member = member
        self.a = a
        self.b = b

    def __str__(self):
        return (f"{self.member} is not a mergeable JSON type in tree, "
                f"a: {type(self.a).__name__}, b: {type(self.b).__name__}")
