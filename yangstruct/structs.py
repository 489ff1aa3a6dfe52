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

"""Building blocks of schema-annotated structs.

Classes generated from a YANG data model are dataclasses derived from
:class:`YangStruct`.  Their fields are declared with :func:`yang_field`,
which records the schema annotations of the field:

* ``path``: schema path(s) of the field relative to the parent struct;
  alternatives are separated by ``|``,
* ``module``: module name(s) of the path segments, parallel to ``path``,
* ``shadow-path`` and ``shadow-module``: alternative annotations used
  when shadow paths are preferred.

This module implements the following classes:

* Annotation: Abstract class for metadata annotations.
* Binary: Binary value as a union alternative.
* EnumDefinition: Name and defining module of an enumeration value.
* KeyedMap: Keyed list instance.
* UnionValue: Abstract class for union types.
* UnionBool, UnionFloat64, UnionInt8, …, UnionUint64, UnionString: Simple
  union alternatives.
* YangEnum: Abstract class for enumeration types.
* YangStruct: Abstract class for schema-annotated structs.
"""

from abc import ABC, abstractmethod
import dataclasses
from typing import Any, ClassVar, NamedTuple, NewType, Optional

from .exceptions import InvalidEnumValue, ValueConversionError
from .typealiases import PathTag, YangIdentifier

Int64 = NewType("Int64", int)
"""Integer leaf that is encoded as a string in [RFC7951]_ JSON."""

Uint64 = NewType("Uint64", int)
"""Unsigned integer leaf that is encoded as a string in [RFC7951]_ JSON."""


def yang_field(path: PathTag, module: PathTag = None,
               shadow_path: PathTag = None, shadow_module: PathTag = None,
               default: Any = None, default_factory: Any = dataclasses.MISSING,
               **kwargs) -> Any:
    """Declare a field of a schema-annotated struct.

    Args:
        path: Path annotation.
        module: Module annotation.
        shadow_path: Shadow path annotation.
        shadow_module: Shadow module annotation.
        default: Default value, ``None`` (i.e. unset) if not given.
        default_factory: Factory of the default value.

    Remaining keyword arguments are passed to :func:`dataclasses.field`.
    """
    meta = {"path": path}
    if module is not None:
        meta["module"] = module
    if shadow_path is not None:
        meta["shadow-path"] = shadow_path
    if shadow_module is not None:
        meta["shadow-module"] = shadow_module
    if default_factory is not dataclasses.MISSING:
        return dataclasses.field(default_factory=default_factory,
                                 metadata=meta, **kwargs)
    return dataclasses.field(default=default, metadata=meta, **kwargs)


class YangStruct:
    """Abstract class for schema-annotated structs.

    Subclasses are dataclasses; a freshly constructed instance without
    arguments is the zero value of the struct.
    """

    def validate(self) -> None:
        """Check the receiver against its schema.

        Generated classes may override this method, by default there is
        nothing to check.
        """
        pass

    def belonging_module(self) -> Optional[YangIdentifier]:
        """Return the name of the module the receiver's schema node belongs to."""
        return None


class EnumDefinition(NamedTuple):
    """Definition of an enumeration or identity value."""

    name: YangIdentifier
    """Name of the value in the schema."""
    defining_module: Optional[YangIdentifier] = None
    """Module in which the value is defined."""


class YangEnum(int):
    """Abstract class for enumeration types.

    Value zero means that the enumeration is not set, and it never
    corresponds to a member of the enumeration.
    """

    definitions: ClassVar[dict[int, EnumDefinition]] = {}
    """Mapping of integer values to definitions."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({int(self)})"

    @property
    def is_set(self) -> bool:
        """Is the receiver set to a member of the enumeration?"""
        return int(self) != 0

    def definition(self) -> EnumDefinition:
        """Return the definition of the receiver's value.

        Raises:
            InvalidEnumValue: If the value is not defined.
        """
        try:
            return self.definitions[int(self)]
        except KeyError:
            raise InvalidEnumValue(self.__class__, int(self)) from None

    @classmethod
    def from_name(cls, name: str) -> "YangEnum":
        """Return the enumeration value with the given name.

        The name may be prefixed with the defining module.

        Raises:
            ValueConversionError: If no such value exists.
        """
        mod, sep, loc = name.partition(":")
        for val, edef in cls.definitions.items():
            if sep:
                if edef.name == loc and edef.defining_module in (None, mod):
                    return cls(val)
            elif edef.name == name:
                return cls(val)
        raise ValueConversionError(name, cls.__name__)


class UnionValue(ABC):
    """Abstract class for union types.

    Each union type is a subclass whose `alternatives` map names of the
    member types in the schema to Python classes.  In the *wrapper*
    encoding, the alternatives are dataclasses derived from the union
    class that hold the value in a single field.  In the *simple*
    encoding, the alternatives are simple union classes, :class:`Binary`
    or enumeration classes registered as virtual subclasses.
    """

    alternatives: ClassVar[dict[YangIdentifier, type]] = {}

    @classmethod
    def convert(cls, type_name: YangIdentifier, value: Any) -> "UnionValue":
        """Return the union alternative for a value of a member type.

        Args:
            type_name: Name of the member type in the schema.
            value: Value of the member type.

        Raises:
            ValueConversionError: If the receiver has no such alternative.
        """
        try:
            alt = cls.alternatives[type_name]
        except KeyError:
            raise ValueConversionError(repr(value), cls.__name__) from None
        return value if type(value) is alt else alt(value)


class Binary(bytes):
    """Binary value as a union alternative."""

    def __repr__(self) -> str:
        return f"Binary({bytes(self)!r})"


class _SimpleUnion:
    """Mixin for simple union alternatives."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({super().__repr__()})"


class UnionString(_SimpleUnion, str):
    """String union alternative."""


class UnionInt8(_SimpleUnion, int):
    """Int8 union alternative."""


class UnionInt16(_SimpleUnion, int):
    """Int16 union alternative."""


class UnionInt32(_SimpleUnion, int):
    """Int32 union alternative."""


class UnionInt64(_SimpleUnion, int):
    """Int64 union alternative."""


class UnionUint8(_SimpleUnion, int):
    """Uint8 union alternative."""


class UnionUint16(_SimpleUnion, int):
    """Uint16 union alternative."""


class UnionUint32(_SimpleUnion, int):
    """Uint32 union alternative."""


class UnionUint64(_SimpleUnion, int):
    """Uint64 union alternative."""


class UnionFloat64(_SimpleUnion, float):
    """Float64 union alternative."""


class UnionBool(_SimpleUnion, int):
    """Boolean union alternative (:class:`bool` cannot be subclassed)."""

    def __new__(cls, value: Any) -> "UnionBool":
        return super().__new__(cls, bool(value))

    def __repr__(self) -> str:
        return f"UnionBool({bool(self)})"


UNION_SINGLETON_TYPES: dict[type, type] = {
    UnionString: str,
    UnionInt8: int,
    UnionInt16: int,
    UnionInt32: int,
    UnionInt64: int,
    UnionUint8: int,
    UnionUint16: int,
    UnionUint32: int,
    UnionUint64: int,
    UnionFloat64: float,
    UnionBool: bool,
}
"""Simple union alternatives and their underlying types."""


class Annotation(ABC):
    """Abstract class for metadata annotations [RFC7952]_.

    Lists of annotations are exempt from the uniqueness rule of YANG
    lists.
    """

    @abstractmethod
    def to_json(self) -> Any:
        """Return JSON representation of the receiver."""


class KeyedMap(dict):
    """Instance of a keyed YANG list.

    A dictionary mapping keys to list entries that knows the declared
    types of both.
    """

    def __init__(self, key_type: type, value_type: type, *args, **kwargs):
        """Initialize the class instance.

        Args:
            key_type: Class of keys (scalar or composite key struct).
            value_type: Class of list entries.
        """
        super().__init__(*args, **kwargs)
        self.key_type = key_type
        self.value_type = value_type

    def __repr__(self) -> str:
        return (f"KeyedMap[{self.key_type.__name__}, "
                f"{self.value_type.__name__}]({super().__repr__()})")

    def copy(self) -> "KeyedMap":
        """Return a shallow copy of the receiver."""
        return self.__class__(self.key_type, self.value_type, self)
