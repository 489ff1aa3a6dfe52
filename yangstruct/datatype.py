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

"""Classes representing YANG data types.

Data types convert the string representation of list keys into values
and check whether values conform to the type.

This module implements the following classes:

* BinaryType: YANG binary type.
* BooleanType: YANG boolean type.
* DataType: Abstract class for data types.
* Decimal64Type: YANG decimal64 type.
* EmptyType: YANG empty type.
* EnumerationType: YANG enumeration type.
* IdentityrefType: YANG identityref type.
* IntegralType: Abstract class for integral types.
* Int8Type, Int16Type, Int32Type, Int64Type: YANG signed integer types.
* LeafrefType: YANG leafref type.
* LinearType: Abstract class for character or byte sequences.
* NumericType: Abstract class for numeric types.
* StringType: YANG string type.
* Uint8Type, Uint16Type, Uint32Type, Uint64Type: YANG unsigned integer types.
* UnionType: YANG union type.
"""
from abc import ABC, abstractmethod
import base64
import binascii
import decimal
from typing import Any, ClassVar, Optional

from .constraint import Intervals, Pattern
from .exceptions import InvalidArgument, ValueConversionError
from .typealiases import ScalarValue, SchemaPath, YangIdentifier


class DataType(ABC):
    """Abstract class for YANG data types."""

    def __init__(self, name: Optional[YangIdentifier] = None):
        """Initialize the class instance.

        Args:
            name: Name of a derived type or union member, if any.
        """
        self.name = name
        self.error_message: Optional[str] = None

    @abstractmethod
    def __contains__(self, val: ScalarValue) -> bool:
        """Return ``True`` if the receiver type contains `val`.

        If the result is ``False``, set also the `error_message` property.
        """

    def __str__(self):
        """Return YANG name of the receiver type."""
        base = self.yang_type()
        return f"{self.name}({base})" if self.name else base

    @abstractmethod
    def parse_value(self, text: str) -> Optional[ScalarValue]:
        """Parse value of the receiver's type.

        The input text should follow the rules for lexical
        representation of scalar values as specified in
        [RFC7950]_. Conformance to the receiving type isn't
        guaranteed.

        Args:
            text: String representation of the value.

        Returns:
            A value of the receiver's type or ``None`` if parsing fails.
        """

    def from_string(self, text: str) -> ScalarValue:
        """Return a conforming value of the receiver's type.

        Raises:
            ValueConversionError: If `text` doesn't represent such a value.
        """
        res = self.parse_value(text)
        if res is None or res not in self:
            raise ValueConversionError(text, str(self))
        return res

    def canonical_string(self, val: ScalarValue) -> Optional[str]:
        """Return canonical form of a value."""
        return str(val) if val in self else None

    def yang_type(self) -> YangIdentifier:
        """Return YANG name of the receiver."""
        return self.__class__.__name__[:-4].lower()

    @property
    def member_name(self) -> YangIdentifier:
        """Name identifying the receiver as a union member."""
        return self.name if self.name else self.yang_type()

    def _set_error_info(self, error_message: Optional[str] = None) -> None:
        self.error_message = (error_message if error_message else
                              "expected " + str(self))


class EmptyType(DataType):
    """Class representing YANG "empty" type."""

    def __contains__(self, val: tuple[None]) -> bool:
        if val == (None,):
            return True
        self._set_error_info()
        return False

    def canonical_string(self, val: tuple[None]) -> Optional[str]:
        return ""

    def parse_value(self, text: str) -> Optional[tuple[None]]:
        return (None,) if text == "" else None


class BooleanType(DataType):
    """Class representing YANG "boolean" type."""

    def __contains__(self, val: bool) -> bool:
        if isinstance(val, bool):
            return True
        self._set_error_info()
        return False

    def parse_value(self, text: str) -> Optional[bool]:
        if text == "true":
            return True
        if text == "false":
            return False
        return None

    def canonical_string(self, val: bool) -> Optional[str]:
        if val is True:
            return "true"
        if val is False:
            return "false"
        return None


class LinearType(DataType):
    """Abstract class representing character or byte sequences."""

    def __init__(self, name: Optional[YangIdentifier] = None,
                 length: Optional[str] = None):
        """Initialize the class instance.

        Args:
            name: Name of a derived type or union member, if any.
            length: Argument of the "length" restriction.
        """
        super().__init__(name)
        self.length: Optional[Intervals] = None
        if length:
            self.length = Intervals([[0, 4294967295]])
            self.length.restrict_with(length)

    def __contains__(self, val: Any) -> bool:
        if self.length and len(val) not in self.length:
            self._set_error_info("invalid length")
            return False
        return True


class StringType(LinearType):
    """Class representing YANG "string" type."""

    def __init__(self, name: Optional[YangIdentifier] = None,
                 length: Optional[str] = None, patterns: list[str] = (),
                 invert_patterns: list[str] = ()):
        """Initialize the class instance.

        Args:
            name: Name of a derived type or union member, if any.
            length: Argument of the "length" restriction.
            patterns: Regular expressions that values must match.
            invert_patterns: Regular expressions that values must not match.
        """
        super().__init__(name, length)
        self.patterns = ([Pattern(p) for p in patterns] +
                         [Pattern(p, True) for p in invert_patterns])

    def __contains__(self, val: str) -> bool:
        if not isinstance(val, str):
            self._set_error_info()
            return False
        if not super().__contains__(val):
            return False
        for p in self.patterns:
            if not p.matches(val):
                self._set_error_info(f"{p}: {val}")
                return False
        return True

    def parse_value(self, text: str) -> Optional[str]:
        return text if isinstance(text, str) else None


class BinaryType(LinearType):
    """Class representing YANG "binary" type."""

    def __contains__(self, val: bytes) -> bool:
        if not isinstance(val, bytes):
            self._set_error_info()
            return False
        return super().__contains__(val)

    def parse_value(self, text: str) -> Optional[bytes]:
        """Decode base64-encoded text."""
        try:
            return base64.b64decode(text, validate=True)
        except (TypeError, binascii.Error):
            return None

    def canonical_string(self, val: bytes) -> Optional[str]:
        try:
            return base64.b64encode(val).decode("ascii")
        except TypeError:
            return None


class EnumerationType(DataType):
    """Class representing YANG "enumeration" type.

    The schema may omit the enum labels, in which case any label is
    accepted and resolved by the enumeration class of the struct field.
    """

    def __init__(self, name: Optional[YangIdentifier] = None,
                 enums: list[str] = ()):
        """Initialize the class instance.

        Args:
            name: Name of a derived type or union member, if any.
            enums: Enum labels in the order of definition.
        """
        super().__init__(name)
        self.enum: dict[str, int] = {e: i for i, e in enumerate(enums)}

    def __contains__(self, val: str) -> bool:
        if isinstance(val, str) and (not self.enum or val in self.enum):
            return True
        self._set_error_info()
        return False

    def parse_value(self, text: str) -> Optional[str]:
        return text if isinstance(text, str) else None


class IdentityrefType(EnumerationType):
    """Class representing YANG "identityref" type.

    Identities are represented in the same way as enumerations.
    """

    def parse_value(self, text: str) -> Optional[str]:
        if not isinstance(text, str):
            return None
        return text.partition(":")[2] or text


class LeafrefType(DataType):
    """Class representing YANG "leafref" type.

    The path is relative to the leaf that uses the type, so the same
    instance may refer to different leaves.  Values are parsed and
    checked by the type returned from :meth:`.TerminalNode.resolved_type`;
    the leafref type itself accepts no values.
    """

    def __init__(self, path: SchemaPath, name: Optional[YangIdentifier] = None):
        """Initialize the class instance.

        Args:
            path: Argument of the "path" statement.
            name: Name of a derived type or union member, if any.
        """
        super().__init__(name)
        self.path = path

    def __contains__(self, val: ScalarValue) -> bool:
        self._set_error_info("unresolved leafref")
        return False

    def parse_value(self, text: str) -> None:
        return None

    def canonical_string(self, val: ScalarValue) -> None:
        return None


class NumericType(DataType):
    """Abstract class for numeric data types."""

    _range: ClassVar[list]
    """Minimum and maximum value permitted by the type."""

    def __init__(self, name: Optional[YangIdentifier] = None,
                 range: Optional[str] = None):
        """Initialize the class instance.

        Args:
            name: Name of a derived type or union member, if any.
            range: Argument of the "range" restriction.
        """
        super().__init__(name)
        self.range: Optional[Intervals] = None
        if range:
            self.range = Intervals([self._full_range()],
                                   parser=self.parse_value)
            self.range.restrict_with(range)

    def _full_range(self) -> list:
        return self._range

    def __contains__(self, val: Any) -> bool:
        rng = self.range if self.range else Intervals([self._full_range()])
        if val in rng:
            return True
        self._set_error_info("not in range")
        return False


class Decimal64Type(NumericType):
    """Class representing YANG "decimal64" type."""

    def __init__(self, fraction_digits: int,
                 name: Optional[YangIdentifier] = None,
                 range: Optional[str] = None):
        """Initialize the class instance.

        Args:
            fraction_digits: Argument of the "fraction-digits" statement.
            name: Name of a derived type or union member, if any.
            range: Argument of the "range" restriction.
        """
        if not 1 <= fraction_digits <= 18:
            raise InvalidArgument(str(fraction_digits))
        self.fraction_digits = fraction_digits
        self._epsilon = decimal.Decimal(10) ** -fraction_digits
        super().__init__(name, range)

    def _full_range(self) -> list[decimal.Decimal]:
        quot = decimal.Decimal(10**self.fraction_digits)
        lim = decimal.Decimal(9223372036854775808)
        return [-lim / quot, (lim - 1) / quot]

    def __contains__(self, val: decimal.Decimal) -> bool:
        if not isinstance(val, decimal.Decimal):
            self._set_error_info()
            return False
        return super().__contains__(val)

    def parse_value(self, text: str) -> Optional[decimal.Decimal]:
        try:
            return decimal.Decimal(text).quantize(self._epsilon)
        except (decimal.InvalidOperation, TypeError):
            return None

    def canonical_string(self, val: decimal.Decimal) -> str:
        if val == 0:
            return "0.0"
        sval = str(val.quantize(self._epsilon)).rstrip("0")
        return (sval + "0") if sval.endswith(".") else sval


class IntegralType(NumericType):
    """Abstract class for integral data types."""

    def __contains__(self, val: int) -> bool:
        if not isinstance(val, int) or isinstance(val, bool):
            self._set_error_info()
            return False
        return super().__contains__(val)

    def parse_value(self, text: str) -> Optional[int]:
        try:
            return int(text)
        except (ValueError, TypeError):
            return None


class Int8Type(IntegralType):
    """Class representing YANG "int8" type."""

    _range = [-128, 127]


class Int16Type(IntegralType):
    """Class representing YANG "int16" type."""

    _range = [-32768, 32767]


class Int32Type(IntegralType):
    """Class representing YANG "int32" type."""

    _range = [-2147483648, 2147483647]


class Int64Type(IntegralType):
    """Class representing YANG "int64" type."""

    _range = [-9223372036854775808, 9223372036854775807]


class Uint8Type(IntegralType):
    """Class representing YANG "uint8" type."""

    _range = [0, 255]


class Uint16Type(IntegralType):
    """Class representing YANG "uint16" type."""

    _range = [0, 65535]


class Uint32Type(IntegralType):
    """Class representing YANG "uint32" type."""

    _range = [0, 4294967295]


class Uint64Type(IntegralType):
    """Class representing YANG "uint64" type."""

    _range = [0, 18446744073709551615]


class UnionType(DataType):
    """Class representing YANG "union" type."""

    def __init__(self, types: list[DataType],
                 name: Optional[YangIdentifier] = None):
        """Initialize the class instance.

        Args:
            types: Member types in the order of declaration.
            name: Name of a derived type, if any.
        """
        super().__init__(name)
        self.types = types

    def __contains__(self, val: ScalarValue) -> bool:
        for t in self.types:
            try:
                if val in t:
                    return True
            except TypeError:
                continue
        return False

    def canonical_string(self, val: ScalarValue) -> Optional[str]:
        for t in self.types:
            if val in t:
                return t.canonical_string(val)
        return None

    def parse_value(self, text: str) -> Optional[ScalarValue]:
        for t in self.types:
            val = t.parse_value(text)
            if val is not None and val in t:
                return val
        return None
