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

"""Restrictions of YANG data types.

This module implements the following classes:

* Intervals: Sequence of numeric intervals from a "range" or "length"
  restriction.
* Pattern: Regular expression from a "pattern" restriction.
"""
import decimal
import re
from typing import Callable, Optional, Union
from elementpath import RegexError, translate_pattern

from .exceptions import InvalidArgument

# Type aliases
Number = Union[int, decimal.Decimal]
"""Union of numeric classes appearing in interval constraints."""

Interval = list[Number]
"""Numeric interval consisting either of one number or a pair of bounds."""


class Intervals:
    """Sequence of numeric intervals."""

    def __init__(self, intervals: list[Interval],
                 parser: Callable[[str], Optional[Number]] = None):
        """Initialize the class instance.

        Args:
            intervals: Initial intervals, typically the full range of a type.
            parser: Function converting bounds in restriction expressions.
        """
        self.intervals = intervals
        self.parser = parser if parser else self._parse_int

    @staticmethod
    def _parse_int(text: str) -> Optional[int]:
        try:
            return int(text)
        except ValueError:
            return None

    def __contains__(self, value: Number) -> bool:
        for r in self.intervals:
            if r[0] <= value <= r[-1]:
                return True
        return False

    def __str__(self) -> str:
        return " | ".join(f"{r[0]}..{r[-1]}" if len(r) > 1 else str(r[0])
                          for r in self.intervals)

    def restrict_with(self, expr: str) -> None:
        """Narrow the receiver with a "range" or "length" expression.

        The keywords ``min`` and ``max`` stand for the current lower and
        upper bound, respectively.

        Raises:
            InvalidArgument: If `expr` cannot be parsed.
        """
        lo = self.intervals[0][0]
        hi = self.intervals[-1][-1]

        def bound(text: str) -> Number:
            if text == "min":
                return lo
            if text == "max":
                return hi
            res = self.parser(text)
            if res is None:
                raise InvalidArgument(expr)
            return res

        res = []
        for part in expr.split("|"):
            ends = [bound(e.strip()) for e in part.split("..")]
            if len(ends) > 2:
                raise InvalidArgument(expr)
            res.append(ends if len(ends) == 1 or ends[0] != ends[1]
                       else ends[:1])
        self.intervals = res


class Pattern:
    """Regular expression from a "pattern" restriction.

    The pattern uses the XML Schema regular expression syntax, which is
    translated to Python syntax.
    """

    def __init__(self, pattern: str, invert_match: bool = False):
        """Initialize the class instance.

        Raises:
            InvalidArgument: If `pattern` is not a valid regular expression.
        """
        self.pattern = pattern
        self.invert_match = invert_match
        try:
            self.regex = re.compile(translate_pattern(
                pattern, back_references=False,
                lazy_quantifiers=False, anchors=False))
        except RegexError:
            raise InvalidArgument(pattern) from None

    def __str__(self) -> str:
        return f"pattern '{self.pattern}'"

    def matches(self, text: str) -> bool:
        """Does `text` satisfy the receiver?"""
        res = self.regex.fullmatch(text) is not None
        return res != self.invert_match
