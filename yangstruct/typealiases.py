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

"""Type aliases for use with type hints [PEP484]_."""

from decimal import Decimal
from typing import Any, Union

YangIdentifier = str
"""YANG identifier, see sec. `6.2`_ of [RFC7950]_."""

InstanceName = str
"""Object member name (simple or qualified), see sec. `4`_ of [RFC7951]_."""

PathTag = str
"""Value of a ``path`` or ``module`` field annotation.

Alternative paths are separated by ``|``, path segments by ``/``.
"""

SchemaPath = str
"""Schema path such as a leafref path, e.g. ``../config/name``."""

ScalarValue = Union[int, Decimal, str, bool, bytes, tuple[None]]
"""Value of a leaf."""

KeyValues = dict[YangIdentifier, str]
"""String representations of list keys, indexed by key leaf name."""

RawObject = dict[InstanceName, Any]
"""JSON object of a projection."""
