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

"""Enumeration classes."""

from enum import Enum

class FieldKind(Enum):
    """Enumeration of struct field kinds recognized by the value classifier."""

    optional_scalar = 1
    """Leaf that may be unset (``None``)."""
    struct_ref = 2
    """Optional reference to a nested struct (container)."""
    union = 3
    """Union-typed field holding a union alternative or an enumeration."""
    sequence = 4
    """Leaf-list, unkeyed list or list of annotations."""
    mapping = 5
    """Keyed list."""
    scalar = 6
    """Field holding a bare value, typically an enumeration."""

class MergeOption(Enum):
    """Enumeration of options accepted by merge and copy functions."""

    overwrite_existing_fields = 1
    """Values set in the source overwrite different values in the
    destination instead of raising a conflict."""
    merge_empty_maps = 2
    """An empty but present keyed list in the source makes the destination
    list present as well."""

class JSONFormat(Enum):
    """Enumeration of JSON projection formats."""

    internal = 1
    """Loosely specified format keyed by schema names."""
    rfc7951 = 2
    """JSON encoding of YANG data according to [RFC7951]_."""

class NodeKind(Enum):
    """Enumeration of schema node kinds."""

    container = 1
    """Container node."""
    list = 2
    """List node."""
    leaf = 3
    """Leaf node."""
    leaf_list = 4
    """Leaf-list node."""
