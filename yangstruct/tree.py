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

"""Operations on the shape of struct trees.

* :func:`build_empty_tree` creates all missing containers,
* :func:`prune_empty_branches` removes containers that hold no data,
* :func:`init_container` and :func:`initialize_struct_field` initialize
  a single field.
"""

from typing import Any

from .classify import FieldSpec, struct_fields, value_kind
from .enumerations import FieldKind
from .exceptions import FieldKindError, NonexistentField
from .structs import KeyedMap, YangStruct

__all__ = ["build_empty_tree", "prune_empty_branches", "init_container",
           "initialize_struct_field"]


def build_empty_tree(s: YangStruct) -> None:
    """Create all missing containers under `s` in place.

    Containers that are already present are left intact, including
    their own descendants.
    """
    for spec in struct_fields(type(s)):
        if spec.kind != FieldKind.struct_ref:
            continue
        if getattr(s, spec.name) is not None:
            continue
        child = spec.type()
        build_empty_tree(child)
        setattr(s, spec.name, child)


def prune_empty_branches(s: YangStruct) -> None:
    """Remove containers with no data from the tree under `s` in place.

    A container is removed if it is equal to its zero value, or if all its
    descendant containers have been removed and no other field is set.
    Entries of lists are pruned too, but the lists themselves are kept.
    """
    _prune(s)


def _prune(s: YangStruct) -> bool:
    """Prune the receiver's subtrees.

    Returns:
        ``True`` if all fields of `s` are now unset.
    """
    empty = True
    for spec in struct_fields(type(s)):
        val = getattr(s, spec.name)
        if spec.kind == FieldKind.struct_ref:
            if val is None:
                continue
            if val == type(val)() or _prune(val):
                setattr(s, spec.name, None)
            else:
                empty = False
        elif spec.kind in (FieldKind.sequence, FieldKind.mapping):
            if not val:
                continue
            empty = False
            entries = val.values() if spec.kind == FieldKind.mapping else val
            for e in entries:
                if value_kind(e) == FieldKind.struct_ref:
                    _prune(e)
        elif val is not None and val != spec.zero():
            empty = False
    return empty


def _field_spec(s: YangStruct, name: str) -> FieldSpec:
    for spec in struct_fields(type(s)):
        if spec.name == name:
            return spec
    raise NonexistentField(s, name)


def init_container(s: YangStruct, name: str) -> None:
    """Set container field `name` of `s` to a new empty container.

    Raises:
        NonexistentField: If `s` has no such field.
        FieldKindError: If the field isn't a container.
    """
    spec = _field_spec(s, name)
    if spec.kind != FieldKind.struct_ref:
        raise FieldKindError(
            f"field {name} was not a struct to initialise")
    setattr(s, name, spec.type())


def initialize_struct_field(s: YangStruct, name: str,
                            overwrite: bool = False) -> Any:
    """Give a container, list or leaf-list field of `s` its empty value.

    Args:
        s: Struct containing the field.
        name: Attribute name of the field.
        overwrite: Replace the current value even if the field is set.

    Returns:
        Value of the field.

    Raises:
        NonexistentField: If `s` has no such field.
        FieldKindError: If the field is a leaf.
    """
    spec = _field_spec(s, name)
    if spec.kind not in (FieldKind.struct_ref, FieldKind.mapping,
                         FieldKind.sequence):
        raise FieldKindError(
            f"field {name} of kind {spec.kind.name} cannot be initialised")
    val = getattr(s, name)
    if val is not None and not overwrite:
        return val
    if spec.kind == FieldKind.struct_ref:
        val = spec.type()
    elif spec.kind == FieldKind.mapping:
        val = KeyedMap(spec.key_type, spec.element_type)
    else:
        val = []
    setattr(s, name, val)
    return val
