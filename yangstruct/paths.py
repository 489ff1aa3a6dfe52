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

"""Schema paths recorded in field annotations.

This module implements the following class:

* TagPath: Path parsed from a path or module annotation.

and functions for extracting paths from fields of schema-annotated structs.
"""

import dataclasses
from typing import NamedTuple, Optional

from .exceptions import InvalidPathTag
from .typealiases import YangIdentifier


class TagPath(NamedTuple):
    """Path parsed from a path or module annotation."""

    elements: tuple[YangIdentifier, ...] = ()
    """Path segments."""
    absolute: bool = False
    """Does the path start at the schema root?"""

    def __str__(self) -> str:
        return ("/" if self.absolute else "") + "/".join(self.elements)

    def append(self, *names: YangIdentifier) -> "TagPath":
        """Return a copy of the receiver extended with `names`."""
        return TagPath(self.elements + names, self.absolute)


def _split_tag(tag: str) -> tuple[YangIdentifier, ...]:
    return tuple(s for s in tag.split("/") if s)


def struct_tag_to_lib_paths(field: dataclasses.Field, parent: TagPath = TagPath(),
                            prefer_shadow: bool = False) -> list[TagPath]:
    """Return the paths a struct field maps to.

    Args:
        field: Field of a schema-annotated struct.
        parent: Path of the struct containing `field`.
        prefer_shadow: Use the shadow path annotation if it is present.

    Raises:
        InvalidPathTag: If the field has no path annotation.
    """
    tag = field.metadata.get("shadow-path") if prefer_shadow else None
    if tag is None:
        tag = field.metadata.get("path")
        if tag is None:
            raise InvalidPathTag(field.name, "field did not specify a path")
    res = []
    for p in tag.split("|"):
        path = parent.append(*_split_tag(p))
        if p.startswith("/"):
            path = path._replace(absolute=True)
        res.append(path)
    return res


def struct_tag_to_lib_modules(field: dataclasses.Field,
                              prefer_shadow: bool = False) -> Optional[list[TagPath]]:
    """Return module names of the path segments of a struct field.

    If the field is correctly annotated, the module names correspond 1:1
    to the path segments returned by :func:`struct_tag_to_lib_paths`.

    Args:
        field: Field of a schema-annotated struct.
        prefer_shadow: Use the shadow module annotation if it is present.

    Returns:
        List of module paths, or ``None`` if the field has no module
        annotation.

    Raises:
        InvalidPathTag: If an alternative in the annotation is empty.
    """
    tag = field.metadata.get("shadow-module") if prefer_shadow else None
    if tag is None:
        tag = field.metadata.get("module")
        if tag is None:
            return None
    res = []
    for m in tag.split("|"):
        if not m:
            raise InvalidPathTag(tag, "module tag must not have an empty path")
        res.append(TagPath(_split_tag(m), m.startswith("/")))
    return res


def schema_paths(field: dataclasses.Field) -> list[TagPath]:
    """Return relative paths of a struct field (shadow paths are ignored)."""
    return struct_tag_to_lib_paths(field)


def field_by_path(cls: type, name: YangIdentifier) -> Optional[dataclasses.Field]:
    """Return the field of struct class `cls` that maps to child `name`.

    Only fields with a single-segment path alternative equal to `name`
    qualify.
    """
    for f in dataclasses.fields(cls):
        if any(p.elements == (name,) for p in schema_paths(f)):
            return f
    return None
