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

"""JSON projection of struct trees.

A struct tree is rendered to a structure of dictionaries and lists that
can be serialized with the :mod:`json` module.  Two formats are
supported, see :class:`~.JSONFormat`:

* internal format: member names are schema node names, keyed lists are
  objects keyed by the string form of the list key,
* [RFC7951]_ format: member names are qualified with module names where
  required, keyed lists are arrays, and 64-bit integers and decimals are
  encoded as strings.

This module implements the following classes:

* EmitJSONConfig: Options of :func:`emit_json`.
* RFC7951JSONConfig: Options specific to the [RFC7951]_ format.
"""

import base64
import decimal
import json
from typing import Any, Optional

from .classify import FieldSpec, is_annotation_list, is_struct_class, struct_fields
from .enumerations import FieldKind, JSONFormat
from .exceptions import JSONMergeError
from .paths import struct_tag_to_lib_modules, struct_tag_to_lib_paths
from .structs import (
    Annotation, Int64, KeyedMap, Uint64, UnionBool, UnionInt64, UnionUint64,
    UNION_SINGLETON_TYPES, UnionValue, YangEnum, YangStruct)
from .typealiases import RawObject, YangIdentifier

__all__ = ["EmitJSONConfig", "RFC7951JSONConfig", "enum_name",
           "enum_log_string", "key_value_as_string",
           "construct_internal_json", "construct_rfc7951_json",
           "emit_json", "merge_json", "merge_struct_json"]

INDENT = "   "
"""Default indentation of serialized JSON."""


class RFC7951JSONConfig:
    """Options specific to the [RFC7951]_ format."""

    def __init__(self, append_module_name: bool = False,
                 prefer_shadow_path: bool = False):
        """Initialize the class instance.

        Args:
            append_module_name: Qualify enumeration and identity values
                with the name of their defining module.
            prefer_shadow_path: Use shadow path annotations where present.
        """
        self.append_module_name = append_module_name
        self.prefer_shadow_path = prefer_shadow_path


class EmitJSONConfig:
    """Options of :func:`emit_json`."""

    def __init__(self, format: JSONFormat = JSONFormat.internal,
                 rfc7951_config: Optional[RFC7951JSONConfig] = None,
                 indent: str = INDENT, ensure_ascii: bool = False,
                 skip_validation: bool = False):
        """Initialize the class instance.

        Args:
            format: JSON format.
            rfc7951_config: Options of the [RFC7951]_ format.
            indent: Indentation string.
            ensure_ascii: Escape all non-ASCII characters.
            skip_validation: Don't validate the struct before rendering.
        """
        self.format = format
        self.rfc7951_config = rfc7951_config
        self.indent = indent
        self.ensure_ascii = ensure_ascii
        self.skip_validation = skip_validation


def enum_name(e: YangEnum) -> str:
    """Return the name of an enumeration value.

    Returns:
        Name from the schema, or an empty string if `e` is unset.

    Raises:
        InvalidEnumValue: If `e` is not defined by its class.
    """
    return _enum_string(e, False) or ""


def enum_log_string(etype: type, val: int) -> str:
    """Return a string suitable for logging an enumeration value.

    Args:
        etype: Enumeration class.
        val: Integer value.
    """
    edef = etype.definitions.get(val)
    if edef is None:
        return f"out-of-range {etype.__name__} enum value: {val}"
    return edef.name


def _enum_string(e: YangEnum, prepend_module: bool) -> Optional[str]:
    if not e.is_set:
        return None
    edef = e.definition()
    if prepend_module and edef.defining_module:
        return f"{edef.defining_module}:{edef.name}"
    return edef.name


def _scalar_string(val: Any) -> str:
    if isinstance(val, YangEnum):
        return enum_name(val)
    if isinstance(val, (bool, UnionBool)):
        return "true" if val else "false"
    if isinstance(val, bytes):
        return base64.b64encode(val).decode("ascii")
    if isinstance(val, YangStruct) and isinstance(val, UnionValue):
        return _scalar_string(_wrapped_value(val))
    return str(val)


def key_value_as_string(key: Any) -> str:
    """Return the string form of a list key.

    Components of a composite key are separated by spaces.
    """
    if is_struct_class(type(key)) and not isinstance(key, UnionValue):
        return " ".join(_scalar_string(getattr(key, s.name))
                        for s in struct_fields(type(key)))
    return _scalar_string(key)


def _wrapped_value(u: YangStruct) -> Any:
    """Return the value held by a wrapper union alternative."""
    return getattr(u, struct_fields(type(u))[0].name)


class _Renderer:
    """Walker producing the JSON projection of a struct tree."""

    def __init__(self, rfc7951: bool,
                 config: Optional[RFC7951JSONConfig] = None):
        self.rfc7951 = rfc7951
        self.config = config if config else RFC7951JSONConfig()

    def struct(self, s: YangStruct,
               module: Optional[YangIdentifier] = None) -> RawObject:
        res = {}
        prefer = self.config.prefer_shadow_path if self.rfc7951 else False
        for spec in struct_fields(type(s)):
            val = getattr(s, spec.name)
            paths = struct_tag_to_lib_paths(spec.field, prefer_shadow=prefer)
            mods = (struct_tag_to_lib_modules(spec.field, prefer)
                    if self.rfc7951 else None)
            for i, p in enumerate(paths):
                mpath = mods[i].elements if mods and i < len(mods) else ()
                names = self._member_names(p.elements, mpath, module)
                cmod = mpath[-1] if mpath else module
                rval = self.field(spec, val, cmod)
                if rval is not None:
                    self._insert(res, names, rval)
        return res

    def _member_names(self, segs: tuple, mods: tuple,
                      module: Optional[YangIdentifier]) -> list[str]:
        if not self.rfc7951 or len(mods) != len(segs):
            return list(segs)
        res = []
        for seg, mod in zip(segs, mods):
            res.append(seg if mod == module else f"{mod}:{seg}")
            module = mod
        return res

    @staticmethod
    def _insert(obj: RawObject, names: list[str], val: Any) -> None:
        for n in names[:-1]:
            obj = obj.setdefault(n, {})
        obj[names[-1]] = val

    def field(self, spec: FieldSpec, val: Any,
              module: Optional[YangIdentifier]) -> Any:
        if val is None:
            return None
        if spec.kind == FieldKind.struct_ref:
            return self.struct(val, module) or None
        if spec.kind == FieldKind.mapping:
            return self.keyed_list(val, module)
        if spec.kind == FieldKind.sequence:
            if not val:
                return None
            if is_annotation_list(spec, val):
                return [a.to_json() for a in val]
            return [self.value(v, spec.element_type, module) for v in val]
        return self.value(val, spec.type, module)

    def keyed_list(self, val: dict, module: Optional[YangIdentifier]) -> Any:
        if not val:
            return None
        if self.rfc7951:
            keys = sorted(val, key=key_value_as_string)
            return [self.struct(val[k], module) for k in keys]
        return {key_value_as_string(k): self.struct(v, module)
                for k, v in val.items()}

    def value(self, val: Any, tp: Any, module: Optional[YangIdentifier]) -> Any:
        """Render a leaf value or a list entry."""
        if isinstance(val, YangStruct):
            if isinstance(val, UnionValue):
                return self.value(_wrapped_value(val), None, module)
            return self.struct(val, module)
        if isinstance(val, YangEnum):
            return _enum_string(val, self.rfc7951 and
                                self.config.append_module_name)
        if isinstance(val, Annotation):
            return val.to_json()
        if isinstance(val, bytes):
            return base64.b64encode(val).decode("ascii")
        if isinstance(val, UnionBool):
            return bool(val)
        if isinstance(val, decimal.Decimal):
            return str(val) if self.rfc7951 else float(val)
        if (self.rfc7951 and isinstance(val, int) and not isinstance(val, bool)
                and (tp in (Int64, Uint64) or
                     isinstance(val, (UnionInt64, UnionUint64)))):
            return str(int(val))
        base = UNION_SINGLETON_TYPES.get(type(val))
        return base(val) if base else val


def _render(s: YangStruct, rfc7951: bool,
            config: Optional[RFC7951JSONConfig] = None) -> RawObject:
    return _Renderer(rfc7951, config).struct(s, s.belonging_module())


def construct_internal_json(s: YangStruct) -> RawObject:
    """Return the internal-format JSON projection of `s`.

    Raises:
        InvalidPathTag: If a field has a malformed path annotation.
        InvalidEnumValue: If an enumeration value is not defined.
    """
    return _render(s, False)


def construct_rfc7951_json(s: YangStruct,
                           config: Optional[RFC7951JSONConfig] = None) -> RawObject:
    """Return the [RFC7951]_ JSON projection of `s`.

    Top-level members are qualified with the module name, and so are
    members defined in a different module than their parent.  Fields
    without a module annotation are never qualified.

    Raises:
        InvalidPathTag: If a field has a malformed path or module
            annotation.
        InvalidEnumValue: If an enumeration value is not defined.
    """
    return _render(s, True, config)


def _make_json(s: YangStruct, config: Optional[EmitJSONConfig]) -> RawObject:
    if config and config.format == JSONFormat.rfc7951:
        return construct_rfc7951_json(s, config.rfc7951_config)
    return construct_internal_json(s)


def emit_json(s: YangStruct, config: EmitJSONConfig = None) -> str:
    """Serialize `s` as a JSON text.

    Unless validation is skipped, :meth:`~.YangStruct.validate` is called
    first and its exceptions are propagated.

    Args:
        s: Struct to serialize.
        config: Options, defaults are used if absent.
    """
    config = config if config else EmitJSONConfig()
    if not config.skip_validation:
        s.validate()
    return json.dumps(_make_json(s, config), indent=config.indent,
                      ensure_ascii=config.ensure_ascii)


def merge_json(a: RawObject, b: RawObject) -> RawObject:
    """Merge two JSON objects into a new one.

    Members present in only one of the objects are copied, objects
    present in both are merged recursively and arrays present in both
    are concatenated.

    Raises:
        JSONMergeError: If a member present in both objects is neither
            an object nor an array in both.
    """
    res = dict(a)
    for k, v in b.items():
        if k not in res:
            res[k] = v
        elif isinstance(res[k], dict) and isinstance(v, dict):
            res[k] = merge_json(res[k], v)
        elif isinstance(res[k], list) and isinstance(v, list):
            res[k] = res[k] + v
        else:
            raise JSONMergeError(k, res[k], v)
    return res


def merge_struct_json(s: YangStruct, existing: RawObject,
                      config: EmitJSONConfig = None) -> RawObject:
    """Project `s` to JSON and merge it into an existing projection.

    The existing projection should be in the format selected by `config`.
    """
    return merge_json(existing, _make_json(s, config))
