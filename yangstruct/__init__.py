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

"""Merging and copying of YANG data trees represented by Python structs."""

from .enumerations import FieldKind, JSONFormat, MergeOption, NodeKind
from .listkey import insert_and_get_key, make_key_for_insert, make_value_for_insert
from .merge import copy_struct, deep_copy, merge_struct_into, merge_structs
from .paths import TagPath, struct_tag_to_lib_modules, struct_tag_to_lib_paths
from .render import (
    EmitJSONConfig, RFC7951JSONConfig, construct_internal_json,
    construct_rfc7951_json, emit_json, enum_log_string, enum_name, merge_json,
    merge_struct_json)
from .structs import (
    Annotation, Binary, EnumDefinition, Int64, KeyedMap, Uint64, UnionValue,
    YangEnum, YangStruct, yang_field)
from .tree import (
    build_empty_tree, init_container, initialize_struct_field,
    prune_empty_branches)
