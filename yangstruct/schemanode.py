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

"""Schema nodes consulted by the list key engine.

The schema tree is a lightweight description of a YANG data model: it
provides the kind of each node, the key of each list, lookup of children
by name, parent links and types of leaves.

This module implements the following classes:

* ContainerNode: Container node.
* InternalNode: Abstract class for schema nodes that have children.
* LeafListNode: Leaf-list node.
* LeafNode: Leaf node.
* ListNode: List node.
* SchemaNode: Abstract class for all schema nodes.
* SchemaTreeNode: Root node of a schema tree.
* TerminalNode: Abstract class for schema nodes that have no children.
"""

import re
from typing import Optional

from .datatype import DataType, LeafrefType, UnionType
from .enumerations import NodeKind
from .exceptions import InvalidLeafrefPath
from .typealiases import SchemaPath, YangIdentifier

_predicate = re.compile(r"\[[^\]]*\]")


class SchemaNode:
    """Abstract class for all schema nodes."""

    kind: Optional[NodeKind] = None
    """Kind of the receiver."""

    def __init__(self: "SchemaNode", name: Optional[YangIdentifier] = None,
                 ns: Optional[YangIdentifier] = None):
        """Initialize the class instance.

        Args:
            name: Name of the node.
            ns: Name of the module defining the node.
        """
        self.name = name
        """Name of the receiver."""
        self.ns = ns
        """Namespace of the receiver."""
        self.parent: Optional["InternalNode"] = None
        """Parent schema node."""

    def __str__(self: "SchemaNode") -> str:
        return self.data_path()

    def schema_root(self: "SchemaNode") -> "SchemaNode":
        """Return the root node of the receiver's schema."""
        sn = self
        while sn.parent:
            sn = sn.parent
        return sn

    def iname(self: "SchemaNode") -> YangIdentifier:
        """Return the instance name corresponding to the receiver."""
        if self.ns is None or self.parent is None or self.ns == self.parent.ns:
            return self.name
        return self.ns + ":" + self.name

    def data_path(self: "SchemaNode") -> SchemaPath:
        """Return the receiver's data path."""
        if self.parent is None:
            return "/" if self.name is None else "/" + self.name
        pp = self.parent.data_path()
        return ("" if pp == "/" else pp) + "/" + self.iname()


class InternalNode(SchemaNode):
    """Abstract class for schema nodes that have children."""

    def __init__(self: "InternalNode", name: Optional[YangIdentifier] = None,
                 ns: Optional[YangIdentifier] = None):
        """Initialize the class instance."""
        super().__init__(name, ns)
        self.children: list[SchemaNode] = []

    def add_child(self: "InternalNode", node: SchemaNode) -> SchemaNode:
        """Add a child to the receiver.

        A child without a namespace inherits the namespace of the
        receiver.

        Returns:
            The added child.
        """
        node.parent = self
        if node.ns is None:
            node.ns = self.ns
        self.children.append(node)
        return node

    def get_child(self: "InternalNode", name: YangIdentifier,
                  ns: YangIdentifier = None) -> Optional[SchemaNode]:
        """Return receiver's schema child.

        Args:
            name: Child's name.
            ns: Child's namespace, any namespace matches if absent.
        """
        for child in self.children:
            if child.name == name and (ns is None or child.ns == ns):
                return child
        return None

    def get_schema_descendant(
            self: "InternalNode",
            route: list[YangIdentifier]) -> Optional[SchemaNode]:
        """Return descendant schema node or ``None`` if not found.

        Args:
            route: Names of nodes on the way to the descendant node
                   (relative to the receiver).
        """
        node = self
        for name in route:
            try:
                node = node.get_child(name)
            except AttributeError:
                return None
            if node is None:
                return None
        return node


class SchemaTreeNode(InternalNode):
    """Root node of a schema tree."""

    def data_path(self: "SchemaTreeNode") -> SchemaPath:
        return "/"


class ContainerNode(InternalNode):
    """Container node."""

    kind = NodeKind.container


class ListNode(InternalNode):
    """List node."""

    kind = NodeKind.list

    def __init__(self: "ListNode", name: YangIdentifier, key: str = "",
                 ns: Optional[YangIdentifier] = None):
        """Initialize the class instance.

        Args:
            name: Name of the list.
            key: Argument of the "key" statement, i.e. names of key leaves
                separated by spaces.
            ns: Name of the module defining the node.
        """
        super().__init__(name, ns)
        self.keys: list[YangIdentifier] = key.split()
        """Names of key leaves in the declared order."""


class TerminalNode(SchemaNode):
    """Abstract class for schema nodes that have no children."""

    def __init__(self: "TerminalNode", name: YangIdentifier, type: DataType,
                 ns: Optional[YangIdentifier] = None):
        """Initialize the class instance.

        Args:
            name: Name of the node.
            type: Type of the node.
            ns: Name of the module defining the node.
        """
        super().__init__(name, ns)
        self.type = type
        self._resolved_type: Optional[DataType] = None

    def resolved_type(self: "TerminalNode") -> DataType:
        """Return the type of the receiver with leafrefs resolved.

        Leafref types (including members of a union) are replaced with
        the type of the leaf they refer to.

        Raises:
            InvalidLeafrefPath: If a leafref path doesn't lead to a leaf
                or leafrefs form a cycle.
        """
        if self._resolved_type is None:
            self._resolved_type = self._resolve(self.type, [self])
        return self._resolved_type

    def _resolve(self: "TerminalNode", dtype: DataType,
                 visited: list["TerminalNode"]) -> DataType:
        if isinstance(dtype, LeafrefType):
            target = self._follow_leafref(dtype.path)
            if target in visited:
                raise InvalidLeafrefPath(self.name, dtype.path)
            return target._resolve(target.type, visited + [target])
        if isinstance(dtype, UnionType):
            if not any(isinstance(t, (LeafrefType, UnionType))
                       for t in dtype.types):
                return dtype
            return UnionType([self._resolve(t, visited) for t in dtype.types],
                             dtype.name)
        return dtype

    def _follow_leafref(self: "TerminalNode",
                        path: SchemaPath) -> "TerminalNode":
        """Return the leaf referred to by a leafref path.

        Predicates and module prefixes in the path are ignored.
        """
        steps = _predicate.sub("", path).split("/")
        node = self
        if path.startswith("/"):
            node = self.schema_root()
        for step in steps:
            if step in ("", "."):
                continue
            if step == "..":
                node = node.parent
            elif isinstance(node, InternalNode):
                node = node.get_child(step.partition(":")[2] or step)
            else:
                node = None
            if node is None:
                raise InvalidLeafrefPath(self.name, path)
        if not isinstance(node, TerminalNode):
            raise InvalidLeafrefPath(self.name, path)
        return node


class LeafNode(TerminalNode):
    """Leaf node."""

    kind = NodeKind.leaf


class LeafListNode(TerminalNode):
    """Leaf-list node."""

    kind = NodeKind.leaf_list
