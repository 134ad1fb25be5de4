# Copyright (C) 2026 Linuxfabrik <info@linuxfabrik.ch>
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# On Debian systems, the complete text of the GNU General Public License
# version 2 can be found in /usr/share/common-licenses/GPL-2.
#
# SPDX-License-Identifier: GPL-2.0-or-later

"""Typed errors raised by the node collection and its collaborators."""


class NodeListError(Exception):
    """Base class for all node list errors."""


class RebuildError(NodeListError):
    """The children snapshot could not be fully consumed during a rebuild.

    The collection is left empty when this is raised. The original
    exception is available as ``cause`` and as ``__cause__``.
    """

    def __init__(self, cause):
        super().__init__(f"Can't add node elements to the list: {cause}")
        self.cause = cause


class DuplicateNodeError(NodeListError):
    """A node with the same identity is already part of the collection."""

    def __init__(self, node):
        super().__init__(f'Node {node.id} is already in the collection')
        self.node = node


class IndexOutOfRangeError(NodeListError, IndexError):
    """A positional access outside ``[0, size)``."""

    def __init__(self, index, size):
        super().__init__(f'Index {index} out of range for size {size}')
        self.index = index
        self.size = size


class NestedBatchError(NodeListError):
    """``begin()`` was called while a batch was open, or ``end()`` without one."""
