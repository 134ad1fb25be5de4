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

"""Interface of the tree that owns groups, entries and their relations."""

import typing

if typing.TYPE_CHECKING:
    from collections.abc import Iterable

    from ._nodes import Node


@typing.runtime_checkable
class TreeStore(typing.Protocol):
    """Owner of the node hierarchy, injected into the node list adapter."""

    def get_children(self, group: 'Node') -> 'Iterable[Node]':
        """Return a snapshot of the direct children of *group*."""
        ...

    def count_descendant_entries(self, group: 'Node', include_nested: bool) -> int:
        """Count entries below *group*, recursively if *include_nested*."""
        ...
