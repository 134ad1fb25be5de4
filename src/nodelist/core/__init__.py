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

from ._adapter import BindData, NodeClickCallback, NodeListAdapter
from ._collection import NodeCollection
from ._database import NodeDatabase
from ._errors import (
    DuplicateNodeError,
    IndexOutOfRangeError,
    NestedBatchError,
    NodeListError,
    RebuildError,
)
from ._nodes import EntryData, GroupData, Node, NodeKind
from ._notifier import (
    ChangeNotifier,
    Inserted,
    RangeChanged,
    RemovedAt,
    Reordered,
    coalesce,
)
from ._preferences import ListPreferences
from ._selection import SelectionSet
from ._sort import Ordering, SortConfiguration, SortField, compare, sort_key
from ._tree import TreeStore
from ._yaml_reader import YamlReader

__all__ = [
    'BindData',
    'ChangeNotifier',
    'DuplicateNodeError',
    'EntryData',
    'GroupData',
    'IndexOutOfRangeError',
    'Inserted',
    'ListPreferences',
    'NestedBatchError',
    'Node',
    'NodeClickCallback',
    'NodeCollection',
    'NodeDatabase',
    'NodeKind',
    'NodeListAdapter',
    'NodeListError',
    'Ordering',
    'RangeChanged',
    'RebuildError',
    'RemovedAt',
    'Reordered',
    'SelectionSet',
    'SortConfiguration',
    'SortField',
    'TreeStore',
    'YamlReader',
    'coalesce',
    'compare',
    'sort_key',
]
