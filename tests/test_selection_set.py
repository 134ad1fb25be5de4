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

"""Tests for the action node selection."""

from nodelist.core import Node, NodeCollection, SelectionSet

from .conftest import title_config


def test_set_replaces_selection():
    first = Node.entry('a')
    second = Node.entry('b')
    selection = SelectionSet()
    selection.set([first])
    selection.set([second])
    assert not selection.contains(first)
    assert selection.contains(second)
    assert len(selection) == 1


def test_clear_returns_previous_members():
    nodes = [Node.entry('a'), Node.entry('b')]
    selection = SelectionSet()
    selection.set(nodes)
    assert selection.clear() == nodes
    assert len(selection) == 0
    assert selection.clear() == []


def test_contains_uses_identity():
    node = Node.entry('a')
    selection = SelectionSet()
    selection.set([node])
    assert node.with_changes(title='renamed') in selection
    assert Node.entry('a') not in selection


def test_selection_survives_unrelated_mutations():
    selected = Node.entry('x')
    other = Node.entry('y')
    collection = NodeCollection(title_config())
    collection.rebuild([selected, other])
    selection = SelectionSet()
    selection.set([selected])
    collection.remove(other)
    collection.add(Node.entry('z'))
    collection.reconfigure(title_config(ascending=False))
    assert selection.contains(selected)


def test_removed_node_stays_selected_until_retained():
    selected = Node.entry('x')
    collection = NodeCollection(title_config())
    collection.rebuild([selected, Node.entry('y')])
    selection = SelectionSet()
    selection.set([selected])
    collection.remove(selected)
    assert selection.contains(selected)
    assert selection.retain(collection) == [selected]
    assert not selection.contains(selected)
