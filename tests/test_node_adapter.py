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

"""Tests for the renderer facing node list adapter."""

import dataclasses

import pytest

from nodelist.core import (
    ListPreferences,
    NodeKind,
    NodeListAdapter,
    RangeChanged,
    RebuildError,
    Reordered,
    SortField,
)


class _Preferences:
    """Mutable preference source, read again on every rebuild."""

    def __init__(self, **values):
        self.current = ListPreferences(**values)

    def __call__(self):
        return self.current

    def update(self, **values):
        self.current = dataclasses.replace(self.current, **values)


class _Clicks:
    def __init__(self, consume=True):
        self.clicks = []
        self.long_clicks = []
        self.consume = consume

    def on_node_click(self, node, position):
        self.clicks.append((node, position))

    def on_node_long_click(self, node, position):
        self.long_clicks.append((node, position))
        return self.consume


class _BrokenTree:
    def get_children(self, group):
        raise OSError('database closed')

    def count_descendant_entries(self, group, include_nested):
        return 0


def _titles(adapter):
    return [adapter.bind_data(i).title for i in range(adapter.item_count())]


@pytest.fixture()
def adapter(vault):
    db, nodes = vault
    adapter = NodeListAdapter(db)
    adapter.rebuild_list(nodes['root'])
    return adapter


class TestRebuildList:
    def test_default_preferences_use_database_order(self, adapter):
        assert _titles(adapter) == ['Email', 'bank', 'Alpha', 'Recycle Bin']

    def test_preferences_are_read_on_every_rebuild(self, vault):
        db, nodes = vault
        preferences = _Preferences(sort_field=SortField.TITLE)
        adapter = NodeListAdapter(db, preferences)
        adapter.rebuild_list(nodes['root'])
        assert _titles(adapter) == ['Email', 'Alpha', 'bank', 'Recycle Bin']

        preferences.update(recycle_bin_bottom_sort=False, groups_before_entries=False)
        adapter.rebuild_list(nodes['root'])
        assert _titles(adapter) == ['Alpha', 'bank', 'Email', 'Recycle Bin']
        assert adapter.preferences is preferences.current

    def test_rebuild_failure_is_typed_and_empties_list(self, vault):
        _, nodes = vault
        adapter = NodeListAdapter(_BrokenTree())
        with pytest.raises(RebuildError) as excinfo:
            adapter.rebuild_list(nodes['root'])
        assert isinstance(excinfo.value.cause, OSError)
        assert adapter.is_empty

    def test_rebuild_notifies_once(self, vault, recorder):
        db, nodes = vault
        adapter = NodeListAdapter(db)
        adapter.subscribe(recorder)
        adapter.rebuild_list(nodes['email'])
        assert recorder.notifications == [(Reordered(),)]
        assert _titles(adapter) == ['Archive', 'Mail']


class TestBindData:
    def test_group_row(self, adapter):
        bind = adapter.bind_data(0)
        assert bind.kind is NodeKind.Group
        assert bind.title == 'Email'
        assert bind.subtitle == ''
        assert bind.child_entry_count == 2
        assert adapter.view_kind(0) is NodeKind.Group

    def test_entry_row_with_username(self, adapter):
        bind = adapter.bind_data(1)
        assert bind.kind is NodeKind.Entry
        assert bind.subtitle == 'bob'
        assert bind.is_expired_strikethrough is True
        assert bind.child_entry_count is None

    def test_entry_without_username_has_empty_subtitle(self, adapter):
        assert adapter.bind_data(2).subtitle == ''

    def test_display_flags_only_affect_bind_data(self, vault):
        db, nodes = vault
        preferences = _Preferences(show_usernames=False, show_number_entries=False)
        adapter = NodeListAdapter(db, preferences)
        adapter.rebuild_list(nodes['root'])
        assert _titles(adapter) == ['Email', 'bank', 'Alpha', 'Recycle Bin']
        assert adapter.bind_data(0).child_entry_count is None
        assert adapter.bind_data(1).subtitle == ''

    def test_entry_title_override(self, vault):
        db, nodes = vault
        adapter = NodeListAdapter(db)
        adapter.rebuild_list(nodes['root'])
        adapter.add_node(db.add_entry('raw', nodes['root'], title_override='Shown'))
        assert 'Shown' in _titles(adapter)
        assert 'raw' not in _titles(adapter)


class TestMutation:
    def test_update_node_moves_row(self, vault):
        db, nodes = vault
        adapter = NodeListAdapter(db, _Preferences(sort_field=SortField.TITLE))
        adapter.rebuild_list(nodes['root'])
        renamed = db.update_entry(nodes['alpha'], title='Zeta')
        adapter.update_node(nodes['alpha'], renamed)
        assert _titles(adapter) == ['Email', 'bank', 'Zeta', 'Recycle Bin']

    def test_remove_node_at(self, adapter, recorder):
        adapter.subscribe(recorder)
        removed = adapter.remove_node_at(1)
        assert removed.title == 'bank'
        assert not adapter.contains(removed)
        assert adapter.remove_node(removed) is False
        assert len(recorder.notifications) == 1

    def test_notify_change_sort_keeps_recycle_bin_last(self, adapter, recorder):
        adapter.subscribe(recorder)
        adapter.notify_change_sort(SortField.TITLE, False, True)
        assert _titles(adapter) == ['Email', 'bank', 'Alpha', 'Recycle Bin']
        assert recorder.notifications == [(Reordered(),)]


class TestActionNodes:
    def test_selected_rows_are_highlighted_and_refreshed(self, adapter, vault, recorder):
        _, nodes = vault
        adapter.subscribe(recorder)
        adapter.set_action_nodes([nodes['bank']])
        assert adapter.bind_data(1).is_selected is True
        assert adapter.bind_data(0).is_selected is False
        assert recorder.notifications == [(RangeChanged(1, 1),)]

    def test_unselect_refreshes_previous_rows(self, adapter, vault, recorder):
        _, nodes = vault
        adapter.set_action_nodes([nodes['bank'], nodes['email']])
        adapter.subscribe(recorder)
        previous = adapter.unselect_action_nodes()
        assert set(previous) == {nodes['bank'], nodes['email']}
        assert recorder.notifications == [(RangeChanged(0, 1), RangeChanged(1, 1))]
        assert not adapter.bind_data(1).is_selected

    def test_selection_is_kept_across_rebuild(self, adapter, vault):
        _, nodes = vault
        adapter.set_action_nodes([nodes['bank']])
        adapter.rebuild_list(nodes['email'])
        assert adapter.selection.contains(nodes['bank'])
        assert adapter.selection.retain(adapter.collection) == [nodes['bank']]


class TestClicks:
    def test_clicks_are_forwarded(self, adapter):
        clicks = _Clicks()
        adapter.set_on_node_click_listener(clicks)
        adapter.click(0)
        assert adapter.long_click(1) is True
        assert clicks.clicks == [(adapter.node_at(0), 0)]
        assert clicks.long_clicks == [(adapter.node_at(1), 1)]

    def test_long_click_without_listener_is_not_consumed(self, adapter):
        assert adapter.long_click(0) is False
        adapter.click(0)

    def test_long_click_result_is_passed_through(self, adapter):
        adapter.set_on_node_click_listener(_Clicks(consume=False))
        assert adapter.long_click(0) is False
