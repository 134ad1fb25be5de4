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

"""Shared pytest fixtures for the node list tests."""

from pathlib import Path

import pytest

from nodelist.core import Node, NodeDatabase, SortConfiguration, SortField

FIXTURES_DIR = Path(__file__).parent / 'fixtures'


class EventRecorder:
    """Listener that records every notification it receives."""

    def __init__(self):
        self.notifications = []

    def __call__(self, events):
        self.notifications.append(events)

    @property
    def events(self):
        return [event for batch in self.notifications for event in batch]

    def reset(self):
        self.notifications.clear()


def title_config(**overrides):
    """Return a title-ascending configuration with *overrides* applied."""
    values = {
        'field': SortField.TITLE,
        'ascending': True,
        'groups_before_entries': True,
        'recycle_bin_last': False,
    }
    values.update(overrides)
    return SortConfiguration(**values)


@pytest.fixture()
def recorder():
    return EventRecorder()


@pytest.fixture()
def root():
    return Node.group('Root')


@pytest.fixture()
def vault():
    """Return ``(db, nodes)`` for a small vault tree.

    Root
    ├── Email (group)
    │   ├── Mail (entry, alice)
    │   └── Archive (group)
    │       └── Old mail (entry)
    ├── Recycle Bin (group)
    │   └── Deleted (entry)
    ├── bank (entry, bob, expired)
    └── Alpha (entry, no username)
    """
    db = NodeDatabase()
    nodes = {}
    nodes['root'] = db.add_group('Root', created=1.0, modified=1.0, accessed=1.0)
    nodes['email'] = db.add_group('Email', nodes['root'], created=2.0, modified=5.0, accessed=3.0)
    nodes['mail'] = db.add_entry('Mail', nodes['email'], username='alice')
    nodes['archive'] = db.add_group('Archive', nodes['email'])
    nodes['old_mail'] = db.add_entry('Old mail', nodes['archive'])
    nodes['bin'] = db.add_group('Recycle Bin', nodes['root'], is_recycle_bin=True, created=3.0)
    nodes['deleted'] = db.add_entry('Deleted', nodes['bin'])
    nodes['bank'] = db.add_entry(
        'bank', nodes['root'], username='bob', expired=True,
        created=4.0, modified=2.0, accessed=9.0,
    )
    nodes['alpha'] = db.add_entry(
        'Alpha', nodes['root'], created=5.0, modified=3.0, accessed=1.0,
    )
    return db, nodes
