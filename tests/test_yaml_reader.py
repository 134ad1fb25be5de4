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

"""Tests for loading a vault tree from YAML."""

import pytest

from nodelist.core import YamlReader

from .conftest import FIXTURES_DIR


@pytest.fixture()
def db():
    return YamlReader().parse(FIXTURES_DIR / 'vault.yml')


def test_tree_is_loaded(db):
    root = db.root_group()
    assert root.title == 'Root'
    assert [child.title for child in db.get_children(root)] == [
        'Email', 'Recycle Bin', 'bank', 'Alpha',
    ]


def test_fields_are_coerced(db):
    root = db.root_group()
    children = db.get_children(root)
    email, recycle_bin, bank = children[0], children[1], children[2]
    assert email.icon == 'mail'
    assert email.created > 0
    assert recycle_bin.is_recycle_bin is True
    assert bank.expired is True
    assert bank.username == 'bob'


def test_title_override(db):
    email = db.find_group('Email')
    titles = [child.visual_title for child in db.get_children(email)]
    assert titles == ['Mail', 'Webmail']


def test_top_level_must_be_mapping():
    with pytest.raises(ValueError):
        YamlReader().load(['not', 'a', 'mapping'])


def test_unknown_keys_are_logged(caplog):
    YamlReader().load({'title': 'Root', 'colour': 'red'})
    assert 'Unknown group key: colour' in caplog.text
