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

"""CLI entry point that prints the sorted children of a vault group."""

import argparse
import logging
import sys

import nodelist
import nodelist.core

__author__ = 'Linuxfabrik GmbH, Zurich/Switzerland'

DESCRIPTION = """Loads a vault tree from a YAML file and prints the children of one group
in the order and with the details a node list would show them."""

SORT_CHOICES = [field.name.lower() for field in nodelist.core.SortField]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='nodelist-show',
        description=DESCRIPTION,
    )

    parser.add_argument(
        'FILE',
        help='path to the YAML vault file',
    )

    parser.add_argument(
        '-g',
        '--group',
        default='',
        dest='GROUP',
        help='title of the group to list. Default: the root group',
    )

    parser.add_argument(
        '-s',
        '--sort',
        choices=SORT_CHOICES,
        default='db',
        dest='SORT',
        help='sort field. Default: %(default)s',
    )

    parser.add_argument(
        '--descending',
        action='store_true',
        dest='DESCENDING',
        help='sort in descending order',
    )

    parser.add_argument(
        '--no-groups-first',
        action='store_false',
        dest='GROUPS_FIRST',
        help='mix groups and entries instead of listing groups first',
    )

    parser.add_argument(
        '--no-recycle-bin-last',
        action='store_false',
        dest='RECYCLE_BIN_LAST',
        help='sort the recycle bin like any other group',
    )

    parser.add_argument(
        '--hide-usernames',
        action='store_false',
        dest='SHOW_USERNAMES',
        help='do not show entry usernames',
    )

    parser.add_argument(
        '--hide-counts',
        action='store_false',
        dest='SHOW_COUNTS',
        help='do not show the number of entries in groups',
    )

    parser.add_argument(
        '-v',
        '--verbose',
        action='count',
        default=0,
        dest='VERBOSE',
        help='verbose output (repeat for higher verbosity)',
    )

    parser.add_argument(
        '-V',
        '--version',
        action='version',
        version=f'%(prog)s: v{nodelist.__version__} by {__author__}',
    )

    return parser.parse_args(argv)


def format_row(bind):
    """Render one bind data record as a single text line."""
    marker = '[G]' if bind.kind is nodelist.core.NodeKind.Group else '[E]'
    parts = [marker, bind.title]
    if bind.subtitle:
        parts.append(f'({bind.subtitle})')
    if bind.child_entry_count is not None:
        parts.append(f'[{bind.child_entry_count}]')
    if bind.is_expired_strikethrough:
        parts.append('(expired)')
    return ' '.join(parts)


def main(argv=None):
    args = parse_args(argv)
    level = logging.WARNING
    if args.VERBOSE == 1:
        level = logging.INFO
    elif args.VERBOSE > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')

    try:
        db = nodelist.core.YamlReader().parse(args.FILE)
    except Exception as e:
        print(f'Error: failed to load vault from {args.FILE}: {e}', file=sys.stderr)
        return 1

    if args.GROUP:
        group = db.find_group(args.GROUP)
        if group is None:
            print(f'Error: group "{args.GROUP}" not found', file=sys.stderr)
            return 1
    else:
        group = db.root_group()

    preferences = nodelist.core.ListPreferences(
        sort_field=nodelist.core.SortField[args.SORT.upper()],
        ascending=not args.DESCENDING,
        groups_before_entries=args.GROUPS_FIRST,
        recycle_bin_bottom_sort=args.RECYCLE_BIN_LAST,
        show_usernames=args.SHOW_USERNAMES,
        show_number_entries=args.SHOW_COUNTS,
    )
    adapter = nodelist.core.NodeListAdapter(db, lambda: preferences)
    try:
        adapter.rebuild_list(group)
    except nodelist.core.RebuildError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    for position in range(adapter.item_count()):
        print(format_row(adapter.bind_data(position)))
    return 0


if __name__ == '__main__':
    sys.exit(main())
