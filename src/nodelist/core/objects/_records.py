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

"""Declarative base and the group and entry records of the vault tree."""

from __future__ import annotations  # This is needed since SQLAlchemy does not support forward references yet

import typing
import uuid

import sqlalchemy
import sqlalchemy.event
import sqlalchemy.orm


class Base(sqlalchemy.orm.DeclarativeBase):
    """Shared metadata of the vault tables."""


def enable_sqlite_fks(engine: sqlalchemy.engine.Engine) -> None:
    """Turn on SQLite foreign keys so a group cannot vanish under its entries."""

    @sqlalchemy.event.listens_for(engine, 'connect')
    def _on_connect(dbapi_connection: object, connection_record: object) -> None:
        cursor = dbapi_connection.cursor()  # type: ignore[union-attr]
        try:
            cursor.execute('PRAGMA foreign_keys = ON')
        finally:
            cursor.close()


class GroupRecord(Base):
    """A folder of the vault; the root group has no parent."""

    __tablename__ = 'groups'

    id: sqlalchemy.orm.Mapped[uuid.UUID] = sqlalchemy.orm.mapped_column(
        sqlalchemy.Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    parent_group_id: sqlalchemy.orm.Mapped[typing.Optional[uuid.UUID]] = (
        sqlalchemy.orm.mapped_column(
            sqlalchemy.Uuid,
            sqlalchemy.ForeignKey('groups.id'),
            nullable=True,
            default=None,
        )
    )
    title: sqlalchemy.orm.Mapped[str] = sqlalchemy.orm.mapped_column(
        sqlalchemy.String,
        default='',
    )
    icon: sqlalchemy.orm.Mapped[str] = sqlalchemy.orm.mapped_column(
        sqlalchemy.String,
        default='',
    )
    position: sqlalchemy.orm.Mapped[int] = sqlalchemy.orm.mapped_column(
        sqlalchemy.Integer,
        default=0,
    )
    is_recycle_bin: sqlalchemy.orm.Mapped[bool] = sqlalchemy.orm.mapped_column(
        sqlalchemy.Boolean,
        default=False,
    )
    expired: sqlalchemy.orm.Mapped[bool] = sqlalchemy.orm.mapped_column(
        sqlalchemy.Boolean,
        default=False,
    )
    created: sqlalchemy.orm.Mapped[float] = sqlalchemy.orm.mapped_column(
        sqlalchemy.Float,
        default=0.0,
    )
    modified: sqlalchemy.orm.Mapped[float] = sqlalchemy.orm.mapped_column(
        sqlalchemy.Float,
        default=0.0,
    )
    accessed: sqlalchemy.orm.Mapped[float] = sqlalchemy.orm.mapped_column(
        sqlalchemy.Float,
        default=0.0,
    )

    parent_group: sqlalchemy.orm.Mapped[typing.Optional[GroupRecord]] = (
        sqlalchemy.orm.relationship(
            'GroupRecord',
            remote_side='GroupRecord.id',
            back_populates='child_groups',
        )
    )
    child_groups: sqlalchemy.orm.Mapped[list[GroupRecord]] = (
        sqlalchemy.orm.relationship(
            'GroupRecord',
            back_populates='parent_group',
        )
    )
    entries: sqlalchemy.orm.Mapped[list[EntryRecord]] = sqlalchemy.orm.relationship(
        'EntryRecord',
        back_populates='group',
    )

    __table_args__ = (
        sqlalchemy.Index('ix_groups_parent_group_id', 'parent_group_id'),
    )


class EntryRecord(Base):
    """A credential entry, always inside a group."""

    __tablename__ = 'entries'

    id: sqlalchemy.orm.Mapped[uuid.UUID] = sqlalchemy.orm.mapped_column(
        sqlalchemy.Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    group_id: sqlalchemy.orm.Mapped[uuid.UUID] = sqlalchemy.orm.mapped_column(
        sqlalchemy.Uuid,
        sqlalchemy.ForeignKey('groups.id'),
        nullable=False,
    )
    title: sqlalchemy.orm.Mapped[str] = sqlalchemy.orm.mapped_column(
        sqlalchemy.String,
        default='',
    )
    title_override: sqlalchemy.orm.Mapped[typing.Optional[str]] = (
        sqlalchemy.orm.mapped_column(
            sqlalchemy.String,
            nullable=True,
            default=None,
        )
    )
    username: sqlalchemy.orm.Mapped[str] = sqlalchemy.orm.mapped_column(
        sqlalchemy.String,
        default='',
    )
    icon: sqlalchemy.orm.Mapped[str] = sqlalchemy.orm.mapped_column(
        sqlalchemy.String,
        default='',
    )
    position: sqlalchemy.orm.Mapped[int] = sqlalchemy.orm.mapped_column(
        sqlalchemy.Integer,
        default=0,
    )
    expired: sqlalchemy.orm.Mapped[bool] = sqlalchemy.orm.mapped_column(
        sqlalchemy.Boolean,
        default=False,
    )
    created: sqlalchemy.orm.Mapped[float] = sqlalchemy.orm.mapped_column(
        sqlalchemy.Float,
        default=0.0,
    )
    modified: sqlalchemy.orm.Mapped[float] = sqlalchemy.orm.mapped_column(
        sqlalchemy.Float,
        default=0.0,
    )
    accessed: sqlalchemy.orm.Mapped[float] = sqlalchemy.orm.mapped_column(
        sqlalchemy.Float,
        default=0.0,
    )

    group: sqlalchemy.orm.Mapped[GroupRecord] = sqlalchemy.orm.relationship(
        'GroupRecord',
        back_populates='entries',
    )

    __table_args__ = (
        sqlalchemy.Index('ix_entries_group_id', 'group_id'),
    )
