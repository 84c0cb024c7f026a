from __future__ import annotations

import mysql.connector
import pytest

from meeting_attendance.core.exceptions import StoreError, ValidationError
from meeting_attendance.database.mysql_base import db_cursor


class FakeCursor:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


class FakeConn:
    def __init__(self):
        self.cursor_obj = FakeCursor()
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=True):
        return self.cursor_obj

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeFactory:
    def __init__(self, conn=None, error=None):
        self.conn = conn
        self.error = error

    def connect(self):
        if self.error:
            raise self.error
        return self.conn


def test_commits_on_success():
    conn = FakeConn()

    with db_cursor(FakeFactory(conn)) as (_, cur):
        assert cur is conn.cursor_obj

    assert conn.committed and conn.closed and conn.cursor_obj.closed


def test_driver_error_becomes_store_error():
    conn = FakeConn()

    with pytest.raises(StoreError):
        with db_cursor(FakeFactory(conn)):
            raise mysql.connector.Error("lost connection")

    assert conn.rolled_back and not conn.committed and conn.closed


def test_other_errors_propagate_unchanged():
    conn = FakeConn()

    with pytest.raises(ValidationError):
        with db_cursor(FakeFactory(conn)):
            raise ValidationError("x")

    assert conn.rolled_back


def test_connect_failure_is_store_error():
    with pytest.raises(StoreError):
        with db_cursor(FakeFactory(error=mysql.connector.Error("refused"))):
            pass
