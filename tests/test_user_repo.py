"""Tests for the users repository."""

from datetime import datetime

import psycopg2
import pytest

from models.user import User
from repositories.user_repo import UserRepository

CREATED_AT = datetime(2026, 1, 15, 12, 0, 0)


def _user_row(**overrides) -> dict:
    row = {
        "id": 1,
        "name": "Eva Stanley",
        "email": "sebastianguerra@ymail.com",
        "password": "$2a$10$FB/BOAVhpuLvpOREQVmvmezD4ED/.JBIDRh70tGevYzYzQgFId2u.",
        "created_at": CREATED_AT,
    }
    row.update(overrides)
    return row


def test_get_by_email_returns_user(fake_pool, conn, cursor):
    cursor.fetchone.return_value = _user_row()

    user = UserRepository().get_by_email("sebastianguerra@ymail.com")

    assert user == User(
        id=1,
        name="Eva Stanley",
        email="sebastianguerra@ymail.com",
        password=_user_row()["password"],
        created_at=CREATED_AT,
    )
    sql, params = cursor.execute.call_args.args
    assert "WHERE email = %s" in sql
    assert params == ("sebastianguerra@ymail.com",)
    fake_pool.putconn.assert_called_once_with(conn)


def test_get_by_email_missing_returns_none(fake_pool, cursor):
    cursor.fetchone.return_value = None
    assert UserRepository().get_by_email("nobody@example.com") is None


def test_get_by_id(fake_pool, cursor):
    cursor.fetchone.return_value = _user_row(id=42)

    user = UserRepository().get_by_id(42)

    assert user.id == 42
    sql, params = cursor.execute.call_args.args
    assert "WHERE id = %s" in sql
    assert params == (42,)


def test_read_releases_connection_on_error(fake_pool, conn, cursor):
    cursor.execute.side_effect = psycopg2.OperationalError("server closed the connection")

    with pytest.raises(psycopg2.OperationalError):
        UserRepository().get_by_id(1)

    fake_pool.putconn.assert_called_once_with(conn)


def test_add_populates_id_and_commits(fake_pool, conn, cursor):
    cursor.fetchone.return_value = {"id": 9, "created_at": CREATED_AT}
    user = User(name="Kate", email="kate@example.com", password="hashed")

    saved = UserRepository().add(user)

    assert saved is user
    assert saved.id == 9
    assert saved.created_at == CREATED_AT
    sql, params = cursor.execute.call_args.args
    assert "INSERT INTO users (name, email, password)" in sql
    assert "RETURNING" in sql
    assert params == ("Kate", "kate@example.com", "hashed")
    conn.commit.assert_called_once()
    conn.rollback.assert_not_called()
    fake_pool.putconn.assert_called_once_with(conn)


def test_add_duplicate_email_rolls_back_and_raises(fake_pool, conn, cursor):
    cursor.execute.side_effect = psycopg2.IntegrityError("duplicate key value violates unique constraint")

    with pytest.raises(psycopg2.IntegrityError):
        UserRepository().add(User(name="Kate", email="kate@example.com", password="x"))

    conn.rollback.assert_called_once()
    conn.commit.assert_not_called()
    fake_pool.putconn.assert_called_once_with(conn)


def test_password_hidden_from_repr():
    user = User(name="Kate", email="kate@example.com", password="secret")
    assert "secret" not in repr(user)
    assert str(user) == "Kate <kate@example.com>"
