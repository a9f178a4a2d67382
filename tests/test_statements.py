import pytest

from antdb.params import ParamType
from antdb.statements import build_delete, build_insert, build_update


def test_build_insert():
    stmt = build_insert("users", {"username": "joe", "password": "secret"})
    assert stmt.sql == "INSERT INTO users (username, password) VALUES (?, ?)"
    assert stmt.params == ("joe", "secret")
    assert stmt.types == []


def test_build_insert_with_format_placeholder():
    stmt = build_insert("users", {"username": "joe"}, placeholder="%s")
    assert stmt.sql == "INSERT INTO users (username) VALUES (%s)"


def test_build_update_orders_params_data_then_where():
    stmt = build_update(
        "users",
        {"password": "secret", "username": "steve2"},
        {"id": 1, "username": "steve"},
    )
    assert stmt.sql == (
        "UPDATE users SET password = ?, username = ? WHERE id = ? AND username = ?"
    )
    assert stmt.params == ("secret", "steve2", 1, "steve")


def test_build_update_resolves_types_by_column():
    stmt = build_update(
        "users",
        {"password": "secret"},
        {"id": 1},
        {"id": ParamType.INT},
    )
    assert stmt.types == [None, ParamType.INT]


def test_build_delete():
    stmt = build_delete("users", {"username": "steve", "id": 1}, {"username": ParamType.STR})
    assert stmt.sql == "DELETE FROM users WHERE username = ? AND id = ?"
    assert stmt.params == ("steve", 1)
    assert stmt.types == [ParamType.STR, None]


@pytest.mark.parametrize(
    "build",
    [
        lambda: build_insert("users", {}),
        lambda: build_update("users", {}, {"id": 1}),
        lambda: build_update("users", {"password": "x"}, {}),
        lambda: build_delete("users", {}),
    ],
)
def test_empty_mappings_are_rejected(build):
    with pytest.raises(ValueError):
        build()
