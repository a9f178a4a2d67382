import sqlite3

import pytest

from antdb.antdb import AntDb

SCHEMA = """
    CREATE TABLE users (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        username VARCHAR(255),
        password VARCHAR(255)
    )
"""
SEED = [("steve", "steve_pass"), ("nancy", "nancy_pass")]


def seed(conn):
    conn.execute(SCHEMA)
    conn.executemany("INSERT INTO users (username, password) VALUES (?, ?)", SEED)


@pytest.fixture
def connection():
    conn = sqlite3.connect(":memory:", isolation_level=None)
    seed(conn)
    yield conn
    conn.close()


@pytest.fixture
def db(connection):
    return AntDb({"options": {"driver": "sqlite"}}, connection)


@pytest.fixture
def db_file(tmp_path):
    path = tmp_path / "users.db"
    conn = sqlite3.connect(path, isolation_level=None)
    seed(conn)
    conn.close()
    return path
