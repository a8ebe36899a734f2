from uuid import UUID

import pytest

from ettu.database import Database, DatabaseError, generate_id, parse_uuid


def test_database_connection_and_health_check():
    db = Database.connect("sqlite://")
    try:
        assert db.health_check() is None
    finally:
        db.close()


def test_file_database_health_check(tmp_path):
    db = Database.connect(f"sqlite:///{tmp_path / 'app.db'}")
    with db:
        assert db.health_check() is None
    assert (tmp_path / "app.db").exists()


def test_connect_rejects_malformed_url():
    with pytest.raises(DatabaseError):
        Database.connect("not a url")


def test_connect_fails_when_unreachable(tmp_path):
    with pytest.raises(DatabaseError):
        Database.connect(f"sqlite:///{tmp_path / 'missing' / 'dir' / 'app.db'}")


def test_health_check_fails_after_close():
    db = Database.connect("sqlite://")
    db.close()
    with pytest.raises(DatabaseError, match="closed"):
        db.health_check()


def test_generate_id_is_random_v4():
    first = generate_id()
    second = generate_id()
    assert first.version == 4
    assert first != second


def test_parse_uuid_round_trip():
    ident = generate_id()
    assert parse_uuid(str(ident)) == ident
    assert parse_uuid(ident.hex) == ident


def test_parse_uuid_accepts_urn_form():
    ident = generate_id()
    assert parse_uuid(ident.urn) == ident


@pytest.mark.parametrize("value", ["", "not-a-uuid", "1234", "zzzzzzzz-zzzz-zzzz-zzzz-zzzzzzzzzzzz"])
def test_parse_uuid_rejects_malformed(value):
    with pytest.raises(ValueError):
        parse_uuid(value)


def test_parse_uuid_rejects_non_string():
    with pytest.raises(ValueError):
        parse_uuid(UUID(int=5))