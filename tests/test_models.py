import pytest

from lwebapi.models import AppState, Config, DatabaseConfig


def _database():
    password = "password"
    return {
        "key": "main",
        "database_type": "postgres",
        "host": "localhost",
        "port": 5432,
        "username": "user",
        "password": password,
        "database": "lweb",
    }


def _config():
    return {
        "version": "1.0.0",
        "host": "127.0.0.1",
        "port": 3000,
        "databases": [_database()],
    }


def test_database_config_from_dict_keeps_fields():
    db = DatabaseConfig.from_dict(_database())
    assert db.key == "main"
    assert db.database_type == "postgres"
    assert db.port == 5432
    assert db.password == "password"


def test_config_from_dict_builds_nested_databases():
    config = Config.from_dict(_config())
    assert config.version == "1.0.0"
    assert config.host == "127.0.0.1"
    assert config.port == 3000
    assert config.databases == [DatabaseConfig.from_dict(_database())]


def test_unknown_keys_are_ignored():
    data = _config()
    data["extra"] = {"anything": True}
    assert Config.from_dict(data).port == 3000


@pytest.mark.parametrize("name", ["version", "host", "port", "databases"])
def test_missing_config_field_raises(name):
    data = _config()
    del data[name]
    with pytest.raises(ValueError, match=name):
        Config.from_dict(data)


@pytest.mark.parametrize("name", ["key", "database_type", "username", "password", "database"])
def test_missing_database_field_raises(name):
    data = _database()
    del data[name]
    with pytest.raises(ValueError, match=name):
        DatabaseConfig.from_dict(data)


@pytest.mark.parametrize("port", [-1, 65536, "3000", True, 1.5])
def test_invalid_port_is_rejected(port):
    data = _config()
    data["port"] = port
    with pytest.raises(ValueError):
        Config.from_dict(data)


def test_port_bounds_are_accepted():
    data = _config()
    data["port"] = 65535
    assert Config.from_dict(data).port == 65535
    data["port"] = 0
    assert Config.from_dict(data).port == 0


def test_non_object_input_rejected():
    with pytest.raises(ValueError):
        Config.from_dict([1, 2])
    data = _config()
    data["databases"] = [42]
    with pytest.raises(ValueError):
        Config.from_dict(data)


def test_app_state_defaults_to_empty_map():
    first = AppState()
    second = AppState()
    first.db_map["main"] = object()
    assert second.db_map == {}
    assert list(first.db_map) == ["main"]