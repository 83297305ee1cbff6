import pytest

from hospital_records.config import RecordsConfig
from hospital_records.database import DatabaseConfig, DatabaseManager


@pytest.fixture()
def settings(monkeypatch):
    for name in ('HOSPITAL_DB_URL', 'HOSPITAL_DB_USER', 'HOSPITAL_DB_PASSWORD',
                 'HOSPITAL_LOG_LEVEL', 'HOSPITAL_LOG_FILE'):
        monkeypatch.delenv(name, raising=False)
    return RecordsConfig()


def test_config_defaults(settings):
    assert settings.database_url == 'postgresql://localhost:5432/hospital'
    assert settings.username is None
    assert settings.log_level == 'WARNING'
    assert settings.log_file is None
    assert settings.validate()


def test_config_from_environment(monkeypatch):
    monkeypatch.setenv('HOSPITAL_DB_URL', 'oracle+oracledb://oracle.example.edu:1521/orcl')
    monkeypatch.setenv('HOSPITAL_DB_USER', 'clerk')
    monkeypatch.setenv('HOSPITAL_LOG_LEVEL', 'debug')

    config = RecordsConfig()

    assert config.database_url == 'oracle+oracledb://oracle.example.edu:1521/orcl'
    assert config.username == 'clerk'
    assert config.log_level == 'DEBUG'


def test_config_rejects_unknown_log_level(settings):
    settings.log_level = 'LOUD'
    with pytest.raises(ValueError):
        settings.validate()


def test_url_credentials_override(settings):
    settings.username = 'from-env'
    url = DatabaseConfig(settings).get_url('alice', 's3cret', database_url='postgresql://db.example.edu/hospital')

    assert url.username == 'alice'
    assert url.password == 's3cret'
    assert url.host == 'db.example.edu'
    assert url.database == 'hospital'


def test_url_falls_back_to_configured_credentials(settings):
    settings.username = 'clerk'
    settings.password = 'pw'
    url = DatabaseConfig(settings).get_url()

    assert url.username == 'clerk'
    assert url.password == 'pw'
    assert url.database == 'hospital'


def test_connection_requires_initialize():
    manager = DatabaseManager()
    with pytest.raises(RuntimeError):
        with manager.get_connection():
            pass


def test_test_connection(db_url):
    manager = DatabaseManager()
    manager.initialize(database_url=db_url)
    try:
        assert manager.test_connection() is True
    finally:
        manager.close()


def test_close_is_idempotent(db_url):
    manager = DatabaseManager()
    manager.initialize(database_url=db_url)

    manager.close()
    manager.close()

    assert manager.engine is None


def test_positional_credentials_use_configured_url(settings):
    url = DatabaseConfig(settings).get_url('alice', 'pw')

    assert url.username == 'alice'
    assert url.password == 'pw'
    assert url.host == 'localhost'
    assert url.database == 'hospital'


def test_test_connection_unreachable_database(tmp_path):
    manager = DatabaseManager()
    manager.initialize(database_url=f"sqlite:///{tmp_path / 'missing' / 'hospital.db'}")
    try:
        assert manager.test_connection() is False
    finally:
        manager.close()
